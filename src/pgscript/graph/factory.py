"""Script Factory - Shared entry point for converting a graph document.

Runs the three stages in order: classify every entity, assemble the
associations, validate the tree. Commands should use this instead of
wiring the stages themselves.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pgscript.graph.builder import AssemblyResult, DanglingReference, GraphAssembler
from pgscript.graph.classifier import ScriptClassifier
from pgscript.graph.errors import MalformedDocumentError
from pgscript.graph.models import (
    DEFAULT_SCRIPT_NAME,
    DEFAULT_SCRIPT_VERSION,
    TEXT_NODE_TYPE,
    GraphDocument,
    ScriptDocument,
)
from pgscript.validation.tree import check_tree


@dataclass
class ConversionOptions:
    """Settings for one conversion run.

    Attributes:
        entity_type: Editor type that marks text nodes.
        default_name: Script name when no root line names it.
        default_version: Script version when no version node sets it.
        strict: Reject associations whose target has no entity.
    """

    entity_type: str = TEXT_NODE_TYPE
    default_name: str = DEFAULT_SCRIPT_NAME
    default_version: str = DEFAULT_SCRIPT_VERSION
    strict: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConversionOptions:
        """Create ConversionOptions from the [parser] config section."""
        return cls(
            entity_type=data.get("entity_type", TEXT_NODE_TYPE),
            default_name=data.get("default_name", DEFAULT_SCRIPT_NAME),
            default_version=data.get("default_version", DEFAULT_SCRIPT_VERSION),
            strict=bool(data.get("strict", False)),
        )


@dataclass
class ConversionResult:
    """A converted script plus non-fatal findings."""

    document: ScriptDocument
    dangling: list[DanglingReference] = field(default_factory=list)


def convert_graph(
    graph: GraphDocument, options: ConversionOptions | None = None
) -> ConversionResult:
    """Convert a parsed graph document into a script.

    Args:
        graph: The node-graph document.
        options: Conversion settings (defaults when omitted).

    Returns:
        ConversionResult with the validated ScriptDocument.

    Raises:
        ConversionError: Any classification, assembly or validation failure.
    """
    options = options or ConversionOptions()
    classifier = ScriptClassifier(
        entity_type=options.entity_type,
        default_name=options.default_name,
        default_version=options.default_version,
    )
    document = classifier.classify_all(graph.entities)

    assembly: AssemblyResult = GraphAssembler(document.entities, strict=options.strict).assemble(
        graph.associations
    )

    check_tree(document.entities)
    return ConversionResult(document=document, dangling=list(assembly.dangling))


def convert_document(data: Any, options: ConversionOptions | None = None) -> ScriptDocument:
    """Convert decoded graph JSON into a ScriptDocument."""
    return convert_graph(GraphDocument.from_dict(data), options).document


def load_graph_file(path: Path) -> GraphDocument:
    """Read and decode one graph JSON file.

    Raises:
        MalformedDocumentError: If the file is not valid JSON or has the
            wrong shape.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedDocumentError(f"Invalid JSON in {path}: {e}") from e
    return GraphDocument.from_dict(data)
