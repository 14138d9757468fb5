"""Data models for project graphs and converted scripts.

Provides dataclasses for the raw node-graph input (entities and
associations) and the converted script document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pgscript.graph.errors import MalformedDocumentError
from pgscript.graph.kinds import NodeKind

TEXT_NODE_TYPE = "core:text_node"
DEFAULT_SCRIPT_NAME = "untitled"
DEFAULT_SCRIPT_VERSION = "0.0.0"


@dataclass(frozen=True)
class RawEntity:
    """A node as exported by the graph editor.

    Attributes:
        type: Editor node type (text nodes are the only supported type).
        uuid: Editor-assigned node identifier.
        text: Newline-delimited label; line 0 is the kind keyword. None when
            the editor wrote a non-string label.
        raw: The original JSON object, kept for diagnostics.
    """

    type: str
    uuid: str
    text: str | None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def lines(self) -> list[str]:
        """Label lines with trailing carriage returns removed."""
        return [line.rstrip("\r") for line in (self.text or "").split("\n")]

    @classmethod
    def from_dict(cls, data: Any) -> RawEntity:
        if not isinstance(data, dict):
            raise MalformedDocumentError(f"Entity is not an object: {data!r}")
        text = data.get("text", "")
        uuid = data.get("uuid")
        return cls(
            type=str(data.get("type", "")),
            uuid="" if uuid is None else str(uuid),
            text=text if isinstance(text, str) else None,
            raw=data,
        )


@dataclass(frozen=True)
class RawAssociation:
    """A directed edge between two editor nodes."""

    source: str
    target: str
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Any) -> RawAssociation:
        if not isinstance(data, dict) or "source" not in data or "target" not in data:
            raise MalformedDocumentError(f"Association needs source and target: {data!r}")
        return cls(source=str(data["source"]), target=str(data["target"]), raw=data)


@dataclass(frozen=True)
class GraphDocument:
    """A whole node-graph file: entities plus associations."""

    entities: tuple[RawEntity, ...] = ()
    associations: tuple[RawAssociation, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> GraphDocument:
        """Build a GraphDocument from decoded JSON.

        Raises:
            MalformedDocumentError: If the top level is not an object with
                an ``entities`` list.
        """
        if not isinstance(data, dict):
            raise MalformedDocumentError("Graph document must be a JSON object")
        entities = data.get("entities")
        if not isinstance(entities, list):
            raise MalformedDocumentError("Graph document has no 'entities' list")
        associations = data.get("associations", [])
        if not isinstance(associations, list):
            raise MalformedDocumentError("Graph document 'associations' is not a list")
        return cls(
            entities=tuple(RawEntity.from_dict(e) for e in entities),
            associations=tuple(RawAssociation.from_dict(a) for a in associations),
        )


@dataclass(frozen=True)
class Role:
    """A character/role declared by a ``role`` node.

    Attributes:
        id: Role identifier, the key in the document's role table.
        attributes: All declared key/value pairs, ``id`` included.
    """

    id: str
    attributes: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, **self.attributes}


@dataclass
class Entity:
    """A content-bearing node retained in the script tree.

    Children are target uuids appended by the assembler in association
    order; they are not resolved to Entity objects.
    """

    uuid: str
    kind: NodeKind
    payload: list[str] = field(default_factory=list)
    children: list[str] = field(default_factory=list)

    def add_child(self, uuid: str) -> None:
        self.children.append(uuid)

    def child_count(self) -> int:
        return len(self.children)


@dataclass
class ScriptDocument:
    """The converted script.

    Attributes:
        name: Script name, taken from the root node's second label line.
        version: Script version, taken from the version node.
        roles: Role table keyed by role id.
        entities: Tree entities keyed by uuid.
        root: uuid of the root entity, None until one is classified.
    """

    name: str = DEFAULT_SCRIPT_NAME
    version: str = DEFAULT_SCRIPT_VERSION
    roles: dict[str, Role] = field(default_factory=dict)
    entities: dict[str, Entity] = field(default_factory=dict)
    root: str | None = None

    def get_entity(self, uuid: str) -> Entity | None:
        return self.entities.get(uuid)

    def root_entity(self) -> Entity | None:
        if self.root is None:
            return None
        return self.entities.get(self.root)
