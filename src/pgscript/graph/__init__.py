"""Graph module - Project graph to script conversion.

Exports:
- NodeKind: Enum of node kinds
- RawEntity, RawAssociation, GraphDocument: editor input
- Role, Entity, ScriptDocument: converted script
- ScriptClassifier: label classification
- GraphAssembler, DanglingReference: child link assembly

Note: the full pipeline is in pgscript.graph.factory (convert_graph()).
"""

from pgscript.graph.builder import AssemblyResult, DanglingReference, GraphAssembler
from pgscript.graph.classifier import Classification, ScriptClassifier, classify_entity
from pgscript.graph.kinds import (
    PROCESS_KINDS,
    RESULT_KINDS,
    ROOT_KINDS,
    NodeKind,
    is_process,
    is_result,
    is_root,
    resolve_keyword,
)
from pgscript.graph.models import (
    Entity,
    GraphDocument,
    RawAssociation,
    RawEntity,
    Role,
    ScriptDocument,
)

__all__ = [
    "NodeKind",
    "PROCESS_KINDS",
    "ROOT_KINDS",
    "RESULT_KINDS",
    "is_process",
    "is_root",
    "is_result",
    "resolve_keyword",
    "RawEntity",
    "RawAssociation",
    "GraphDocument",
    "Role",
    "Entity",
    "ScriptDocument",
    "Classification",
    "ScriptClassifier",
    "classify_entity",
    "GraphAssembler",
    "AssemblyResult",
    "DanglingReference",
]
