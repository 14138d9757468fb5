"""Label classifier - Turns raw editor nodes into script outcomes.

Classification of a single node is side-effect free: it produces a
Classification (one or more immutable outcomes) which
apply_classification() then merges into the ScriptDocument being built.

Outcomes:
- VersionUpdate: sets the document version
- RoleDefinition: adds a role to the role table
- EntityInsertion: adds a tree entity
- RootDesignation: marks the root uuid and optionally renames the script
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from pgscript.graph.errors import (
    MalformedDocumentError,
    RoleParameterError,
    UnexpectedEntityTypeError,
    UnhandledKindError,
    UnknownNodeKindError,
)
from pgscript.graph.kinds import NodeKind, is_process, is_root, resolve_keyword
from pgscript.graph.models import (
    DEFAULT_SCRIPT_NAME,
    DEFAULT_SCRIPT_VERSION,
    TEXT_NODE_TYPE,
    Entity,
    RawEntity,
    Role,
    ScriptDocument,
)

# ASCII colon or full-width colon
ROLE_SEPARATOR = re.compile(r"[:：]")


@dataclass(frozen=True)
class VersionUpdate:
    version: str


@dataclass(frozen=True)
class RoleDefinition:
    role: Role


@dataclass(frozen=True)
class EntityInsertion:
    uuid: str
    kind: NodeKind
    payload: tuple[str, ...] = ()

    def to_entity(self) -> Entity:
        return Entity(uuid=self.uuid, kind=self.kind, payload=list(self.payload))


@dataclass(frozen=True)
class RootDesignation:
    uuid: str
    name: str | None = None


Outcome = Union[VersionUpdate, RoleDefinition, EntityInsertion, RootDesignation]


@dataclass(frozen=True)
class Classification:
    """Result of classifying one raw entity.

    Attributes:
        uuid: The classified node's uuid.
        kind: The resolved node kind.
        outcomes: Outcomes to merge into the document, in order.
    """

    uuid: str
    kind: NodeKind
    outcomes: tuple[Outcome, ...] = field(default_factory=tuple)


def parse_role(lines: list[str], raw: RawEntity) -> Role:
    """Parse role attribute lines into a Role.

    Each line must split on a colon into exactly a key and a value.
    Blank lines are ignored.

    Raises:
        RoleParameterError: On a malformed line or a missing ``id``.
    """
    attributes: dict[str, str] = {}
    for line in lines:
        if not line.strip():
            continue
        parts = ROLE_SEPARATOR.split(line)
        if len(parts) != 2:
            raise RoleParameterError(
                f"expected 'key:value', got {len(parts)} field(s) in {line!r}", raw.raw
            )
        key, value = parts[0].strip(), parts[1].strip()
        attributes[key] = value

    role_id = attributes.get("id")
    if not role_id:
        raise RoleParameterError("role has no 'id'", raw.raw)
    return Role(id=role_id, attributes=attributes)


def classify_entity(raw: RawEntity, entity_type: str = TEXT_NODE_TYPE) -> Classification:
    """Classify one raw node.

    Args:
        raw: The raw editor node.
        entity_type: The editor type that marks text nodes.

    Returns:
        Classification holding the outcomes for this node.

    Raises:
        UnexpectedEntityTypeError: If the node is not a text node.
        UnknownNodeKindError: If the first label line is not a keyword.
        RoleParameterError: If a role node is malformed.
        UnhandledKindError: If the resolved kind has no branch.
    """
    if raw.type != entity_type:
        raise UnexpectedEntityTypeError(raw.type, raw.raw)
    if not raw.uuid:
        raise MalformedDocumentError(f"Text node has no uuid: {raw.raw!r}")
    if raw.text is None:
        raise MalformedDocumentError(f"Text node label is not a string: {raw.raw!r}")

    lines = raw.lines
    keyword = lines[0]
    kind = resolve_keyword(keyword)
    if kind is None:
        raise UnknownNodeKindError(keyword, raw.raw)

    outcomes: list[Outcome] = []
    if kind == NodeKind.VERSION:
        if len(lines) > 1:
            outcomes.append(VersionUpdate(lines[1]))
    elif kind == NodeKind.ROLE:
        outcomes.append(RoleDefinition(parse_role(lines[1:], raw)))
    elif is_process(kind):
        outcomes.append(EntityInsertion(uuid=raw.uuid, kind=kind, payload=tuple(lines[1:])))
    else:
        raise UnhandledKindError(kind.value, raw.raw)

    if is_root(kind):
        outcomes.append(RootDesignation(uuid=raw.uuid, name=lines[1] if len(lines) > 1 else None))

    return Classification(uuid=raw.uuid, kind=kind, outcomes=tuple(outcomes))


def apply_classification(document: ScriptDocument, classification: Classification) -> None:
    """Merge a node's outcomes into the document."""
    for outcome in classification.outcomes:
        if isinstance(outcome, VersionUpdate):
            document.version = outcome.version
        elif isinstance(outcome, RoleDefinition):
            # Later definitions with the same id replace earlier ones
            document.roles[outcome.role.id] = outcome.role
        elif isinstance(outcome, EntityInsertion):
            document.entities[outcome.uuid] = outcome.to_entity()
        elif isinstance(outcome, RootDesignation):
            document.root = outcome.uuid
            if outcome.name is not None:
                document.name = outcome.name


class ScriptClassifier:
    """Classifies every node of a graph into a fresh ScriptDocument.

    Usage:
        classifier = ScriptClassifier()
        document = classifier.classify_all(graph.entities)
    """

    def __init__(
        self,
        entity_type: str = TEXT_NODE_TYPE,
        default_name: str = DEFAULT_SCRIPT_NAME,
        default_version: str = DEFAULT_SCRIPT_VERSION,
    ) -> None:
        self.entity_type = entity_type
        self.default_name = default_name
        self.default_version = default_version

    def new_document(self) -> ScriptDocument:
        return ScriptDocument(name=self.default_name, version=self.default_version)

    def classify(self, raw: RawEntity) -> Classification:
        return classify_entity(raw, entity_type=self.entity_type)

    def classify_all(self, entities: Iterable[RawEntity]) -> ScriptDocument:
        """Classify entities in input order.

        The first failure aborts the fold; no partial document escapes.
        """
        document = self.new_document()
        for raw in entities:
            apply_classification(document, self.classify(raw))
        return document
