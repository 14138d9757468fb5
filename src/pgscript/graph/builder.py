"""Graph assembler - Attaches associations to classified entities.

Each association appends its target uuid to the children of its source
entity. Targets are not resolved; associations pointing at uuids with
no entity are recorded as DanglingReference and only rejected in
strict mode.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from pgscript.graph.errors import DanglingReferenceError, UnknownAssociationSourceError
from pgscript.graph.models import Entity, RawAssociation


@dataclass(frozen=True)
class DanglingReference:
    """A child reference to a uuid with no classified entity.

    Attributes:
        source: uuid of the entity holding the reference.
        target: uuid that was referenced but doesn't exist.
    """

    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.source} --> {self.target} (missing)"


@dataclass
class AssemblyResult:
    """Outcome of assembling one document's associations."""

    edge_count: int = 0
    dangling: list[DanglingReference] = field(default_factory=list)

    def has_dangling(self) -> bool:
        return bool(self.dangling)


class GraphAssembler:
    """Builds parent/child links from the association list.

    Usage:
        assembler = GraphAssembler(document.entities)
        result = assembler.assemble(graph.associations)
    """

    def __init__(self, entities: dict[str, Entity], strict: bool = False) -> None:
        """Initialize the assembler.

        Args:
            entities: Classified entities keyed by uuid; mutated in place.
            strict: Raise on the first dangling child reference.
        """
        self.entities = entities
        self.strict = strict

    def link(self, association: RawAssociation) -> DanglingReference | None:
        """Append one association's target to its source entity.

        Returns:
            DanglingReference when the target has no entity, else None.

        Raises:
            UnknownAssociationSourceError: If the source has no entity.
            DanglingReferenceError: In strict mode, for a missing target.
        """
        source = self.entities.get(association.source)
        if source is None:
            raise UnknownAssociationSourceError(association.source, association.raw or None)

        source.add_child(association.target)

        if association.target in self.entities:
            return None
        if self.strict:
            raise DanglingReferenceError(association.source, association.target)
        return DanglingReference(source=association.source, target=association.target)

    def assemble(self, associations: Iterable[RawAssociation]) -> AssemblyResult:
        result = AssemblyResult()
        for association in associations:
            dangling = self.link(association)
            result.edge_count += 1
            if dangling is not None:
                result.dangling.append(dangling)
        return result


def assemble(
    entities: dict[str, Entity],
    associations: Iterable[RawAssociation],
    strict: bool = False,
) -> AssemblyResult:
    """Convenience wrapper around GraphAssembler.assemble()."""
    return GraphAssembler(entities, strict=strict).assemble(associations)
