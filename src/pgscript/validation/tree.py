"""Tree validation - Structural checks on an assembled script tree.

Rules:
- root.child_count: a root entity must have exactly one child

Only root entities are checked. Acyclicity, reachability and root
uniqueness are not verified.
"""

from __future__ import annotations

from dataclasses import dataclass

from pgscript.graph.errors import RootChildCountError
from pgscript.graph.kinds import is_root
from pgscript.graph.models import Entity

ROOT_CHILD_COUNT = 1


@dataclass
class TreeViolation:
    """A structural rule violation found during validation.

    Attributes:
        rule: The rule that was violated (e.g., "root.child_count")
        uuid: uuid of the offending entity
        message: Human-readable description of the violation
        severity: "error" or "warning"
        child_count: Number of children the entity had
    """

    rule: str
    uuid: str
    message: str
    severity: str = "error"
    child_count: int = 0

    def __str__(self) -> str:
        prefix = "❌ ERROR" if self.severity == "error" else "⚠️ WARNING"
        return f"{prefix} [{self.rule}] {self.uuid}\n   {self.message}"


def validate_tree(entities: dict[str, Entity]) -> list[TreeViolation]:
    """Check every entity against the structural rules.

    Args:
        entities: Assembled entities keyed by uuid.

    Returns:
        List of violations, in entity order.
    """
    violations = []
    for entity in entities.values():
        if is_root(entity.kind) and entity.child_count() != ROOT_CHILD_COUNT:
            violations.append(
                TreeViolation(
                    rule="root.child_count",
                    uuid=entity.uuid,
                    message=(
                        f"Root must have exactly {ROOT_CHILD_COUNT} child, "
                        f"found {entity.child_count()}"
                    ),
                    child_count=entity.child_count(),
                )
            )
    return violations


def check_tree(entities: dict[str, Entity]) -> None:
    """Raise on the first error-level violation.

    Raises:
        RootChildCountError: If a root entity's child count is not exactly one.
    """
    for violation in validate_tree(entities):
        if violation.severity == "error" and violation.rule == "root.child_count":
            entity = entities[violation.uuid]
            raise RootChildCountError(entity.uuid, violation.child_count, entity.payload)
