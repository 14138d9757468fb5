"""Node kinds - The closed set of label keywords and their categories.

This module defines the type registry used by the classifier:
- NodeKind: Enum of node kinds, valued by canonical keyword
- PROCESS_KINDS / ROOT_KINDS / RESULT_KINDS: composite categories
- resolve_keyword(): keyword (first label line) to NodeKind lookup
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class NodeKind(Enum):
    """Kinds of nodes in a project graph.

    The value is the canonical keyword written on the first line of a
    node label. Declaration order fixes the legacy bit value of each kind.
    """

    TEXT = "text"
    ROLE = "role"
    ROOT = "root"
    EVENT = "event"
    BUTTON = "button"
    VERSION = "version"
    END = "end"
    LOOKUP = "lookup"
    FAIL = "fail"
    SUCCESS = "success"

    @property
    def flag(self) -> int:
        """Bit value of this kind (1 << declaration index)."""
        return 1 << list(NodeKind).index(self)

    def is_process(self) -> bool:
        """Check if nodes of this kind become tree entities."""
        return is_process(self)

    def is_root(self) -> bool:
        """Check if nodes of this kind anchor the script."""
        return is_root(self)

    def is_result(self) -> bool:
        """Check if nodes of this kind are terminal outcomes."""
        return is_result(self)


PROCESS_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.TEXT,
        NodeKind.EVENT,
        NodeKind.BUTTON,
        NodeKind.END,
        NodeKind.LOOKUP,
        NodeKind.FAIL,
        NodeKind.SUCCESS,
        NodeKind.ROOT,
    }
)
ROOT_KINDS: frozenset[NodeKind] = frozenset({NodeKind.ROOT})
RESULT_KINDS: frozenset[NodeKind] = frozenset({NodeKind.FAIL, NodeKind.SUCCESS})

# Short keywords written by the editor templates
KEYWORD_ALIASES: dict[str, NodeKind] = {
    "btn": NodeKind.BUTTON,
    "zhao-cha": NodeKind.LOOKUP,
    "succ": NodeKind.SUCCESS,
}

_KEYWORDS: dict[str, NodeKind] = {
    **{kind.value: kind for kind in NodeKind},
    **KEYWORD_ALIASES,
}


def is_process(kind: NodeKind) -> bool:
    return kind in PROCESS_KINDS


def is_root(kind: NodeKind) -> bool:
    return kind in ROOT_KINDS


def is_result(kind: NodeKind) -> bool:
    return kind in RESULT_KINDS


def category_mask(kinds: Iterable[NodeKind]) -> int:
    """Combine the bit values of several kinds into one mask.

    A kind belongs to the category when ``(mask & kind.flag) == kind.flag``.
    """
    mask = 0
    for kind in kinds:
        mask |= kind.flag
    return mask


def resolve_keyword(keyword: str) -> NodeKind | None:
    """Look up the kind for a label keyword.

    Args:
        keyword: First line of a node label.

    Returns:
        The matching NodeKind, or None for an unregistered keyword.
    """
    return _KEYWORDS.get(keyword.rstrip())


def keywords() -> dict[str, NodeKind]:
    """Return a copy of the keyword table, aliases included."""
    return dict(_KEYWORDS)
