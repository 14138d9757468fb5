"""Conversion errors raised while turning a project graph into a script.

Every failure aborts conversion of the current document. Messages carry
the offending keyword, uuid or raw entity so the node can be located in
the source file.
"""

from __future__ import annotations

import json
from typing import Any


def _dump(raw: Any) -> str:
    return json.dumps(raw, ensure_ascii=False, default=str)


class ConversionError(ValueError):
    """Base class for all graph-to-script conversion failures."""


class MalformedDocumentError(ConversionError):
    """The input document does not have the expected shape."""


class UnexpectedEntityTypeError(ConversionError):
    """A raw entity is not a text node."""

    def __init__(self, entity_type: Any, raw: Any) -> None:
        self.entity_type = entity_type
        self.raw = raw
        super().__init__(f"Unexpected entity type: {entity_type} {_dump(raw)}")


class UnknownNodeKindError(ConversionError):
    """The first label line is not a registered keyword."""

    def __init__(self, keyword: str, raw: Any) -> None:
        self.keyword = keyword
        self.raw = raw
        super().__init__(f"Unknown node kind: {keyword!r} {_dump(raw)}")


class RoleParameterError(ConversionError):
    """A role attribute line is malformed, or the role has no id."""

    def __init__(self, reason: str, raw: Any) -> None:
        self.reason = reason
        self.raw = raw
        super().__init__(f"Role parameter error: {reason} {_dump(raw)}")


class UnhandledKindError(ConversionError):
    """A resolved kind has no classification branch."""

    def __init__(self, kind: Any, raw: Any) -> None:
        self.kind = kind
        self.raw = raw
        super().__init__(f"Node kind not handled: {kind} {_dump(raw)}")


class UnknownAssociationSourceError(ConversionError):
    """An association starts at a uuid with no classified entity."""

    def __init__(self, source: str, raw: Any = None) -> None:
        self.source = source
        self.raw = raw
        detail = f" {_dump(raw)}" if raw is not None else ""
        super().__init__(f"Unknown association source: {source}{detail}")


class DanglingReferenceError(ConversionError):
    """An association points at a uuid with no classified entity (strict mode)."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Dangling child reference: {source} -> {target} (missing)")


class RootChildCountError(ConversionError):
    """A root entity does not have exactly one child."""

    def __init__(self, uuid: str, child_count: int, payload: list[str] | None = None) -> None:
        self.uuid = uuid
        self.child_count = child_count
        self.payload = payload or []
        super().__init__(
            f"Root entity {uuid} must have exactly 1 child, found {child_count} "
            f"{_dump(self.payload)}"
        )
