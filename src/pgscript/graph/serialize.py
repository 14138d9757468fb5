"""Script Serialization - Export ScriptDocument to JSON.

This module provides functions to serialize ScriptDocument and Entity
to JSON-compatible dicts and formatted JSON text.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pgscript.graph.models import Entity, ScriptDocument


def serialize_entity(entity: Entity) -> dict[str, Any]:
    """Serialize an Entity to a JSON-compatible dict.

    Args:
        entity: The entity to serialize.

    Returns:
        Dict with uuid, kind keyword, payload lines and child uuids.
    """
    return {
        "uuid": entity.uuid,
        "kind": entity.kind.value,
        "payload": list(entity.payload),
        "children": list(entity.children),
    }


def serialize_document(document: ScriptDocument) -> dict[str, Any]:
    """Serialize a ScriptDocument to a JSON-compatible dict."""
    return {
        "name": document.name,
        "version": document.version,
        "roles": {role_id: role.to_dict() for role_id, role in document.roles.items()},
        "entities": {
            uuid: serialize_entity(entity) for uuid, entity in document.entities.items()
        },
        "root": document.root,
    }


def to_json(document: ScriptDocument, indent: int = 2) -> str:
    """Render a ScriptDocument as formatted JSON text with a trailing newline."""
    return json.dumps(serialize_document(document), indent=indent, ensure_ascii=False) + "\n"
