"""Tests for serialize.py - ScriptDocument JSON output."""

import json

from pgscript.graph.factory import convert_document
from pgscript.graph.kinds import NodeKind
from pgscript.graph.models import Entity, ScriptDocument
from pgscript.graph.serialize import serialize_document, serialize_entity, to_json


class TestSerializeEntity:
    def test_fields(self):
        entity = Entity(uuid="t", kind=NodeKind.BUTTON, payload=["Go"], children=["x"])

        assert serialize_entity(entity) == {
            "uuid": "t",
            "kind": "button",
            "payload": ["Go"],
            "children": ["x"],
        }


class TestSerializeDocument:
    def test_empty_document(self):
        assert serialize_document(ScriptDocument()) == {
            "name": "untitled",
            "version": "0.0.0",
            "roles": {},
            "entities": {},
            "root": None,
        }

    def test_story(self, story):
        data = serialize_document(convert_document(story))

        assert data["roles"]["hero"] == {"id": "hero", "name": "Aria"}
        assert data["entities"]["root"]["children"] == ["t1"]
        assert data["entities"]["e1"]["kind"] == "success"
        assert data["root"] == "root"

    def test_to_json(self, story):
        text = to_json(convert_document(story))

        assert text.endswith("\n")
        assert '\n  "name": "Chapter 1"' in text
        assert json.loads(text)["version"] == "1.2.3"

    def test_non_ascii_is_kept(self):
        document = ScriptDocument(name="第一章")

        assert "第一章" in to_json(document)
