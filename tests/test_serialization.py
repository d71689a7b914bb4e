"""Tests for unleashed_md.serialization — Document JSON round-trip."""

from __future__ import annotations

import json

import pytest

from unleashed_md import SerializationError, parse_markup
from unleashed_md.nodes import Bold, Break, Document, Italic, Link, LinkStyle, Span, StyleSpan
from unleashed_md.serialization import from_dict, from_json, to_dict, to_json


class TestRoundTrip:
    """Verify round-trip serialization of parsed documents."""

    def test_empty_document(self) -> None:
        assert from_json(to_json(Document())) == Document()

    def test_all_style_kinds(self) -> None:
        doc = parse_markup("foo*bar**bazqux*quux**corge [x](y)\nz")
        assert from_json(to_json(doc)) == doc

    def test_link_value(self) -> None:
        link = Link(target="maps/coast")
        assert from_dict(to_dict(link)) == link


class TestDictShape:
    """Serialized structure."""

    def test_discriminators(self) -> None:
        doc = Document(
            text=("a",),
            styles=(StyleSpan(span=Span(start=0, end=0), style=LinkStyle(target="t")),),
            breaks=(Break(pos=1),),
        )
        assert to_dict(doc) == {
            "_type": "Document",
            "text": ["a"],
            "styles": [
                {
                    "_type": "StyleSpan",
                    "span": {"_type": "Span", "start": 0, "end": 0},
                    "style": {"_type": "LinkStyle", "target": "t"},
                }
            ],
            "breaks": [{"_type": "Break", "pos": 1}],
        }

    def test_json_is_deterministic(self) -> None:
        doc = Document(
            text=("a", "b"),
            styles=(
                StyleSpan(span=Span(start=0, end=0), style=Italic()),
                StyleSpan(span=Span(start=1, end=1), style=Bold()),
            ),
        )
        assert to_json(doc) == to_json(doc)
        assert json.loads(to_json(doc, indent=2)) == to_dict(doc)


class TestErrors:
    """Malformed input raises SerializationError."""

    def test_missing_type(self) -> None:
        with pytest.raises(SerializationError, match="Missing '_type'"):
            from_dict({"text": []})

    def test_unknown_type(self) -> None:
        with pytest.raises(SerializationError, match="Unknown value type"):
            from_dict({"_type": "Underline"})

    def test_root_must_be_document(self) -> None:
        with pytest.raises(SerializationError, match="Expected Document"):
            from_json(json.dumps({"_type": "Break", "pos": 0}))

    def test_root_must_be_object(self) -> None:
        with pytest.raises(SerializationError):
            from_json("[]")

    def test_missing_required_field(self) -> None:
        with pytest.raises(SerializationError, match="Cannot build Span"):
            from_dict({"_type": "Span", "start": 0})

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_dict({})
