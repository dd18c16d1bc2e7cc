from __future__ import annotations

import os
import unittest
from typing import TYPE_CHECKING

import pytest
import yaml

from python_mediatype.exceptions import ArgumentConflictError, MalformedMimeTypeError, MediaTypeError
from python_mediatype.mediatype import MediaType, media_type

if TYPE_CHECKING:
    from typing import Any

# Get the current directory for our later test cases.
curr_dir = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(curr_dir, "test_data", "media_types.yaml"), "rb") as f:
    serialization_tests: list[dict[str, Any]] = yaml.safe_load(f)


@pytest.mark.parametrize("case", serialization_tests, ids=[case["name"] for case in serialization_tests])
def test_serialization(case: dict[str, Any]) -> None:
    mt = MediaType(case["type"], case["subtype"], case["parameters"])
    assert str(mt) == case["expected"]


class TestMediaType(unittest.TestCase):
    def setUp(self) -> None:
        self.mt = MediaType("text", "plain", {"charset": "utf-8", "format": "flowed"})

    def test_lowercases(self) -> None:
        mt = MediaType("Text", "PLAIN")
        self.assertEqual(mt.type, "text")
        self.assertEqual(mt.subtype, "plain")
        self.assertEqual(mt.mime_type, "text/plain")

    def test_default_parameters(self) -> None:
        mt = MediaType("text", "plain")
        self.assertEqual(len(mt.parameters), 0)
        self.assertEqual(str(mt), "text/plain")

    def test_parameters_are_case_insensitive(self) -> None:
        mt = MediaType("text", "plain", {"Charset": "utf-8"})
        self.assertEqual(mt.parameters["charset"], "utf-8")
        self.assertEqual(mt.parameters.get("CHARSET"), "utf-8")

    def test_parameters_are_copied(self) -> None:
        params = {"charset": "utf-8"}
        mt = MediaType("text", "plain", params)
        params["charset"] = "latin-1"
        self.assertEqual(mt.parameters["charset"], "utf-8")

    def test_parameters_are_read_only(self) -> None:
        with self.assertRaises(TypeError):
            self.mt.parameters["charset"] = "latin-1"  # type: ignore[index]

    def test_immutable_fields(self) -> None:
        with self.assertRaises(AttributeError):
            self.mt.type = "image"  # type: ignore[misc]

    def test_change_nothing(self) -> None:
        changed = self.mt.change()
        self.assertIsNot(changed, self.mt)
        self.assertEqual(changed.type, self.mt.type)
        self.assertEqual(changed.subtype, self.mt.subtype)
        self.assertEqual(dict(changed.parameters), dict(self.mt.parameters))
        self.assertEqual(changed, self.mt)

    def test_change_type(self) -> None:
        changed = self.mt.change(type="Application")
        self.assertEqual(changed.mime_type, "application/plain")
        self.assertEqual(changed.parameters["charset"], "utf-8")

    def test_change_subtype(self) -> None:
        changed = self.mt.change(subtype="html")
        self.assertEqual(changed.mime_type, "text/html")

    def test_change_mime_type(self) -> None:
        changed = self.mt.change(mime_type="Image/PNG")
        self.assertEqual(changed.type, "image")
        self.assertEqual(changed.subtype, "png")
        self.assertEqual(changed.parameters["format"], "flowed")

    def test_change_leaves_original(self) -> None:
        self.mt.change(mime_type="image/png", parameters={"charset": "ascii"})
        self.assertEqual(self.mt.mime_type, "text/plain")
        self.assertEqual(self.mt.parameters["charset"], "utf-8")

    def test_mime_type_with_type_conflicts(self) -> None:
        with self.assertRaises(ArgumentConflictError):
            self.mt.change(type="x", mime_type="a/b")

    def test_mime_type_with_subtype_conflicts(self) -> None:
        with self.assertRaises(ArgumentConflictError):
            self.mt.change(subtype="x", mime_type="a/b")

    def test_malformed_mime_type(self) -> None:
        for value in ("bad", "a/b/c", ""):
            with self.assertRaises(MalformedMimeTypeError) as ctx:
                self.mt.change(mime_type=value)
            self.assertEqual(ctx.exception.value, value)

    def test_errors_are_value_errors(self) -> None:
        with self.assertRaises(ValueError):
            self.mt.change(mime_type="bad")
        with self.assertRaises(MediaTypeError):
            self.mt.change(type="x", mime_type="a/b")

    def test_change_merges_parameters(self) -> None:
        changed = self.mt.change(parameters={"CHARSET": "latin-1", "delsp": "yes"})
        self.assertEqual(len(changed.parameters), 3)
        self.assertEqual(changed.parameters["charset"], "latin-1")
        self.assertEqual(changed.parameters["format"], "flowed")
        self.assertEqual(changed.parameters["delsp"], "yes")
        self.assertIn("CHARSET", list(changed.parameters))

    def test_change_clears_parameters(self) -> None:
        changed = self.mt.change(parameters={"delsp": "yes"}, clear_parameters=True)
        self.assertEqual(dict(changed.parameters), {"delsp": "yes"})

        cleared = self.mt.change(clear_parameters=True)
        self.assertEqual(len(cleared.parameters), 0)

    def test_overwriting_parameter_keeps_one_entry(self) -> None:
        mt = MediaType("text", "plain", {"Charset": "utf-8"}).change(parameters={"charset": "ascii"})
        self.assertEqual(len(mt.parameters), 1)
        self.assertEqual(mt.parameters["Charset"], "ascii")
        self.assertEqual(str(mt), "text/plain; charset=ascii")

    def test_serialize_multiple_parameters(self) -> None:
        mt = MediaType("multipart", "form-data", {"boundary": "x y", "charset": "utf-8"})
        text = str(mt)
        self.assertTrue(text.startswith("multipart/form-data; "))
        self.assertEqual(
            sorted(text.split("; ")[1:]),
            ['boundary="x y"', "charset=utf-8"],
        )

    def test_equality(self) -> None:
        self.assertEqual(
            MediaType("TEXT", "Plain", {"Charset": "utf-8"}),
            MediaType("text", "plain", {"charset": "utf-8"}),
        )
        self.assertNotEqual(MediaType("text", "plain"), MediaType("text", "html"))
        self.assertNotEqual(MediaType("text", "plain", {"a": "b"}), MediaType("text", "plain"))
        self.assertFalse(MediaType("text", "plain") == "text/plain")

    def test_hash(self) -> None:
        a = MediaType("text", "plain", {"Charset": "utf-8"})
        b = MediaType("text", "plain", {"charset": "utf-8"})
        self.assertEqual(len({a, b}), 1)

    def test_repr(self) -> None:
        self.assertEqual(repr(MediaType("text", "plain")), "MediaType('text/plain')")


def test_media_type_helper() -> None:
    mt = media_type("Text/HTML", {"charset": "utf-8"})
    assert mt == MediaType("text", "html", {"charset": "utf-8"})

    with pytest.raises(MalformedMimeTypeError):
        media_type("text")
