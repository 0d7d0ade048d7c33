"""Tests for refprint.layout."""
from __future__ import annotations

from refprint.layout import Line, blank, container, emit, indent, label


class TestContainer:
    def test_empty_is_one_line(self):
        assert container("{", [], "}") == [Line(0, "{}")]

    def test_children_indented(self):
        lines = container("[", [Line(0, "1"), Line(0, "2")], "]")
        assert lines == [Line(0, "["), Line(1, "1"), Line(1, "2"), Line(0, "]")]


class TestHelpers:
    def test_indent(self):
        assert indent([Line(0, "a"), Line(2, "b")]) == [Line(1, "a"), Line(3, "b")]

    def test_label_first_line_only(self):
        lines = label([Line(0, "{"), Line(1, "x: 1"), Line(0, "}")], "obj: ")
        assert lines[0] == Line(0, "obj: {")
        assert lines[1] == Line(1, "x: 1")

    def test_blank(self):
        assert blank() == Line(0, "")


class TestEmit:
    def test_tabs_per_depth(self):
        text = emit([Line(0, "{"), Line(1, "a: ["), Line(2, "1"), Line(1, "]"), Line(0, "}")])
        assert text == "{\n\ta: [\n\t\t1\n\t]\n}"

    def test_blank_line_keeps_indent(self):
        assert emit([Line(0, "Date{"), Line(1, ""), Line(0, "}")]) == "Date{\n\t\n}"
