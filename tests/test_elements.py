"""Tests for element, text and comment layout."""

import pytest

from ngfmt import Comment, Element, FormatOptions, NestingDepthError, Printer, Text

from .conftest import el, lines


class TestSingleLineElements:
    """No content and at most one attribute: one line."""

    def test_single_attribute_no_content(self, printer):
        node = el("button", attrs={"(click)": "go()"})
        assert printer.format(node) == '<button (click)="go()"></button>'

    def test_no_attributes_no_content(self, printer):
        assert printer.format(el("div")) == "<div></div>"

    def test_whitespace_children_are_not_content(self, printer):
        node = el("div", "\n   ", " ", attrs={"class": "a"})
        assert printer.format(node) == '<div class="a"></div>'

    def test_valueless_single_attribute(self, printer):
        assert printer.format(el("ng-content", attrs={"select": None})) == "<ng-content select></ng-content>"

    @pytest.mark.parametrize("name", ["br", "hr", "wbr"])
    def test_void_without_attributes(self, printer, name):
        assert printer.format(el(name)) == f"<{name}>"

    def test_void_with_single_attribute(self, printer):
        assert printer.format(el("img", attrs={"src": "a.png"})) == '<img src="a.png">'

    def test_indent_applies_to_tag(self, printer):
        assert printer.format(el("span"), "    ") == "    <span></span>"


class TestMultipleAttributes:
    """Attribute blocks: one unit without content, two with content."""

    def test_no_content(self, printer):
        node = el("app-x", attrs={"[title]": "t", "class": "c"})
        assert printer.format(node) == lines(
            "<app-x",
            '  [title]="t"',
            '  class="c">',
            "</app-x>",
        )

    def test_with_content(self, printer):
        node = el("app-x", "Hi", attrs={"[title]": "t", "class": "c"})
        assert printer.format(node) == lines(
            "<app-x",
            '    [title]="t"',
            '    class="c">',
            "  Hi",
            "</app-x>",
        )

    def test_nested_indent(self, printer):
        node = el("app-x", attrs={"a": "1", "b": "2"})
        assert printer.format(node, "  ") == lines(
            "  <app-x",
            '    a="1"',
            '    b="2">',
            "  </app-x>",
        )

    def test_void_never_gets_closing_tag(self, printer):
        node = el("input", attrs={"type": "text", "name": "x"})
        assert printer.format(node) == lines(
            "<input",
            '  type="text"',
            '  name="x">',
        )

    def test_void_with_blank_children_gets_no_closing_tag(self, printer):
        node = el("input", "  \n", attrs={"type": "text", "name": "x"})
        assert "</input>" not in printer.format(node)


class TestChildren:
    """Children are printed one unit deeper."""

    def test_text_child(self, printer):
        assert printer.format(el("p", "  Hello  ")) == lines("<p>", "  Hello", "</p>")

    def test_nested_elements(self, printer):
        node = el("ul", "\n  ", el("li", "One"), "\n  ", el("li", "Two"), "\n")
        assert printer.format(node) == lines(
            "<ul>",
            "  <li>",
            "    One",
            "  </li>",
            "  <li>",
            "    Two",
            "  </li>",
            "</ul>",
        )

    def test_interpolation_child(self, printer):
        assert printer.format(el("h1", "{{title}}")) == lines("<h1>", "  {{ title }}", "</h1>")

    def test_comment_child(self, printer):
        node = el("div", Comment(" note "))
        assert printer.format(node) == lines("<div>", "  <!-- note -->", "</div>")

    def test_single_attribute_with_content(self, printer):
        node = el("div", el("span"), attrs={"class": "card"})
        assert printer.format(node) == lines(
            '<div class="card">',
            "  <span></span>",
            "</div>",
        )

    def test_control_flow_children(self, printer):
        node = el(
            "div",
            "@if (a) {",
            el("span", "yes"),
            "} @else {",
            "no",
            "}",
        )
        assert printer.format(node) == lines(
            "<div>",
            "  @if (a) {",
            "    <span>",
            "      yes",
            "    </span>",
            "  } @else {",
            "    no",
            "  }",
            "</div>",
        )

    def test_each_element_has_its_own_block_stack(self, printer):
        """A closer inside a child element never closes the parent's block."""
        node = el("div", "@if (a) {", el("p", "} text"), "x", "}")
        assert printer.format(node) == lines(
            "<div>",
            "  @if (a) {",
            "    <p>",
            "      text",
            "    </p>",
            "    x",
            "  }",
            "</div>",
        )

    def test_unnamed_element_prints_nothing(self, printer):
        assert printer.format(Element(name="")) == ""


class TestTextAndComments:
    """Standalone text and comment nodes."""

    @pytest.mark.parametrize("value", [None, "", "   \n  "])
    def test_blank_text(self, printer, value):
        assert printer.format(Text(value)) == ""

    def test_plain_text_trimmed(self, printer):
        assert printer.format(Text("  hello  "), "  ") == "  hello"

    def test_interpolation_text(self, printer):
        assert printer.format(Text("  {{   value  }} ")) == "{{ value }}"

    def test_directive_with_interpolation_kept_whole(self, printer):
        assert printer.format(Text("@for x {{ y }}")) == "@for x {{ y }}"

    def test_directive_text(self, printer):
        assert printer.format(Text("@for(x of xs){"), "  ") == "  @for (x of xs) {"

    def test_comment_kept_byte_for_byte(self, printer):
        assert printer.format(Comment("\n  kept\n")) == "<!--\n  kept\n-->"

    def test_comment_interior_not_reindented(self, printer):
        assert printer.format(Comment("\n  kept\n"), "    ") == "    <!--\n  kept\n-->"


class TestNestingDepth:
    """Depth guard."""

    @staticmethod
    def _nested(levels: int) -> Element:
        node = el("span", "x")
        for _ in range(levels - 1):
            node = el("div", node)
        return node

    def test_within_limit(self):
        printer = Printer(FormatOptions(max_depth=4))
        output = printer.format(self._nested(5))
        assert output.splitlines()[5] == "          x"

    def test_beyond_limit_raises(self):
        printer = Printer(FormatOptions(max_depth=3))
        with pytest.raises(NestingDepthError) as exc_info:
            printer.format(self._nested(5))
        assert exc_info.value.depth == 4
        assert exc_info.value.limit == 3
        assert exc_info.value.element == "span"
