"""Tests for attribute and interpolation formatting."""

from ngfmt import Attribute
from ngfmt.printer import format_attribute, format_attributes, format_interpolation


class TestFormatAttributes:
    """Attribute list layout."""

    def test_single_attribute_inline(self):
        assert format_attributes([Attribute("class", "primary")], "    ") == 'class="primary"'

    def test_single_valueless_attribute(self):
        assert format_attributes([Attribute("disabled")]) == "disabled"

    def test_empty_value_keeps_quotes(self):
        assert format_attribute(Attribute("alt", "")) == 'alt=""'

    def test_angular_binding_names_untouched(self):
        attr = Attribute("(click)", "save($event)")
        assert format_attribute(attr) == '(click)="save($event)"'

    def test_multiple_attributes_one_per_line(self):
        attrs = [Attribute("[title]", "t"), Attribute("class", "c")]
        assert format_attributes(attrs, "  ") == '  [title]="t"\n  class="c"'

    def test_multiple_with_valueless(self):
        attrs = [Attribute("type", "checkbox"), Attribute("checked"), Attribute("#box")]
        assert format_attributes(attrs, "    ") == '    type="checkbox"\n    checked\n    #box'

    def test_order_is_preserved(self):
        attrs = [Attribute("z", "1"), Attribute("a", "2")]
        assert format_attributes(attrs).splitlines() == ['z="1"', 'a="2"']


class TestFormatInterpolation:
    """Interpolation spacing."""

    def test_extra_spaces_removed(self):
        assert format_interpolation("{{   value  }}") == "{{ value }}"

    def test_missing_spaces_added(self):
        assert format_interpolation("{{value}}") == "{{ value }}"

    def test_indent_prefixed(self):
        assert format_interpolation("{{a}}", "  ") == "  {{ a }}"

    def test_newlines_collapse(self):
        assert format_interpolation("{{ items\n    | slice:0:3 }}") == "{{ items | slice:0:3 }}"

    def test_every_span_normalized(self):
        assert format_interpolation("{{a}}{{  b }}") == "{{ a }}{{ b }}"
