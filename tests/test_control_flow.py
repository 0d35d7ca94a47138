"""Tests for directive header formatting."""

import logging

import pytest

from ngfmt.printer import format_control_flow


class TestHeaderNormalization:
    """Well-formed headers are respaced."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("@if (a) {", "@if (a) {"),
            ("@if(a){", "@if (a) {"),
            ("@if   (  a  )   {", "@if ( a ) {"),
            ("@else   if   (x)  {", "@else if (x) {"),
            ("@else{", "@else {"),
            ("@for (item of items; track item.id) {", "@for (item of items; track item.id) {"),
            ("@switch (value) {", "@switch (value) {"),
            ("@case ('a') {", "@case ('a') {"),
            ("@default {", "@default {"),
            ("@defer (on viewport; prefetch on idle) {", "@defer (on viewport; prefetch on idle) {"),
            ("@loading (minimum 1s) {", "@loading (minimum 1s) {"),
            ("\n  @if (a &&\n      b) {\n", "@if (a && b) {"),
        ],
    )
    def test_formats_header(self, text, expected):
        assert format_control_flow(text) == expected

    def test_indent_is_prefixed(self):
        assert format_control_flow("@if (a) {", "    ") == "    @if (a) {"

    def test_text_after_brace_is_not_part_of_header(self):
        assert format_control_flow("@if (a) { trailing") == "@if (a) {"

    def test_interpolation_in_condition_is_kept(self):
        assert format_control_flow("@if (x === {{ y }}) {") == "@if (x === {{ y }}) {"


class TestMalformedHeaders:
    """Text without a header shape is emitted verbatim, never raising."""

    @pytest.mark.parametrize(
        "text",
        ["@if (a)", "not a directive", "@ if (a) {", "{"],
    )
    def test_emitted_trimmed_at_indent(self, text):
        assert format_control_flow(f"  {text}  ", "  ") == f"  {text}"

    @pytest.mark.parametrize("text", ["@if (a) {{ x }}", "@for x {{ y }}"])
    def test_interpolation_brace_is_not_a_block_brace(self, text):
        assert format_control_flow(text) == text

    def test_inner_whitespace_is_preserved(self):
        assert format_control_flow("@if   (a)") == "@if   (a)"

    def test_degraded_header_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="ngfmt.printer.control_flow"):
            format_control_flow("@if (a)")
        assert "no block header" in caplog.text
