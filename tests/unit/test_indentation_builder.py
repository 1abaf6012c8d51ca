"""
Tests for the indentation-aware string builder
"""
import pytest

from labscape.output import IndentationAwareStringBuilder, IndentationType


class TestIndentationAwareStringBuilder:

    def test_defaults_to_four_spaces(self):
        builder = IndentationAwareStringBuilder()

        builder.add("a").increase_indentation().add("b").increase_indentation().add("c")

        assert builder.build_string() == "a\n    b\n        c"

    def test_custom_tab_size(self):
        builder = IndentationAwareStringBuilder().with_tab_size(2)

        builder.add("a").increase_indentation().add("b")

        assert builder.lines() == ["a", "  b"]

    def test_tabs(self):
        builder = IndentationAwareStringBuilder().with_indentation_type(IndentationType.TABS)

        builder.increase_indentation().increase_indentation().add("x")

        assert builder.build_string() == "\t\tx"

    def test_switching_back_to_spaces_resets_width(self):
        builder = (IndentationAwareStringBuilder()
                   .with_tab_size(2)
                   .with_indentation_type(IndentationType.TABS)
                   .with_indentation_type(IndentationType.SPACES))

        assert builder.indent_unit == "    "

    def test_string_indentation_type_accepted(self):
        builder = IndentationAwareStringBuilder().with_indentation_type("tabs")
        assert builder.indent_unit == "\t"

    def test_zero_tab_size(self):
        builder = IndentationAwareStringBuilder().with_tab_size(0)

        builder.increase_indentation().add("flat")

        assert builder.build_string() == "flat"

    def test_negative_tab_size_rejected(self):
        with pytest.raises(ValueError):
            IndentationAwareStringBuilder().with_tab_size(-1)

    def test_decrease_below_zero_rejected(self):
        builder = IndentationAwareStringBuilder()

        with pytest.raises(ValueError):
            builder.decrease_indentation()

        assert builder.indentation_level == 0

    def test_level_applies_to_later_lines_only(self):
        builder = IndentationAwareStringBuilder()

        builder.add("open").increase_indentation().add("body").decrease_indentation().add("close")

        assert builder.lines() == ["open", "    body", "close"]

    def test_empty_builder(self):
        assert IndentationAwareStringBuilder().build_string() == ""
