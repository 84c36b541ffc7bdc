"""Tests for EditField."""

from contact_model.domain.models import EditField
from contact_model.shared.types import (
    TYPE_CLASS_PHONE,
    TYPE_CLASS_TEXT,
    TYPE_TEXT_FLAG_CAP_WORDS,
    TYPE_TEXT_FLAG_MULTI_LINE,
)


class TestEditField:
    """Test EditField."""

    def test_defaults(self):
        """Test default flags."""
        field = EditField("data1", 10)
        assert field.column == "data1"
        assert field.title_res == 10
        assert field.input_type == 0
        assert field.min_lines == 0
        assert not field.optional
        assert not field.short_form
        assert not field.long_form
        assert not field.is_full_name

    def test_input_type_constructor(self):
        """Test the three-argument form."""
        field = EditField("data1", 10, TYPE_CLASS_PHONE)
        assert field.input_type == TYPE_CLASS_PHONE

    def test_fluent_setters(self):
        """Test setters chain and return the same field."""
        field = EditField("data4", 11)
        result = (field.set_optional(True)
                  .set_short_form(True)
                  .set_long_form(True)
                  .set_min_lines(3)
                  .set_is_full_name(True))

        assert result is field
        assert field.optional
        assert field.short_form
        assert field.long_form
        assert field.min_lines == 3
        assert field.is_full_name

    def test_multi_line_flag_set(self):
        """Test multi-line is derived from the input type bit."""
        field = EditField("data1", 10, TYPE_CLASS_TEXT | TYPE_TEXT_FLAG_MULTI_LINE)
        assert field.is_multi_line() is True

    def test_multi_line_flag_clear(self):
        """Test other bits do not make a field multi-line."""
        field = EditField("data1", 10, TYPE_CLASS_TEXT | TYPE_TEXT_FLAG_CAP_WORDS)
        assert field.is_multi_line() is False

    def test_multi_line_follows_input_type_changes(self):
        """Test the predicate is computed, not cached."""
        field = EditField("data1", 10, TYPE_TEXT_FLAG_MULTI_LINE)
        field.input_type &= ~TYPE_TEXT_FLAG_MULTI_LINE
        assert field.is_multi_line() is False
