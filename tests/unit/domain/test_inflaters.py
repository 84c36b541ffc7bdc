"""Tests for string inflaters."""

import sqlite3

import pytest

from contact_model.domain.interfaces import StringInflater
from contact_model.domain.models import DataKind, EditType
from contact_model.domain.services import JoinInflater, SimpleInflater, TypeLabelInflater


@pytest.fixture
def phone_kind():
    return DataKind(
        "phone",
        type_column="data2",
        type_list=[
            EditType(1, 10),
            EditType(2, 11),
            EditType(0, 12).set_secondary(True).set_custom_column("data3"),
        ],
    )


def make_row(values):
    """Build a sqlite3.Row holding the given values."""
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    columns = ", ".join(f"? AS {name}" for name in values)
    row = conn.execute(f"SELECT {columns}", list(values.values())).fetchone()
    conn.close()
    return row


class TestSimpleInflater:
    """Test SimpleInflater."""

    def test_column_only(self, context):
        """Test the column value is returned as text."""
        assert SimpleInflater("data1").inflate_values(context, {"data1": "555-1234"}) == "555-1234"

    def test_string_only(self, context):
        """Test the string resource alone."""
        assert SimpleInflater(string_res=10).inflate_values(context, {}) == "Home"

    def test_string_formatted_with_column(self, context):
        """Test the resource is formatted with the column value."""
        inflater = SimpleInflater("data1", 20)
        assert inflater.inflate_values(context, {"data1": "555"}) == "Call 555"

    def test_missing_column_falls_back_to_string(self, context):
        """Test a missing column leaves the plain resource text."""
        assert SimpleInflater("data1", 10).inflate_values(context, {}) == "Home"

    def test_nothing_available(self, context):
        """Test None when neither source has a value."""
        assert SimpleInflater("data1").inflate_values(context, {"data1": None}) is None

    def test_non_string_values(self, context):
        """Test values are converted to text."""
        assert SimpleInflater("data1").inflate_values(context, {"data1": 42}) == "42"

    def test_row_matches_values(self, context):
        """Test both entry points agree."""
        inflater = SimpleInflater("data1", 20)
        values = {"data1": "555", "data2": 1}
        assert inflater.inflate_row(context, make_row(values)) == inflater.inflate_values(context, values)

    def test_satisfies_protocol(self):
        """Test inflaters satisfy the StringInflater protocol."""
        assert isinstance(SimpleInflater("data1"), StringInflater)


class TestJoinInflater:
    """Test JoinInflater."""

    def test_join_skips_empty(self, context):
        """Test empty and missing columns are skipped."""
        inflater = JoinInflater(["data4", "data7", "data8", "data9"])
        values = {"data4": "1 Main St", "data7": "Springfield", "data8": "", "data9": None}
        assert inflater.inflate_values(context, values) == "1 Main St, Springfield"

    def test_custom_separator(self, context):
        """Test the separator is configurable."""
        inflater = JoinInflater(["a", "b"], separator=" / ")
        assert inflater.inflate_values(context, {"a": "x", "b": "y"}) == "x / y"

    def test_all_empty(self, context):
        """Test None when no column has text."""
        assert JoinInflater(["a", "b"]).inflate_values(context, {"a": "  "}) is None

    def test_row_matches_values(self, context):
        """Test both entry points agree."""
        inflater = JoinInflater(["a", "b"])
        values = {"a": "x", "b": "y"}
        assert inflater.inflate_row(context, make_row(values)) == "x, y"


class TestTypeLabelInflater:
    """Test TypeLabelInflater."""

    def test_label_resource(self, context, phone_kind):
        """Test the variant's label resource is used."""
        inflater = TypeLabelInflater(phone_kind)
        assert inflater.inflate_values(context, {"data2": 2}) == "Work"

    def test_custom_label(self, context, phone_kind):
        """Test custom variants use their custom column."""
        inflater = TypeLabelInflater(phone_kind)
        assert inflater.inflate_values(context, {"data2": 0, "data3": "Cabin"}) == "Cabin"

    def test_custom_label_missing_uses_resource(self, context, phone_kind):
        """Test an empty custom label falls back to the resource."""
        inflater = TypeLabelInflater(phone_kind)
        assert inflater.inflate_values(context, {"data2": 0, "data3": ""}) == "Other"

    def test_string_type_code(self, context, phone_kind):
        """Test codes stored as text are accepted."""
        assert TypeLabelInflater(phone_kind).inflate_values(context, {"data2": "1"}) == "Home"

    def test_unknown_type(self, context, phone_kind):
        """Test codes outside the type list give None."""
        assert TypeLabelInflater(phone_kind).inflate_values(context, {"data2": 99}) is None

    def test_missing_type(self, context, phone_kind):
        """Test rows without a type give None."""
        assert TypeLabelInflater(phone_kind).inflate_values(context, {}) is None

    def test_untyped_kind(self, context):
        """Test kinds without a type column give None."""
        assert TypeLabelInflater(DataKind("note")).inflate_values(context, {"data2": 1}) is None

    def test_row_matches_values(self, context, phone_kind):
        """Test both entry points agree."""
        inflater = TypeLabelInflater(phone_kind)
        values = {"data2": 0, "data3": "Cabin"}
        assert inflater.inflate_row(context, make_row(values)) == inflater.inflate_values(context, values)
