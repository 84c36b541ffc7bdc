"""Property-based tests for the data kind registry using Hypothesis."""

from hypothesis import given, strategies as st
from hypothesis.strategies import composite

from contact_model.domain.models import AccountType, DataKind, EditField, EditType, EventEditType
from contact_model.shared.types import TYPE_TEXT_FLAG_MULTI_LINE, UNBOUNDED


class StubAccountType(AccountType):
    """Account type with fixed colors."""

    def __init__(self, res_package_name=None):
        super().__init__()
        self.account_type = "com.example"
        self.res_package_name = res_package_name

    def is_group_membership_editable(self):
        return True

    def get_header_color(self, context):
        return 0

    def get_side_bar_color(self, context):
        return 0


@composite
def edit_types(draw):
    """Generate plain or event edit types with arbitrary attributes."""
    raw_value = draw(st.integers(min_value=-5, max_value=20))
    label_res = draw(st.integers())
    if draw(st.booleans()):
        edit_type = EventEditType(raw_value, label_res).set_year_optional(draw(st.booleans()))
    else:
        edit_type = EditType(raw_value, label_res)
    return (edit_type
            .set_secondary(draw(st.booleans()))
            .set_specific_max(draw(st.integers(min_value=-1, max_value=5)))
            .set_custom_column(draw(st.none() | st.sampled_from(["data3", "data4"]))))


registrations = st.lists(
    st.tuples(st.sampled_from(["a", "b", "c", "d"]), st.integers(min_value=-3, max_value=3)),
    max_size=12,
)


class TestEditTypeProperties:
    """Properties of edit type identity."""

    @given(edit_types(), edit_types())
    def test_equality_iff_raw_value(self, a, b):
        """Test equality depends only on the raw value."""
        assert (a == b) == (a.raw_value == b.raw_value)
        if a == b:
            assert hash(a) == hash(b)


class TestEditFieldProperties:
    """Properties of edit fields."""

    @given(st.integers(min_value=0, max_value=0xFFFFFFFF))
    def test_multi_line_matches_bit(self, input_type):
        """Test the multi-line predicate mirrors the flag bit."""
        field = EditField("data1", 1, input_type)
        assert field.is_multi_line() == bool(input_type & TYPE_TEXT_FLAG_MULTI_LINE)


class TestRegistryProperties:
    """Properties of AccountType registration and ordering."""

    @given(registrations, st.none() | st.sampled_from(["com.a", "com.b"]))
    def test_lookup_returns_last_registration(self, entries, package):
        """Test lookups see the last kind registered per mime type."""
        account = StubAccountType(res_package_name=package)
        last = {}
        for mime_type, weight in entries:
            kind = account.add_kind(DataKind(mime_type, weight=weight, res_package_name="stale"))
            last[mime_type] = kind
            assert kind.res_package_name == package

        for mime_type in ["a", "b", "c", "d"]:
            assert account.get_kind_for_mimetype(mime_type) is last.get(mime_type)

    @given(registrations)
    def test_sorted_is_stable_and_complete(self, entries):
        """Test ordering is by weight, ties in registration order, nothing lost."""
        account = StubAccountType()
        registered = [account.add_kind(DataKind(m, weight=w)) for m, w in entries]

        result = account.get_sorted_data_kinds()
        assert len(result) == len(registered)
        assert set(map(id, result)) == set(map(id, registered))
        for earlier, later in zip(result, result[1:]):
            assert earlier.weight <= later.weight
            if earlier.weight == later.weight:
                assert registered.index(earlier) < registered.index(later)
        assert account.get_sorted_data_kinds() == result


class TestCardinalityProperties:
    """Properties of the valid type computation."""

    @given(st.lists(edit_types(), max_size=6, unique_by=lambda t: t.raw_value),
           st.lists(st.integers(min_value=-5, max_value=20), max_size=8),
           st.integers(min_value=-1, max_value=6))
    def test_valid_types_respect_caps(self, types, existing, overall_max):
        """Test no offered variant is secondary or over its cap."""
        kind = DataKind("x", type_overall_max=overall_max, type_list=types)
        valid = kind.get_valid_types(existing)

        if overall_max != UNBOUNDED and len(existing) >= overall_max:
            assert valid == []
        for edit_type in valid:
            assert not edit_type.secondary
            if edit_type.specific_max != UNBOUNDED:
                assert existing.count(edit_type.raw_value) < edit_type.specific_max
