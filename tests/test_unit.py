"""
Unit Tests - Test individual components in isolation.
"""

import pytest

from tabfields.fields import Fields, FieldRef, IndexOutOfRange
from tabfields.layout import (
    DEFAULT_DELIMITER,
    LINE_TERMINATOR,
    resolve_delimiter,
    strip_line_terminator,
    validate_delimiter,
)


# =============================================================================
# Fields - construction and access
# =============================================================================

class TestFieldsBasics:

    def test_empty(self):
        fields = Fields()
        assert fields.size() == 0
        assert len(fields) == 0
        assert fields.to_list() == []

    def test_from_list_preserves_order(self):
        fields = Fields(["c", "a", "b"])
        assert fields.to_list() == ["c", "a", "b"]
        assert fields.size() == 3

    def test_constructor_copies_input(self):
        source = ["a", "b"]
        fields = Fields(source)
        source.append("c")
        assert fields.size() == 2

    def test_empty_string_field_allowed(self):
        fields = Fields(["", "x"])
        assert fields.get(0) == ""

    def test_rejects_non_str(self):
        with pytest.raises(TypeError):
            Fields(["a", None])
        with pytest.raises(TypeError):
            Fields([1, 2])

    def test_rejects_bare_str(self):
        with pytest.raises(TypeError):
            Fields("abc")

    def test_append_all_and_insert_all_reject_bare_str(self):
        fields = Fields(["a", "b"])
        with pytest.raises(TypeError):
            fields.append_all("cd")
        with pytest.raises(TypeError):
            fields.insert_all(0, "cd")
        assert fields.to_list() == ["a", "b"]

    def test_get(self):
        fields = Fields(["a", "b"])
        assert fields.get(0) == "a"
        assert fields.get(1) == "b"
        assert fields[1] == "b"

    def test_get_out_of_range(self):
        fields = Fields(["a"])
        with pytest.raises(IndexOutOfRange):
            fields.get(1)
        with pytest.raises(IndexError):
            fields[5]

    def test_negative_index_rejected(self):
        fields = Fields(["a", "b"])
        with pytest.raises(IndexOutOfRange):
            fields.get(-1)

    def test_non_int_index_rejected(self):
        fields = Fields(["a", "b"])
        with pytest.raises(TypeError):
            fields.get("0")
        with pytest.raises(TypeError):
            fields.remove(True)

    def test_slice_returns_new_fields(self):
        fields = Fields(["a", "b", "c"])
        part = fields[1:]
        assert isinstance(part, Fields)
        assert part.to_list() == ["b", "c"]
        part.append("d")
        assert fields.size() == 3

    def test_iter_and_equality(self):
        fields = Fields(["a", "b"])
        assert list(fields) == ["a", "b"]
        assert fields == Fields(["a", "b"])
        assert fields != Fields(["b", "a"])
        assert fields != ["a", "b"]

    def test_copy_is_independent(self):
        fields = Fields(["a"])
        dup = fields.copy()
        dup.append("b")
        assert fields.to_list() == ["a"]
        assert dup.to_list() == ["a", "b"]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Fields(["a"]))

    def test_repr(self):
        assert repr(Fields(["a", "b"])) == "Fields(['a', 'b'])"


# =============================================================================
# Fields - mutation
# =============================================================================

class TestFieldsMutation:

    def test_replace(self):
        fields = Fields(["a", "b", "c"])
        fields.replace(1, "x")
        assert fields.to_list() == ["a", "x", "c"]

    def test_replace_out_of_range_leaves_fields_unchanged(self):
        fields = Fields(["a", "b"])
        with pytest.raises(IndexOutOfRange):
            fields.replace(2, "x")
        assert fields.to_list() == ["a", "b"]

    def test_replace_rejects_non_str(self):
        fields = Fields(["a"])
        with pytest.raises(TypeError):
            fields.replace(0, None)
        assert fields.to_list() == ["a"]

    def test_insert_before_index(self):
        fields = Fields(["a", "b", "c"])
        fields.insert(1, "new_field")
        assert fields.to_list() == ["a", "new_field", "b", "c"]
        assert fields.get(2) == "b"

    def test_insert_at_zero(self):
        fields = Fields(["a"])
        fields.insert(0, "z")
        assert fields.to_list() == ["z", "a"]

    def test_insert_at_size_rejected(self):
        fields = Fields(["a", "b"])
        with pytest.raises(IndexOutOfRange):
            fields.insert(2, "x")
        assert fields.to_list() == ["a", "b"]

    def test_insert_into_empty_rejected(self):
        fields = Fields()
        with pytest.raises(IndexOutOfRange):
            fields.insert(0, "x")
        assert fields.size() == 0

    def test_append(self):
        fields = Fields(["a"])
        fields.append("new_field")
        assert fields.size() == 2
        assert fields.get(fields.size() - 1) == "new_field"

    def test_append_to_empty(self):
        fields = Fields()
        fields.append("a")
        assert fields.to_list() == ["a"]

    def test_append_all(self):
        fields = Fields(["a", "b"])
        fields.append_all(Fields(["c", "d"]))
        assert fields.to_list() == ["a", "b", "c", "d"]

    def test_append_all_leaves_other_untouched(self):
        other = Fields(["c"])
        fields = Fields(["a"])
        fields.append_all(other)
        fields.append("z")
        assert other.to_list() == ["c"]

    def test_append_all_self(self):
        fields = Fields(["a", "b"])
        fields.append_all(fields)
        assert fields.to_list() == ["a", "b", "a", "b"]

    def test_append_all_plain_iterable(self):
        fields = Fields(["a"])
        fields.append_all(iter(["b", "c"]))
        assert fields.to_list() == ["a", "b", "c"]

    def test_remove(self):
        fields = Fields(["a", "b", "c"])
        fields.remove(0)
        assert fields.to_list() == ["b", "c"]

    def test_remove_last(self):
        fields = Fields(["a", "b", "c"])
        fields.remove(2)
        assert fields.to_list() == ["a", "b"]

    def test_remove_out_of_range_leaves_fields_unchanged(self):
        fields = Fields(["a"])
        with pytest.raises(IndexOutOfRange):
            fields.remove(1)
        assert fields.to_list() == ["a"]

    def test_insert_all(self):
        fields = Fields(["a", "d"])
        fields.insert_all(1, Fields(["b", "c"]))
        assert fields.to_list() == ["a", "b", "c", "d"]

    def test_insert_all_self(self):
        fields = Fields(["a", "b"])
        fields.insert_all(1, fields)
        assert fields.to_list() == ["a", "a", "b", "b"]

    def test_insert_all_at_size_rejected(self):
        fields = Fields(["a"])
        with pytest.raises(IndexOutOfRange):
            fields.insert_all(1, Fields(["b"]))
        assert fields.to_list() == ["a"]

    def test_insert_all_bad_value_leaves_fields_unchanged(self):
        fields = Fields(["a", "b"])
        with pytest.raises(TypeError):
            fields.insert_all(0, ["x", 3])
        assert fields.to_list() == ["a", "b"]

    def test_index_error_details(self):
        fields = Fields(["a", "b"])
        with pytest.raises(IndexOutOfRange) as exc:
            fields.replace(7, "x")
        assert exc.value.index == 7
        assert exc.value.size == 2
        assert "7" in str(exc.value)

    @pytest.mark.parametrize("i", [0, 1, 2])
    def test_replace_touches_only_target(self, i):
        fields = Fields(["a", "b", "c"])
        before = fields.to_list()
        fields.replace(i, "v")
        assert fields.get(i) == "v"
        for j in range(3):
            if j != i:
                assert fields.get(j) == before[j]

    @pytest.mark.parametrize("i", [0, 1, 2])
    def test_remove_keeps_relative_order(self, i):
        fields = Fields(["a", "b", "c"])
        expected = fields.to_list()
        del expected[i]
        fields.remove(i)
        assert fields.to_list() == expected


# =============================================================================
# FieldRef
# =============================================================================

class TestFieldRef:

    def test_edit_first_character_in_place(self):
        fields = Fields(["hello", "world"])
        with fields.get_mutable(0) as first:
            first[0] = "a"
        assert fields.to_list() == ["aello", "world"]

    def test_value_write_through(self):
        fields = Fields(["x", "y"])
        ref = fields.get_mutable(1)
        ref.value = ref.value + "z"
        assert fields.get(1) == "yz"
        assert str(ref) == "yz"
        assert len(ref) == 2
        assert ref[1] == "z"

    def test_sees_later_replace(self):
        fields = Fields(["x"])
        ref = fields.get_mutable(0)
        fields.replace(0, "q")
        assert ref.value == "q"

    @pytest.mark.parametrize("change", [
        lambda f: f.remove(0),
        lambda f: f.insert(0, "new"),
        lambda f: f.append("tail"),
    ])
    def test_stale_after_size_change(self, change):
        fields = Fields(["a", "b"])
        ref = fields.get_mutable(1)
        change(fields)
        with pytest.raises(RuntimeError):
            ref.value
        with pytest.raises(RuntimeError):
            ref.value = "x"
        assert "x" not in fields.to_list()
        assert "stale" in repr(ref)

    def test_get_mutable_out_of_range(self):
        with pytest.raises(IndexOutOfRange):
            Fields(["a"]).get_mutable(1)

    def test_released_after_with_block(self):
        fields = Fields(["a"])
        with fields.get_mutable(0) as ref:
            assert isinstance(ref, FieldRef)
        with pytest.raises(RuntimeError):
            ref.value
        with pytest.raises(RuntimeError):
            ref[0] = "b"
        assert fields.to_list() == ["a"]
        assert "released" in repr(ref)

    def test_set_char_validation(self):
        fields = Fields(["abc"])
        ref = fields.get_mutable(0)
        with pytest.raises(ValueError):
            ref[0] = "xy"
        with pytest.raises(IndexError):
            ref[3] = "x"
        ref[-1] = "z"
        assert fields.get(0) == "abz"

    def test_set_char_on_empty_field(self):
        fields = Fields([""])
        with pytest.raises(IndexError):
            fields.get_mutable(0)[0] = "a"


# =============================================================================
# Layout constants
# =============================================================================

class TestLayout:

    def test_defaults(self):
        assert DEFAULT_DELIMITER == "\t"
        assert LINE_TERMINATOR == "\n"

    def test_validate_delimiter(self):
        assert validate_delimiter(",") == ","

    @pytest.mark.parametrize("bad", ["", ",,", "\n", "\r"])
    def test_validate_delimiter_rejects(self, bad):
        with pytest.raises(ValueError):
            validate_delimiter(bad)

    def test_validate_delimiter_type(self):
        with pytest.raises(TypeError):
            validate_delimiter(9)

    def test_resolve_delimiter_aliases(self):
        assert resolve_delimiter("tab") == "\t"
        assert resolve_delimiter("TAB") == "\t"
        assert resolve_delimiter("\\t") == "\t"
        assert resolve_delimiter("comma") == ","
        assert resolve_delimiter("pipe") == "|"
        assert resolve_delimiter(";") == ";"

    def test_strip_line_terminator(self):
        assert strip_line_terminator("a\tb\n") == "a\tb"
        assert strip_line_terminator("a\tb\r\n") == "a\tb"
        assert strip_line_terminator("a\tb") == "a\tb"
        assert strip_line_terminator("a\n\n") == "a\n"
