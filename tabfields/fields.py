"""
Fields - In-memory representation of one delimited record.
"""

from __future__ import annotations

from typing import Iterable, Iterator, overload


class IndexOutOfRange(IndexError):
    """Raised when a field index is not strictly less than the field count."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"field index {index} is out of range for {size} fields")


def _check_value(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Field values must be str, got {type(value).__name__}")
    return value


def _check_values(values: Iterable[str]) -> list[str]:
    # A bare str would otherwise iterate as one field per character
    if isinstance(values, str):
        raise TypeError("Expected an iterable of str fields, got a single str")
    return [_check_value(v) for v in values]


class Fields:
    """
    Ordered, mutable sequence of string fields.

    Usage:
        fields = Fields(["id", "name"])
        fields.append("email")
        fields.insert(1, "created")
        fields.replace(0, "uid")
        fields.remove(2)
        fields.to_list()  # ["uid", "created", "email"]

    Every index-based operation raises IndexOutOfRange (an IndexError) when
    the index is not in ``0 <= index < len(fields)`` and leaves the sequence
    untouched. ``insert`` and ``insert_all`` follow the same bound, so adding
    at the tail goes through ``append`` / ``append_all``.
    """

    def __init__(self, fields: Iterable[str] = ()) -> None:
        self._fields: list[str] = _check_values(fields)

    # --- Access ---

    def size(self) -> int:
        return len(self._fields)

    def _check_index(self, index: int) -> int:
        # bool is an int subclass but never a meaningful index
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"Field index must be int, got {type(index).__name__}")
        if index < 0 or index >= len(self._fields):
            raise IndexOutOfRange(index, len(self._fields))
        return index

    def get(self, index: int) -> str:
        """Return the field at index."""
        return self._fields[self._check_index(index)]

    def get_mutable(self, index: int) -> FieldRef:
        """Return a handle that edits the field at index in place."""
        return FieldRef(self, self._check_index(index))

    # --- Mutation ---

    def replace(self, index: int, new_value: str) -> None:
        self._check_index(index)
        self._fields[index] = _check_value(new_value)

    def insert(self, index: int, new_value: str) -> None:
        """Insert new_value before the field currently at index."""
        self._check_index(index)
        self._fields.insert(index, _check_value(new_value))

    def append(self, new_value: str) -> None:
        self._fields.append(_check_value(new_value))

    def append_all(self, other: Fields | Iterable[str]) -> None:
        """Append every field of other, in order."""
        self._fields.extend(_snapshot(other))

    def remove(self, index: int) -> None:
        self._check_index(index)
        del self._fields[index]

    def insert_all(self, index: int, other: Fields | Iterable[str]) -> None:
        """Insert every field of other starting at index, keeping their order."""
        self._check_index(index)
        self._fields[index:index] = _snapshot(other)

    # --- Python protocol ---

    def copy(self) -> Fields:
        return Fields(self._fields)

    def to_list(self) -> list[str]:
        return list(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Fields: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Fields(self._fields[index])
        return self.get(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fields):
            return NotImplemented
        return self._fields == other._fields

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Fields({self._fields!r})"


def _snapshot(other: Fields | Iterable[str]) -> list[str]:
    # Copy first so that a.append_all(a) and a.insert_all(i, a) are well defined
    if isinstance(other, Fields):
        return list(other._fields)
    return _check_values(other)


class FieldRef:
    """
    Short-lived handle to one field of a Fields sequence.

    Writes go straight into the owning sequence:

        with fields.get_mutable(0) as first:
            first[0] = "a"          # overwrite first character
            first.value += "_x"     # or replace the whole value

    Once the ``with`` block exits (or release() is called) the handle is
    dead and every access raises RuntimeError. The handle is also bound to
    the field count at creation: after the owner grows or shrinks (insert,
    remove, append) the slot may hold a different field, so access raises
    RuntimeError instead of touching it.
    """

    def __init__(self, owner: Fields, index: int) -> None:
        self._owner: Fields | None = owner
        self._index = index
        self._size = owner.size()

    @property
    def index(self) -> int:
        return self._index

    def _live_owner(self) -> Fields:
        if self._owner is None:
            raise RuntimeError("Field handle has been released")
        if self._owner.size() != self._size:
            raise RuntimeError(
                f"Field handle is stale: sequence changed from {self._size} "
                f"to {self._owner.size()} fields"
            )
        return self._owner

    @property
    def value(self) -> str:
        return self._live_owner().get(self._index)

    @value.setter
    def value(self, new_value: str) -> None:
        self._live_owner().replace(self._index, new_value)

    def __getitem__(self, pos: int) -> str:
        return self.value[pos]

    def __setitem__(self, pos: int, char: str) -> None:
        """Overwrite the single character at pos."""
        current = self.value
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        if not -len(current) <= pos < len(current):
            raise IndexError(
                f"character position {pos} is out of range for field of length {len(current)}"
            )
        pos %= len(current)
        self.value = current[:pos] + char + current[pos + 1:]

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value

    def release(self) -> None:
        self._owner = None

    def __enter__(self) -> FieldRef:
        self._live_owner()
        return self

    def __exit__(self, *args) -> None:
        self.release()

    def __repr__(self) -> str:
        if self._owner is None:
            return f"FieldRef(index={self._index}, released)"
        if self._owner.size() != self._size:
            return f"FieldRef(index={self._index}, stale)"
        return f"FieldRef(index={self._index}, value={self.value!r})"
