"""Credential attributes and parsing of credential structure specifications."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "AttrCount",
    "CredAttr",
    "Int64Attr",
    "StrAttr",
    "parse_attrs",
]

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class AttrCount:
    """Numbers of known, committed and hidden attributes."""

    known: int
    committed: int
    hidden: int

    def __str__(self) -> str:
        return (
            f"known: {self.known}\n"
            f"committed: {self.committed}\n"
            f"hidden: {self.hidden}\n"
        )


class CredAttr:
    """An attribute of a credential, carried internally as an integer.

    A known attribute is known to both the issuer and the receiver; for an
    attribute that is not known the issuer sees only a commitment.
    The plain attribute's value is its internal integer.
    """

    type_name = "int"

    def __init__(self, name: str, known: bool = True) -> None:
        self.name = name
        self.known = known
        self._internal: int | None = None

    @property
    def internal_value(self) -> int | None:
        """The integer used in the credential scheme, or None when unset."""
        return self._internal

    @property
    def has_value(self) -> bool:
        """Whether a value has been set."""
        return self._internal is not None

    @property
    def value(self):
        """The attribute's value."""
        return self._internal

    def from_internal_value(self, value: int):
        """The attribute value that corresponds to an internal integer."""
        return value

    def update_value(self, value) -> None:
        """Set a new value; raises TypeError for a value of the wrong type."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"attribute {self.name} takes an integer value")
        self._internal = value

    def _describe(self) -> str:
        tag = "known" if self.known else "revealed"
        return f"{self.name} ({tag})"

    def __str__(self) -> str:
        return f"{self._describe()}, type = {self.type_name}"

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return (
            self.name == other.name
            and self.known == other.known
            and self._internal == other._internal
            and self.value == other.value
        )

    __hash__ = None  # type: ignore[assignment]


def _check_int64(value: int) -> None:
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value {value} is out of the 64-bit integer range")


class Int64Attr(CredAttr):
    """Attribute holding a signed 64-bit integer."""

    type_name = "int64"

    def __init__(self, name: str, value: int | None = None, known: bool = True) -> None:
        super().__init__(name, known)
        self._value = 0
        if value is not None:
            self.update_value(value)

    @property
    def value(self) -> int:
        return self._value

    def from_internal_value(self, value: int) -> int:
        """The integer itself; raises ValueError outside the 64-bit range."""
        _check_int64(value)
        return int(value)

    def update_value(self, value) -> None:
        """Set a new integer value."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"attribute {self.name} takes an integer value")
        _check_int64(value)
        self._value = value
        self._internal = value


class StrAttr(CredAttr):
    """Attribute holding a string, carried as the integer of its UTF-8 bytes."""

    type_name = "string"

    def __init__(self, name: str, value: str | None = None, known: bool = True) -> None:
        super().__init__(name, known)
        self._value = ""
        if value is not None:
            self.update_value(value)

    @property
    def value(self) -> str:
        return self._value

    def from_internal_value(self, value: int) -> str:
        """The string whose big-endian UTF-8 bytes make up ``value``."""
        value = abs(value)
        return value.to_bytes((value.bit_length() + 7) // 8, "big").decode("utf-8")

    def update_value(self, value) -> None:
        """Set a new string value."""
        if not isinstance(value, str):
            raise TypeError(f"attribute {self.name} takes a string value")
        self._value = value
        self._internal = int.from_bytes(value.encode("utf-8"), "big")


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError("known must be true or false")


def parse_attrs(specs: dict) -> tuple[list[CredAttr], AttrCount]:
    """Attributes described by ``specs``, ordered by their index, and their counts.

    ``specs`` maps each attribute name to a mapping with a ``type``
    ("string" or "int64"), an ``index`` given as a string and an optional
    ``known`` given as a boolean string (default true).
    Raises ValueError for any malformed specification.
    """
    slots: list[CredAttr | None] = [None] * len(specs)
    n_known = 0
    n_committed = 0

    for name, data in specs.items():
        if not isinstance(data, dict):
            raise ValueError("invalid configuration")
        if "type" not in data:
            raise ValueError("missing type specifier")
        attr_type = data["type"]
        if "index" not in data:
            raise ValueError("missing index specifier")
        index_text = data["index"]
        if not isinstance(index_text, str) or not _INDEX_PATTERN.fullmatch(index_text):
            raise ValueError("index must be string")
        index = int(index_text)

        known = True
        if "known" in data:
            known_text = data["known"]
            if not isinstance(known_text, str):
                raise ValueError("known must be true or false")
            known = _parse_bool(known_text)

        if known:
            n_known += 1
        else:
            n_committed += 1

        if attr_type == "string":
            attr: CredAttr = StrAttr(name, "", known)
        elif attr_type == "int64":
            attr = Int64Attr(name, 0, known)
        else:
            raise ValueError(f"unsupported attribute type: {attr_type}")

        if not 0 <= index < len(slots):
            raise ValueError(f"index {index} out of range")
        slots[index] = attr

    missing = [i for i, slot in enumerate(slots) if slot is None]
    if missing:
        raise ValueError(f"no attribute at index {missing[0]}")

    attrs = [slot for slot in slots if slot is not None]
    return attrs, AttrCount(n_known, n_committed, 0)