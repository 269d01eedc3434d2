"""A credential's attributes as the receiver fills them in."""

from __future__ import annotations

from zkcommit.attributes import AttrCount, CredAttr, Int64Attr, StrAttr

__all__ = ["RawCred"]


class RawCred:
    """Named attributes of a credential, kept in the order they were added."""

    def __init__(self, attr_count: AttrCount) -> None:
        self.attr_count = attr_count
        self._attrs: list[CredAttr] = []
        self._indices: dict[str, int] = {}
        self._known_indices: dict[str, int] = {}
        self._committed_indices: dict[str, int] = {}

    @property
    def attrs(self) -> dict[int, CredAttr]:
        """Attributes by their position among all attributes."""
        return dict(enumerate(self._attrs))

    def check_complete(self) -> None:
        """Raise ValueError naming the first attribute that has no value."""
        for attr in self._attrs:
            if not attr.has_value:
                raise ValueError(f"{attr.name} missing")

    def get_attr(self, name: str) -> CredAttr:
        """The attribute called ``name``; raises KeyError if there is none."""
        try:
            return self._attrs[self._indices[name]]
        except KeyError:
            raise KeyError(f"no attribute {name} in this credential") from None

    def add_empty_str_attr(self, name: str, known: bool) -> None:
        """Add a string attribute without a value."""
        self._validate(name, known)
        self._insert(StrAttr(name, None, known))

    def add_str_attr(self, name: str, value: str, known: bool) -> None:
        """Add a string attribute with the given value."""
        self.add_empty_str_attr(name, known)
        self.get_attr(name).update_value(value)

    def add_int64_attr(self, name: str, value: int, known: bool) -> None:
        """Add an integer attribute with the given value."""
        self.add_empty_int64_attr(name, known)
        self.get_attr(name).update_value(value)

    def add_empty_int64_attr(self, name: str, known: bool) -> None:
        """Add an integer attribute without a value."""
        self._validate(name, known)
        self._insert(Int64Attr(name, None, known))

    def known_values(self) -> list[int | None]:
        """Internal values of the known attributes, in attribute order."""
        return [a.internal_value for a in self._attrs if a.known]

    def committed_values(self) -> list[int | None]:
        """Internal values of the committed attributes, in attribute order."""
        return [a.internal_value for a in self._attrs if not a.known]

    def attr_internal_index(self, name: str) -> int:
        """Position of the attribute among the known or the committed ones."""
        attr = self.get_attr(name)
        if attr.known:
            return self._known_indices[name]
        return self._committed_indices[name]

    def _insert(self, attr: CredAttr) -> None:
        self._indices[attr.name] = len(self._attrs)
        self._attrs.append(attr)
        group = self._known_indices if attr.known else self._committed_indices
        group[attr.name] = len(group)

    def _validate(self, name: str, known: bool) -> None:
        if known and len(self.known_values()) >= self.attr_count.known:
            raise ValueError("known attributes exhausted")
        if not known and len(self.committed_values()) >= self.attr_count.committed:
            raise ValueError("committed attributes exhausted")
        if name == "":
            raise ValueError("attribute's name cannot be empty")
        if name in self._indices:
            raise ValueError("duplicate attribute, ignoring")