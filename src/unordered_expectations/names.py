"""Named collections and the rules that a set of names must satisfy"""


from collections import abc
from typing import Any, Iterable, Iterator, List, Optional, Sequence

from unordered_expectations.exception import InvalidArgument
from unordered_expectations.values import render_value


class NamedVector(abc.Sequence):
    """An ordered sequence of values with an optional parallel list of names

    Unlike a dict, a NamedVector may hold repeated or empty ("") names. That
    makes it possible to represent (and then reject) collections that are
    not valid mappings. Indexing is positional.
    """

    def __init__(self,
                 values: Iterable[Any],
                 names: Optional[Iterable[str]] = None):
        self._values = list(values)
        self._names: Optional[List[str]] = None
        if names is not None:
            self._names = list(names)
            if len(self._names) != len(self._values):
                raise ValueError(f'{len(self._names)} names were given for '
                                 f'{len(self._values)} values')

    @property
    def names(self) -> Optional[List[str]]:
        """Names for each value, or None if this vector is unnamed"""
        if self._names is None:
            return None
        return list(self._names)

    def __getitem__(self, index):
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __eq__(self, other):
        if isinstance(other, NamedVector):
            return (self._values == other._values and
                    self._names == other._names)
        return False

    def __repr__(self):
        if self._names is None:
            return f'NamedVector({self._values!r})'
        return f'NamedVector({self._values!r}, names={self._names!r})'


def is_vector(obj: Any) -> bool:
    """Check whether a value is an (ordered) collection of zero or more items

    Mappings, sets and NamedVectors count, as do sequences other than
    strings. Text is deliberately excluded, even though str is a Sequence,
    because a string is one value rather than a collection of characters.
    """

    if obj is None:
        return False
    if isinstance(obj, (str, bytes, bytearray)):
        return False
    return isinstance(obj, (abc.Sequence, abc.Mapping, abc.Set))


def has_names(obj: Any) -> bool:
    """Whether a vector carries (non-empty) name metadata"""
    if isinstance(obj, abc.Mapping):
        return len(obj) > 0
    if isinstance(obj, NamedVector):
        return obj.names is not None and len(obj) > 0
    return False


def names_of(obj: Any) -> List[Any]:
    """Names of a vector, one per element ("" for each unnamed element)"""
    if isinstance(obj, abc.Mapping):
        return list(obj.keys())
    if isinstance(obj, NamedVector) and obj.names is not None:
        return obj.names
    return [""] * len(obj)


def values_of(obj: Any) -> List[Any]:
    """Values of a vector, in order, with any names stripped off"""
    if isinstance(obj, abc.Mapping):
        return list(obj.values())
    return list(obj)


def duplicated_names(names: Sequence[Any]) -> List[Any]:
    """Every name which occurs more than once, each reported a single time

    Empty names are not considered here. An unnamed element is not a name
    that can be duplicated; validate_names reports it separately.
    """

    seen: List[Any] = []
    duplicates: List[Any] = []
    for name in names:
        if name == "":
            continue
        if name in seen:
            if name not in duplicates:
                duplicates.append(name)
        else:
            seen.append(name)
    return duplicates


def validate_names(names: Sequence[Any], label: str) -> None:
    """Insist that every element is named and that no name is repeated

    Duplicates are checked before empty names, so a collection with both
    problems is reported as having duplicates.
    """

    duplicates = duplicated_names(names)
    if len(duplicates) > 0:
        raise InvalidArgument(f'Duplicate names in `{label}`: '
                              f'{", ".join(map(render_value, duplicates))}')
    if any(map(lambda x: x == "", names)):
        raise InvalidArgument(f'All elements in `{label}` must be named')
