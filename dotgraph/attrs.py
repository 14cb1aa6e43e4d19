from dataclasses import dataclass
from typing import Iterable, Tuple

from .identity import Identity, IdentityLike, to_identity

AttrPair = Tuple[Identity, Identity]
AttrGroup = Tuple[AttrPair, ...]


def to_pair(key: IdentityLike, value: IdentityLike) -> AttrPair:
    return to_identity(key), to_identity(value)


@dataclass(frozen=True)
class AttrList:
    """AttrList is a sequence of bracket groups, each a sequence of key/value pairs.

    Rendered as consecutive ``[k=v;...]`` blocks. Every operation returns a
    new list and leaves the receiver untouched.
    """

    groups: Tuple[AttrGroup, ...] = ()

    def __str__(self) -> str:
        return "".join("[" + "".join(f"{k}={v};" for k, v in group) + "]" for group in self.groups)

    def __iter__(self):
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def new_bracket(self) -> "AttrList":
        """Open a new, empty bracket group."""
        return AttrList(self.groups + ((),))

    def add(self, key: IdentityLike, value: IdentityLike) -> "AttrList":
        """Append a pair to the last group, opening the first group if there is none."""
        return self.extend([to_pair(key, value)])

    def add_pair(self, pair: AttrPair) -> "AttrList":
        return self.add(*pair)

    def extend(self, pairs: Iterable[Tuple[IdentityLike, IdentityLike]]) -> "AttrList":
        """Append pairs to the last group, opening the first group if there is none."""
        groups = self.groups or ((),)
        extra = tuple(to_pair(k, v) for k, v in pairs)
        return AttrList(groups[:-1] + (groups[-1] + extra,))

    def extend_list(self, groups: Iterable[Iterable[Tuple[IdentityLike, IdentityLike]]]) -> "AttrList":
        """Append whole groups, keeping their grouping."""
        extra = tuple(tuple(to_pair(k, v) for k, v in group) for group in groups)
        return AttrList(self.groups + extra)

    def merge(self, other: "AttrList") -> "AttrList":
        """Append the groups of another list, then open a fresh trailing group.

        Later single-pair additions land in the new group instead of joining
        the merged content.
        """
        return self.extend_list(other.groups).new_bracket()
