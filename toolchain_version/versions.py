"""Toolchain versions in a form that supports easy comparison and sorting.

Besides concrete versions there are two kinds of "virtual" version used as
unbounded comparison bounds: `MaximalVersion` sorts above every concrete
version and `AnyVersion` sorts below everything.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from toolchain_version.builds import FINAL, Build


class Version:
    __slots__ = ()

    @classmethod
    def parse(cls, text: str, on_error: Callable[[str], None] | None = None) -> Version:
        from toolchain_version.parser import parse_version

        return parse_version(text, on_error)

    def compare(self, other: Version) -> int:
        raise NotImplementedError

    def unparse(self) -> str:
        raise NotImplementedError

    @property
    def version_string(self) -> str:
        return self.unparse()

    def __str__(self) -> str:
        return self.unparse()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def min(self, other: Version) -> Version:
        return self if self <= other else other

    def max(self, other: Version) -> Version:
        return self if self >= other else other


@dataclass(frozen=True, slots=True)
class MaximalVersion(Version):
    """Sorts higher than every concrete version.

    All maximal versions compare as 0 against each other; `label` only changes
    how the version is displayed (and therefore `==`).
    """

    label: str

    def unparse(self) -> str:
        return self.label

    def compare(self, other: Version) -> int:
        if isinstance(other, MaximalVersion):
            return 0
        return 1


@dataclass(frozen=True, slots=True)
class SpecificVersion(Version):
    """A concrete version, released or not.

    The same type covers final, release candidate, milestone and development
    builds; `build` tells them apart.
    """

    major: int
    minor: int
    rev: int
    build: Build = FINAL

    def unparse(self) -> str:
        return f"{self.major}.{self.minor}.{self.rev}{self.build.unparse()}"

    @property
    def version_string(self) -> str:
        return f"{self.major}.{self.minor}.{self.rev}"

    def compare(self, other: Version) -> int:
        if isinstance(other, SpecificVersion):
            if self.major != other.major:
                return -1 if self.major < other.major else 1
            if self.minor != other.minor:
                return -1 if self.minor < other.minor else 1
            if self.rev != other.rev:
                return -1 if self.rev < other.rev else 1
            return self.build.compare(other.build)
        if isinstance(other, AnyVersion):
            return 1
        return -1


@dataclass(frozen=True, slots=True)
class AnyVersion(Version):
    """Sorts lower than every other version."""

    label: str = "any"

    def unparse(self) -> str:
        return self.label

    def compare(self, other: Version) -> int:
        if isinstance(other, AnyVersion):
            return 0
        return -1


# "No version" means the latest: an unspecified bound is unbounded.
NO_VERSION = MaximalVersion("none")
CROSS_VERSION = MaximalVersion("3-cross")
ANY_VERSION = AnyVersion()


def min_version(a: Version, b: Version) -> Version:
    return a.min(b)


def max_version(a: Version, b: Version) -> Version:
    return a.max(b)
