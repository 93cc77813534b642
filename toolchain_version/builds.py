"""Build classifications: whatever follows the dash in `major.minor.rev-build`."""

from __future__ import annotations

from dataclasses import dataclass


class Build:
    __slots__ = ()

    def compare(self, other: Build) -> int:
        raise NotImplementedError

    def unparse(self) -> str:
        """Text that parses back into an equal build."""
        raise NotImplementedError

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Build):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Build):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Build):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Build):
            return NotImplemented
        return self.compare(other) >= 0


@dataclass(frozen=True, slots=True)
class Development(Build):
    """A development, snapshot, integration or other unofficial build."""

    id: str

    def unparse(self) -> str:
        return f"-{self.id}"

    def compare(self, other: Build) -> int:
        if isinstance(other, Development):
            # Only meaningful for ids produced by the same naming scheme.
            # UTF-16 code unit order, not code point order.
            a = self.id.encode("utf-16-be", "surrogatepass")
            b = other.id.encode("utf-16-be", "surrogatepass")
            if a < b:
                return -1
            return 1 if a > b else 0
        # Unknown builds are assumed to be newer than anything official.
        return 1


@dataclass(frozen=True, slots=True)
class Final(Build):
    def unparse(self) -> str:
        return ""

    def compare(self, other: Build) -> int:
        if isinstance(other, Final):
            return 0
        if isinstance(other, Development):
            return -1
        return 1


@dataclass(frozen=True, slots=True)
class RC(Build):
    n: int

    def unparse(self) -> str:
        return f"-RC{self.n}"

    def compare(self, other: Build) -> int:
        if isinstance(other, RC):
            return self.n - other.n
        if isinstance(other, Milestone):
            return 1
        return -1


@dataclass(frozen=True, slots=True)
class Milestone(Build):
    n: int

    def unparse(self) -> str:
        return f"-M{self.n}"

    def compare(self, other: Build) -> int:
        if isinstance(other, Milestone):
            return self.n - other.n
        return -1


FINAL = Final()
