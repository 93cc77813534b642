from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from toolchain_version.builds import RC, Build, Development, Final, Milestone
from toolchain_version.versions import AnyVersion, MaximalVersion, SpecificVersion, Version


class BuildKind(str, Enum):
    MILESTONE = "milestone"
    RC = "rc"
    FINAL = "final"
    DEVELOPMENT = "development"


class VersionKind(str, Enum):
    MAXIMAL = "maximal"
    SPECIFIC = "specific"
    ANY = "any"


class BuildInfo(BaseModel):
    kind: BuildKind
    number: int | None = None
    id: str | None = None


class VersionInfo(BaseModel):
    kind: VersionKind
    text: str
    version_string: str
    major: int | None = None
    minor: int | None = None
    rev: int | None = None
    build: BuildInfo | None = None


def describe_build(build: Build) -> BuildInfo:
    if isinstance(build, Milestone):
        return BuildInfo(kind=BuildKind.MILESTONE, number=build.n)
    if isinstance(build, RC):
        return BuildInfo(kind=BuildKind.RC, number=build.n)
    if isinstance(build, Final):
        return BuildInfo(kind=BuildKind.FINAL)
    if isinstance(build, Development):
        return BuildInfo(kind=BuildKind.DEVELOPMENT, id=build.id)
    raise TypeError(f"unknown build: {build!r}")


def describe_version(version: Version) -> VersionInfo:
    if isinstance(version, SpecificVersion):
        return VersionInfo(
            kind=VersionKind.SPECIFIC,
            text=version.unparse(),
            version_string=version.version_string,
            major=version.major,
            minor=version.minor,
            rev=version.rev,
            build=describe_build(version.build),
        )
    if isinstance(version, MaximalVersion):
        kind = VersionKind.MAXIMAL
    elif isinstance(version, AnyVersion):
        kind = VersionKind.ANY
    else:
        raise TypeError(f"unknown version: {version!r}")
    return VersionInfo(kind=kind, text=version.unparse(), version_string=version.version_string)
