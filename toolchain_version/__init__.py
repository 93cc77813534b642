from __future__ import annotations

from toolchain_version.builds import FINAL, RC, Build, Development, Final, Milestone
from toolchain_version.config import current_version
from toolchain_version.errors import MalformedVersionError
from toolchain_version.parser import (
    log_malformed,
    parse_lenient,
    parse_version,
    raise_malformed,
    to_build,
)
from toolchain_version.versions import (
    ANY_VERSION,
    CROSS_VERSION,
    NO_VERSION,
    AnyVersion,
    MaximalVersion,
    SpecificVersion,
    Version,
    max_version,
    min_version,
)

__all__ = [
    # Versions
    "ANY_VERSION",
    "CROSS_VERSION",
    "NO_VERSION",
    "AnyVersion",
    "MaximalVersion",
    "SpecificVersion",
    "Version",
    "max_version",
    "min_version",
    # Builds
    "FINAL",
    "RC",
    "Build",
    "Development",
    "Final",
    "Milestone",
    # Parsing
    "MalformedVersionError",
    "log_malformed",
    "parse_lenient",
    "parse_version",
    "raise_malformed",
    "to_build",
    "current_version",
]
