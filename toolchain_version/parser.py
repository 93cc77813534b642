from __future__ import annotations

import logging
import re
from collections.abc import Callable

from toolchain_version.builds import FINAL, RC, Build, Development, Milestone
from toolchain_version.errors import MalformedVersionError, malformed_message
from toolchain_version.versions import (
    ANY_VERSION,
    CROSS_VERSION,
    NO_VERSION,
    SpecificVersion,
    Version,
)

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[str], None]

# major[.minor[.revision]][-suffix]; the suffix is arbitrary (even multi-line) but non-empty.
VERSION_PATTERN = re.compile(r"(\d+)(?:\.(\d+)(?:\.(\d+))?)?(?:-(.+))?", re.ASCII | re.DOTALL)
RC_PATTERN = re.compile(r"rc(\d*)", re.ASCII | re.IGNORECASE)
MILESTONE_PATTERN = re.compile(r"m(\d*)", re.ASCII | re.IGNORECASE)

_RESERVED: dict[str, Version] = {
    "": NO_VERSION,
    "none": NO_VERSION,
    "3-cross": CROSS_VERSION,
    "any": ANY_VERSION,
}


def raise_malformed(message: str) -> None:
    raise MalformedVersionError(message)


def log_malformed(message: str) -> None:
    logger.warning("%s; assuming %s", message, ANY_VERSION.unparse())


def _to_int(digits: str | None) -> int:
    if not digits:
        return 0
    return int(digits)


def to_build(suffix: str | None) -> Build:
    # Only the upper-case spelling means final; "final" is a development label.
    if not suffix or suffix == "FINAL":
        return FINAL
    m = RC_PATTERN.fullmatch(suffix)
    if m:
        return RC(_to_int(m.group(1)))
    m = MILESTONE_PATTERN.fullmatch(suffix)
    if m:
        return Milestone(_to_int(m.group(1)))
    return Development(suffix)


def parse_version(text: str, on_error: ErrorHandler | None = None) -> Version:
    """Parse `major[.minor[.revision]][-suffix]` or one of the reserved names.

    `""` and `"none"` give `NO_VERSION`, `"3-cross"` gives `CROSS_VERSION` and
    `"any"` gives `ANY_VERSION`. Malformed input is reported to `on_error`
    (by default `MalformedVersionError` is raised); if the handler returns, the result is
    `ANY_VERSION` so that version-gated behaviour defaults to off.
    """
    reserved = _RESERVED.get(text)
    if reserved is not None:
        return reserved

    m = VERSION_PATTERN.fullmatch(text)
    if m is not None:
        major_s, minor_s, rev_s, build_s = m.groups()
        try:
            return SpecificVersion(
                _to_int(major_s), _to_int(minor_s), _to_int(rev_s), to_build(build_s)
            )
        except ValueError:
            # Digit groups past the interpreter's int conversion limit.
            pass

    message = malformed_message(text)
    if on_error is None or on_error is raise_malformed:
        raise MalformedVersionError(message, text=text)
    on_error(message)
    return ANY_VERSION


def parse_lenient(text: str) -> Version:
    return parse_version(text, log_malformed)
