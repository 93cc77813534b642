from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib import metadata
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from toolchain_version.parser import log_malformed, parse_version
from toolchain_version.versions import Version

logger = logging.getLogger(__name__)

DIST_NAME = "toolchain-version"

_CURRENT: Version | None = None


def repo_root() -> Path:
    # Checkout root, one level above this package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # A `.env` next to the package wins over one found from the working directory.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


def _env_flag(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _installed_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return ""


@dataclass(frozen=True)
class VersionSettings:
    toolchain_version: str | None
    strict: bool


def load_settings() -> VersionSettings:
    load_env()
    return VersionSettings(
        toolchain_version=os.getenv("TOOLCHAIN_VERSION"),
        strict=_env_flag("TOOLCHAIN_VERSION_STRICT", True),
    )


def resolve_version(settings: VersionSettings) -> Version:
    text = settings.toolchain_version
    if text is None:
        text = _installed_version()
        logger.debug("TOOLCHAIN_VERSION unset; using installed %s version %r", DIST_NAME, text)
    else:
        text = text.strip()
        logger.debug("using TOOLCHAIN_VERSION=%r", text)
    return parse_version(text, None if settings.strict else log_malformed)


def current_version() -> Version:
    """The version of the running toolchain, resolved once per process."""
    global _CURRENT

    if _CURRENT is None:
        _CURRENT = resolve_version(load_settings())
    return _CURRENT


def reset_current_version() -> None:
    global _CURRENT
    _CURRENT = None
