from __future__ import annotations


class MalformedVersionError(ValueError):
    def __init__(self, message: str, *, text: str | None = None) -> None:
        self.text = text
        super().__init__(message)


def malformed_message(text: str) -> str:
    return f"Bad version ({text}) not major[.minor[.revision]][-suffix]"
