"""Problems found in a ``cairn.yaml`` settings file.

Validation collects every problem instead of stopping at the first one. Each
problem names the settings key it concerns, when there is one, so a report
reads as a list of keys to fix.
"""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class ValidationError:
    """One settings problem with a stable ``CFG`` code."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    line: int | None = None
    column: int | None = None

    def location(self) -> str:
        """``path[:line[:column]]`` followed by ``[key]`` for key-level problems."""
        location = self.path
        if self.line is not None:
            location = f"{location}:{self.line}"
            if self.column is not None:
                location = f"{location}:{self.column}"
        if self.field:
            location = f"{location} [{self.field}]"
        return location

    def format(self) -> str:
        text = f"{self.code} {self.location()}: {self.message}"
        if self.hint:
            return f"{text}\n    hint: {self.hint}"
        return text


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Group errors by settings file, then order them by code and key."""
    return sorted(errors, key=attrgetter("path", "code", "field"))


def format_errors(errors: list[ValidationError]) -> str:
    return "\n".join(error.format() for error in sort_errors(errors))
