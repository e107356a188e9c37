"""
Script: docker_build_tools/common.py
What: Shared helper functions used by all `docker_build_tools` modules.
Doing: Wraps input reads, error types, advisory warnings, and `$GITHUB_ENV` writes.
Why: Avoids duplicated helper code.
Goal: Keep behavior consistent across all helper modules.
"""

from __future__ import annotations

import os
import uuid
from dataclasses import dataclass
from typing import Mapping


class BuildToolError(RuntimeError):
    """Raised when a build metadata step hits a known error condition."""

    def __init__(self, message: str, *, field: str = "") -> None:
        super().__init__(message)
        self.field = field


class MissingInputError(BuildToolError):
    """A required input was not supplied (or was empty)."""


class ConflictingInputError(BuildToolError):
    """Two inputs that must not be set together were both supplied."""


class ValidationError(BuildToolError):
    """An input was supplied but does not follow the accepted syntax."""


@dataclass(frozen=True)
class Advisory:
    """
    A non-fatal correction made to one input.

    The pipeline keeps going with `corrected`; the advisory only tells the
    operator what changed and how to supply the corrected value directly.
    """

    field: str
    original: str
    corrected: str
    hint: str

    @property
    def message(self) -> str:
        return f"{self.field} changed from {self.original!r} to {self.corrected!r}. {self.hint}"


def require_env(name: str, env: Mapping[str, str] | None = None) -> str:
    """Return a required input or raise a clear error."""
    source = os.environ if env is None else env
    value = source.get(name)
    if value is None or value == "":
        raise MissingInputError(f"Missing required input: {name}", field=name)
    return value


def optional_env(name: str, default: str = "", env: Mapping[str, str] | None = None) -> str:
    """Return an input with a fallback default."""
    source = os.environ if env is None else env
    value = source.get(name)
    if value is None or value == "":
        return default
    return value


def print_advisories(advisories: list[Advisory]) -> None:
    """
    Print advisories as GitHub Actions warning annotations.

    `::warning title=...::` lines are picked up by the runner and shown on
    the workflow summary page, not just in the raw log.
    """
    for advisory in advisories:
        print(f"::warning title={advisory.field}::{advisory.message}")


def format_env_record(name: str, value: str) -> str:
    """
    Format one `$GITHUB_ENV` record.

    Single-line values use `NAME=value`. Multi-line values (for example a tag
    list written one per line) need the heredoc form, with a delimiter that
    cannot appear in the value.
    """
    if "\n" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    while delimiter in value:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def write_github_env(values: Mapping[str, str], env_file: str) -> None:
    """
    Export values for later steps in this GitHub Actions job.

    GitHub provides a file path in `GITHUB_ENV`; every record appended there
    becomes an environment variable for the following steps. Records are
    written in the order of `values`, all in one open, and each one is
    echoed to the job log.
    """
    with open(env_file, "a", encoding="utf-8") as handle:
        for name, value in values.items():
            handle.write(format_env_record(name, value))
            print(f"set {name} to {value}")
