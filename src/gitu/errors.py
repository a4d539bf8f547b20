"""Exceptions raised by gitu."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .switch.plan import ConfigDirective


class GituError(Exception):
    """Base class for gitu errors."""


class StoreCorruptError(GituError):
    """The identity store file exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Corrupted identity store {path}: {reason}")


class IdentityNotFoundError(GituError):
    """An identity id is not present in the store."""

    def __init__(self, identity_id: str, available: Sequence[str] = ()):
        self.identity_id = identity_id
        self.available = list(available)
        super().__init__(f"Identity '{identity_id}' not found")


class GitConfigError(GituError):
    """A `git config` invocation failed."""

    def __init__(
        self,
        directive: "ConfigDirective",
        returncode: int | None,
        stderr: str = "",
    ):
        self.directive = directive
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"Failed: {directive.display()}"
        if returncode is not None:
            message += f" (exit {returncode})"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)
