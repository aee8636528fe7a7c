"""Exception types raised by jobgate."""

from __future__ import annotations


class JobgateError(Exception):
    """Base class for all jobgate errors."""


class UnhandledDiffTypeError(JobgateError):
    """Raised when a plan diff carries a top-level type the gate cannot act on."""

    def __init__(self, diff_type: str) -> None:
        super().__init__(f"Unhandled plan diff type: {diff_type!r}")
        self.diff_type = diff_type


class NomadError(JobgateError):
    """Raised when the Nomad API cannot produce a plan."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
