"""Error types raised by the check components and handled in main."""

from __future__ import annotations


class ScopusCheckError(RuntimeError):
    """Base class for every error that aborts a run."""


class ConfigurationError(ScopusCheckError):
    """Missing credentials or no input files."""


class InputFileError(ScopusCheckError):
    def __init__(self, path: str, reason: object) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class RecordDecodeError(ScopusCheckError):
    def __init__(self, path: str, line_number: int, reason: object) -> None:
        super().__init__(f"Malformed record in {path} at line {line_number}: {reason}")
        self.path = path
        self.line_number = line_number


class OrcidApiError(ScopusCheckError):
    """Transport failure, bad status or undecodable body from an ORCID endpoint."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
