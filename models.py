"""Shared typed models for the Scopus/ORCID check."""

from __future__ import annotations

from dataclasses import dataclass

SCOPUS_SCHEME = "scopus"
REQUEST_TIMEOUT_SECONDS = 30
DEFAULT_THROTTLE_SECONDS = 0.001


@dataclass(frozen=True, slots=True)
class Identifier:
    """One (scheme, value) pair declared on a person record."""

    scheme: str
    value: str


@dataclass(frozen=True, slots=True)
class Person:
    """Person record decoded from one line of a Person export file."""

    family_name: str
    given_name: str
    person_id: str
    identifiers: tuple[Identifier, ...] = ()

    def scopus_ids(self) -> list[str]:
        """Return every identifier value tagged with the scopus scheme, in order."""
        return [ident.value for ident in self.identifiers if ident.scheme == SCOPUS_SCHEME]


@dataclass(frozen=True, slots=True)
class AccessToken:
    """Bearer token granted by the ORCID OAuth endpoint."""

    access_token: str
    token_type: str = ""
    scope: str = ""


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Decoded ORCID search response plus the raw body it came from."""

    num_found: int
    body: str


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Configuration assembled once at startup and handed to run()."""

    client_id: str
    client_secret: str
    paths: tuple[str, ...] = ()
    throttle_seconds: float = DEFAULT_THROTTLE_SECONDS
    request_timeout_seconds: float = REQUEST_TIMEOUT_SECONDS


@dataclass(slots=True)
class RunSummary:
    """Counters accumulated over one run."""

    files: int = 0
    records: int = 0
    lookups: int = 0
    matches: int = 0
