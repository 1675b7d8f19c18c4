"""ORCID public API client: client-credentials token and eid-self search."""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

from errors import ConfigurationError, OrcidApiError
from models import DEFAULT_THROTTLE_SECONDS, REQUEST_TIMEOUT_SECONDS, AccessToken, SearchResult

ORCID_TOKEN_URL = "https://orcid.org/oauth/token"
ORCID_SEARCH_URL = "https://pub.orcid.org/v2.0/search/"
ORCID_JSON_MEDIA_TYPE = "application/vnd.orcid+json"
READ_PUBLIC_SCOPE = "/read-public"

LOGGER = logging.getLogger(__name__)


class RequestThrottle:
    """Fixed pause applied after every search request."""

    def __init__(self, delay_seconds: float = DEFAULT_THROTTLE_SECONDS) -> None:
        self.delay_seconds = delay_seconds

    def wait(self) -> None:
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)


def fetch_search_token(
    client_id: str,
    client_secret: str,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> AccessToken:
    """Exchange client credentials for a /read-public bearer token."""
    if not client_id:
        raise ConfigurationError("You need to provide a client_id")
    if not client_secret:
        raise ConfigurationError("You need to provide a client_secret")

    form = {
        "client_id": client_id,
        "client_secret": client_secret,
        "grant_type": "client_credentials",
        "scope": READ_PUBLIC_SCOPE,
    }
    try:
        response = requests.post(
            ORCID_TOKEN_URL,
            data=form,
            headers={"Accept": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise OrcidApiError(f"Token request failed: {exc}") from exc

    if response.status_code != 200:
        LOGGER.error("Unable to get access token from API: %s, %s", response.status_code, response.text)
        raise OrcidApiError(
            f"Unable to get access token from API (status {response.status_code})",
            status_code=response.status_code,
            body=response.text,
        )

    payload = _decode_object(response, "token")
    access_token = payload.get("access_token")
    if not isinstance(access_token, str) or not access_token:
        raise OrcidApiError("Token response did not contain an access_token", body=response.text)

    LOGGER.info("Obtained ORCID search token (scope=%s)", payload.get("scope") or READ_PUBLIC_SCOPE)
    return AccessToken(
        access_token=access_token,
        token_type=_as_str(payload.get("token_type")),
        scope=_as_str(payload.get("scope")),
    )


def search_scopus_id(
    scopus_id: str,
    token: str,
    throttle: RequestThrottle | None = None,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> SearchResult:
    """Search ORCID for profiles that list ``scopus_id`` as a self-asserted external id.

    The throttle pause runs after the request whether or not it succeeded.
    """
    throttle = throttle or RequestThrottle()
    LOGGER.debug("Searching ORCID for eid-self:%s", scopus_id)
    try:
        return _search(scopus_id, token, timeout)
    finally:
        throttle.wait()


def _search(scopus_id: str, token: str, timeout: float) -> SearchResult:
    headers = {
        "Accept": ORCID_JSON_MEDIA_TYPE,
        "Authorization": f"Bearer {token}",
    }
    try:
        response = requests.get(
            ORCID_SEARCH_URL,
            params={"q": f"eid-self:{scopus_id}"},
            headers=headers,
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise OrcidApiError(f"Search request for {scopus_id} failed: {exc}") from exc

    if response.status_code != 200:
        LOGGER.error("Bad HTTP status from API: %s, %s", response.status_code, response.text)
        raise OrcidApiError(
            f"Bad HTTP status from API for {scopus_id} (status {response.status_code})",
            status_code=response.status_code,
            body=response.text,
        )

    payload = _decode_object(response, "search")
    num_found = payload.get("num-found", 0)
    if num_found is None:
        num_found = 0
    if isinstance(num_found, bool) or not isinstance(num_found, int):
        raise OrcidApiError(f"Unexpected num-found value: {num_found!r}", body=response.text)

    return SearchResult(num_found=num_found, body=response.text)


def _decode_object(response: requests.Response, kind: str) -> dict[str, Any]:
    try:
        payload = response.json()
    except ValueError as exc:
        raise OrcidApiError(f"Could not decode {kind} response: {exc}", body=response.text) from exc
    if not isinstance(payload, dict):
        raise OrcidApiError(f"Unexpected {kind} response shape: expected an object", body=response.text)
    return payload


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""
