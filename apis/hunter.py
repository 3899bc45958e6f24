"""Hunter.io Domain Search API client."""

import logging
from typing import Any, Optional

import requests
from pydantic import ValidationError

from .errors import SchemaError, TransportError
from .models import DomainSearchResponse

log = logging.getLogger(__name__)

DOMAIN_SEARCH_URL = "https://api.hunter.io/v2/domain-search"
DEFAULT_LIMIT = 100
DEFAULT_TIMEOUT = 15.0


def _redact(text: str, api_key: str) -> str:
    return text.replace(api_key, "***") if api_key else text


def _upstream_errors(body: Any) -> Optional[str]:
    """Summarize a Hunter error envelope: {"errors": [{"id", "code", "details"}]}."""
    if not isinstance(body, dict) or not isinstance(body.get("errors"), list):
        return None
    parts = []
    for err in body["errors"]:
        if isinstance(err, dict):
            parts.append(str(err.get("details") or err.get("id") or err))
        else:
            parts.append(str(err))
    return "; ".join(parts) or None


def _field_path(loc) -> str:
    path = "body"
    for part in loc:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def _describe(err: ValidationError) -> str:
    """First few validation errors as `body.data.emails[0].confidence: <reason>`."""
    errors = err.errors()
    shown = "; ".join(f"{_field_path(e['loc'])}: {e['msg']}" for e in errors[:3])
    if len(errors) > 3:
        shown += f" (+{len(errors) - 3} more)"
    return shown


def domain_search(
    domain: str,
    api_key: str,
    limit: int = DEFAULT_LIMIT,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> DomainSearchResponse:
    """Fetch every email Hunter knows for a domain (first page only).

    Raises TransportError when the request cannot be completed and
    SchemaError when the body does not decode into a DomainSearchResponse,
    whatever the HTTP status code was.
    """
    log.debug("GET %s domain=%s limit=%s timeout=%s", DOMAIN_SEARCH_URL, domain, limit, timeout)
    try:
        r = requests.get(
            DOMAIN_SEARCH_URL,
            params={
                "domain": domain,
                "api_key": api_key,
                "limit": limit,
            },
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise TransportError(
            f"HTTP error for {domain}: {_redact(str(e), api_key)}", domain=domain
        ) from None

    log.debug("%s answered %s (%d bytes)", domain, r.status_code, len(r.content))

    try:
        body = r.json()
    except ValueError as e:
        raise SchemaError(
            f"invalid JSON from Hunter for {domain} (HTTP {r.status_code}): {e}",
            domain=domain,
            status_code=r.status_code,
        ) from None

    try:
        return DomainSearchResponse.model_validate(body)
    except ValidationError as e:
        detail = _upstream_errors(body)
        message = f"unexpected response from Hunter for {domain} (HTTP {r.status_code}): "
        message += f"upstream error: {detail}" if detail else _describe(e)
        raise SchemaError(
            _redact(message, api_key), domain=domain, status_code=r.status_code
        ) from None
