"""Flatten a domain-search result into one output row per email."""

from dataclasses import dataclass, fields
from typing import List, Optional

from apis.models import LookupResult


@dataclass
class FlatRow:
    # domain-level, identical for every row of one lookup
    domain: str
    disposable: bool
    webmail: bool
    accept_all: bool
    pattern: Optional[str]
    organization: Optional[str]
    country: Optional[str]
    state: Optional[str]
    # email-level
    value: str
    type: str
    confidence: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[str] = None
    seniority: Optional[str] = None
    department: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    phone_number: Optional[str] = None


COLUMNS = [f.name for f in fields(FlatRow)]


def flatten(result: LookupResult) -> List[FlatRow]:
    """One FlatRow per email, in response order. Sources are dropped."""
    return [
        FlatRow(
            domain=result.domain,
            disposable=result.disposable,
            webmail=result.webmail,
            accept_all=result.accept_all,
            pattern=result.pattern,
            organization=result.organization,
            country=result.country,
            state=result.state,
            value=email.value,
            type=email.type,
            confidence=email.confidence,
            first_name=email.first_name,
            last_name=email.last_name,
            position=email.position,
            seniority=email.seniority,
            department=email.department,
            linkedin=email.linkedin,
            twitter=email.twitter,
            phone_number=email.phone_number,
        )
        for email in result.emails
    ]
