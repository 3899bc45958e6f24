"""Data models for the Hunter.io domain-search response."""

from typing import List, Optional

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr


class Source(BaseModel):
    domain: StrictStr
    uri: StrictStr
    extracted_on: StrictStr  # YYYY-MM-DD
    last_seen_on: StrictStr  # YYYY-MM-DD
    still_on_page: StrictBool


class EmailEntry(BaseModel):
    value: StrictStr
    type: StrictStr  # "personal" or "generic"
    confidence: StrictInt = Field(ge=0)  # 0..100
    sources: List[Source]
    first_name: Optional[StrictStr] = None
    last_name: Optional[StrictStr] = None
    position: Optional[StrictStr] = None
    seniority: Optional[StrictStr] = None
    department: Optional[StrictStr] = None
    linkedin: Optional[StrictStr] = None
    twitter: Optional[StrictStr] = None
    phone_number: Optional[StrictStr] = None


class LookupResult(BaseModel):
    domain: StrictStr
    disposable: StrictBool
    webmail: StrictBool
    accept_all: StrictBool
    pattern: Optional[StrictStr] = None
    organization: Optional[StrictStr] = None
    country: Optional[StrictStr] = None
    state: Optional[StrictStr] = None
    emails: List[EmailEntry]


class SearchMeta(BaseModel):
    results: StrictInt
    limit: StrictInt
    offset: StrictInt


class DomainSearchResponse(BaseModel):
    """Body of GET /v2/domain-search; unknown keys are ignored."""

    data: LookupResult
    meta: SearchMeta
