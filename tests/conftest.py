"""Shared fixtures: canned Hunter payloads and a fake requests.get."""

import copy
import json

import pytest

ACME_PAYLOAD = {
    "data": {
        "domain": "acme.com",
        "disposable": False,
        "webmail": False,
        "accept_all": True,
        "pattern": None,
        "organization": "Acme Inc",
        "country": "US",
        "state": "CA",
        "emails": [
            {
                "value": "jane@acme.com",
                "type": "personal",
                "confidence": 90,
                "sources": [],
                "first_name": "Jane",
                "last_name": "Doe",
            }
        ],
    },
    "meta": {"results": 1, "limit": 100, "offset": 0},
}

RATE_LIMITED_PAYLOAD = {
    "errors": [
        {
            "id": "too_many_requests",
            "code": 429,
            "details": "You have reached the rate limit for this endpoint.",
        }
    ]
}


class FakeResponse:
    def __init__(self, body, status_code=200):
        self.text = body if isinstance(body, str) else json.dumps(body)
        self.content = self.text.encode("utf-8")
        self.status_code = status_code

    def json(self):
        return json.loads(self.text)


class FakeHunter:
    """Stands in for requests.get; answers by the `domain` query parameter."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def __call__(self, url, params=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        answer = self.responses[params["domain"]]
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def acme_payload():
    return copy.deepcopy(ACME_PAYLOAD)


@pytest.fixture
def rate_limited_payload():
    return copy.deepcopy(RATE_LIMITED_PAYLOAD)


@pytest.fixture
def fake_hunter(monkeypatch):
    """Install a FakeHunter in place of requests.get and return a setter."""

    def install(responses):
        fake = FakeHunter(responses)
        monkeypatch.setattr("apis.hunter.requests.get", fake)
        return fake

    return install


@pytest.fixture
def write_csv(tmp_path):
    def write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return write
