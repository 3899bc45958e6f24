from dataclasses import asdict

from apis.models import EmailEntry, LookupResult, Source
from records.flatten import COLUMNS, flatten

DOMAIN_FIELDS = [
    "domain",
    "disposable",
    "webmail",
    "accept_all",
    "pattern",
    "organization",
    "country",
    "state",
]


def _result(emails):
    return LookupResult(
        domain="stripe.com",
        disposable=False,
        webmail=False,
        accept_all=False,
        pattern="{first}",
        organization="Stripe",
        country="US",
        state=None,
        emails=emails,
    )


def _email(value, **kw):
    kw.setdefault("sources", [])
    return EmailEntry(value=value, type="personal", confidence=kw.pop("confidence", 80), **kw)


def test_one_row_per_email_in_order():
    emails = [_email(f"user{i}@stripe.com", confidence=i) for i in range(5)]
    rows = flatten(_result(emails))
    assert [r.value for r in rows] == [e.value for e in emails]
    assert [r.confidence for r in rows] == [0, 1, 2, 3, 4]


def test_no_emails_no_rows():
    assert flatten(_result([])) == []


def test_domain_fields_are_broadcast():
    result = _result([_email("a@stripe.com"), _email("b@stripe.com"), _email("a@stripe.com")])
    rows = flatten(result)
    assert len(rows) == 3  # duplicates are kept
    for row in rows:
        for name in DOMAIN_FIELDS:
            assert getattr(row, name) == getattr(result, name)


def test_sources_are_dropped():
    src = Source(
        domain="stripe.com",
        uri="https://stripe.com/about",
        extracted_on="2019-03-01",
        last_seen_on="2021-01-01",
        still_on_page=False,
    )
    rows = flatten(_result([_email("a@stripe.com", sources=[src])]))
    values = asdict(rows[0])
    assert "sources" not in values
    assert "https://stripe.com/about" not in values.values()
    assert list(values) == COLUMNS


def test_absent_optionals_stay_none():
    rows = flatten(_result([_email("a@stripe.com", first_name="Ann", department="")]))
    row = rows[0]
    assert row.first_name == "Ann"
    assert row.department == ""
    assert row.last_name is None
    assert row.phone_number is None
    assert row.state is None


def test_column_order():
    assert COLUMNS == DOMAIN_FIELDS + [
        "value",
        "type",
        "confidence",
        "first_name",
        "last_name",
        "position",
        "seniority",
        "department",
        "linkedin",
        "twitter",
        "phone_number",
    ]
