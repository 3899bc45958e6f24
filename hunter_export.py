#!/usr/bin/env python3
"""
hunter_export.py — export Hunter.io domain-search emails to CSV

Features
- Reads organizations (name, domain) from a CSV
- One Hunter.io Domain Search call per domain
- Flattens every discovered email into one CSV row, domain fields included
- Stops at the first failure with a non-zero exit status

Environment (.env)
  KEY=...            your hunter.io API key

Usage
  hunter INPUT.csv OUTPUT.csv [--limit N] [--timeout SECONDS] [--verbose]
  KEY=foo python hunter_export.py input.csv output.csv --limit 10
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Callable, Optional

import click
from dotenv import load_dotenv

from apis.errors import CredentialMissingError, HunterExportError
from apis.hunter import DEFAULT_LIMIT, DEFAULT_TIMEOUT, domain_search
from apis.models import DomainSearchResponse
from records.flatten import flatten
from records.reader import RecordReader
from records.writer import RecordWriter

log = logging.getLogger("hunter_export")

KEY_ENV = "KEY"

Lookup = Callable[[str, str, int, Optional[float]], DomainSearchResponse]


@dataclass
class ExportSummary:
    domains: int
    rows: int


# --------------------------
# Configuration
# --------------------------


def get_api_key() -> str:
    """Read the Hunter API key from the environment (or .env)."""
    key = os.getenv(KEY_ENV)
    if not key:
        raise CredentialMissingError(
            f"Please set {KEY_ENV} (your hunter.io api key).\n"
            "For example:\n"
            f"  {KEY_ENV}=foo hunter input.csv output.csv"
        )
    return key


# --------------------------
# Pipeline
# --------------------------


def export_domains(
    input_path,
    output_path,
    api_key: str,
    limit: int = DEFAULT_LIMIT,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    lookup: Lookup = domain_search,
) -> ExportSummary:
    """Look up every domain of input_path and stream the emails to output_path.

    Any error propagates: the first failing domain ends the run, leaving the
    rows already written in place.
    """
    domains = 0
    with RecordReader(input_path) as reader, RecordWriter(output_path) as writer:
        for record in reader:
            print(f"processing {record.domain}...")
            response = lookup(record.domain, api_key, limit, timeout)
            meta = response.meta
            print(f"📊 results={meta.results} limit={meta.limit} offset={meta.offset}")
            for row in flatten(response.data):
                writer.write(row)
            domains += 1
            log.debug("%s (%s): %d emails", record.domain, record.name, len(response.data.emails))
        rows = writer.rows_written
    return ExportSummary(domains=domains, rows=rows)


# --------------------------
# CLI
# --------------------------


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Read domains from a csv and extract email data from hunter.io.",
    epilog=(
        "Exit status: 0 on success, 1 on any failure during the run (KEY unset, "
        "bad input row, Hunter error, unusable file). Missing or invalid arguments "
        "are rejected by the parser with status 2 before KEY is checked."
    ),
)
@click.argument("input_path", metavar="INPUT", type=click.Path(dir_okay=False))
@click.argument("output_path", metavar="OUTPUT", type=click.Path(dir_okay=False))
@click.option(
    "-l",
    "--limit",
    default=DEFAULT_LIMIT,
    show_default=True,
    type=int,
    help="How many emails to retrieve per domain. (If using a free plan, you must set to 10)",
)
@click.option(
    "--timeout",
    default=DEFAULT_TIMEOUT,
    show_default=True,
    type=click.FloatRange(min=0),
    help="Seconds to wait for Hunter before giving up; 0 waits forever.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
def main(
    input_path: str, output_path: str, limit: int, timeout: float, verbose: bool
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_dotenv()

    try:
        api_key = get_api_key()
        summary = export_domains(
            input_path,
            output_path,
            api_key,
            limit=limit,
            timeout=timeout or None,
        )
    except HunterExportError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"✅ {summary.domains} domain(s), {summary.rows} email(s) written to {output_path}")


if __name__ == "__main__":
    main()
