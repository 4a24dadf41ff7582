# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""JiraScan CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..config import HttpSettings, ScanSettings, load_http_settings, load_scan_settings
from ..log import setup_logging
from ..models import Finding, FindingKind, ScanReport
from ..probes import PROBES, get_probe, probe_names
from ..runtime import JiraScan


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="JiraScan remote Jira fingerprinting and misconfiguration scanner")
    parser.add_argument("url", nargs="?", help="Target base URL (e.g. https://jira.example.com/)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument(
        "--insecure",
        "--ignore-ssl-errors",
        dest="insecure",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument(
        "--check",
        dest="checks",
        action="append",
        choices=probe_names(),
        metavar="NAME",
        help="Run only this check (repeatable; see --list-checks)",
    )
    parser.add_argument("--list-checks", action="store_true", help="List available checks and exit")
    parser.add_argument("--workers", type=int, default=None, help="Number of checks to run concurrently")
    parser.add_argument("--deadline", type=float, default=None, help="Overall scan deadline in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every request")
    return parser


def _format_record(record: Any) -> str:
    if isinstance(record, (tuple, list)):
        return ", ".join("" if item is None else str(item) for item in record)
    return str(record)


def _print_finding(finding: Finding) -> None:
    description = get_probe(finding.probe).description or finding.probe
    marker = "+" if finding.positive else "-"
    if finding.kind == FindingKind.FLAG:
        print(f"[{marker}] {description}")
    elif finding.kind == FindingKind.VALUE:
        print(f"[{marker}] {description}: {finding.value if finding.positive else '-'}")
    elif finding.kind == FindingKind.RECORD:
        print(f"[{marker}] {description}")
        for key, value in finding.value.items():
            print(f"    {key}: {value}")
    else:
        print(f"[{marker}] {description} ({len(finding.value)})")
        for record in finding.value:
            print(f"    - {_format_record(record)}")


def _pretty_print(report: ScanReport) -> None:
    print(f"[JiraScan] Target: {report.target}")
    for finding in report.findings.values():
        _print_finding(finding)


def _print_json(report: ScanReport) -> None:
    json.dump(report.to_dict(), sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _list_checks() -> None:
    width = max(len(probe.name) for probe in PROBES)
    for probe in PROBES:
        print(f"{probe.name.ljust(width)}  {probe.description}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    if args.list_checks:
        _list_checks()
        return 0
    if not args.url:
        parser.error("the following arguments are required: url")

    http_settings: HttpSettings = load_http_settings()
    if args.insecure:
        http_settings.verify_ssl = False
    scan_settings: ScanSettings = load_scan_settings()
    if args.workers is not None and args.workers > 0:
        scan_settings.max_workers = args.workers
    if args.deadline is not None and args.deadline > 0:
        scan_settings.deadline = args.deadline

    with JiraScan(http_settings=http_settings, scan_settings=scan_settings) as scanner:
        report = scanner.scan(args.url, args.checks)

    if args.json:
        _print_json(report)
    else:
        _pretty_print(report)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
