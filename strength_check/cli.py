"""Command line password checker.

Usage (from repo root):
    python -m strength_check.cli --username alice@example.com 'S3cret!pass'
    python -m strength_check.cli --generate --json

Without a password argument the password is read with getpass so it does
not end up in shell history.
"""

from __future__ import annotations

import argparse
import getpass
import json
import logging

from passphrase import generate
from strength_check.entropy import estimate_crack_time
from strength_check.scoring import analyze

logger = logging.getLogger(__name__)


def build_report(username: str, password: str) -> dict:
    result = analyze(username, password)
    report = result.to_dict()
    report["crack_time"] = estimate_crack_time(result.entropy_bits)
    return report


def format_report(report: dict) -> str:
    lines = [
        f"Strength: {report['rating']} ({report['score']}/100)",
        f"Entropy: {report['entropy']:.2f} bits",
        f"Estimated crack time: {report['crack_time']}",
    ]
    if report["suggestions"]:
        lines.append("Suggestions:")
        lines.extend(f"  - {s}" for s in report["suggestions"])
    return "\n".join(lines)


def main(argv=None):
    p = argparse.ArgumentParser(description="Estimate password strength")
    p.add_argument("password", nargs="?", default=None)
    p.add_argument("--username", default="", help="Username or email the password belongs to")
    p.add_argument(
        "--generate",
        action="store_true",
        help="Generate a memorable password and analyse it",
    )
    p.add_argument("--json", action="store_true", help="Print the analysis as JSON")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.generate:
        password = generate()
    elif args.password is not None:
        password = args.password
    else:
        password = getpass.getpass("Password to analyze: ")

    report = build_report(args.username, password)
    if args.generate:
        report["password"] = password

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        if args.generate:
            print(f"Generated: {password}")
        print(format_report(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
