#!/usr/bin/env python3
"""
Password Policy Auditor — Entry Point
=====================================

Reads `./input`, one `<first>-<second> <char>: <password>` entry per line,
and prints how many passwords satisfy their policy.

Usage:
    python main.py                                         # positional-xor on ./input
    PASSWORD_AUDIT_MODE=occurrence-range python main.py    # count-based rule
    PASSWORD_AUDIT_INPUT=data/day2.txt python main.py      # another input file
"""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from password_policy.config import load_settings
from password_policy.exceptions import PasswordPolicyError
from password_policy.pipeline import PasswordAuditPipeline, format_report

logger = logging.getLogger("password_policy")


def main() -> None:
    """Run the audit on the configured input and print the summary line."""
    load_dotenv()

    try:
        settings = load_settings()
    except PasswordPolicyError as exc:
        print(f"error: [{exc.code}] {exc}", file=sys.stderr)
        sys.exit(2)

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    pipeline = PasswordAuditPipeline(settings.mode)
    try:
        report = pipeline.run_file(settings.input_path)
    except PasswordPolicyError as exc:
        logger.error("Audit aborted: %s", exc)
        print(f"error: [{exc.code}] {exc}", file=sys.stderr)
        sys.exit(1)

    print(format_report(report))


if __name__ == "__main__":
    main()
