"""
Deterministic regex-based parsing of policy lines.

A line looks like `1-3 a: abcde`. Everything left of the first colon is the
policy, everything right of it is the password.

Philosophy: It's better to parse nothing than to parse wrong data.
              Every function returns None for input it does not understand.
"""

from __future__ import annotations

import re

from .models import Entry, Policy

_POLICY_RE = re.compile(r"^(\d{1,3})-(\d{1,3})\s([a-z])$", re.ASCII)


def parse_policy(text: str) -> Policy | None:
    """Parse a trimmed policy string such as '1-3 a'.

    Args:
        text: The policy part of a line, already stripped of whitespace.

    Returns:
        Policy if the whole string matches, None otherwise.
    """
    # fullmatch so that '$' cannot accept a trailing newline
    match = _POLICY_RE.fullmatch(text)
    if not match:
        return None

    try:
        return Policy(
            first=int(match.group(1)),
            second=int(match.group(2)),
            pattern=match.group(3),
        )
    except ValueError:
        return None


def parse_entry(line: str) -> Entry | None:
    """Split a raw line on its first colon and parse both halves.

    The password is kept as-is after trimming, including an empty string;
    only a missing colon or a bad policy rejects the line.
    """
    parts = line.split(":", 1)
    if len(parts) < 2:
        return None

    policy = parse_policy(parts[0].strip())
    if policy is None:
        return None

    return Entry(policy=policy, password=parts[1].strip())
