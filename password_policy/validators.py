"""
Deterministic validation engine.

Each validator function:
  - Takes a Policy and a password
  - Returns a bool
  - Never raises, whatever the password length

validate() looks the mode up in a single dispatch table, so adding a mode
means adding one function and one table entry.
"""

from __future__ import annotations

from typing import Callable

from .models import Policy, ValidationMode


# ─── Individual Validators ───────────────────────────────────────────


def validate_occurrence_range(policy: Policy, password: str) -> bool:
    """The pattern must occur between `first` and `second` times, inclusive.

    A `first` of 0 allows passwords without the pattern at all.
    """
    count = password.count(policy.pattern)
    return policy.first <= count <= policy.second


def validate_positional_xor(policy: Policy, password: str) -> bool:
    """Exactly one of the 1-based positions `first` and `second` holds the pattern.

    A position past the end of the password, or position 0, is treated the
    same as a position holding some other character.
    """
    first_matches = _char_at(password, policy.first) == policy.pattern
    second_matches = _char_at(password, policy.second) == policy.pattern
    return first_matches != second_matches


def _char_at(password: str, position: int) -> str | None:
    """Return the character at a 1-based position, or None if there is none."""
    # Guard position 0 explicitly; password[-1] would silently wrap around
    if 1 <= position <= len(password):
        return password[position - 1]
    return None


# ─── Orchestrator ────────────────────────────────────────────────────

_VALIDATORS: dict[ValidationMode, Callable[[Policy, str], bool]] = {
    ValidationMode.OCCURRENCE_RANGE: validate_occurrence_range,
    ValidationMode.POSITIONAL_XOR: validate_positional_xor,
}


def validate(policy: Policy, password: str, mode: ValidationMode) -> bool:
    """Check a password against its policy under the given mode."""
    return _VALIDATORS[mode](policy, password)
