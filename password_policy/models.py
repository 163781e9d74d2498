"""
Pydantic models for policy lines: immutable values from parse to report.

Policy and Entry are frozen: once a line is parsed nothing downstream may
change it. The validation mode is configuration, never stored on an entry.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ─── Validation Mode ────────────────────────────────────────────────


class ValidationMode(str, Enum):
    """Which interpretation of a policy's two numbers applies."""

    OCCURRENCE_RANGE = "occurrence-range"  # first..second occurrences allowed
    POSITIONAL_XOR = "positional-xor"  # exactly one of two 1-based positions


# ─── Policy ─────────────────────────────────────────────────────────


class Policy(BaseModel):
    """A parsed `first-second pattern` rule, e.g. `1-3 a`."""

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(min_length=1, max_length=1)
    first: int = Field(ge=0, le=999)
    second: int = Field(ge=0, le=999)

    def __str__(self) -> str:
        return f"{self.first}-{self.second} {self.pattern}"


# ─── Entry ──────────────────────────────────────────────────────────


class Entry(BaseModel):
    """One input line: a policy and the password it governs."""

    model_config = ConfigDict(frozen=True)

    policy: Policy
    password: str

    def __str__(self) -> str:
        return f"{self.policy}: {self.password}"


# ─── Audit Report ───────────────────────────────────────────────────


class AuditReport(BaseModel):
    """The final output of the audit pipeline."""

    model_config = ConfigDict(frozen=True)

    mode: ValidationMode
    total: int = Field(ge=0)  # Successfully parsed entries only
    valid: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def invalid(self) -> int:
        return self.total - self.valid
