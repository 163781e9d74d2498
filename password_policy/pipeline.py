"""
Main audit pipeline: orchestrates the full workflow.

Flow:
  ┌────────────┐
  │ Line source│   ← file, upload, or in-memory list
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ Entry      │   ← split on ':', parse policy, drop what fails
  │ Parser     │
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ Validator  │   ← one mode for the whole run
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ Report     │   ← total / valid / invalid
  └────────────┘

Design principles:
  - A malformed or undecodable line is skipped, never reported as an error.
  - Only an input that cannot be opened aborts the run.
  - Validators are pure functions, so running twice gives the same counts.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

from .config import DEFAULT_INPUT_PATH, DEFAULT_MODE
from .exceptions import InputSourceError
from .models import AuditReport, Entry, ValidationMode
from .parser import parse_entry
from .validators import validate

logger = logging.getLogger(__name__)


# ─── Line Sources ────────────────────────────────────────────────────


@contextmanager
def read_lines(path: str | Path = DEFAULT_INPUT_PATH) -> Iterator[Iterator[str]]:
    """Open the input file and yield an iterator over its decoded lines.

    The file is closed when the `with` block exits, whether or not the
    lines were consumed. Lines that are not valid UTF-8 are skipped.

    Usage:
        with read_lines("./input") as lines:
            report = pipeline.run(lines)

    Raises:
        InputSourceError: if the path cannot be opened for reading.
    """
    resolved = Path(path)
    try:
        handle = resolved.open("rb")
    except OSError as exc:
        raise InputSourceError(
            f"Cannot open input file '{resolved}': {exc.strerror or exc}",
            details={"path": str(resolved), "os_error": str(exc)},
        ) from exc

    with handle:
        yield decode_lines(handle, str(resolved))


def split_lines(content: bytes) -> list[bytes]:
    """Split raw bytes on '\\n' only, the same boundaries a file read uses."""
    return content.split(b"\n")


def decode_lines(raw_lines: Iterable[bytes], source: str = "<bytes>") -> Iterator[str]:
    """Decode byte lines as UTF-8, dropping any that fail to decode."""
    for number, raw in enumerate(raw_lines, start=1):
        try:
            yield raw.decode("utf-8").rstrip("\r\n")
        except UnicodeDecodeError:
            logger.debug("Skipping undecodable line %d in %s", number, source)


# ─── Parsing ─────────────────────────────────────────────────────────


def parse_entries(lines: Iterable[str]) -> Iterator[Entry]:
    """Lazily parse lines into entries, dropping the ones that do not parse."""
    for number, line in enumerate(lines, start=1):
        entry = parse_entry(line)
        if entry is None:
            logger.debug("Skipping malformed line %d: %r", number, line)
            continue
        yield entry


# ─── Pipeline ────────────────────────────────────────────────────────


class PasswordAuditPipeline:
    """Counts how many entries satisfy their policy under one mode.

    Usage:
        pipeline = PasswordAuditPipeline(ValidationMode.OCCURRENCE_RANGE)
        report = pipeline.run_file("./input")
        print(format_report(report))
    """

    def __init__(self, mode: ValidationMode = DEFAULT_MODE):
        self.mode = mode

    def run(self, lines: Iterable[str]) -> AuditReport:
        """Execute the pipeline over any iterable of raw lines.

        Args:
            lines: Raw text lines, with or without trailing newlines.

        Returns:
            AuditReport with the counts for this pipeline's mode.
        """
        total = 0
        valid = 0
        for entry in parse_entries(lines):
            total += 1
            if validate(entry.policy, entry.password, self.mode):
                valid += 1

        logger.info(
            "Audited %d entries in %s mode: %d valid", total, self.mode.value, valid
        )
        return AuditReport(mode=self.mode, total=total, valid=valid)

    def run_file(self, path: str | Path = DEFAULT_INPUT_PATH) -> AuditReport:
        """Read the input file to completion and audit it."""
        logger.info("Reading entries from %s", path)
        with read_lines(path) as lines:
            return self.run(lines)


# ─── Reporter ────────────────────────────────────────────────────────


def format_report(report: AuditReport) -> str:
    """Render the one-line, human-readable summary of a report."""
    return (
        f"There are {report.valid} / {report.total} valid passwords "
        f"({report.invalid} invalid passwords)"
    )
