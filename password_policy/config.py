"""
Runtime settings read from the environment.

Every variable is optional; the defaults reproduce the plain behaviour of
auditing `./input` in positional-xor mode. Entry points load a `.env` file
before calling load_settings().
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .exceptions import InvalidLogLevelError, UnknownValidationModeError
from .models import ValidationMode

DEFAULT_INPUT_PATH = "./input"
DEFAULT_MODE = ValidationMode.POSITIONAL_XOR
DEFAULT_LOG_LEVEL = "WARNING"

# Names logging.basicConfig(level=...) accepts
LOG_LEVELS: tuple[str, ...] = (
    "CRITICAL", "FATAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG", "NOTSET",
)


class Settings(BaseModel):
    """Resolved configuration for a single audit run."""

    model_config = ConfigDict(frozen=True)

    input_path: Path = Path(DEFAULT_INPUT_PATH)
    mode: ValidationMode = DEFAULT_MODE
    log_level: str = DEFAULT_LOG_LEVEL


def parse_mode(raw: str) -> ValidationMode:
    """Turn a mode name such as 'occurrence-range' into a ValidationMode."""
    try:
        return ValidationMode(raw.strip().lower())
    except ValueError:
        raise UnknownValidationModeError(
            f"Unknown validation mode '{raw}'. Expected one of: "
            f"{', '.join(m.value for m in ValidationMode)}.",
            details={"mode": raw},
        ) from None


def parse_log_level(raw: str) -> str:
    """Normalise a level name such as 'debug', rejecting names logging does not know."""
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise InvalidLogLevelError(
            f"Unknown log level '{raw}'. Expected one of: {', '.join(LOG_LEVELS)}.",
            details={"log_level": raw},
        )
    return level


def load_settings() -> Settings:
    """Build Settings from PASSWORD_AUDIT_* environment variables."""
    raw_mode = os.environ.get("PASSWORD_AUDIT_MODE")
    return Settings(
        input_path=Path(os.environ.get("PASSWORD_AUDIT_INPUT", DEFAULT_INPUT_PATH)),
        mode=parse_mode(raw_mode) if raw_mode else DEFAULT_MODE,
        log_level=parse_log_level(
            os.environ.get("PASSWORD_AUDIT_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        ),
    )
