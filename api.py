"""
Password Policy Auditor — FastAPI Server
========================================

RESTful API for auditing password policy lines.

Endpoints:
    POST /audit             Audit a list of raw lines
    POST /audit/file        Upload an input file for auditing
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import asyncio

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, UploadFile
from pydantic import BaseModel, Field

from password_policy import __version__
from password_policy.config import DEFAULT_MODE
from password_policy.models import AuditReport, ValidationMode
from password_policy.pipeline import (
    PasswordAuditPipeline,
    decode_lines,
    format_report,
    split_lines,
)

load_dotenv()

_MAX_UPLOAD_BYTES = 1_048_576


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Password Policy Auditor API",
    description=(
        "Counts how many passwords satisfy the policy on their own line, "
        "under either the occurrence-range or the positional-xor rule."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class AuditRequest(BaseModel):
    """Request body for the /audit endpoint."""

    lines: list[str] = Field(
        ...,
        description="Raw input lines. Lines that do not parse are skipped.",
        json_schema_extra={"example": ["1-3 a: abcde", "1-3 b: cdefg", "2-9 c: ccccccccc"]},
    )
    mode: ValidationMode = DEFAULT_MODE


class AuditResponse(BaseModel):
    """Counts returned by the API, plus the same summary line the CLI prints."""

    mode: ValidationMode
    total: int
    valid: int
    invalid: int
    summary: str

    model_config = {"json_schema_extra": {"example": {
        "mode": "positional-xor",
        "total": 3,
        "valid": 1,
        "invalid": 2,
        "summary": "There are 1 / 3 valid passwords (2 invalid passwords)",
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    modes: list[ValidationMode]


# ─── Helpers ─────────────────────────────────────────────────────────


def _build_response(report: AuditReport) -> AuditResponse:
    """Convert the internal AuditReport to the API response schema."""
    return AuditResponse(
        mode=report.mode,
        total=report.total,
        valid=report.valid,
        invalid=report.invalid,
        summary=format_report(report),
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/audit",
    summary="Audit a list of policy lines",
    tags=["Audit"],
)
def audit_lines(request: AuditRequest) -> AuditResponse:
    """Run the audit pipeline over the submitted lines.

    Returns the **total** number of parsed entries, how many are **valid**
    under the requested **mode**, and how many are **invalid**.
    """
    report = PasswordAuditPipeline(request.mode).run(request.lines)
    return _build_response(report)


@app.post(
    "/audit/file",
    summary="Audit an uploaded input file",
    tags=["Audit"],
    responses={413: {"description": "File too large (max 1 MB)"}},
)
async def audit_file(file: UploadFile, mode: ValidationMode = DEFAULT_MODE) -> AuditResponse:
    """Upload an input file with one entry per line.

    Lines that are not valid UTF-8 are dropped, exactly as the CLI does.
    """
    if file.size and file.size > _MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large (max 1 MB)")

    content = await file.read()
    if len(content) > _MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large (max 1 MB)")

    lines = decode_lines(split_lines(content), file.filename or "<upload>")
    report = await asyncio.to_thread(PasswordAuditPipeline(mode).run, lines)
    return _build_response(report)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
)
def health_check() -> HealthResponse:
    """Returns service status and the supported validation modes."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        modes=list(ValidationMode),
    )
