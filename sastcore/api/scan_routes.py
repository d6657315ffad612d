from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from sastcore.core.containers import build_module_registry
from sastcore.services.scan_service import ScanService

router = APIRouter(prefix="/api", tags=["scan"])

# Build once at module level
_scan_service = ScanService(build_module_registry())


# ── Request / Response schemas ────────────────────────────────────
class ScanRequest(BaseModel):
    """Request body for scanning a project directory."""

    target: str = Field(..., description="Absolute path of the project root to scan.")
    modules: list[str] | None = Field(
        None,
        description="Module keys to run. If omitted, every applicable module runs.",
        json_schema_extra={"examples": [["findSecBugs", "bandit"]]},
    )


class ModuleDescription(BaseModel):
    key: str
    description: str


class FindingSummary(BaseModel):
    """Counts by severity."""

    total: int
    by_severity: dict[str, int]


class ScanResponse(BaseModel):
    """Result of one scan."""

    target: str
    ran: list[str]
    skipped: list[str]
    unfinished: list[str]
    summary: FindingSummary
    findings: dict[str, list[dict[str, Any]]] = Field(
        ..., description="Findings keyed by severity (low, medium, high, critical)."
    )


# ── Endpoints ─────────────────────────────────────────────────────
@router.get(
    "/modules",
    response_model=list[ModuleDescription],
    summary="List scan modules",
)
def list_modules() -> list[dict[str, str]]:
    """Return every registered scan module with a short description."""
    return [
        {"key": m.key, "description": m.info.description}
        for m in _scan_service.modules.all()
    ]


@router.post(
    "/scan",
    response_model=ScanResponse,
    summary="Scan a project",
    response_description="Findings recorded by every module that ran",
)
def scan(req: ScanRequest) -> dict[str, Any]:
    """Run the applicable scan modules against ``target``.

    Modules whose tool or build artifact is missing are skipped and listed
    under ``skipped``; tool failures never fail the request.
    """
    if req.modules:
        unknown = sorted(set(req.modules) - set(_scan_service.modules.list()))
        if unknown:
            raise HTTPException(status_code=400, detail=f"Unknown modules: {', '.join(unknown)}")

    try:
        outcome = _scan_service.scan(req.target, selected=req.modules)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    summary = outcome.results.summary()
    return {
        "target": str(outcome.target),
        "ran": outcome.ran,
        "skipped": outcome.skipped,
        "unfinished": outcome.unfinished,
        "summary": {"total": summary.total, "by_severity": summary.by_severity},
        "findings": outcome.results.to_dict(),
    }
