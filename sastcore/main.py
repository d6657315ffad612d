from fastapi import FastAPI

from sastcore.api.scan_routes import router as scan_router
from sastcore.core.config import settings
from sastcore.core.logging import setup_logging

setup_logging()

app = FastAPI(
    title="sastcore",
    version=settings.VERSION,
    description="Runs external security scanners and normalizes their findings by severity.",
    openapi_tags=[
        {"name": "scan", "description": "Discover scan modules and scan a project directory."},
        {"name": "health", "description": "Liveness check."},
    ],
)

app.include_router(scan_router)


@app.get("/health", tags=["health"], summary="Health check")
def health():
    return {"status": "healthy", "version": settings.VERSION}
