import os

from pydantic import BaseModel


def _csv(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


class Settings(BaseModel):
    VERSION: str = "0.1.0"

    # Process runner
    COMMAND_TIMEOUT_SEC: int = int(os.getenv("COMMAND_TIMEOUT_SEC", "900"))
    RUNNER_MAX_WORKERS: int = int(os.getenv("RUNNER_MAX_WORKERS", "4"))

    # Upper bound for a whole multi-module scan
    SCAN_TIMEOUT_SEC: int = int(os.getenv("SCAN_TIMEOUT_SEC", "1800"))

    # Directories never walked when looking for source files
    EXCLUDE_DIRS: list[str] = _csv(
        os.getenv("EXCLUDE_DIRS", ".git,node_modules,.venv,venv,__MACOSX,__pycache__")
    )

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
