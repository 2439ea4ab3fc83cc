from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Default data directory sits next to the `src` package.
DEFAULT_GTFS_PATH = Path(__file__).resolve().parents[2] / "gtfs_data"


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class ServerConfig:
    port: int
    host: str
    gtfs_path: Path
    reveal_errors: bool
    log_level: str

    @staticmethod
    def from_env() -> "ServerConfig":
        gtfs_path = (os.getenv("GTFS_PATH") or "").strip()

        return ServerConfig(
            port=_env_int("PORT", 3000),
            host=(os.getenv("HOST") or "").strip() or "0.0.0.0",
            gtfs_path=Path(gtfs_path) if gtfs_path else DEFAULT_GTFS_PATH,
            reveal_errors=_env_bool("GTFS_API_REVEAL_ERRORS", False),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        )
