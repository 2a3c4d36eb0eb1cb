import os
from functools import lru_cache
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _load_env_file(env_file: Path) -> None:
    """Copy KEY=VALUE lines from `env_file` into os.environ; variables already set win."""
    try:
        lines = env_file.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError:
        return

    for raw in lines:
        line = raw.strip()
        if line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key or key in os.environ:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        os.environ[key] = value


_load_env_file(BASE_DIR / ".env")


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in (raw or "").split(",") if item.strip()]


class Settings:
    def __init__(self) -> None:
        self.app_name: str = os.getenv("APP_NAME", "SMB Security Copilot")
        self.app_env: str = os.getenv("APP_ENV", "dev")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
        self.cors_allowed_origins: list[str] = _split_csv(
            os.getenv(
                "CORS_ALLOWED_ORIGINS",
                "http://127.0.0.1,http://localhost,http://127.0.0.1:3000,http://localhost:3000",
            )
        )
        # Optional JSON file replacing the built-in vendor catalog.
        raw_catalog = os.getenv("AFFILIATE_CATALOG_PATH", "").strip()
        self.affiliate_catalog_path: Path | None = Path(raw_catalog).expanduser() if raw_catalog else None


@lru_cache
def get_settings() -> Settings:
    return Settings()
