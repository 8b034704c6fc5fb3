import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

BACKENDS = ("memory", "sql")
DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./todo_server.db"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    backend: str = "sql"
    database_url: str = DEFAULT_DATABASE_URL
    # 404/409 instead of the blanket 400 for missing/duplicate ids
    strict_status_codes: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    def __post_init__(self):
        if self.backend not in BACKENDS:
            raise ValueError(f"TODO_BACKEND must be one of {BACKENDS}, got {self.backend!r}")
        if not 0 < self.port < 65536:
            raise ValueError(f"PORT out of range: {self.port}")

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(find_dotenv(usecwd=True))
        port = os.getenv("PORT", "8080")
        try:
            port_number = int(port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port!r}") from None
        return cls(
            backend=os.getenv("TODO_BACKEND", "sql").strip().lower(),
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            strict_status_codes=_env_bool("STRICT_STATUS_CODES", False),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("HOST", "0.0.0.0"),
            port=port_number,
        )
