import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "y", "on"}


def _csv(val: str | None, default: list[str]) -> list[str]:
    if not val:
        return default
    return [v.strip() for v in val.split(",") if v.strip()]


def _int(val: str | None, default: int | None) -> int | None:
    if val is None or not val.strip():
        return default
    return int(val)


def _env(name: str, default: str | None = None):
    return field(default_factory=lambda: os.getenv(name) or default)


@dataclass(frozen=True)
class Settings:
    env: str = _env("ENV", "local")

    # Required at boot
    database_url: str | None = _env("DATABASE_URL")
    jwt_secret: str | None = _env("JWT_SECRET")
    port: int | None = field(default_factory=lambda: _int(os.getenv("PORT"), None))

    host: str = _env("HOST", "0.0.0.0")
    database_echo: bool = field(default_factory=lambda: _bool(os.getenv("DATABASE_ECHO")))

    # Logging
    log_level: str = _env("LOG_LEVEL", "INFO")
    log_json: bool = field(
        default_factory=lambda: _bool(
            os.getenv("LOG_JSON"),
            default=(os.getenv("ENV", "local") != "local"),
        )
    )

    # Tokens
    jwt_algorithm: str = _env("JWT_ALGORITHM", "HS256")
    access_token_ttl_seconds: int = field(
        default_factory=lambda: _int(os.getenv("ACCESS_TOKEN_TTL_SECONDS"), 3600)
    )

    # Passwords: argon2 iteration count, fixed when a hash is created
    password_time_cost: int = field(
        default_factory=lambda: _int(os.getenv("PASSWORD_TIME_COST"), 3)
    )

    cors_allow_origins: list[str] = field(
        default_factory=lambda: _csv(
            os.getenv("CORS_ALLOW_ORIGINS"),
            default=["http://localhost:3000", "http://127.0.0.1:3000"],
        )
    )

    def validate(self) -> "Settings":
        missing = [
            name
            for name, value in (
                ("DATABASE_URL", self.database_url),
                ("JWT_SECRET", self.jwt_secret),
                ("PORT", self.port),
            )
            if not value
        ]
        if missing:
            raise RuntimeError(f"missing required configuration: {', '.join(missing)}")
        if self.access_token_ttl_seconds <= 0:
            raise RuntimeError("ACCESS_TOKEN_TTL_SECONDS must be positive")
        return self


def load_settings() -> Settings:
    return Settings().validate()
