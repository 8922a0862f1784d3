"""
Global configuration settings for EduGraph.

Loads configuration from environment variables and provides
typed access to all gateway settings.
"""

import os
from typing import Optional, Dict, Any, Mapping
from dataclasses import dataclass, field

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Immutable gateway settings, built once at startup."""

    # Backend base URLs
    student_base: str = "http://localhost:8081"
    course_base: str = "http://localhost:8000"
    ai_base: str = "http://localhost:8001"

    # Server
    host: str = "0.0.0.0"
    port: int = 4000
    cors_origins: tuple = field(default_factory=lambda: ("*",))

    # Outbound calls (None = wait forever)
    backend_timeout: Optional[float] = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __post_init__(self):
        # Base URLs are joined with absolute paths
        for name in ("student_base", "course_base", "ai_base"):
            object.__setattr__(self, name, getattr(self, name).rstrip("/"))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Settings instance
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        timeout = env.get("BACKEND_TIMEOUT")
        origins = env.get("CORS_ORIGINS")

        return cls(
            student_base=env.get("STUDENT_BASE") or defaults.student_base,
            course_base=env.get("COURSE_BASE") or defaults.course_base,
            ai_base=env.get("AI_BASE") or defaults.ai_base,
            host=env.get("HOST") or defaults.host,
            port=int(env.get("PORT") or defaults.port),
            cors_origins=(
                tuple(o.strip() for o in origins.split(",") if o.strip())
                if origins else defaults.cors_origins
            ),
            backend_timeout=float(timeout) if timeout else None,
            log_level=env.get("LOG_LEVEL") or defaults.log_level,
        )

    @property
    def backends(self) -> Dict[str, str]:
        """Get backend base URLs keyed by service name."""
        return {
            "student": self.student_base,
            "course": self.course_base,
            "ai": self.ai_base,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "backends": self.backends,
            "host": self.host,
            "port": self.port,
            "cors_origins": list(self.cors_origins),
            "backend_timeout": self.backend_timeout,
            "log_level": self.log_level,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance (reads .env on first use)."""
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
