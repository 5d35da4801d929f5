import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _env_list(name: str, default: str) -> List[str]:
    """Split a comma separated environment value, dropping empty items."""
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Patterns")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    # Mirror every catalog notification into the log (library_patterns.events)
    log_events: bool = os.getenv("LOG_EVENTS", "False").lower() in ("true", "1", "yes")

    # CLI output mode: plain | json | rich
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()

    # External ISBN system (hardcoded stub)
    external_isbn_code: str = os.getenv("EXTERNAL_ISBN_CODE", "EXT-ISBN-332211")

    # Demo scenario
    demo_admins: list = field(default_factory=lambda: _env_list("DEMO_ADMINS", "Carlos,Andrea"))
    demo_books: list = field(
        default_factory=lambda: _env_list("DEMO_BOOKS", "El Quijote,Arquitectura de Software")
    )
    demo_target_title: str = os.getenv("DEMO_TARGET_TITLE", "Arquitectura de Software")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


settings = Settings()
