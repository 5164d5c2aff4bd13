"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory, if
present, is loaded first so that local development does not require
exporting variables by hand.  Defaults are provided for all fields
except the mail account credentials, which must be supplied for the
contact form to work.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


# Front‑end origins permitted to call the API with credentials.
DEFAULT_CORS_ORIGINS = (
    "https://hifi-horizon-mmf-1.onrender.com",
    "https://hifi-horizon-mmf-2.onrender.com",
    "http://localhost:5173",
    "https://hifi-mmf.netlify.app",
    "https://hifi-horizon-mmf.onrender.com",
)


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Account API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Path of the JSON document holding all user records.  If a relative
    # path is provided, it will be resolved relative to the project root
    # by the ``store`` module.
    users_file: str = os.getenv("USERS_FILE", "users.json")

    # Comma‑separated list overriding the built‑in front‑end allowlist.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", ""))
        or list(DEFAULT_CORS_ORIGINS)
    )

    # Mail account used to relay contact form submissions.  The operator
    # mailbox defaults to the sending account itself.
    email_user: str = os.getenv("EMAIL_USER", "")
    email_pass: str = os.getenv("EMAIL_PASS", "")
    contact_recipient: str = os.getenv("CONTACT_RECIPIENT", "") or os.getenv("EMAIL_USER", "")
    smtp_host: str = os.getenv("SMTP_HOST", "smtp.gmail.com")
    smtp_port: int = int(os.getenv("SMTP_PORT", "587"))
    smtp_timeout: float = float(os.getenv("SMTP_TIMEOUT", "30"))

    password_hash_iterations: int = int(os.getenv("PASSWORD_HASH_ITERATIONS", "100000"))

    # Set by the Render hosting platform.  Only affects a startup log line.
    render: bool = bool(os.getenv("RENDER"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
