"""
Application settings loaded from environment variables.
"""

import pathlib
from typing import List

from pydantic_settings import BaseSettings

_DEFAULT_PDF_DIR = pathlib.Path(__file__).resolve().parent.parent / "public" / "pdf"
_DEV_CLIENT_ORIGIN = "http://localhost:5173"


class Settings(BaseSettings):
    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = ""              # empty → /register, /login, /getUser answer 503

    # ── Security Secrets ──────────────────────────────────────────────────
    secret_key: str = ""                # HMAC secret for JWTs; empty → signing disabled
    jwt_algorithm: str = "HS256"
    jwt_expiry_seconds: int = 3600      # 1 hour
    bcrypt_rounds: int = 10

    # ── Email (SendGrid) ─────────────────────────────────────────────────
    sendgrid_api_key: str = ""
    sendgrid_base_url: str = "https://api.sendgrid.com"
    mail_from: str = ""                 # must be a verified sender in SendGrid

    # ── Static files ─────────────────────────────────────────────────────
    pdf_dir: str = str(_DEFAULT_PDF_DIR)

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 8081
    host: str = "0.0.0.0"
    debug: bool = False
    client_url: str = ""                # production client origin

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def cors_origins(self) -> List[str]:
        """Production client plus the local dev server, blanks dropped."""
        return [o for o in (self.client_url, _DEV_CLIENT_ORIGIN) if o]

    @property
    def database_configured(self) -> bool:
        return bool(self.database_url)

    @property
    def signing_configured(self) -> bool:
        return bool(self.secret_key)


config = Settings()
