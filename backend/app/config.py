"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent


class Settings:
    ENV: str
    DATABASE_URL: str
    DB_ECHO: bool
    CORS_ORIGIN: str
    LOG_LEVEL: str
    HOST: str
    PORT: int

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'tutorials.db'}")
        self.DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
        # Only one browser origin may call the API (the Angular dev server by default).
        self.CORS_ORIGIN = os.getenv("CORS_ORIGIN", "http://localhost:4200")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.HOST = os.getenv("HOST", "127.0.0.1")
        self.PORT = int(os.getenv("PORT", "8080"))
        self._validate()

    def _validate(self):
        if not self.DATABASE_URL.strip():
            raise RuntimeError("DATABASE_URL must not be empty")
        if not self.CORS_ORIGIN.strip() or self.CORS_ORIGIN.strip() == "*":
            raise RuntimeError("CORS_ORIGIN must name a single concrete origin")


settings = Settings()
