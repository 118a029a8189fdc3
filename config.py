from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.engine import URL


@dataclass(frozen=True)
class DatabaseConfig:
     # Connection parameters for the LightBnB PostgreSQL database
     host: str
     port: int
     name: str
     user: Optional[str]
     password: Optional[str]

     # Full SQLAlchemy URL; wins over the discrete fields when set
     database_url: Optional[str]

     # Pool tuning
     echo: bool
     pool_size: int
     max_overflow: int
     pool_timeout: int
     pool_recycle: int

     log_level: str

     @property
     def url(self) -> str:
          if self.database_url:
               return self.database_url
          return URL.create(
               "postgresql+psycopg2",
               username=self.user,
               password=self.password,
               host=self.host,
               port=self.port,
               database=self.name,
          ).render_as_string(hide_password=False)


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
     v = os.getenv(name, default)
     if v is None:
          return None
     v = v.strip()
     return v if v else None


def _getint(name: str, default: int) -> int:
     v = _getenv(name)
     return int(v) if v is not None else default


def get_config() -> DatabaseConfig:
     """
     Centralized config: this is the ONLY place env vars are read.
     Loads `.env` if present (local dev).
     """
     load_dotenv(override=False)

     return DatabaseConfig(
          host=_getenv("DB_HOST", "localhost"),
          port=_getint("DB_PORT", 5432),
          name=_getenv("DB_NAME", "lightbnb"),
          user=_getenv("DB_USER"),
          password=_getenv("DB_PASS"),
          database_url=_getenv("DATABASE_URL"),
          echo=(_getenv("SQL_ECHO", "false") or "false").lower() == "true",
          pool_size=_getint("DB_POOL_SIZE", 5),
          max_overflow=_getint("DB_MAX_OVERFLOW", 10),
          pool_timeout=_getint("DB_POOL_TIMEOUT", 30),
          pool_recycle=_getint("DB_POOL_RECYCLE", 1800),
          log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
     )
