"""
SQLAlchemy connection pool, session management and statement execution.

This module provides:
- Pooled engine configuration for the LightBnB PostgreSQL database
- Session factory for dependency injection
- `$n`-placeholder statement execution with typed data-access errors

Usage:
     from database import get_session_context
     from services import get_user_with_email

     with get_session_context() as db:
          user = get_user_with_email(db, "tristanjacobs@gmail.com")
"""
import logging
import re
from contextlib import contextmanager
from typing import Any, Dict, Generator, List, Optional, Sequence, Union

from sqlalchemy import bindparam, create_engine, text
from sqlalchemy import exc as sa_exc
from sqlalchemy.engine import Connection, Engine, Result
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

from config import DatabaseConfig, get_config

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class DataAccessError(RuntimeError):
     """Base class for failures raised by the data-access functions."""

     def __init__(self, operation: str, message: str):
          super().__init__(f"{operation}: {message}")
          self.operation = operation
          self.message = message


class NotFoundError(DataAccessError):
     """The row targeted by an update or delete does not exist."""


class ConstraintViolationError(DataAccessError):
     """Unique, foreign-key or check constraint rejected the statement."""


class ConnectivityError(DataAccessError):
     """The store could not be reached or the connection was lost."""


class InvalidStatementError(DataAccessError):
     """The statement (or a value bound into it) was rejected as malformed."""


def translate_error(error: Exception, operation: str) -> DataAccessError:
     """Map a SQLAlchemy exception onto the data-access error taxonomy."""
     if isinstance(error, sa_exc.IntegrityError):
          cls = ConstraintViolationError
     elif isinstance(error, (sa_exc.OperationalError, sa_exc.InterfaceError, sa_exc.DisconnectionError, sa_exc.TimeoutError)):
          cls = ConnectivityError
     elif isinstance(error, sa_exc.DBAPIError) and error.connection_invalidated:
          cls = ConnectivityError
     else:
          cls = InvalidStatementError
     orig = getattr(error, "orig", None)
     return cls(operation, str(orig if orig is not None else error))


# ---------------------------------------------------------------------------
# Engine / sessions
# ---------------------------------------------------------------------------

def create_db_engine(cfg: DatabaseConfig) -> Engine:
     """
     Build the process-wide connection pool.

     SQLite URLs (tests, local experiments) keep SQLAlchemy's default pool;
     everything else gets a sized QueuePool.
     """
     url = cfg.url
     if url.startswith("sqlite"):
          return create_engine(url, echo=cfg.echo)
     return create_engine(
          url,
          poolclass=QueuePool,
          pool_size=cfg.pool_size,
          max_overflow=cfg.max_overflow,
          pool_timeout=cfg.pool_timeout,
          pool_recycle=cfg.pool_recycle,  # Recycle connections after 30 minutes by default
          pool_pre_ping=True,
          echo=cfg.echo,  # Log SQL if SQL_ECHO=true
     )


# Created once at import; connections are only opened on first use
engine = create_db_engine(get_config())

# Session factory
SessionLocal = sessionmaker(
     bind=engine,
     autocommit=False,
     autoflush=False,
     expire_on_commit=False,
)


def get_session() -> Generator[Session, None, None]:
     """
     Dependency that provides a database session.

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
     """
     Context manager for database sessions (for use outside a web framework).

     Usage:
          with get_session_context() as db:
               rows = get_all_properties(db, {"city": "Vancouver"})

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def init_db(bind: Optional[Engine] = None) -> None:
     """
     Initialize database tables.

     Creates all tables defined in the models if they don't exist.
     For production, use Alembic migrations instead.
     """
     from models import Base
     Base.metadata.create_all(bind=bind or engine)


def check_connection(bind: Optional[Engine] = None) -> bool:
     """
     Test database connectivity.

     Returns:
          bool: True if connection successful, False otherwise
     """
     try:
          with (bind or engine).connect() as conn:
               conn.execute(text("SELECT 1"))
          return True
     except sa_exc.SQLAlchemyError as e:
          logger.warning("Database connection failed: %s", e)
          return False


# ---------------------------------------------------------------------------
# Statement execution
# ---------------------------------------------------------------------------

_PLACEHOLDER = re.compile(r"\$(\d+)")


def bind_positional(statement: str, params: Sequence[Any]):
     """
     Turn a `$n`-placeholder statement into a SQLAlchemy text clause.

     `$3` becomes the named bind `:p3` carrying `params[2]`, so the same
     statement text works with every driver SQLAlchemy supports.

     Raises:
          ValueError: If a placeholder points outside `params`
     """
     used = set()

     def _named(match: "re.Match[str]") -> str:
          index = int(match.group(1))
          if not 1 <= index <= len(params):
               raise ValueError(f"Placeholder ${index} has no value ({len(params)} params)")
          used.add(index)
          return f":p{index}"

     rendered = _PLACEHOLDER.sub(_named, statement)
     binds = [bindparam(f"p{index}", params[index - 1]) for index in sorted(used)]
     return text(rendered).bindparams(*binds)


def execute(db: Union[Session, Connection], statement: str, params: Sequence[Any] = (), operation: str = "query") -> Result:
     """
     Execute a parameterized statement on the injected session.

     Raises:
          DataAccessError: Subclass matching the failure (constraint,
               connectivity, invalid statement)
     """
     clause = bind_positional(statement, list(params))
     try:
          return db.execute(clause)
     except sa_exc.SQLAlchemyError as e:
          error = translate_error(e, operation)
          logger.error("%s failed: %s", operation, error.message, extra={"operation": operation})
          raise error from e


def fetch_one(db: Union[Session, Connection], statement: str, params: Sequence[Any] = (), operation: str = "query") -> Optional[Dict[str, Any]]:
     """Execute and return the first row as a dict, or None when there are no rows."""
     row = execute(db, statement, params, operation).mappings().first()
     return dict(row) if row is not None else None


def fetch_all(db: Union[Session, Connection], statement: str, params: Sequence[Any] = (), operation: str = "query") -> List[Dict[str, Any]]:
     """Execute and return every row as a dict."""
     return [dict(row) for row in execute(db, statement, params, operation).mappings().all()]
