import logging
import re
from decimal import Decimal
from typing import Any, Dict, List, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from jobly.core.config import settings

logger = logging.getLogger(__name__)

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using them
    pool_size=10,  # Connection pool size
    max_overflow=20  # Allow up to 20 connections beyond pool_size
)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()

_POSITIONAL = re.compile(r"\$(\d+)")


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database.

    Alembic owns table creation, so this only makes sure the models are
    imported and registered on Base.metadata.

    Use "alembic upgrade head" to create/update database schema.
    """
    from jobly.models import company, job  # noqa: F401


def _bind_value(value: Any) -> Any:
    # Not every DBAPI adapts Decimal; the store casts numeric strings itself
    if isinstance(value, Decimal):
        return str(value)
    return value


def query(db: Session, sql: str, values: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    """
    Run a parameterized SQL statement and return its rows as dicts.

    Placeholders are positional (`$1`, `$2`, ...) and refer to `values` in
    order, so fragments built by `jobly.helpers.sql` can be spliced in as-is.

    Args:
        db: Database session
        sql: SQL statement with positional placeholders
        values: Parameter values, `values[0]` binds `$1`

    Returns:
        List of rows (empty if the statement returned none)
    """
    statement = _POSITIONAL.sub(lambda m: f":p{m.group(1)}", sql)
    params = {f"p{i}": _bind_value(v) for i, v in enumerate(values, start=1)}

    logger.debug("Executing SQL: %s | params=%s", " ".join(sql.split()), params)
    result = db.execute(text(statement), params)

    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]
