import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings
from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base

from core.errors import ForeignKeyEnforcementError, SchemaInitError

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_FILE = "history.db"


def default_database_path() -> Path:
    """Default history database file, next to the running program"""
    return Path(sys.argv[0] or ".").resolve().parent / DEFAULT_DATABASE_FILE


class DatabaseSettings(BaseSettings):
    """Database configuration from environment"""
    database_url: str = Field(
        default_factory=lambda: f"sqlite:///{default_database_path()}"
    )
    database_echo: bool = False

    class Config:
        env_file = ".env"
        extra = "ignore"


def mask_database_url(database_url: str) -> str:
    """Render a database URL with its password hidden, for logs"""
    return make_url(database_url).render_as_string(hide_password=True)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ships with foreign key checks off, per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, echo: bool = False, **engine_kwargs) -> Engine:
    """
    Create a SQLAlchemy engine with referential integrity enforced.

    SQLite connections get ``PRAGMA foreign_keys=ON`` as soon as they are
    opened, so the cascading delete on ``video_format`` holds for every
    session drawn from the engine.

    Args:
        database_url: SQLAlchemy database URL
        echo: Log emitted SQL
        **engine_kwargs: Passed through to ``create_engine``

    Returns:
        Engine: Configured engine (no connection is opened yet)
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        db_engine = create_engine(url, echo=echo, **engine_kwargs)
        event.listen(db_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine_kwargs.setdefault("pool_pre_ping", True)
        engine_kwargs.setdefault("pool_recycle", 300)
        db_engine = create_engine(url, echo=echo, **engine_kwargs)

    return db_engine


def foreign_keys_enabled(db_engine: Engine) -> bool:
    """Check that a fresh connection enforces foreign keys"""
    if db_engine.dialect.name != "sqlite":
        return True

    with db_engine.connect() as connection:
        return bool(connection.execute(text("PRAGMA foreign_keys")).scalar())


def create_schema(db_engine: Engine) -> List[str]:
    """
    Create the video history tables if they do not exist yet.

    Safe to call any number of times against the same store: existing
    tables and their rows are left untouched.

    Args:
        db_engine: Engine pointing at the target store

    Returns:
        List[str]: Table names present after creation

    Raises:
        ForeignKeyEnforcementError: Connections do not enforce foreign keys
        SchemaInitError: The store could not be opened or rejected the DDL
    """
    import core.models  # noqa: F401  registers tables on Base.metadata

    start_time = time.time()
    database_url = mask_database_url(str(db_engine.url))

    try:
        if not foreign_keys_enabled(db_engine):
            logger.error("Foreign key enforcement is disabled", extra={
                "database_url": database_url
            })
            raise ForeignKeyEnforcementError(
                f"Foreign keys are not enforced on {database_url}"
            )

        Base.metadata.create_all(bind=db_engine, checkfirst=True)
        tables = sorted(inspect(db_engine).get_table_names())

    except SQLAlchemyError as e:
        logger.error("Schema creation failed", extra={
            "database_url": database_url,
            "error_type": type(e).__name__,
            "error_message": str(e)
        })
        raise SchemaInitError(f"Schema creation failed: {e}") from e

    latency_ms = int((time.time() - start_time) * 1000)
    logger.info("Schema ready", extra={
        "database_url": database_url,
        "tables": tables,
        "latency_ms": latency_ms
    })

    return tables


def init_database(path: Optional[Union[str, Path]] = None, echo: bool = False) -> Engine:
    """
    Open the SQLite history database and apply the schema.

    The file is created if it does not exist. Without ``path`` the file
    from ``default_database_path()`` is used.

    Returns:
        Engine: Engine bound to the initialized database
    """
    db_path = Path(path) if path is not None else default_database_path()
    db_engine = create_db_engine(f"sqlite:///{db_path}", echo=echo)
    create_schema(db_engine)
    return db_engine


# Initialize settings
db_settings = DatabaseSettings()

# Base class for models
Base = declarative_base()
