#!/usr/bin/env python3
import sys
import logging
import argparse
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.schema import CreateTable

# Add project root to path
sys.path.insert(0, ".")

from core.db import Base, db_settings, create_db_engine, create_schema, mask_database_url
from core.errors import SchemaError
from core.logging import setup_json_logging
from core.models import VideoInfo, VideoFormat

logger = logging.getLogger(__name__)

def render_ddl(database_url: str) -> str:
    """Render CREATE TABLE statements for the dialect of database_url"""
    dialect = make_url(database_url).get_dialect()()
    statements = [
        str(CreateTable(table, if_not_exists=True).compile(dialect=dialect)).strip() + ";"
        for table in Base.metadata.sorted_tables
    ]
    return "\n\n".join(statements)

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Create the video history tables")
    parser.add_argument("--database-url", default=None,
                        help="SQLAlchemy URL (default: DATABASE_URL setting)")
    parser.add_argument("--dry-run", action="store_true", help="Print DDL, don't touch the database")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level (default: INFO)")

    args = parser.parse_args(argv)

    setup_json_logging(getattr(logging, args.log_level))

    database_url = args.database_url or db_settings.database_url
    trace_id = f"init_schema_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}"

    try:
        masked_url = mask_database_url(database_url)

        if args.dry_run:
            logger.info("Dry run mode - no database changes", extra={
                "trace_id": trace_id,
                "database_url": masked_url
            })
            print(render_ddl(database_url))
            return 0

        db_engine = create_db_engine(database_url, echo=db_settings.database_echo)
    except ArgumentError as e:
        logger.error("Invalid database URL", extra={
            "trace_id": trace_id,
            "error_code": "INVALID_DATABASE_URL",
            "error_message": str(e)
        })
        return 1

    try:
        tables = create_schema(db_engine)
    except SchemaError as e:
        logger.error("Schema initialization failed", extra={
            "trace_id": trace_id,
            "error_code": e.code,
            "error_message": e.message
        })
        return 1
    finally:
        db_engine.dispose()

    logger.info("Schema initialization completed", extra={
        "trace_id": trace_id,
        "database_url": masked_url,
        "tables": tables
    })
    return 0

if __name__ == "__main__":
    sys.exit(main())
