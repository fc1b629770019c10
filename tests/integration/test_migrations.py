"""Tests for the alembic revision that ships the schema"""
import io
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import inspect, text

from core.db import create_db_engine, create_schema

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def alembic_config(database_url):
    """Alembic config pointing at the test database"""
    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option("sqlalchemy.url", database_url)
    return config


@pytest.fixture
def migrated_engine(alembic_config, database_url):
    command.upgrade(alembic_config, "head")
    engine = create_db_engine(database_url)
    yield engine
    engine.dispose()


class TestMigrations:
    """Upgrade and downgrade of the initial revision"""

    def test_upgrade_creates_tables(self, migrated_engine):
        tables = set(inspect(migrated_engine).get_table_names())
        assert {"video_info", "video_format", "alembic_version"} <= tables

    def test_upgrade_twice_is_safe(self, alembic_config, migrated_engine):
        command.upgrade(alembic_config, "head")

        with migrated_engine.connect() as conn:
            count = conn.execute(text("""
                SELECT COUNT(*) FROM sqlite_master
                WHERE type = 'table' AND name IN ('video_info', 'video_format')
            """)).scalar()
        assert count == 2

    def test_upgrade_over_existing_schema(self, alembic_config, database_url):
        engine = create_db_engine(database_url)
        create_schema(engine)

        command.upgrade(alembic_config, "head")

        with engine.connect() as conn:
            version = conn.execute(text("SELECT version_num FROM alembic_version")).scalar()
        engine.dispose()
        assert version == "4c1e2a7f9b30"

    def test_migrated_schema_cascades(self, migrated_engine):
        with migrated_engine.begin() as conn:
            conn.execute(text("""
                INSERT INTO video_info (video_id, title, author, duration_seconds, thumbnail, audio_available)
                VALUES ('abc123', 'Test', 'Alice', '120', NULL, 1)
            """))
            conn.execute(text("""
                INSERT INTO video_format (container, width, height, fps, video_info_id)
                VALUES ('mp4', '1920', '1080', '30', 1)
            """))

        with migrated_engine.begin() as conn:
            conn.execute(text("DELETE FROM video_info WHERE id = 1"))

        with migrated_engine.connect() as conn:
            remaining = conn.execute(text("SELECT COUNT(*) FROM video_format")).scalar()
        assert remaining == 0

    def test_downgrade_drops_tables(self, alembic_config, migrated_engine):
        command.downgrade(alembic_config, "base")

        tables = set(inspect(migrated_engine).get_table_names())
        assert "video_info" not in tables
        assert "video_format" not in tables

    def test_offline_upgrade_emits_sql(self, tmp_path):
        db_path = tmp_path / "offline.db"
        output = io.StringIO()
        config = Config(output_buffer=output)
        config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
        config.set_main_option("sqlalchemy.url", f"sqlite:///{db_path}")

        command.upgrade(config, "head", sql=True)

        sql = output.getvalue()
        assert "CREATE TABLE IF NOT EXISTS video_info" in sql
        assert "CREATE TABLE IF NOT EXISTS video_format" in sql
        assert "ON DELETE CASCADE" in sql
        assert "4c1e2a7f9b30" in sql
        assert not db_path.exists()
