"""Common test fixtures for all test modules"""
import pytest
from sqlalchemy.orm import sessionmaker

from core.db import create_db_engine, create_schema


@pytest.fixture
def database_url(tmp_path):
    """URL of a fresh SQLite file for the test"""
    return f"sqlite:///{tmp_path / 'history.db'}"


@pytest.fixture
def db_engine(database_url):
    """Engine with the video history schema applied"""
    engine = create_db_engine(database_url)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(db_engine):
    """Session bound to the test engine"""
    TestSession = sessionmaker(bind=db_engine, autoflush=False)
    with TestSession() as s:
        yield s


@pytest.fixture
def sample_videos():
    """Three downloaded videos with two renditions each"""
    return [
        {
            "video_id": f"id{n}",
            "title": f"Video {n}",
            "author": f"Author {n}",
            "duration_seconds": str(n),
            "thumbnail": None,
            "audio_available": n % 2 == 1,
            "formats": [
                {"container": "webm", "width": "640", "height": "480", "fps": "30"},
                {"container": "mp4", "width": "1280", "height": "720", "fps": "60"},
            ],
        }
        for n in (1, 2, 3)
    ]
