from sqlalchemy import Column, Integer, Text, Boolean
from sqlalchemy.orm import relationship
from core.db import Base

VIDEO_INFO_TABLE = "video_info"

class VideoInfo(Base):
    """Downloaded video metadata table"""
    __tablename__ = VIDEO_INFO_TABLE

    id = Column(Integer, primary_key=True, autoincrement=True)
    video_id = Column(Text, nullable=False, comment="Source platform video ID")
    title = Column(Text, nullable=False, comment="Video title")
    author = Column(Text, nullable=False, comment="Uploader name")
    duration_seconds = Column(Text, nullable=False, comment="Length in seconds, as reported")
    thumbnail = Column(Text, nullable=True, comment="Thumbnail URL or path")
    audio_available = Column(Boolean, nullable=False, comment="Has an audio track")

    # Children are removed by the ON DELETE CASCADE on video_format
    video_formats = relationship(
        "VideoFormat",
        back_populates="video_info",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="VideoFormat.id"
    )

    # Emit AUTOINCREMENT on SQLite so ids are never reused
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<VideoInfo(id={self.id}, video_id={self.video_id})>"
