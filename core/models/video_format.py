from sqlalchemy import Column, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship
from core.db import Base

VIDEO_FORMAT_TABLE = "video_format"

class VideoFormat(Base):
    """Available renditions of a downloaded video"""
    __tablename__ = VIDEO_FORMAT_TABLE

    id = Column(Integer, primary_key=True, autoincrement=True)
    container = Column(Text, nullable=False, comment="Container name (e.g., mp4)")
    width = Column(Text, nullable=False, comment="Frame width, as reported")
    height = Column(Text, nullable=False, comment="Frame height, as reported")
    fps = Column(Text, nullable=False, comment="Frame rate, as reported")
    video_info_id = Column(Integer, ForeignKey("video_info.id", ondelete="CASCADE"),
                           nullable=False, comment="Owning video")

    video_info = relationship("VideoInfo", back_populates="video_formats")

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<VideoFormat(id={self.id}, container={self.container}, video_info_id={self.video_info_id})>"
