"""Core database models"""
from .video_info import VideoInfo, VIDEO_INFO_TABLE
from .video_format import VideoFormat, VIDEO_FORMAT_TABLE

__all__ = ["VideoInfo", "VideoFormat", "VIDEO_INFO_TABLE", "VIDEO_FORMAT_TABLE"]
