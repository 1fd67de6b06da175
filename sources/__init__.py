"""Line sources that feed playlist text to the parser."""

from sources.base import LineSource
from sources.dispatcher import open_source
from sources.file_source import FileLineSource
from sources.http_source import HttpLineSource

__all__ = ["FileLineSource", "HttpLineSource", "LineSource", "open_source"]
