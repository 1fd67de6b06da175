"""Playlist file loading, export and merge helpers."""

from playlist.export import write_m3u
from playlist.load import load_playlist
from playlist.merge import merge_playlists, write_merged_m3u

__all__ = ["load_playlist", "merge_playlists", "write_m3u", "write_merged_m3u"]
