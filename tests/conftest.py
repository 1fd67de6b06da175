import sys
from pathlib import Path

import pytest


# Ensure tests can import project packages regardless of how pytest is invoked.
ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


@pytest.fixture
def playlist_file(tmp_path):
    """Factory writing playlist text to a file under ``tmp_path``."""

    def _write(text: str, name: str = "playlist.m3u") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
