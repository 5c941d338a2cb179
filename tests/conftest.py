import os
from datetime import datetime
from pathlib import Path

import pytest

from media_manager.cancellation import CancellationToken
from media_manager.exceptions import MetadataUnreadableError
from media_manager.models import MetadataBundle

# 2022-08-01 09:15:00 UTC
FIXED_MTIME = 1659345300


class StaticReader:
    """MetadataReader stand-in: returns one bundle for every file, or fails."""
    def __init__(self, bundle=None):
        self.bundle = bundle
        self.calls = []

    def read(self, path):
        self.calls.append(path)
        if self.bundle is None:
            raise MetadataUnreadableError(f"No EXIF data in {path}")
        return self.bundle


def make_file(path: Path, content: str = "data", mtime: int = FIXED_MTIME) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    os.utime(path, (mtime, mtime))
    return path


def mtime_stamp(mtime: int = FIXED_MTIME) -> str:
    return datetime.fromtimestamp(mtime).strftime("%Y%m%d_%H%M%S")


@pytest.fixture
def token():
    return CancellationToken()


@pytest.fixture
def unreadable_reader():
    return StaticReader()


@pytest.fixture
def capture_reader():
    return StaticReader(MetadataBundle(
        date_time_original="2023:06:15 14:30:00",
        camera_make="Canon",
        camera_model="EOS R5",
    ))
