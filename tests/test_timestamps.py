import os
import time
from datetime import datetime, timezone

import pytest

from media_manager.exceptions import FileStatError
from media_manager.metadata.dates import parse_metadata_date
from media_manager.metadata.timestamps import TimestampResolver
from media_manager.models import MetadataBundle, TimestampSource

from conftest import FIXED_MTIME, make_file


@pytest.fixture
def dst_timezone():
    """US Eastern rules without relying on the system tz database."""
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "EST5EDT,M3.2.0,M11.1.0"
    time.tzset()
    try:
        yield
    finally:
        if previous is None:
            del os.environ["TZ"]
        else:
            os.environ["TZ"] = previous
        time.tzset()


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2023:06:15 14:30:00", datetime(2023, 6, 15, 14, 30, 0)),
        ("2023-06-15 14:30:00", datetime(2023, 6, 15, 14, 30, 0)),
        ("2023:06:15 14:30:00.250", datetime(2023, 6, 15, 14, 30, 0, 250000)),
        ("  2023:06:15 14:30:00\x00", datetime(2023, 6, 15, 14, 30, 0)),
    ],
)
def test_parse_supported_layouts_keep_wall_clock(text, expected):
    dt = parse_metadata_date(text)
    assert dt is not None
    assert dt.tzinfo is not None
    assert dt.replace(tzinfo=None) == expected


@pytest.mark.parametrize(
    "text",
    [None, "", "not-a-date", "0000:00:00 00:00:00", "2023:13:45 10:00:00", "2023:06:15"],
)
def test_parse_rejects_bad_values(text):
    assert parse_metadata_date(text) is None


def test_parse_utc_marker_converts_to_local():
    dt = parse_metadata_date("UTC 2023-01-01 12:00:00")
    assert dt == datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert dt.utcoffset() == dt.astimezone().utcoffset()


@pytest.mark.skipif(not hasattr(time, "tzset"), reason="needs time.tzset")
def test_parse_rejects_times_in_dst_gap(dst_timezone):
    assert parse_metadata_date("2023:03:12 02:30:00") is None
    assert parse_metadata_date("2023:03:12 03:30:00") is not None


@pytest.mark.skipif(not hasattr(time, "tzset"), reason="needs time.tzset")
def test_parse_rejects_ambiguous_times(dst_timezone):
    assert parse_metadata_date("2023:11:05 01:30:00") is None


def test_resolve_prefers_capture_time(tmp_path):
    f = make_file(tmp_path / "a.jpg")
    bundle = MetadataBundle(date_time_original="2023:06:15 14:30:00", date_time="2024:01:01 00:00:00")

    resolved = TimestampResolver().resolve(f, bundle)

    assert resolved.source == TimestampSource.FROM_METADATA
    assert resolved.value.replace(tzinfo=None) == datetime(2023, 6, 15, 14, 30)


@pytest.mark.parametrize(
    "bundle",
    [
        None,
        MetadataBundle(),
        MetadataBundle(date_time_original="not-a-date"),
        # Only the capture time counts; the other dates are informational
        MetadataBundle(date_time="2024:01:01 00:00:00", date_time_digitized="2024:01:01 00:00:00"),
    ],
)
def test_resolve_falls_back_to_mtime(tmp_path, bundle):
    f = make_file(tmp_path / "a.jpg")

    resolved = TimestampResolver().resolve(f, bundle)

    assert resolved.source == TimestampSource.FROM_FILESYSTEM
    assert resolved.value.timestamp() == FIXED_MTIME


def test_resolve_missing_file_raises_stat_error(tmp_path):
    missing = tmp_path / "gone.jpg"
    bundle = MetadataBundle(date_time_original="2023:06:15 14:30:00")

    with pytest.raises(FileStatError) as excinfo:
        TimestampResolver().resolve(missing, bundle)

    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


@pytest.mark.parametrize("text", ["2023-06-15T14:30:00+0200", "2023-06-15 14:30:00+02:00"])
def test_parse_explicit_offset_converts_to_local(text):
    dt = parse_metadata_date(text)
    assert dt == datetime(2023, 6, 15, 12, 30, tzinfo=timezone.utc)
    assert dt.utcoffset() == dt.astimezone().utcoffset()
