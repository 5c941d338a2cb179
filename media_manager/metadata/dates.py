"""
Parsing of the date strings found in embedded metadata.
"""
from datetime import datetime, timezone
from typing import Optional

from .. import config


def parse_metadata_date(text: Optional[str]) -> Optional[datetime]:
    """
    Parses a metadata date string into a timezone-aware local datetime.

    Layouts in config.DATE_FORMATS are tried in order and the first match wins.
    Strings carrying a UTC marker (MediaInfo writes "UTC 2023-01-01 12:00:00")
    or an explicit offset are converted to local time; everything else is
    local wall clock time.
    Returns None for empty, unparseable or out-of-range values.
    """
    if not text:
        return None

    clean = str(text).strip().strip('\x00')
    is_utc = config.UTC_MARKER in clean
    if is_utc:
        clean = clean.replace(config.UTC_MARKER, "").strip()

    for fmt in config.DATE_FORMATS:
        try:
            naive = datetime.strptime(clean, fmt)
        except ValueError:
            continue

        if naive.tzinfo is not None or is_utc:
            # Explicit offset or UTC marker: a fixed instant, shown in local time
            aware = naive if naive.tzinfo is not None else naive.replace(tzinfo=timezone.utc)
            try:
                return aware.astimezone()
            except (OverflowError, OSError):
                return None
        return localize(naive)

    return None


def localize(naive: datetime) -> Optional[datetime]:
    """
    Attaches the local timezone to a wall clock value.

    Returns None when the value is not exactly one local instant: inside a
    DST gap (never happened) or a DST fold (happened twice).
    """
    try:
        early = naive.replace(fold=0).astimezone()
        late = naive.replace(fold=1).astimezone()
    except (OverflowError, OSError, ValueError):
        return None

    if early.utcoffset() != late.utcoffset():
        return None
    return early
