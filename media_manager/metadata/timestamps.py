import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..exceptions import FileStatError
from ..models import MetadataBundle, ResolvedTimestamp, TimestampSource
from .dates import parse_metadata_date


class TimestampResolver:
    """
    Picks the creation time for a file.

    Precedence:
      1. DateTimeOriginal from embedded metadata, when present and parseable.
      2. Filesystem modification time.

    The file is stat-ed on every call, so a vanished or unreadable file fails
    even when its metadata was already read.
    """

    def resolve(self, path: Path, bundle: Optional[MetadataBundle]) -> ResolvedTimestamp:
        """
        `bundle` is None when the metadata could not be read.
        Raises FileStatError if the file cannot be stat-ed.
        """
        try:
            mtime = path.stat().st_mtime
        except OSError as e:
            raise FileStatError(path, e.strerror or e) from e

        if bundle is not None:
            captured = parse_metadata_date(bundle.date_time_original)
            if captured:
                return ResolvedTimestamp(captured, TimestampSource.FROM_METADATA)
            if bundle.date_time_original:
                logging.debug(f"Ignoring unparseable capture date {bundle.date_time_original!r} in {path}")

        modified = datetime.fromtimestamp(mtime, tz=timezone.utc).astimezone()
        return ResolvedTimestamp(modified, TimestampSource.FROM_FILESYSTEM)
