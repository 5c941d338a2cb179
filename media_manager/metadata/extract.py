import logging
from pathlib import Path
from typing import Any, List, Optional

import exifread
from pymediainfo import MediaInfo

from .. import config
from ..exceptions import MetadataUnreadableError
from ..models import MediaType, MetadataBundle
from ..scanning.classify import get_media_type, normalize_extension
from .dates import parse_metadata_date


class MetadataReader:
    """
    Reads the embedded metadata container of a media file.

    Strategies:
      - Video: 'pymediainfo', General track.
      - Everything else: 'exifread' (JPEG, TIFF, PNG, WebP, HEIC).

    Raises MetadataUnreadableError when there is no container to read; that is
    the normal outcome for non-media files.
    """

    def read(self, path: Path) -> MetadataBundle:
        media_type = get_media_type(normalize_extension(path.suffix))
        if media_type == MediaType.VIDEO:
            return self._read_video(path)
        return self._read_exif(path)

    def _read_exif(self, path: Path) -> MetadataBundle:
        try:
            with path.open('rb') as f:
                # details=False skips MakerNotes and thumbnails
                tags = exifread.process_file(f, details=False)
        except Exception as e:
            raise MetadataUnreadableError(f"ExifRead failed for {path}: {e}") from e

        if not tags:
            raise MetadataUnreadableError(f"No EXIF data in {path}")

        return MetadataBundle(
            date_time_original=self._tag_text(tags, config.EXIF_DATE_TIME_ORIGINAL),
            date_time=self._tag_text(tags, config.EXIF_DATE_TIME),
            date_time_digitized=self._tag_text(tags, config.EXIF_DATE_TIME_DIGITIZED),
            camera_make=self._tag_text(tags, config.EXIF_MAKE),
            camera_model=self._tag_text(tags, config.EXIF_MODEL),
        )

    def _read_video(self, path: Path) -> MetadataBundle:
        try:
            mi = MediaInfo.parse(str(path))
        except Exception as e:
            raise MetadataUnreadableError(f"MediaInfo failed for {path}: {e}") from e

        general = next((t for t in mi.tracks if t.track_type == "General"), None)
        # MediaInfo reports a General track for any file; no format means no container
        if general is None or not getattr(general, "format", None):
            raise MetadataUnreadableError(f"No media container in {path}")

        logging.debug(f"MediaInfo container for {path}: {general.format}")
        return MetadataBundle(
            date_time_original=self._first_date(general, config.VIDEO_ORIGINAL_DATE_FIELDS),
            date_time=self._first_date(general, config.VIDEO_MODIFIED_DATE_FIELDS),
            date_time_digitized=self._first_date(general, config.VIDEO_DIGITIZED_DATE_FIELDS),
            camera_make=self._first_attr(general, config.VIDEO_MAKE_FIELDS),
            camera_model=self._first_attr(general, config.VIDEO_MODEL_FIELDS),
        )

    @staticmethod
    def _tag_text(tags: dict, name: str) -> Optional[str]:
        if name not in tags:
            return None
        value = str(tags[name]).strip(' \x00')
        return value or None

    @staticmethod
    def _first_attr(track: Any, fields: List[str]) -> Optional[str]:
        for field in fields:
            val = getattr(track, field, None)
            if val:
                return str(val).strip()
        return None

    @classmethod
    def _first_date(cls, track: Any, fields: List[str]) -> Optional[str]:
        """First candidate that parses as a date, else the first non-empty one."""
        for field in fields:
            val = cls._first_attr(track, [field])
            if val and parse_metadata_date(val):
                return val
        return cls._first_attr(track, fields)
