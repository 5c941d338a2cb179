import logging
import re
from collections import defaultdict
from pathlib import Path
from typing import Optional

from .. import config
from ..exceptions import MetadataUnreadableError
from ..metadata.extract import MetadataReader
from ..metadata.timestamps import TimestampResolver
from ..models import DestinationName, MediaType, PathContext, ResolvedTimestamp, TimestampSource
from ..scanning.classify import get_media_type, normalize_extension
from ..scanning.paths import extract_path_components

_UNSAFE_CHARS = re.compile(r'[^\w.-]+')


class NameBuilder:
    """
    Derives the destination of a file inside the output tree:

        <MediaFolder>/<YYYY>/<YYYY-MM>/<YYYYMMDD_HHMMSS>[_fs]_<parents>_<stem>.<ext>

    "_fs" marks names keyed by the file modification time rather than the
    capture time. Names are unique per folder for the lifetime of the builder
    and never point at a file that already exists under the output root.
    """
    def __init__(self,
                 output_root: Path,
                 reader: Optional[MetadataReader] = None,
                 resolver: Optional[TimestampResolver] = None,
                 levels: int = config.DEFAULT_PATH_LEVELS):
        self.output_root = output_root
        self.reader = reader or MetadataReader()
        self.resolver = resolver or TimestampResolver()
        self.levels = levels
        # Cache used names to prevent collisions within a single run
        self.used_names = defaultdict(set)

    def build(self, path: Path, media_type: Optional[MediaType] = None) -> DestinationName:
        """
        Raises FileStatError if the file cannot be stat-ed. Unreadable
        metadata is not an error: the name falls back to the modification time.
        """
        ext = normalize_extension(path.suffix)
        if media_type is None:
            media_type = get_media_type(ext)

        try:
            bundle = self.reader.read(path)
        except MetadataUnreadableError as e:
            logging.warning(f"{e}; using file modification time")
            bundle = None

        resolved = self.resolver.resolve(path, bundle)
        context = extract_path_components(path, self.levels)

        dt = resolved.value
        folder = Path(config.MEDIA_FOLDERS[media_type.value]) / config.FOLDER_PATTERN.format(year=dt.year, month=dt.month)
        stem = self._compose_stem(resolved, context)
        suffix = f".{ext}" if ext else ""

        filename = self._resolve_collision(folder, stem, suffix)
        return DestinationName(folder, filename, resolved, media_type)

    def _compose_stem(self, resolved: ResolvedTimestamp, context: PathContext) -> str:
        stamp = resolved.value.strftime(config.TIMESTAMP_FORMAT)
        if resolved.source == TimestampSource.FROM_FILESYSTEM:
            stamp = f"{stamp}_{config.FILESYSTEM_MARKER}"

        pieces = [
            stamp,
            _sanitize("-".join(context.segments)),
            _sanitize(Path(context.filename).stem),
        ]
        return "_".join(p for p in pieces if p)

    def _resolve_collision(self, folder: Path, stem: str, suffix: str) -> str:
        """Ensures filename is unique in the destination folder."""
        candidate = f"{stem}{suffix}"
        counter = 1

        while candidate in self.used_names[folder] or (self.output_root / folder / candidate).exists():
            candidate = f"{stem}_{counter}{suffix}"
            counter += 1

        self.used_names[folder].add(candidate)
        return candidate


def _sanitize(text: str) -> str:
    return _UNSAFE_CHARS.sub('_', text).strip('._-')
