from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple


class MediaType(Enum):
    IMAGE = 'Image'
    VIDEO = 'Video'
    UNKNOWN = 'Unknown'

    def __str__(self) -> str:
        return self.value


class TimestampSource(Enum):
    FROM_METADATA = 'from_metadata'
    FROM_FILESYSTEM = 'from_filesystem'


@dataclass(frozen=True)
class MetadataBundle:
    """
    Raw fields read from a file's embedded metadata.
    Dates are kept as the strings the container holds; parsing happens later.
    """
    date_time_original: Optional[str] = None
    date_time: Optional[str] = None
    date_time_digitized: Optional[str] = None
    camera_make: Optional[str] = None
    camera_model: Optional[str] = None


@dataclass(frozen=True)
class ResolvedTimestamp:
    value: datetime         # timezone-aware, local
    source: TimestampSource


@dataclass(frozen=True)
class PathContext:
    segments: Tuple[str, ...]   # parent-to-child
    filename: str


@dataclass(frozen=True)
class DestinationName:
    """
    Where a file lands relative to the output root.
    """
    relative_dir: Path
    filename: str
    timestamp: ResolvedTimestamp
    media_type: MediaType

    @property
    def relative_path(self) -> Path:
        return self.relative_dir / self.filename


@dataclass
class ImportMapping:
    source: Path
    destination: Path


@dataclass
class ImportResult:
    input_root: Path
    output_root: Path
    mappings: List[ImportMapping] = field(default_factory=list)
    cancelled: bool = False

    @property
    def files_processed(self) -> int:
        return len(self.mappings)
