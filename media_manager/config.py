"""
Configuration constants for the media manager.
"""

# --- File Type Definitions ---
IMAGE_EXTENSIONS = frozenset({'jpg', 'png', 'gif', 'bmp', 'tif', 'webp', 'heic', 'heif'})
VIDEO_EXTENSIONS = frozenset({'mp4', 'mov', 'mkv', 'm4v', 'avi', '3gp', 'mts'})

# Synonyms rewritten to their canonical form before classification
EXTENSION_SYNONYMS = {
    'jpeg': 'jpg',
    'jpe': 'jpg',
    'tiff': 'tif',
}

# --- Metadata Parsing ---
# Tried in order; the first layout that matches wins.
DATE_FORMATS = [
    "%Y:%m:%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y:%m:%d %H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
    # QuickTime atoms as MediaInfo reports them, e.g. "2023-06-15T14:30:00+0200"
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S%z",
]

# Marker MediaInfo puts on dates stored in UTC
UTC_MARKER = "UTC"

EXIF_DATE_TIME_ORIGINAL = 'EXIF DateTimeOriginal'
EXIF_DATE_TIME = 'Image DateTime'
EXIF_DATE_TIME_DIGITIZED = 'EXIF DateTimeDigitized'
EXIF_MAKE = 'Image Make'
EXIF_MODEL = 'Image Model'

# MediaInfo General track attributes, by priority
VIDEO_ORIGINAL_DATE_FIELDS = ["recorded_date", "encoded_date"]
VIDEO_MODIFIED_DATE_FIELDS = ["tagged_date"]
VIDEO_DIGITIZED_DATE_FIELDS = ["encoded_date"]
VIDEO_MAKE_FIELDS = ["comapplequicktimemake", "device_manufacturer"]
VIDEO_MODEL_FIELDS = ["comapplequicktimemodel", "device_model", "performer"]

# --- Organization ---
FOLDER_PATTERN = "{year}/{year}-{month:02d}"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
FILESYSTEM_MARKER = "fs"
MEDIA_FOLDERS = {
    'Image': 'Images',
    'Video': 'Videos',
    'Unknown': 'Other',
}
# Parent directories folded into the destination name
DEFAULT_PATH_LEVELS = 1

# --- Logging ---
LOG_LEVEL_ENV = "MEDIA_MANAGER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
