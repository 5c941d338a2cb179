"""
Extension based media classification.
"""
from .. import config
from ..models import MediaType


def normalize_extension(ext: str) -> str:
    """
    Lower-cases an extension and rewrites known synonyms ("JPEG" -> "jpg").
    Accepts both "jpg" and ".jpg".
    """
    extension = ext.lower().lstrip('.')
    return config.EXTENSION_SYNONYMS.get(extension, extension)


def get_media_type(extension: str) -> MediaType:
    """Expects a normalized extension."""
    if extension in config.IMAGE_EXTENSIONS:
        return MediaType.IMAGE
    if extension in config.VIDEO_EXTENSIONS:
        return MediaType.VIDEO
    return MediaType.UNKNOWN
