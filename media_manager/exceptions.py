"""
Exception hierarchy for the media manager.

Only FileStatError, DirectoryReadError and InputPathNotFoundError end an
import with a failure. MetadataUnreadableError is recovered while naming a
file, and ImportCancelled is the expected outcome of an operator interrupt.
"""


class MediaManagerError(Exception):
    """Base exception for all media manager errors."""
    pass


class MetadataUnreadableError(MediaManagerError):
    """Raised when a file holds no metadata container that can be parsed."""
    pass


class FileStatError(MediaManagerError):
    """Raised when filesystem metadata for a file cannot be read."""

    def __init__(self, path, reason):
        super().__init__(f"Cannot stat {path}: {reason}")
        self.path = path


class DirectoryReadError(MediaManagerError):
    """Raised when a directory cannot be listed during the walk."""

    def __init__(self, path, reason):
        super().__init__(f"Cannot read directory {path}: {reason}")
        self.path = path


class InputPathNotFoundError(MediaManagerError):
    """Raised when the import source does not exist."""

    def __init__(self, path):
        super().__init__(f"Input path {path} does not exist")
        self.path = path


class ImportCancelled(MediaManagerError):
    """Raised by the walker once cancellation has been requested."""
    pass
