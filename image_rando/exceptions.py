"""
Custom exception hierarchy for image-rando.

Every failure in a run is raised as one of these and terminates the run;
the CLI turns them into a single error line and a non-zero exit status.
"""
from pathlib import Path


class ImageRandoError(Exception):
    """Base exception for all image-rando errors."""
    pass


class ConfigError(ImageRandoError):
    """Raised when a limit or numeric option is invalid."""
    pass


class FileAccessError(ImageRandoError):
    """Raised when the source or destination cannot be read or prepared."""
    pass


class SourceDirError(FileAccessError):
    """Raised when the source folder is missing or not a directory."""
    pass


class DestinationDirError(FileAccessError):
    """Raised when the destination cannot be created or is not empty."""
    pass


class NoCandidatesError(FileAccessError):
    """Raised when the source folder holds no JPEG files."""
    pass


class OversizedFileError(ImageRandoError):
    """Raised when a single file is larger than the per-folder byte ceiling."""

    def __init__(self, path: Path, size: int, max_bytes: int):
        self.path = path
        self.size = size
        self.max_bytes = max_bytes
        super().__init__(f"file is larger than max-bytes ({size} > {max_bytes}): {path}")


class CopyCollisionError(ImageRandoError):
    """Raised when a destination file already exists."""
    pass


class CopyError(ImageRandoError):
    """Raised when a file copy or folder creation fails."""
    pass
