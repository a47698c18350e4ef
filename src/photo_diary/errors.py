"""Exception types raised by photo-diary components."""


class PhotoDiaryError(Exception):
    """Base class for every fatal photo-diary condition."""


class ConfigError(PhotoDiaryError):
    """Settings file missing, unreadable or malformed."""


class ScanError(PhotoDiaryError):
    """Source directory could not be listed."""


class DiaryError(PhotoDiaryError):
    """Diary document could not be opened or written."""


class RelocationError(PhotoDiaryError):
    """A photo could not be copied to the target or removed from the source."""
