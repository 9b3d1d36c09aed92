"""Error types for the weekly to-do tracker.

Every error is terminal: components raise, and only main.main() turns a
TrackerError into a diagnostic on stderr plus a non-zero exit code.
"""


class TrackerError(RuntimeError):
    exit_code: int = 1


class ConfigError(TrackerError):
    """Required environment configuration is missing."""


class ClockError(TrackerError):
    """System clock could not be read (e.g. set before the Unix epoch)."""


class StorageError(TrackerError):
    """State file could not be opened, read or written."""


class FormatError(TrackerError):
    """State file contents do not match the expected structure."""


class InputError(TrackerError):
    """Console input was closed or unusable."""


class AlreadyRecordedError(TrackerError):
    def __init__(self, message: str = "Already entered completion info for today"):
        super().__init__(message)
