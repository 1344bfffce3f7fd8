"""Custom exception hierarchy."""


class DupScanError(Exception):
    """Base exception for all dupscan errors."""


class InvalidRootError(DupScanError):
    """Scan root does not exist or is not a directory."""


class ConfigError(DupScanError):
    """Configuration error."""
