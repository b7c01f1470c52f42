"""
errors.py
Exception types raised by the merged source and page routing.
"""


class MergedSourceError(Exception):
    """Base class for errors raised by this package."""


class CorruptedMergeError(MergedSourceError):
    """The merged manga has no usable references."""


class UnsupportedHostError(MergedSourceError):
    """An externally hosted chapter names a host with no registered handler."""

    def __init__(self, scanlator):
        self.scanlator = scanlator
        super().__init__(f"{scanlator} not supported")


class SourceNotInstalledError(MergedSourceError):
    """Raised by stub sources when a real operation is attempted."""

    def __init__(self, source_id):
        self.source_id = source_id
        super().__init__(f"Source not installed: {source_id}")


class ConfigurationError(MergedSourceError):
    """The host route table is invalid."""


class UnsupportedOperationError(MergedSourceError):
    """The merged source has no catalogue of its own to serve this call."""
