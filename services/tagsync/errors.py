"""
Error types for tagsync

Per-file errors (ParseError) and resolution errors (ResolveError) are
recovered where they occur. The rest end the run.
"""


class TagSyncError(Exception):
    """Base class for every error raised by tagsync."""


class ConfigError(TagSyncError):
    """A required setting is missing or invalid."""


class ParseError(TagSyncError):
    """A note's front matter is missing or malformed."""


class ResolveError(TagSyncError):
    """The sink could not provide the latest recorded point."""


class EmptyExpansionError(TagSyncError):
    """Eligible notes were found but none produced a point."""


class SinkWriteError(TagSyncError):
    """The batch write to the sink failed."""
