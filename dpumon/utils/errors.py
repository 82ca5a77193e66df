"""Custom exceptions for dpumon.

Discovery and collection never raise these; they degrade to a boolean result
and a log line. The configuration layer and the CLI raise them so callers can
handle bad config files and missing ranks explicitly.
"""


class DpumonError(Exception):
    """Base exception for all dpumon errors."""

    pass


class HardwareNotFoundError(DpumonError):
    """Raised when a command needs DPU ranks and none are present."""

    pass


class ConfigError(DpumonError):
    """Raised when configuration is invalid or a required config file is missing."""

    pass
