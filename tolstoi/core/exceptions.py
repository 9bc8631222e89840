"""
tolstoi - Custom Exceptions

Namespaced exceptions; none of them shadow builtins such as ConnectionError
or FileNotFoundError.
"""


class TolstoiError(Exception):
    """Base exception for tolstoi.

    All custom exceptions inherit from this base class.
    """
    pass


class ConfigurationError(TolstoiError):
    """Raised when configuration is invalid or missing.

    Used for missing command line arguments and invalid settings.
    """
    pass


class InputReadError(TolstoiError):
    """Raised when one of the input files cannot be read.

    Attributes:
        label: Which input failed ("book", "peace terms", "war terms").
        path: The path that was tried.
    """

    def __init__(self, label: str, path: str, reason: str) -> None:
        super().__init__(f"Couldn't read {label} file {path}: {reason}")
        self.label = label
        self.path = path
