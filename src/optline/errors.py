"""Custom exception hierarchy and error messages for optline."""

INVALID_ARGUMENT = "Invalid argument: {token}"
INVALID_HELP_TARGET = "Invalid flag/option: {token}"
HELP_MISUSE_UP_TOP = "Invalid usage of help flag up top"
HELP_MISUSE = "Invalid usage of help flag"


class OptlineError(Exception):
    """Base exception for optline failures."""


class ConfigError(ValueError, OptlineError):
    """Option registration or parser definition errors."""


class StartupValidationError(OptlineError):
    """Command-line usage errors for the optline tool itself."""


class ArgumentError(ValueError):
    """Raised while matching tokens; converted to an error outcome by the parser."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @classmethod
    def invalid(cls, token: str) -> "ArgumentError":
        return cls(INVALID_ARGUMENT.format(token=token))
