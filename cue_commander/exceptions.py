"""Exception hierarchy for cue-commander."""

from pathlib import Path


class CueCommanderError(Exception):
    """Base exception for all cue-commander errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all cue-commander errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(CueCommanderError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Cue Sheet Errors
class CueParseError(CueCommanderError):
    """A cue sheet line could not be tokenized or applied."""

    pass


class CueSyntaxError(CueParseError):
    """Malformed directive, or a cue-sheet ordering/cardinality rule was broken."""

    def __init__(self, content: str, reason: str) -> None:
        self.content = content
        self.reason = reason
        super().__init__(f"SyntaxError: {content} : {reason}")


class UnexpectedTokenError(CueParseError):
    """Unrecognized directive keyword."""

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        super().__init__(f"SyntaxError: {keyword} : unexpected token")


class InvalidArgumentError(CueParseError):
    """A directive argument is missing or has the wrong shape."""

    pass


class InvalidTimestampError(InvalidArgumentError):
    """Timestamp does not match MM:SS:FF or is out of range."""

    def __init__(self, value: str, reason: str = "expected MM:SS:FF") -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid timestamp '{value}': {reason}")


class MissingArgumentError(InvalidArgumentError):
    """Directive keyword given without its required argument."""

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        super().__init__(f"SyntaxError: {keyword} : missing arguments")


class InvalidIdError(InvalidArgumentError):
    """Track/index id or catalog number is malformed or out of range."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid id '{value}': {reason}")


class CueIoError(CueParseError):
    """Reading the cue sheet lines failed."""

    def __init__(self, reason: str, line: int | None = None) -> None:
        self.reason = reason
        self.line = line
        if line is None:
            super().__init__(f"IoError: {reason}")
        else:
            super().__init__(f"IoError: {reason} at line {line}")


class CueLineError(CueParseError):
    """A cue sheet error positioned at a 1-based line number.

    The innermost error is available as ``error`` (and as ``__cause__``).
    """

    def __init__(self, error: CueParseError, line: int) -> None:
        self.error = error
        self.line = line
        super().__init__(f"{error} at line {line}")
