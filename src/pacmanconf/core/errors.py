"""
Exception types raised while reading a pacman configuration.

Every failure aborts the whole read; callers catch PacmanConfError to
handle any of them.
"""

from typing import Optional


class PacmanConfError(Exception):
    """Base class for all pacmanconf errors."""


class ConfigIOError(PacmanConfError):
    """A file could not be opened, read or decoded."""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


class ConfigSyntaxError(PacmanConfError):
    """A line could not be classified (bad section header, missing key)."""

    def __init__(self, path: str, line_no: int, line: str = "", reason: str = "syntax error"):
        self.path = path
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"{path}:{line_no}: {reason}: {line.strip()}")


class CyclicIncludeError(PacmanConfError):
    """An Include chain revisits a file that is still being parsed."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"cyclic Include of {path}")


class GlobPatternError(PacmanConfError):
    """An Include value is not a usable glob pattern."""

    def __init__(self, pattern: str, cause: str):
        self.pattern = pattern
        self.cause = cause
        super().__init__(f"invalid Include pattern '{pattern}': {cause}")


class IncludeDepthError(PacmanConfError):
    """Include nesting went deeper than the configured limit."""

    def __init__(self, path: str, max_depth: int):
        self.path = path
        self.max_depth = max_depth
        super().__init__(f"Include of {path} exceeds the maximum depth ({max_depth})")


class InvalidValueError(PacmanConfError):
    """A recognised key carried a value of the wrong type."""

    def __init__(self, path: Optional[str], line_no: int, key: str, value: str):
        self.path = path
        self.line_no = line_no
        self.key = key
        self.value = value
        super().__init__(f"{path}:{line_no}: invalid value for '{key}': '{value}'")
