from __future__ import annotations


class ACOError(Exception):
    """Base class for errors raised by acotsp."""


class ConfigurationError(ACOError, ValueError):
    """Invalid solver configuration or unusable city set."""


class ProblemFormatError(ACOError, ValueError):
    """A problem file row could not be parsed."""

    def __init__(self, path, line_no: int, message: str):
        super().__init__(f"{path}:{line_no}: {message}")
        self.path = path
        self.line_no = line_no
