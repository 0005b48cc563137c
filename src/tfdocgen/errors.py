from __future__ import annotations


class TfDocGenError(Exception):
    """Base error."""


class SourceFileError(TfDocGenError):
    """Raised when a declaration file cannot be read."""


class ParserAdapterError(TfDocGenError):
    """Raised when a parser adapter cannot be used."""


class ParseError(TfDocGenError):
    """Raised when a parser rejects a declaration file."""

    def __init__(self, message: str, *, source: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


class ExtractionError(TfDocGenError):
    """Raised when a parsed document does not have the expected block layout."""


class RenderError(TfDocGenError):
    """Raised when a table cannot be rendered."""
