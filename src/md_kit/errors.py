# src/md_kit/errors.py


class MdKitError(Exception):
    """Base class for every error raised by md-kit."""


class ParseError(MdKitError):
    """Malformed Markdown source, e.g. an unterminated code fence."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class UnsupportedFormatError(MdKitError, ValueError):
    """Requested render target is not implemented."""

    def __init__(self, target_format: object) -> None:
        self.target_format = target_format
        super().__init__(f"Unsupported target format: {target_format!r}")
