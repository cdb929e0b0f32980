"""
Error types for makegl.

I/O failures are not wrapped: ``OSError`` propagates unchanged so the
caller sees the real cause.
"""

from __future__ import annotations

from typing import Optional


class MakeGlError(Exception):
    """Base exception for all makegl errors."""


class ConfigError(MakeGlError):
    """Invalid configuration (unknown target, repeated document, ...)."""


class DocumentDecodeError(MakeGlError):
    """A page is not valid text in the configured encoding."""

    def __init__(self, document: str, after_line: int, encoding: str, reason: str):
        self.document = document
        self.after_line = after_line
        self.encoding = encoding
        super().__init__(
            f"{document}: cannot decode as {encoding} after line {after_line}: {reason}"
        )


class UnterminatedFunctionError(MakeGlError):
    """
    A function declaration did not reach its terminator.

    Raised at end of document, or when a new declaration starts while the
    previous one is still open.
    """

    def __init__(
        self,
        document: str,
        line: int,
        name: str,
        interrupted_at: Optional[int] = None,
    ):
        self.document = document
        self.line = line
        self.name = name
        self.interrupted_at = interrupted_at
        if interrupted_at is None:
            where = "end of document"
        else:
            where = f"line {interrupted_at}"
        super().__init__(
            f"{document}:{line}: declaration of {name} not terminated "
            f"before {where}"
        )
