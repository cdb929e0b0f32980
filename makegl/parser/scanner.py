"""
Document scanner.

Streams one document line by line, classifies each line and yields the
records it recovers, in line order. Lines that match no recognizer are
skipped; this is how the surrounding HTML prose is discarded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from . import patterns
from .accumulator import SignatureAccumulator
from .patterns import LineKind
from .records import ConstantRecord, Record, SourceLocation
from ..errors import DocumentDecodeError

logger = logging.getLogger("makegl.parser")


@dataclass(frozen=True)
class Document:
    """One input page: its identifier and where to read it from."""
    identifier: str
    path: Path

    def lines(self, encoding: str = "utf-8") -> Iterator[str]:
        """
        Yield lines without their terminators; the file is never fully buffered.

        Raises:
            DocumentDecodeError: the page is not valid ``encoding`` text
        """
        count = 0
        with open(self.path, "r", encoding=encoding, newline="") as f:
            try:
                for line in f:
                    yield line.rstrip("\r\n")
                    count += 1
            except UnicodeDecodeError as e:
                raise DocumentDecodeError(self.identifier, count, encoding, e.reason) from e


def scan_lines(lines: Iterable[str], document: str) -> Iterator[Record]:
    """
    Yield constant and function records found in ``lines``.

    Args:
        lines: Input lines without line terminators
        document: Identifier used in locations and error messages

    Raises:
        UnterminatedFunctionError: a declaration is still open at the end,
            or a new declaration starts before the previous one ended
    """
    accumulator = SignatureAccumulator(document)

    for lineno, line in enumerate(lines, start=1):
        kind = patterns.classify(line)

        if kind is LineKind.CONSTANT and accumulator.is_idle:
            name = patterns.get_constant_name(line)
            if name:
                yield ConstantRecord(name, SourceLocation(document, lineno))
            else:
                logger.debug("%s:%d: constant line without name, skipped", document, lineno)
            continue

        record = accumulator.feed(kind, line, lineno)
        if record is not None:
            yield record

    accumulator.finish()


def scan_document(document: Document, encoding: str = "utf-8") -> Iterator[Record]:
    """Scan a document from disk. See :func:`scan_lines`."""
    return scan_lines(document.lines(encoding), document.identifier)
