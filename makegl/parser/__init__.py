"""
Javadoc page parsing module.
"""

from .records import (
    ConstantRecord,
    FunctionRecord,
    Parameter,
    Record,
    SourceLocation,
)
from .patterns import LineKind, classify
from .accumulator import SignatureAccumulator
from .scanner import Document, scan_document, scan_lines

__all__ = [
    "ConstantRecord",
    "FunctionRecord",
    "Parameter",
    "Record",
    "SourceLocation",
    "LineKind",
    "classify",
    "SignatureAccumulator",
    "Document",
    "scan_document",
    "scan_lines",
]
