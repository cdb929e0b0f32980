"""
Signature accumulator.

Reconstructs one function signature that may span several lines. The state
is a tagged variant, either ``Idle`` or ``Accumulating`` holding the partial
record, so that every transition lives in :meth:`SignatureAccumulator.feed`.

Transitions::

    Idle         --open, terminated-->  Idle          (record complete)
    Idle         --open------------->  Accumulating
    Accumulating --parameter-------->  Accumulating  (one pair appended)
    Accumulating --terminator------->  Idle          (record complete)
    Accumulating --none------------->  Accumulating  (unchanged)
    Accumulating --constant/open---->  error
    Accumulating --end of document-->  error
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from . import patterns
from .patterns import LineKind
from .records import FunctionRecord, SourceLocation
from ..errors import UnterminatedFunctionError

logger = logging.getLogger("makegl.parser")


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Accumulating:
    record: FunctionRecord


State = Union[Idle, Accumulating]

IDLE = Idle()


class SignatureAccumulator:
    """
    Feeds classified lines through the IDLE/ACCUMULATING state machine.

    :meth:`feed` returns a completed :class:`FunctionRecord` on the line that
    terminates it and None otherwise. Constant lines are not handled here;
    the scanner only forwards them while the accumulator is idle.
    """

    def __init__(self, document: str):
        self.document = document
        self.state: State = IDLE

    @property
    def is_idle(self) -> bool:
        return isinstance(self.state, Idle)

    def feed(self, kind: LineKind, line: str, lineno: int) -> Optional[FunctionRecord]:
        state = self.state

        if isinstance(state, Idle):
            if kind is LineKind.FUNCTION_OPEN:
                return self._open(line, lineno)
            return None

        if kind is LineKind.NONE:
            return None

        if kind in (LineKind.CONSTANT, LineKind.FUNCTION_OPEN):
            self._fail(state.record, interrupted_at=lineno)

        parameter = patterns.get_parameter(line)
        if parameter is not None:
            state.record.parameters.append(parameter)
        if patterns.is_terminator(line):
            self.state = IDLE
            return state.record
        return None

    def finish(self) -> None:
        """Signal end of document; raises if a declaration is still open."""
        if isinstance(self.state, Accumulating):
            self._fail(self.state.record)

    def _open(self, line: str, lineno: int) -> Optional[FunctionRecord]:
        return_type = patterns.get_return_type(line)
        name = patterns.get_function_name(line)
        if return_type is None or name is None:
            logger.debug("%s:%d: function line without signature, skipped", self.document, lineno)
            return None

        record = FunctionRecord(
            name=name,
            return_type=return_type,
            location=SourceLocation(self.document, lineno),
        )
        parameter = patterns.get_parameter(line)
        if parameter is not None:
            record.parameters.append(parameter)

        if patterns.is_terminator(line):
            return record
        self.state = Accumulating(record)
        return None

    def _fail(self, record: FunctionRecord, interrupted_at: Optional[int] = None) -> None:
        self.state = IDLE
        line = record.location.line if record.location else 0
        raise UnterminatedFunctionError(
            self.document, line, record.name, interrupted_at=interrupted_at
        )
