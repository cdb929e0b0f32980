"""
Line recognizers for JOGL javadoc HTML.

These patterns depend on the format of the javadoc-generated pages. If
that format changes, this module is what needs updating.

Typical input lines::

    <pre>static final&nbsp;int GL_TRIANGLES</pre>
    <pre>void&nbsp;glClear(int&nbsp;mask)</pre>
    <pre>void&nbsp;glBlendFuncSeparate(int&nbsp;sfactorRGB,
                         int&nbsp;dfactorRGB,
                         int&nbsp;dfactorAlpha)</pre>

Every ``get_*`` function returns None when its pattern does not capture;
callers treat that as "no record", never as an error.
"""

from __future__ import annotations

import re
from enum import Enum, auto
from typing import Optional

from .records import Parameter


class LineKind(Enum):
    """Classification of one input line, in recognizer priority order."""
    CONSTANT = auto()
    FUNCTION_OPEN = auto()
    CONTINUATION = auto()
    NONE = auto()


CONSTANT_MARKER = "static final&nbsp;int GL_"
FUNCTION_PREFIX = "<pre>"
FUNCTION_MARKERS = ("&nbsp;gl", "&nbsp;is")
TERMINATOR = ")</pre>"

_CON_NAME = re.compile(r"final&nbsp;int (GL_\w*)</pre>")
_FUN_TYPE = re.compile(r"(\w+)(?:</a>)?((?:\[\])*)&nbsp;\w+\(")
_FUN_NAME = re.compile(r"&nbsp;(\w+)\(")
_PARAMETER = re.compile(r"(\w+)(?:</a>)?((?:\[\])*)&nbsp;(\w+)[,)]")


def has_constant(line: str) -> bool:
    return CONSTANT_MARKER in line


def has_function(line: str) -> bool:
    return line.startswith(FUNCTION_PREFIX) and any(
        marker in line for marker in FUNCTION_MARKERS
    )


def is_terminator(line: str) -> bool:
    """
    Fixed-suffix test for the end of a parameter list.

    A zero-parameter function must end on its opening line for this to
    match; trailing markup after ``</pre>`` defeats it.
    """
    return line.endswith(TERMINATOR)


def get_constant_name(line: str) -> Optional[str]:
    m = _CON_NAME.search(line)
    return m.group(1) if m else None


def get_return_type(line: str) -> Optional[str]:
    m = _FUN_TYPE.search(line)
    return m.group(1) + m.group(2) if m else None


def get_function_name(line: str) -> Optional[str]:
    m = _FUN_NAME.search(line)
    return m.group(1) if m else None


def get_parameter(line: str) -> Optional[Parameter]:
    """First ``type&nbsp;name`` followed by ``,`` or ``)`` on the line."""
    m = _PARAMETER.search(line)
    if m is None:
        return None
    return Parameter(type=m.group(1) + m.group(2), name=m.group(3))


def classify(line: str) -> LineKind:
    if has_constant(line):
        return LineKind.CONSTANT
    if has_function(line):
        return LineKind.FUNCTION_OPEN
    if is_terminator(line) or _PARAMETER.search(line):
        return LineKind.CONTINUATION
    return LineKind.NONE
