"""
Parsed record data structures.

A record is one unit recovered from a javadoc page: either a constant or a
function signature. Records are created by the scanner, handed to the
generator and then discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


VOID = "void"


@dataclass(frozen=True)
class SourceLocation:
    """Document and 1-based line number, for error reporting."""
    document: str
    line: int

    def __str__(self) -> str:
        return f"{self.document}:{self.line}"


@dataclass(frozen=True)
class Parameter:
    """Function parameter as written in the javadoc (``int[]``, ``Buffer``)."""
    type: str
    name: str

    def __str__(self) -> str:
        return f"{self.type} {self.name}"


@dataclass(frozen=True)
class ConstantRecord:
    """Integer constant such as ``GL_TRIANGLES``."""
    name: str
    location: Optional[SourceLocation] = None


@dataclass
class FunctionRecord:
    """
    Function signature.

    Parameters are appended in input order while the signature is being
    accumulated; a record is only handed out once complete.
    """
    name: str
    return_type: str
    parameters: list[Parameter] = field(default_factory=list)
    location: Optional[SourceLocation] = None

    @property
    def returns_void(self) -> bool:
        return self.return_type == VOID

    @property
    def parameter_names(self) -> list[str]:
        return [p.name for p in self.parameters]

    @property
    def key(self) -> str:
        """Overload key: name plus parameter types, e.g. ``glColor3f(float,float,float)``."""
        types = ",".join(p.type for p in self.parameters)
        return f"{self.name}({types})"

    @property
    def signature(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"{self.return_type} {self.name}({params})"


Record = Union[ConstantRecord, FunctionRecord]
