"""
Python wrapper generator.

Produces a module with one class whose instances hold an explicit context
object. Constants become class attributes; every method forwards to the
binding object returned by the context, through a single ``_gl`` accessor::

    gl = Gl(context)
    gl.glClear(Gl.GL_COLOR_BUFFER_BIT)

Java overloads collapse to the first declaration of each name; the later
ones are reported as duplicates.
"""

from __future__ import annotations

from .base import Generator


# Python reserved keywords that need renaming, plus "self" which the
# generated methods already bind.
PYTHON_KEYWORDS = {
    "lambda", "class", "def", "return", "yield", "import", "from", "as",
    "if", "elif", "else", "for", "while", "break", "continue", "pass",
    "try", "except", "finally", "raise", "with", "assert", "global",
    "nonlocal", "del", "in", "is", "not", "and", "or", "True", "False",
    "None", "async", "await", "type", "match", "case", "self",
}


class PythonWrapperGenerator(Generator):
    """Generator for a context-holding Python wrapper class."""

    language = "python"

    # A later def of the same name replaces the earlier one.
    overloads = False

    @staticmethod
    def safe_name(name: str) -> str:
        """Convert parameter name to safe Python identifier."""
        if name in PYTHON_KEYWORDS:
            return f"{name}_"
        return name
