"""
Java wrapper generator.

Produces a ``Gl.java`` class of static constants and static pass-through
methods, each forwarding to the current ``GL2`` through a private ``gl()``.
"""

from __future__ import annotations

from .base import Generator


class JavaWrapperGenerator(Generator):
    """Generator for the static Java ``Gl`` class."""

    language = "java"
