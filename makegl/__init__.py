"""
makegl

Generates an OpenGL pass-through wrapper (constants and forwarding
functions) from JOGL javadoc pages.
"""

__version__ = "0.1.0"

from .config import MakeGlConfig
from .errors import (
    ConfigError,
    DocumentDecodeError,
    MakeGlError,
    UnterminatedFunctionError,
)
from .pipeline import GenerationReport, generate, scan_only

__all__ = [
    "MakeGlConfig",
    "MakeGlError",
    "ConfigError",
    "DocumentDecodeError",
    "UnterminatedFunctionError",
    "GenerationReport",
    "generate",
    "scan_only",
    "__version__",
]
