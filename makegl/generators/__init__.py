"""
Wrapper generators, one per target language.
"""

from .base import AUXILIARY_FUNCTIONS, Generator
from .java_wrapper import JavaWrapperGenerator
from .python_wrapper import PythonWrapperGenerator
from ..config import MakeGlConfig

GENERATORS = {
    "java": JavaWrapperGenerator,
    "python": PythonWrapperGenerator,
}


def get_generator(config: MakeGlConfig) -> Generator:
    """Instantiate the generator for ``config.target.language``."""
    return GENERATORS[config.target.language](config)


__all__ = [
    "AUXILIARY_FUNCTIONS",
    "Generator",
    "JavaWrapperGenerator",
    "PythonWrapperGenerator",
    "GENERATORS",
    "get_generator",
]
