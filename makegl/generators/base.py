"""
Base class for wrapper generators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from ..config import MakeGlConfig
from ..parser.records import ConstantRecord, FunctionRecord, Parameter, Record


# Pass-throughs appended to every wrapper, after the generated records.
AUXILIARY_FUNCTIONS = (
    FunctionRecord(
        name="isExtensionAvailable",
        return_type="boolean",
        parameters=[Parameter("String", "extensionName")],
    ),
    FunctionRecord(
        name="setSwapInterval",
        return_type="void",
        parameters=[Parameter("int", "interval")],
    ),
)


class Generator(ABC):
    """
    Abstract base class for wrapper generators.

    A generator renders text fragments; it never touches the output file.
    Each fragment comes from a template under ``templates/<language>/``:
    ``prologue``, ``banner``, ``constant``, ``function`` and ``epilogue``.
    Subclasses provide :attr:`language` and may register extra filters.

    :attr:`overloads` tells the pipeline whether the target can hold two
    functions with the same name; when it cannot, duplicates are keyed on
    the name alone.
    """

    overloads: bool = True

    @property
    @abstractmethod
    def language(self) -> str:
        """Template directory under ``templates/``."""

    def __init__(self, config: MakeGlConfig):
        """
        Initialize the generator.

        Args:
            config: makegl configuration
        """
        self.config = config
        self._env: Optional[Environment] = None

    @property
    def env(self) -> Environment:
        """Lazy-load Jinja2 environment."""
        if self._env is None:
            self._env = self._create_jinja_env()
        return self._env

    def _create_jinja_env(self) -> Environment:
        """Create and configure Jinja2 environment."""
        env = Environment(
            loader=PackageLoader("makegl", "templates"),
            autoescape=select_autoescape(default=False),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        target = self.config.target
        env.globals.update(
            class_name=target.class_name,
            description=target.description,
            package=target.package,
            imports=target.imports,
            constants_class=target.constants_class,
            binding_class=target.binding_class,
            accessor=target.accessor,
            accessor_expression=target.accessor_expression,
        )
        env.filters["safe_name"] = self.safe_name

        return env

    def _render(self, fragment: str, **context) -> str:
        template = self.env.get_template(f"{self.language}/{fragment}.j2")
        return template.render(**context)

    @staticmethod
    def safe_name(name: str) -> str:
        """Parameter name as usable in the target language."""
        return name

    def render_prologue(self) -> str:
        return self._render("prologue")

    def render_banner(self, document: str) -> str:
        return self._render("banner", document=document)

    def render_constant(self, constant: ConstantRecord) -> str:
        return self._render("constant", constant=constant)

    def render_function(self, function: FunctionRecord) -> str:
        return self._render("function", function=function)

    def render(self, record: Record) -> str:
        if isinstance(record, ConstantRecord):
            return self.render_constant(record)
        return self.render_function(record)

    def render_epilogue(
        self, auxiliaries: Iterable[FunctionRecord] = AUXILIARY_FUNCTIONS
    ) -> str:
        """Auxiliary pass-throughs, the accessor and the closing declaration."""
        parts = [self.render_function(f) for f in auxiliaries]
        parts.append(self._render("epilogue"))
        return "".join(parts)
