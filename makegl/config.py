"""
Configuration system for makegl.

Supports:
- TOML configuration files (makegl.toml)
- CLI argument overrides
- Per-language target defaults
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None

from .errors import ConfigError


CONFIG_FILE_NAME = "makegl.toml"

# Javadoc pages in processing order. Constants and functions declared in
# more than one page are kept from the first page that declares them.
DEFAULT_INPUTS = [
    "GL.html",
    "GLBase.html",
    "GLLightingFunc.html",
    "GLMatrixFunc.html",
    "GLPointerFunc.html",
    "GL2.html",
    "GL2ES1.html",
    "GL2ES2.html",
    "GL2ES3.html",
    "GL2GL3.html",
]

LANGUAGES = ("java", "python")

# Defaults for every TargetConfig field left unset, per language.
_LANGUAGE_DEFAULTS: dict[str, dict] = {
    "java": {
        "output": "Gl.java",
        "package": "edu.mines.jtk.ogl",
        "imports": [
            "java.nio.*",
            "com.jogamp.opengl.*",
            "com.jogamp.common.nio.PointerBuffer",
        ],
        "constants_class": "GL2",
        "binding_class": "GL2",
        "accessor": "gl",
        "accessor_expression": "(GL2)GLContext.getCurrentGL()",
    },
    "python": {
        "output": "gl.py",
        "package": "",
        "imports": ["from jogl import GL2"],
        "constants_class": "GL2",
        "binding_class": "GL2",
        "accessor": "_gl",
        "accessor_expression": "self._context.get_current_gl()",
    },
}


@dataclass
class PathsConfig:
    """Path configuration."""

    input_dir: Path = field(default_factory=lambda: Path("."))
    inputs: list[str] = field(default_factory=lambda: list(DEFAULT_INPUTS))
    output: Optional[Path] = None  # language default when unset


@dataclass
class TargetConfig:
    """Output language and the names used by the emitted wrapper."""

    language: str = "java"
    class_name: str = "Gl"
    description: str = "OpenGL standard constants and functions."
    package: Optional[str] = None
    imports: Optional[list[str]] = None
    constants_class: Optional[str] = None
    binding_class: Optional[str] = None
    accessor: Optional[str] = None
    accessor_expression: Optional[str] = None

    def __post_init__(self):
        if self.language not in LANGUAGES:
            raise ConfigError(
                f"Unknown target language {self.language!r}, "
                f"expected one of {', '.join(LANGUAGES)}"
            )
        for name, value in _LANGUAGE_DEFAULTS[self.language].items():
            if name != "output" and getattr(self, name) is None:
                setattr(self, name, value)

    @property
    def default_output(self) -> Path:
        return Path(_LANGUAGE_DEFAULTS[self.language]["output"])


@dataclass
class GenerationConfig:
    """Generation options."""

    deduplicate: bool = True
    encoding: str = "utf-8"
    newline: str = "\n"


@dataclass
class MakeGlConfig:
    """Main configuration container."""

    project_root: Path = field(default_factory=Path.cwd)
    paths: PathsConfig = field(default_factory=PathsConfig)
    target: TargetConfig = field(default_factory=TargetConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)

    def __post_init__(self):
        """Ensure project_root is a Path."""
        if isinstance(self.project_root, str):
            self.project_root = Path(self.project_root)

    @classmethod
    def from_file(cls, path: Path) -> "MakeGlConfig":
        """Load configuration from a TOML file."""
        if tomllib is None:
            raise ImportError(
                "tomli is required for Python < 3.11. "
                "Install with: pip install tomli"
            )

        with open(path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid configuration file {path}: {e}") from e

        return cls._from_dict(data, path.parent)

    @classmethod
    def _from_dict(cls, data: dict, base_path: Path) -> "MakeGlConfig":
        """Create config from dictionary."""
        paths_data = data.get("paths", {})
        target_data = data.get("target", {})
        gen_data = data.get("generation", {})

        output = paths_data.get("output")
        paths = PathsConfig(
            input_dir=Path(paths_data.get("input_dir", ".")),
            inputs=list(paths_data.get("inputs", DEFAULT_INPUTS)),
            output=Path(output) if output else None,
        )

        known = set(TargetConfig.__dataclass_fields__)
        unknown = set(target_data) - known
        if unknown:
            raise ConfigError(f"Unknown [target] keys: {', '.join(sorted(unknown))}")
        target = TargetConfig(**target_data)

        generation = GenerationConfig(
            deduplicate=gen_data.get("deduplicate", True),
            encoding=gen_data.get("encoding", "utf-8"),
            newline=gen_data.get("newline", "\n"),
        )

        return cls(
            project_root=base_path,
            paths=paths,
            target=target,
            generation=generation,
        )

    @classmethod
    def find_config(cls, start_path: Optional[Path] = None) -> Optional[Path]:
        """Find makegl.toml in current or parent directories."""
        if start_path is None:
            start_path = Path.cwd()

        current = start_path.resolve()

        for _ in range(10):  # Max 10 levels up
            config_path = current / CONFIG_FILE_NAME
            if config_path.exists():
                return config_path

            parent = current.parent
            if parent == current:
                break
            current = parent

        return None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "MakeGlConfig":
        """
        Load configuration, auto-discovering if path not provided.

        Raises:
            ConfigError: an explicitly given ``config_path`` does not exist
        """
        if config_path is None:
            config_path = cls.find_config()
        elif not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")

        if config_path is not None:
            return cls.from_file(config_path)

        # Return default config with current directory as root
        return cls(project_root=Path.cwd())

    def resolve_path(self, path: Path) -> Path:
        """Resolve a relative path against project root."""
        if path.is_absolute():
            return path
        return self.project_root / path

    @property
    def input_dir_abs(self) -> Path:
        """Absolute path to the javadoc pages."""
        return self.resolve_path(self.paths.input_dir)

    @property
    def output_abs(self) -> Path:
        """Absolute path to the generated wrapper."""
        return self.resolve_path(self.paths.output or self.target.default_output)
