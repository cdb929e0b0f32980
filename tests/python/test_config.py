"""
Tests for configuration loading.
"""

import pytest
from pathlib import Path

from makegl.config import DEFAULT_INPUTS, MakeGlConfig, TargetConfig
from makegl.errors import ConfigError


class TestDefaults:
    """Test built-in defaults."""

    def test_default_inputs(self):
        config = MakeGlConfig()
        assert config.paths.inputs == DEFAULT_INPUTS
        assert config.paths.inputs[0] == "GL.html"
        assert config.paths.inputs is not DEFAULT_INPUTS

    def test_java_target(self):
        target = TargetConfig()
        assert target.constants_class == "GL2"
        assert target.accessor == "gl"
        assert target.accessor_expression == "(GL2)GLContext.getCurrentGL()"
        assert target.default_output == Path("Gl.java")

    def test_python_target(self):
        target = TargetConfig(language="python")
        assert target.accessor == "_gl"
        assert target.default_output == Path("gl.py")

    def test_explicit_values_win(self):
        target = TargetConfig(language="python", accessor="_binding")
        assert target.accessor == "_binding"

    def test_unknown_language(self):
        with pytest.raises(ConfigError, match="cobol"):
            TargetConfig(language="cobol")

    def test_output_resolution(self, tmp_path):
        config = MakeGlConfig(project_root=tmp_path)
        assert config.output_abs == tmp_path / "Gl.java"
        config.paths.output = Path("/abs/Gl.java")
        assert config.output_abs == Path("/abs/Gl.java")


class TestFromFile:
    """Test TOML loading."""

    def test_load(self, tmp_path):
        path = tmp_path / "makegl.toml"
        path.write_text(
            '[paths]\n'
            'input_dir = "javadoc"\n'
            'inputs = ["GL.html", "GL2.html"]\n'
            'output = "out/gl.py"\n'
            '\n'
            '[target]\n'
            'language = "python"\n'
            'class_name = "GL"\n'
            '\n'
            '[generation]\n'
            'deduplicate = false\n'
        )
        config = MakeGlConfig.from_file(path)

        assert config.project_root == tmp_path
        assert config.input_dir_abs == tmp_path / "javadoc"
        assert config.paths.inputs == ["GL.html", "GL2.html"]
        assert config.output_abs == tmp_path / "out" / "gl.py"
        assert config.target.language == "python"
        assert config.target.class_name == "GL"
        assert config.target.accessor == "_gl"
        assert config.generation.deduplicate is False

    def test_unknown_target_key(self, tmp_path):
        path = tmp_path / "makegl.toml"
        path.write_text('[target]\nclassname = "Gl"\n')
        with pytest.raises(ConfigError, match="classname"):
            MakeGlConfig.from_file(path)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "makegl.toml"
        path.write_text("[paths\n")
        with pytest.raises(ConfigError):
            MakeGlConfig.from_file(path)


class TestDiscovery:
    """Test makegl.toml discovery."""

    def test_find_in_parent(self, tmp_path):
        (tmp_path / "makegl.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert MakeGlConfig.find_config(nested) == (tmp_path / "makegl.toml").resolve()

    def test_load_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(MakeGlConfig, "find_config", classmethod(lambda cls, start=None: None))
        config = MakeGlConfig.load()
        assert config.project_root.resolve() == tmp_path.resolve()
        assert config.target.language == "java"

    def test_explicit_path_missing(self, tmp_path):
        with pytest.raises(ConfigError, match="nope.toml"):
            MakeGlConfig.load(tmp_path / "nope.toml")

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[target]\nclass_name = "Custom"\n')
        config = MakeGlConfig.load(path)
        assert config.target.class_name == "Custom"
        assert config.project_root == tmp_path
