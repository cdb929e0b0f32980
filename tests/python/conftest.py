"""
Pytest configuration and shared fixtures for makegl tests.
"""

import pytest
from pathlib import Path

from makegl.config import MakeGlConfig, PathsConfig


# =============================================================================
# Sample javadoc lines
# =============================================================================

CONSTANT_LINE = "<pre>static final&nbsp;int GL_TRIANGLES</pre>"
PROSE_LINE = '<div class="block">Clears buffers to preset values, see glClear(int).</div>'

GL_PAGE = [
    "<!DOCTYPE HTML>",
    "<html lang=\"en\">",
    "<h4>GL_TRIANGLES</h4>",
    CONSTANT_LINE,
    "<h4>GL_LINES</h4>",
    "<pre>static final&nbsp;int GL_LINES</pre>",
    PROSE_LINE,
    "<pre>void&nbsp;glClear(int&nbsp;mask)</pre>",
    "<pre>void&nbsp;glBlendFuncSeparate(int&nbsp;srcRGB,",
    "                         int&nbsp;dstRGB,",
    "                         int&nbsp;srcAlpha,",
    "                         int&nbsp;dstAlpha)</pre>",
    "<pre>int&nbsp;glGetError()</pre>",
    "</html>",
]

GL2_PAGE = [
    "<pre>static final&nbsp;int GL_TRIANGLES</pre>",
    "<pre>static final&nbsp;int GL_QUADS</pre>",
    "<pre>void&nbsp;glClear(int&nbsp;mask)</pre>",
    "<pre>void&nbsp;glVertex3f(float&nbsp;x,",
    "                float&nbsp;y,",
    "                float&nbsp;z)</pre>",
    "<pre>boolean&nbsp;isGL2()</pre>",
]

GLBASE_PAGE = [
    '<pre>boolean&nbsp;isExtensionAvailable(<a href="../../../java/lang/String.html">String</a>&nbsp;glExtensionName)</pre>',
    "<pre>void&nbsp;glFlush()</pre>",
]

OVERLOAD_PAGE = [
    "<pre>void&nbsp;glVertex3fv(float[]&nbsp;v,",
    "                 int&nbsp;v_offset)</pre>",
    '<pre>void&nbsp;glVertex3fv(<a href="../../../java/nio/FloatBuffer.html">FloatBuffer</a>&nbsp;v)</pre>',
]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def write_doc(tmp_path):
    """Write a javadoc page into tmp_path and return its identifier."""
    def _write(name, lines):
        (tmp_path / name).write_text("\n".join(lines) + "\n", encoding="utf-8")
        return name
    return _write


@pytest.fixture
def pages(write_doc):
    """GL.html and GL2.html written to disk, in processing order."""
    return [write_doc("GL.html", GL_PAGE), write_doc("GL2.html", GL2_PAGE)]


@pytest.fixture
def config(tmp_path):
    """Default configuration rooted at tmp_path."""
    return MakeGlConfig(
        project_root=tmp_path,
        paths=PathsConfig(input_dir=Path(tmp_path)),
    )
