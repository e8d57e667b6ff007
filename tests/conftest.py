import stat
import sys
import textwrap

import pytest

FAKE_CLANG_FORMAT = textwrap.dedent(
    """\
    #!{python}
    import sys

    style = [a for a in sys.argv[1:] if a.startswith("--style=")][0][len("--style="):]
    if style == "broken":
        sys.stderr.write("Invalid value for -style\\n")
        sys.exit(1)

    data = sys.stdin.read()
    if not data.startswith("// "):
        data = "// " + style + "\\n" + data
    sys.stdout.write(data)
    """
)


@pytest.fixture
def fake_clang_format(tmp_path, monkeypatch):
    """Executable that stamps the style it was given on top of its input"""
    if sys.platform == "win32":
        pytest.skip("shebang scripts are not executable on Windows")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CLANG_FORMAT_BINARY", raising=False)

    script = tmp_path / "fake-clang-format"
    script.write_text(FAKE_CLANG_FORMAT.format(python=sys.executable))
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(script)
