import shutil

import pytest
from clang_format_invoker import (
    CustomStyle,
    StylePreset,
    ToolFailureError,
    clang_format,
    clang_format_with_style,
)
from clang_format_invoker.models import FormatterConfig

BINARY = shutil.which("clang-format")

pytestmark = pytest.mark.skipif(BINARY is None, reason="clang-format is not installed")

STRUCT = """
            struct Test {

            };
        """

STRUCT_WITH_FIELD = """
            struct Test {
                bool field;
            };
        """


def config():
    return FormatterConfig(binary=BINARY)


def test_format_default():
    output = clang_format_with_style(STRUCT, StylePreset.DEFAULT, config())
    assert output == "\nstruct Test {};\n"


def test_format_mozilla():
    output = clang_format_with_style(STRUCT, StylePreset.MOZILLA, config())
    assert output == "\nstruct Test\n{};\n"


def test_format_mozilla_documented_example():
    output = clang_format_with_style("struct Test {\n};\n", StylePreset.MOZILLA, config())
    assert output == "struct Test\n{};\n"


def test_format_is_idempotent():
    once = clang_format_with_style("struct Test {\n};\n", StylePreset.MOZILLA, config())
    twice = clang_format_with_style(once, StylePreset.MOZILLA, config())
    assert once == twice


def test_format_empty_input():
    output = clang_format_with_style("", StylePreset.LLVM, config())
    assert output.strip() == ""


def test_format_custom():
    # Multiple lines and single quotes
    style = CustomStyle(
        """{BasedOnStyle: 'Mozilla',
                    IndentWidth: 8}"""
    )
    output = clang_format_with_style(STRUCT_WITH_FIELD, style, config())
    assert output == "\nstruct Test\n{\n        bool field;\n};\n"

    # Single line and double quotes
    style = CustomStyle('{ BasedOnStyle: "Mozilla", IndentWidth: 4 }')
    output = clang_format_with_style(STRUCT_WITH_FIELD, style, config())
    assert output == "\nstruct Test\n{\n    bool field;\n};\n"


def test_invalid_custom_style_reports_failure():
    with pytest.raises(ToolFailureError) as exc_info:
        clang_format_with_style("int x;", CustomStyle("{ NotARealOption: 3 }"), config())
    assert exc_info.value.stderr.strip() != ""


def test_clang_format_uses_default_style(monkeypatch):
    monkeypatch.setenv("CLANG_FORMAT_BINARY", BINARY)
    assert clang_format(STRUCT) == "\nstruct Test {};\n"
