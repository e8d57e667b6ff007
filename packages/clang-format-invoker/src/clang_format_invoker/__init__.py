"""
clang-format invoker - run an installed clang-format on in-memory source text

This package provides:
- Style selection (built-in presets plus free-form style strings)
- A single-call invoker that pipes text through clang-format
- Typed errors for missing tools, tool failures, bad output and I/O problems
- Batch formatting of files on disk
"""

__version__ = "0.1.0"

from .engine import (
    CLANG_FORMAT_BINARY_ENV,
    ClangFormatEngine,
    build_command,
    clang_format,
    clang_format_with_style,
    resolve_binary,
)
from .errors import (
    ClangFormatError,
    FormatCancelledError,
    InvalidInputError,
    OutputDecodeError,
    StreamError,
    ToolFailureError,
    ToolNotFoundError,
)
from .models import (
    ClangFormatStyle,
    CustomStyle,
    FormatResult,
    FormatResults,
    FormatterConfig,
    StylePreset,
    parse_style,
)
from .process import ProcessOutput, ProcessRunner, SubprocessRunner

__all__ = [
    "CLANG_FORMAT_BINARY_ENV",
    "ClangFormatEngine",
    "build_command",
    "clang_format",
    "clang_format_with_style",
    "resolve_binary",
    "ClangFormatError",
    "FormatCancelledError",
    "InvalidInputError",
    "OutputDecodeError",
    "StreamError",
    "ToolFailureError",
    "ToolNotFoundError",
    "ClangFormatStyle",
    "CustomStyle",
    "FormatResult",
    "FormatResults",
    "FormatterConfig",
    "StylePreset",
    "parse_style",
    "ProcessOutput",
    "ProcessRunner",
    "SubprocessRunner",
]
