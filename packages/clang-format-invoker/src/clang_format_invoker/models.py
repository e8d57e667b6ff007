from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class StylePreset(str, Enum):
    """Built-in styles understood by clang-format's ``--style`` argument.

    See https://clang.llvm.org/docs/ClangFormatStyleOptions.html#basedonstyle
    """

    CHROMIUM = "Chromium"
    # Empty configuration, clang-format falls back to its own defaults
    DEFAULT = "{}"
    # Nearest .clang-format in the parent directories
    FILE = "file"
    # Since clang-format 11
    GNU = "GNU"
    GOOGLE = "Google"
    LLVM = "LLVM"
    # Since clang-format 9
    MICROSOFT = "Microsoft"
    MOZILLA = "Mozilla"
    WEBKIT = "WebKit"

    def as_str(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomStyle:
    """Free-form ``--style`` value, e.g. ``{ BasedOnStyle: Mozilla, IndentWidth: 8 }``"""

    value: str

    def as_str(self) -> str:
        return self.value


ClangFormatStyle = Union[StylePreset, CustomStyle]


def parse_style(text: str) -> ClangFormatStyle:
    """Map a user supplied style name to a preset, or keep it as a custom style."""
    lookup = text.strip().lower()
    for preset in StylePreset:
        if lookup in (preset.name.lower(), preset.value.lower()):
            return preset
    return CustomStyle(text)


@dataclass
class FormatterConfig:
    binary: Optional[str] = None
    style: ClangFormatStyle = StylePreset.DEFAULT
    timeout: Optional[float] = None
    assume_filename: Optional[str] = None


@dataclass
class FormatResult:
    source: str
    modified: bool
    errors: List[str] = field(default_factory=list)
    file_path: str = ""


@dataclass
class FormatResults:
    results: List[FormatResult]
    total_files: int
    modified_files: int
    error_files: int
