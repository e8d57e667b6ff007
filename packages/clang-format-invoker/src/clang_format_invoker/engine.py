import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional, Union

from .errors import ClangFormatError, InvalidInputError, OutputDecodeError, ToolFailureError
from .models import ClangFormatStyle, FormatResult, FormatResults, FormatterConfig, StylePreset
from .process import ProcessRunner, SubprocessRunner

logger = logging.getLogger(__name__)

CLANG_FORMAT_BINARY_ENV = "CLANG_FORMAT_BINARY"
DEFAULT_BINARY = "clang-format"


def resolve_binary(
    binary: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> str:
    """Explicit binary first, then the environment override, then plain clang-format.

    The environment is read on every call, never cached.
    """
    if binary:
        return binary
    env = os.environ if environ is None else environ
    return env.get(CLANG_FORMAT_BINARY_ENV) or DEFAULT_BINARY


def build_command(
    binary: str, style: ClangFormatStyle, assume_filename: Optional[str] = None
) -> List[str]:
    command = [binary, f"--style={style.as_str()}"]
    if assume_filename:
        command.append(f"--assume-filename={assume_filename}")
    for arg in command:
        if "\0" in arg:
            raise InvalidInputError(f"Argument contains a NUL character: {arg!r}")
    return command


class ClangFormatEngine:
    """Formats source text by piping it through an external clang-format process."""

    def __init__(
        self,
        config: Optional[FormatterConfig] = None,
        runner: Optional[ProcessRunner] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.config = config or FormatterConfig()
        self.runner = runner or SubprocessRunner()
        self.environ = environ

    def format(
        self,
        source: str,
        style: Optional[ClangFormatStyle] = None,
        assume_filename: Optional[str] = None,
    ) -> str:
        """Run clang-format once on ``source`` and return its stdout verbatim.

        Raises a ClangFormatError subclass on any failure.
        """
        binary = resolve_binary(self.config.binary, self.environ)
        command = build_command(
            binary,
            style if style is not None else self.config.style,
            assume_filename or self.config.assume_filename,
        )
        logger.debug("Running %s", command)

        try:
            input_data = source.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidInputError(f"Source text cannot be encoded as UTF-8: {e}") from e

        output = self.runner.run(command, input_data, timeout=self.config.timeout)

        if output.returncode != 0:
            stderr = output.stderr.decode("utf-8", errors="replace")
            logger.warning("%s exited with status %d", binary, output.returncode)
            raise ToolFailureError(output.returncode, stderr, binary)

        try:
            return output.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise OutputDecodeError(f"{binary} produced output that is not valid UTF-8: {e}") from e

    def format_string(self, source: str, file_path: str = "") -> FormatResult:
        """Formats a string, recording failures in the result instead of raising."""
        try:
            formatted = self.format(
                source, assume_filename=self.config.assume_filename or file_path or None
            )
        except ClangFormatError as e:
            return FormatResult(source=source, modified=False, errors=[str(e)], file_path=file_path)
        return FormatResult(
            source=formatted, modified=formatted != source, file_path=file_path
        )

    def format_files(self, files: List[Union[str, Path]], write: bool = True) -> FormatResults:
        """Batch format multiple files on disk."""
        results = []; modified_count = 0; error_count = 0
        for file_path in files:
            file_path = Path(file_path)
            try:
                source = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Could not read %s: %s", file_path, e)
                results.append(FormatResult(source="", modified=False, errors=[str(e)], file_path=str(file_path)))
                error_count += 1
                continue

            result = self.format_string(source, str(file_path))
            results.append(result)
            if result.errors:
                error_count += 1
            elif result.modified:
                if write:
                    try:
                        file_path.write_text(result.source, encoding="utf-8")
                    except OSError as e:
                        result.errors.append(str(e))
                        error_count += 1
                        continue
                modified_count += 1
        return FormatResults(results=results, total_files=len(files), modified_files=modified_count, error_files=error_count)


def clang_format_with_style(
    input: str, style: ClangFormatStyle, config: Optional[FormatterConfig] = None
) -> str:
    """Format ``input`` with the given style.

    >>> clang_format_with_style("struct Test {\\n};\\n", StylePreset.MOZILLA)
    'struct Test\\n{};\\n'
    """
    return ClangFormatEngine(config).format(input, style=style)


def clang_format(input: str) -> str:
    """Format ``input`` with ``StylePreset.DEFAULT``."""
    return clang_format_with_style(input, StylePreset.DEFAULT)
