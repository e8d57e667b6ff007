from typing import Optional


class ClangFormatError(Exception):
    """Base class for every failure of a clang-format invocation"""


class ToolNotFoundError(ClangFormatError):
    """The clang-format executable could not be spawned"""

    def __init__(self, binary: str, reason: Optional[str] = None):
        self.binary = binary
        message = f"Could not run clang-format executable '{binary}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ToolFailureError(ClangFormatError):
    """clang-format ran but exited with a non-zero status"""

    def __init__(self, returncode: int, stderr: str, binary: str = "clang-format"):
        self.returncode = returncode
        self.stderr = stderr
        self.binary = binary
        message = f"{binary} exited with status {returncode}"
        if stderr.strip():
            message += f":\n{stderr.rstrip()}"
        super().__init__(message)


class InvalidInputError(ClangFormatError):
    """The source text or command line cannot be handed to the process"""


class OutputDecodeError(ClangFormatError):
    """clang-format produced output that is not valid UTF-8"""


class StreamError(ClangFormatError):
    """Writing to or reading from the clang-format process failed"""


class FormatCancelledError(ClangFormatError):
    """The clang-format process was killed after exceeding its timeout"""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"clang-format did not finish within {timeout} seconds")
