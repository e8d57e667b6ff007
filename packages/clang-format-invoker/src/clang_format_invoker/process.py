"""
Process capability used by the engine.

The engine only needs "run argv with this stdin, give me exit status and both
output streams", so tests can swap in a fake runner instead of a real binary.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from .errors import FormatCancelledError, InvalidInputError, StreamError, ToolNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessOutput:
    returncode: int
    stdout: bytes
    stderr: bytes


class ProcessRunner(Protocol):
    """Protocol for spawning one process and exchanging its standard streams"""

    def run(
        self, argv: Sequence[str], input_data: bytes, timeout: Optional[float] = None
    ) -> ProcessOutput: ...


class SubprocessRunner:
    """Runs the command with all three standard streams piped.

    ``communicate`` writes stdin, closes it, and drains stdout/stderr
    concurrently, so inputs larger than the OS pipe buffer cannot deadlock.
    The child is waited for on every exit path.
    """

    def run(
        self, argv: Sequence[str], input_data: bytes, timeout: Optional[float] = None
    ) -> ProcessOutput:
        try:
            proc = subprocess.Popen(
                list(argv),
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            raise ToolNotFoundError(argv[0], e.strerror or str(e)) from e
        except ValueError as e:
            raise InvalidInputError(f"Cannot run {argv[0]!r}: {e}") from e

        with proc:
            try:
                stdout, stderr = proc.communicate(input=input_data, timeout=timeout)
            except subprocess.TimeoutExpired as e:
                logger.warning("Killing %s after %s seconds", argv[0], timeout)
                proc.kill()
                proc.communicate()
                raise FormatCancelledError(timeout) from e
            except OSError as e:
                proc.kill()
                raise StreamError(f"I/O error while talking to {argv[0]}: {e}") from e

        return ProcessOutput(returncode=proc.returncode, stdout=stdout, stderr=stderr)
