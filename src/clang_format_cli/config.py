import logging
import tomllib
from pathlib import Path

from clang_format_invoker.models import FormatterConfig, StylePreset, parse_style

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".clang-format-invoker.toml"
SECTION = "clang-format-invoker"


def find_config_file(config_path: Path) -> Path | None:
    """Return the given config file, or pyproject.toml next to it when it is missing"""
    if config_path.exists():
        return config_path
    pyproject = config_path.parent / "pyproject.toml"
    if pyproject.exists():
        return pyproject
    return None


class InvokerConfig:
    """Handles loading of [tool.clang-format-invoker] settings"""

    def __init__(self, config_path: Path | None = None):
        self.style: str | None = None
        self.binary: str | None = None
        self.timeout: float | None = None
        self.assume_filename: str | None = None

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            tool = data.get("tool", {})
            section = tool.get(SECTION, {}) if isinstance(tool, dict) else None
            if not isinstance(section, dict):
                raise TypeError(f"[tool.{SECTION}] must be a table")
            values = {}
            for key in ("style", "binary", "assume_filename"):
                value = section.get(key, getattr(self, key))
                if value is not None and not isinstance(value, str):
                    raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
                values[key] = value

            timeout = section.get("timeout", self.timeout)
            if timeout is not None:
                if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
                    raise TypeError(f"'timeout' must be a number, got {type(timeout).__name__}")
                timeout = float(timeout)

            # Only apply once every value checked out
            for key, value in values.items():
                setattr(self, key, value)
            self.timeout = timeout
        except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as e:
            logger.warning("Ignoring invalid config file %s: %s", path, e)

    def override(
        self,
        style: str | None = None,
        binary: str | None = None,
        timeout: float | None = None,
    ) -> "InvokerConfig":
        """Apply command-line values on top of the file values"""
        if style is not None:
            self.style = style
        if binary is not None:
            self.binary = binary
        if timeout is not None:
            self.timeout = timeout
        return self

    def to_formatter_config(self) -> FormatterConfig:
        return FormatterConfig(
            binary=self.binary,
            style=parse_style(self.style) if self.style else StylePreset.DEFAULT,
            timeout=self.timeout,
            assume_filename=self.assume_filename,
        )
