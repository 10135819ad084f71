"""Runtime defaults for asciitile.

Settings start from these defaults; the CLI overrides them from its flags
and the log level can also come from the ASCIITILE_LOG_LEVEL environment
variable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from asciitile.charsets import DEFAULT_CHARSET
from asciitile.glyphs import GLYPH_SIZE

DEFAULT_RESOLUTION = 2
DEFAULT_ROUNDING = "abs"
DEFAULT_OUTPUT = "console"
HTML_OUTPUT_PATH = "out.html"
HTML_FONT = "Courier New"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ENV = "ASCIITILE_LOG_LEVEL"


def _env_log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    return level if level in LOG_LEVELS else "WARNING"


@dataclass(frozen=True)
class Settings:
    resolution: int = DEFAULT_RESOLUTION
    charset: str = DEFAULT_CHARSET
    rounding: str = DEFAULT_ROUNDING
    output: str = DEFAULT_OUTPUT
    html_path: str = HTML_OUTPUT_PATH
    html_font: str = HTML_FONT
    font_path: str | None = None
    glyph_size: int = GLYPH_SIZE
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(log_level=_env_log_level())

    def override(self, **changes) -> "Settings":
        """Copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
