"""Start-up configuration, read once from the environment."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

PROMPT = "$ "
LOG_LEVEL_VAR = "MYSHELL_LOG_LEVEL"

# Text codec for every stream the shell touches; bytes that are not valid
# UTF-8 decode to lone surrogates and encode back to the same bytes
ENCODING = "utf-8"
ERRORS = "surrogateescape"


@dataclass(frozen=True)
class ShellConfig:
    """Immutable settings shared by the dispatcher and the path resolver."""

    search_path: tuple[str, ...] = ()
    prompt: str = PROMPT
    log_level: int = logging.WARNING

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] = os.environ) -> "ShellConfig":
        raw_path = environ.get("PATH")
        search_path = tuple(raw_path.split(os.pathsep)) if raw_path else ()
        return cls(
            search_path=search_path,
            log_level=_parse_log_level(environ.get(LOG_LEVEL_VAR, "")),
        )


def _parse_log_level(value: str) -> int:
    """Map a level name or number to a logging level; unknown values give WARNING."""
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.WARNING
