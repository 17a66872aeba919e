"""Run external programs found on the search path."""

import logging
import subprocess

from myshell.config import ENCODING, ERRORS, ShellConfig
from myshell.pathsearch import resolve
from myshell.request import CommandRequest, CommandResult

logger = logging.getLogger(__name__)


def run_external(request: CommandRequest, config: ShellConfig) -> CommandResult:
    """Resolve and run ``request.command``, capturing both output streams.

    The program's exit status is logged but not reported: a failing
    program is indistinguishable from a succeeding one here.
    """
    path = resolve(request.command, config.search_path)
    if path is None:
        return CommandResult(stderr=f"{request.command}: command not found\n")

    try:
        proc = subprocess.run(
            request.argv,
            executable=path,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            encoding=ENCODING,
            errors=ERRORS,
        )
    except OSError as e:
        return CommandResult(stderr=f"{request.command}: {e.strerror or e}\n")

    logger.debug("%s exited with status %d", path, proc.returncode)
    return CommandResult(stdout=proc.stdout, stderr=proc.stderr)
