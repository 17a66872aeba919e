"""Bind stdout/stderr to redirection targets for a single command."""

import contextlib
import logging
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from myshell.config import ENCODING, ERRORS
from myshell.errors import RedirectionError
from myshell.request import CommandRequest, Redirect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Streams:
    """The output destinations bound for one dispatch."""

    stdout: TextIO
    stderr: TextIO

    def write(self, stdout: str, stderr: str) -> None:
        if stdout:
            self.stdout.write(stdout)
            self.stdout.flush()
        if stderr:
            self.stderr.write(stderr)
            self.stderr.flush()


@contextlib.contextmanager
def open_redirects(
    request: CommandRequest,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> Iterator[Streams]:
    """Open the request's targets and yield the streams to write to.

    Streams without a target fall back to ``stdout``/``stderr``, or to the
    process's standard streams. Opened files are closed when the block
    exits, however it exits.

    Raises RedirectionError before yielding if a target cannot be opened;
    any file already opened for the request is closed first.
    """
    with contextlib.ExitStack() as stack:
        err = _open_target(stack, request.stderr_target) or stderr or sys.stderr
        out = _open_target(stack, request.stdout_target) or stdout or sys.stdout
        yield Streams(stdout=out, stderr=err)


def _open_target(stack: contextlib.ExitStack, target: Redirect | None) -> TextIO | None:
    if target is None:
        return None
    mode = "a" if target.append else "w"
    try:
        fh = stack.enter_context(
            open(target.path, mode, encoding=ENCODING, errors=ERRORS)  # noqa: SIM115
        )
    except OSError as e:
        raise RedirectionError(e.errno, e.strerror, target.path) from e
    logger.debug("opened %s for %s", target.path, "append" if target.append else "write")
    return fh
