"""Main shell loop: prompt, read, parse, dispatch, repeat."""

import logging
import sys
from typing import TextIO

from myshell.builtins import dispatch
from myshell.config import ENCODING, ERRORS, ShellConfig
from myshell.errors import InputError, ParseError, RedirectionError
from myshell.redirection import open_redirects
from myshell.request import parse_line

logger = logging.getLogger(__name__)


class Shell:
    """Shell state and main loop."""

    def __init__(self, config: ShellConfig | None = None, stdin: TextIO | None = None) -> None:
        self.config = config if config is not None else ShellConfig.from_environ()
        self._stdin = stdin

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def read_line(self) -> str | None:
        """Prompt and read one line, trailing newline included.

        Returns None at end of input. Raises InputError on any
        other read failure.
        """
        sys.stdout.write(self.config.prompt)
        sys.stdout.flush()
        try:
            line = self.stdin.readline()
        except OSError as e:
            raise InputError(str(e)) from e
        return line or None

    def run_command(self, line: str) -> bool:
        """Parse and dispatch one line.

        Returns False once the line asked the shell to exit.
        """
        try:
            request = parse_line(line)
        except ParseError as e:
            print(f"myshell: {e}", file=sys.stderr)
            return True

        try:
            with open_redirects(request) as streams:
                result = dispatch(request, self.config)
                streams.write(result.stdout, result.stderr)
        except RedirectionError as e:
            print(f"myshell: {e.filename}: {e.strerror}", file=sys.stderr)
            return True

        return not result.terminate

    def run(self) -> int:
        """Main shell loop. Returns the process exit status."""
        while True:
            try:
                line = self.read_line()
            except InputError as e:
                print(f"myshell: unrecoverable error: {e}", file=sys.stderr)
                return 1

            if line is None:
                sys.stdout.write("\nexit\n")
                sys.stdout.flush()
                return 0

            if not self.run_command(line):
                logger.debug("exit requested")
                return 0


def main() -> None:
    """Entry point."""
    config = ShellConfig.from_environ()
    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(name)s: %(levelname)s: %(message)s",
    )
    for stream in (sys.stdin, sys.stdout, sys.stderr):
        stream.reconfigure(encoding=ENCODING, errors=ERRORS)
    shell = Shell(config)
    sys.exit(shell.run())
