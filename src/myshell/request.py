"""Assemble tokens into a command request with its redirections."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from myshell.errors import ParseError
from myshell.tokenizer import Operator, Token, Word, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Redirect:
    """A file that replaces stdout or stderr for one command."""

    path: str
    append: bool = False


@dataclass(frozen=True)
class CommandRequest:
    """One parsed input line, ready for dispatch.

    An empty ``command`` is the no-op request produced by a blank line.
    """

    command: str = ""
    arguments: tuple[str, ...] = ()
    stdout_target: Redirect | None = None
    stderr_target: Redirect | None = None

    @property
    def is_empty(self) -> bool:
        return not self.command

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.arguments]


def build_request(tokens: Iterable[Token]) -> CommandRequest:
    """Partition tokens into command, arguments and redirections.

    Every operator must be followed by a word naming its target. A later
    redirect of the same stream replaces an earlier one.

    Raises ParseError when an operator has no target.
    """
    words: list[str] = []
    targets: dict[str, Redirect] = {}

    it = iter(tokens)
    for token in it:
        match token:
            case Word(text=text):
                words.append(text)
            case Operator() as op:
                target = next(it, None)
                if not isinstance(target, Word):
                    raise ParseError("expected a filename after redirection operator")
                targets[op.stream] = Redirect(target.text, append=op.append)

    # A line holding only redirections still opens (and truncates) its targets
    command, *arguments = words or [""]
    request = CommandRequest(
        command=command,
        arguments=tuple(arguments),
        stdout_target=targets.get("stdout"),
        stderr_target=targets.get("stderr"),
    )
    logger.debug("built request %r", request)
    return request


def parse_line(line: str) -> CommandRequest:
    """Tokenize and assemble a raw input line."""
    return build_request(tokenize(line))


@dataclass(frozen=True)
class CommandResult:
    """What a dispatched command produced.

    ``terminate`` is set by ``exit``: the shell stops after releasing any
    redirections for the line.
    """

    stdout: str = ""
    stderr: str = ""
    terminate: bool = False
