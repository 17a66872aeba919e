"""Exceptions raised while turning an input line into a dispatched command."""


class ShellError(Exception):
    """Base class for non-fatal errors reported by the shell."""


class ParseError(ShellError, ValueError):
    """The input line could not be tokenized or assembled into a request."""


class RedirectionError(ShellError, OSError):
    """A redirection target could not be opened; the command is not run."""


class InputError(Exception):
    """Reading the input stream failed for a reason other than end of input."""
