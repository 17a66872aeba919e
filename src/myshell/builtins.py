"""Built-in shell commands and dispatch to them."""

import logging
import os
from collections.abc import Callable
from typing import TypeAlias

from myshell.config import ShellConfig
from myshell.executor import run_external
from myshell.pathsearch import resolve
from myshell.request import CommandRequest, CommandResult

logger = logging.getLogger(__name__)

BuiltinHandler: TypeAlias = Callable[[CommandRequest, ShellConfig], CommandResult]


def builtin_noop(request: CommandRequest, config: ShellConfig) -> CommandResult:
    return CommandResult()


def builtin_exit(request: CommandRequest, config: ShellConfig) -> CommandResult:
    return CommandResult(terminate=True)


def builtin_echo(request: CommandRequest, config: ShellConfig) -> CommandResult:
    return CommandResult(stdout=" ".join(request.arguments) + "\n")


def builtin_pwd(request: CommandRequest, config: ShellConfig) -> CommandResult:
    if request.arguments:
        return CommandResult(stderr="pwd: too many arguments\n")
    try:
        cwd = os.getcwd()
    except OSError as e:
        return CommandResult(stderr=f"pwd: {e.strerror or e}\n")
    return CommandResult(stdout=cwd + "\n")


def builtin_cd(request: CommandRequest, config: ShellConfig) -> CommandResult:
    """Change directory; no argument or ``~`` means $HOME."""
    args = request.arguments
    if len(args) > 1:
        return CommandResult(stderr="chdir too many arguments\n")

    target = args[0] if args else "~"
    if target == "~":
        target = os.environ.get("HOME", "")

    try:
        os.chdir(target)
    except OSError as e:
        message = _capitalize(e.strerror or str(e))
        return CommandResult(stderr=f"{target}: {message}\n")
    return CommandResult()


def builtin_type(request: CommandRequest, config: ShellConfig) -> CommandResult:
    out: list[str] = []
    err: list[str] = []
    for name in request.arguments:
        match name:
            case n if n and n in BUILTIN_REGISTRY:
                out.append(f"{name} is a shell builtin\n")
            case _:
                path = resolve(name, config.search_path)
                if path:
                    out.append(f"{name} is {path}\n")
                else:
                    err.append(f"{name}: not found\n")
    return CommandResult(stdout="".join(out), stderr="".join(err))


def _capitalize(message: str) -> str:
    return message[:1].upper() + message[1:]


BUILTIN_REGISTRY: dict[str, BuiltinHandler] = {
    "": builtin_noop,
    "exit": builtin_exit,
    "echo": builtin_echo,
    "pwd": builtin_pwd,
    "cd": builtin_cd,
    "type": builtin_type,
}


def lookup(name: str) -> BuiltinHandler:
    """Return the builtin handler for name, or the external runner."""
    return BUILTIN_REGISTRY.get(name, run_external)


def dispatch(request: CommandRequest, config: ShellConfig) -> CommandResult:
    handler = lookup(request.command)
    logger.debug("dispatching %r to %s", request.command, handler.__name__)
    return handler(request, config)
