"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
from typing import TextIO

from voidshell.environment import Environment
from voidshell.strutils import atoll, is_numeric, is_valid_identifier


class ShellExit(Exception):
    """Raised when a builtin ends the shell; ``status`` is the exit status."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status & 0xFF


def _is_n_flag(arg: str) -> bool:
    return len(arg) > 1 and arg[0] == "-" and set(arg[1:]) == {"n"}


def echo(args: list[str], out: TextIO) -> int:
    """Print the arguments separated by spaces; leading ``-n`` flags drop the newline."""
    words = args[1:]
    newline = True
    while words and _is_n_flag(words[0]):
        newline = False
        words = words[1:]
    out.write(" ".join(words))
    if newline:
        out.write("\n")
    return 0


def env(args: list[str], environment: Environment, out: TextIO, err: TextIO) -> int:
    """Print every variable that has a value.

    With an argument, print that variable's value and end the shell with
    status 0, or report it missing and end the shell with status 127.
    """
    if len(args) > 1:
        name = args[1]
        if name in environment:
            value = environment.get(name)
            if value is not None:
                out.write(f"{value}\n")
            raise ShellExit(0)
        err.write(f"env: {name}: No such file or directory\n")
        raise ShellExit(127)
    for key, value in environment.items():
        if value is not None:
            out.write(f"{key}={value}\n")
    return 0


def display_exported(environment: Environment, out: TextIO) -> None:
    """Print every variable in ``declare -x`` form."""
    for key, value in environment.items():
        if value is None:
            out.write(f"declare -x {key}\n")
        else:
            out.write(f'declare -x {key}="{value}"\n')


def export(args: list[str], environment: Environment, out: TextIO, err: TextIO) -> int:
    """Set variables from ``KEY``, ``KEY=VALUE`` or ``KEY+=VALUE`` arguments.

    Without arguments, list the variables. Returns 1 if any name was invalid.
    """
    if len(args) < 2:
        display_exported(environment, out)
        return 0
    status = 0
    for arg in args[1:]:
        head, equal, value = arg.partition("=")
        append = bool(equal) and head.endswith("+")
        key = head[:-1] if append else head
        if not is_valid_identifier(key):
            err.write(f"minishell: export: `{arg}': not a valid identifier\n")
            status = 1
            continue
        if not equal:
            environment.insert(key, None)
            continue
        if append:
            existing = environment.get(key)
            if existing is not None:
                value = existing + value
        environment.insert(key, value)
    return status


def unset(args: list[str], environment: Environment, err: TextIO) -> int:
    """Remove the named variables. Returns 1 if any name was invalid."""
    status = 0
    for name in args[1:]:
        if not is_valid_identifier(name):
            err.write(f"minishell: unset: `{name}': not a valid identifier\n")
            status = 1
            continue
        environment.remove(name)
    return status


def _getcwd() -> str | None:
    try:
        return os.getcwd()
    except OSError:
        return None


def _record_cwd(key: str, environment: Environment) -> None:
    cwd = _getcwd()
    if cwd is not None:
        environment.update(key, cwd)


def _missing(err: TextIO, what: str) -> None:
    err.write(f"minishell: cd: '{what}': No such file or directory\n")


def _change_to(path: str, environment: Environment, err: TextIO) -> bool:
    _record_cwd("OLDPWD", environment)
    try:
        os.chdir(path)
    except OSError:
        _missing(err, path)
        return False
    _record_cwd("PWD", environment)
    return True


def _cd_oldpwd(environment: Environment, out: TextIO, err: TextIO) -> int:
    path = environment.get("OLDPWD")
    if path is None:
        _missing(err, "OLDPWD")
        return 1
    if not _change_to(path, environment, err):
        return 1
    out.write(f"{path}\n")
    return 0


def _cd_home(environment: Environment, err: TextIO) -> int:
    if not any(key.startswith("HOME") for key in environment):
        _missing(err, "HOME")
        return 1
    home = environment.get("HOME")
    if home is None:
        _missing(err, "")
        return 1
    return 0 if _change_to(home, environment, err) else 1


def cd(args: list[str], environment: Environment, out: TextIO, err: TextIO) -> int:
    """Change the working directory and keep PWD and OLDPWD current.

    No argument goes to HOME; ``-`` or an empty argument goes to OLDPWD
    and prints it.
    """
    cwd = _getcwd()
    if len(args) > 2:
        err.write("minishell: cd: too many arguments\n")
        return 1
    if len(args) < 2:
        return _cd_home(environment, err)
    target = args[1]
    if target in ("-", ""):
        return _cd_oldpwd(environment, out, err)
    if target != ".":
        _record_cwd("OLDPWD", environment)
        try:
            os.chdir(target)
        except OSError as exc:
            err.write(f"minishell: cd: {target}: {exc.strerror}\n")
            return 1
        _record_cwd("PWD", environment)
        return 0
    if cwd is None:
        err.write(
            "cd: error retrieving current directory: getcwd: "
            "cannot access parent directories: No such file or directory\n"
        )
        return 1
    return 0


def pwd(out: TextIO, err: TextIO) -> int:
    """Print the working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        err.write(f"pwd: {exc.strerror}\n")
        return 1
    out.write(f"{cwd}\n")
    return 0


def exit_builtin(args: list[str], out: TextIO, err: TextIO) -> int:
    """End the shell with the given status by raising ShellExit.

    With no argument nothing happens and 0 is returned; the caller decides
    how to leave.
    """
    if len(args) < 2:
        return 0
    arg = args[1]
    out.write("exit\n")
    if not is_numeric(arg):
        err.write(f"voidshell: exit: {arg}: numeric argument required\n")
        raise ShellExit(2)
    if len(args) > 2:
        err.write("voidshell: exit: too many arguments\n")
        raise ShellExit(1)
    try:
        code = atoll(arg)
    except OverflowError:
        err.write(f"voidshell: exit: {arg}: numeric argument required\n")
        raise ShellExit(255) from None
    raise ShellExit(code)