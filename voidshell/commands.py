"""Nodes of a parsed command line."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Union

MAX_ARGS = 1024


class CommandType(enum.IntEnum):
    """Kinds of command node."""

    EXEC = 1
    REDIR = 2
    PIPE = 3


@dataclass
class ExecCommand:
    """A simple command: a program name followed by its arguments."""

    type: ClassVar[CommandType] = CommandType.EXEC
    argv: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.argv) > MAX_ARGS:
            raise ValueError(f"too many arguments: {len(self.argv)} > {MAX_ARGS}")


@dataclass
class PipeCommand:
    """Two commands joined by a pipe."""

    type: ClassVar[CommandType] = CommandType.PIPE
    left: Command
    right: Command


@dataclass(frozen=True)
class RedirData:
    """Where a redirection points: target file, descriptor and open mode."""

    file: str
    fd: int
    mode: int


@dataclass
class RedirCommand:
    """A command whose descriptor ``fd`` is redirected to ``file``."""

    type: ClassVar[CommandType] = CommandType.REDIR
    sub_cmd: Command
    file: str
    fd: int
    mode: int
    redir_type: str

    @classmethod
    def from_data(cls, sub_cmd: Command, data: RedirData, redir_type: str) -> RedirCommand:
        """Wrap ``sub_cmd`` in the redirection described by ``data``."""
        return cls(
            sub_cmd=sub_cmd,
            file=data.file,
            fd=data.fd,
            mode=data.mode,
            redir_type=redir_type,
        )


Command = Union[ExecCommand, PipeCommand, RedirCommand]