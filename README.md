# voidshell

Building blocks for a small POSIX-style shell, usable as a library.

## Modules

- `voidshell.environment` – `Environment`, the shell's variable table.
  Variables are kept in key order, and a variable may exist without a
  value (`None`).
  - `Environment.from_envp(envp, inherited_shlvl)` builds a table from
    `KEY=VALUE` entries and sets `SHLVL` one above `inherited_shlvl`
    (or to 1 when it is `None`). Leave `inherited_shlvl` out to read it
    from the process environment.
  - `get`, `insert`, `update` (only changes a variable that exists; a
    `None` value leaves the old value), `push_entry`, `remove`,
    `update_shell_level`.
  - `to_vector()` returns `KEY=VALUE` strings, and the bare key for a
    variable without a value.
  - `items()`, iteration, `in` and `len()` all work in key order.
- `voidshell.commands` – nodes of a parsed command line: `ExecCommand`
  (an `argv` list of at most `MAX_ARGS` entries; more raises
  `ValueError`), `PipeCommand` (`left`, `right`), `RedirCommand`
  (`sub_cmd`, `file`, `fd`, `mode`, `redir_type`), built from a
  `RedirData` with `RedirCommand.from_data`. Each node's `type` is a
  `CommandType` member (`EXEC`, `REDIR`, `PIPE`).
- `voidshell.builtins` – the builtin commands. Each writes to the streams
  it is given and returns an exit status:
  - `echo(args, out)` – leading `-n`, `-nn`, … flags suppress the newline.
  - `env(args, environment, out, err)` – prints variables that have a
    value; with an argument it prints that variable's value and raises
    `ShellExit(0)`, or reports it missing and raises `ShellExit(127)`.
  - `export(args, environment, out, err)` – accepts `KEY`, `KEY=VALUE`
    and `KEY+=VALUE`. Without arguments it lists everything through
    `display_exported` in `declare -x` form. It returns 1 if any name was
    invalid.
  - `unset(args, environment, err)` – returns 1 if any name was invalid.
  - `cd(args, environment, out, err)` – with no argument it goes to
    `HOME`. With `-` or an empty argument it goes to `OLDPWD` and prints
    that path. It keeps `PWD` and `OLDPWD` up to date when they exist.
  - `pwd(out, err)`.
  - `exit_builtin(args, out, err)` – raises `ShellExit` with the status
    to leave with:
    - the given number, masked to 0–255;
    - 2 for a non-numeric argument;
    - 1 for too many arguments;
    - 255 for a number outside 64 bits.

    With no argument it returns 0.
- `voidshell.linereader` – `LineReader(fd, buffer_size)` reads
  newline-terminated lines from a file descriptor. `read_line()` returns
  `None` at the end of input, and iterating yields every line. Lines keep
  their trailing newline. A bad descriptor or buffer size raises
  `ValueError`.
- `voidshell.strutils` – the string helpers:
  - `atoi` and `atoll`; `atoll` raises `OverflowError` outside the
    signed 64-bit range.
  - `is_numeric`.
  - `split_words(text, sep)`, which splits on `sep` and on whitespace.
  - `trim(text, chars)`.
  - `is_valid_identifier`.

## What it does not do

There is no interactive prompt and no `voidshell` command. The package
has no tokenizer or parser that turns a command line into the command
tree. It does not expand variables or remove quotes, and it handles no
here-documents or signals. Nothing here runs a command tree: no programs
are started, no pipes are connected and no redirections are opened. The
command nodes are plain data for a caller to build and walk.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import io
from voidshell.environment import Environment
from voidshell import builtins

env = Environment.from_envp(["PATH=/usr/bin", "HOME=/home/user"], None)
out, err = io.StringIO(), io.StringIO()

builtins.export(["export", "GREETING=hello", "GREETING+=_world"], env, out, err)
print(env.get("GREETING"))   # hello_world
print(env.get("SHLVL"))      # 1

builtins.echo(["echo", "-n", "no", "newline"], out)

try:
    builtins.exit_builtin(["exit", "42"], out, err)
except builtins.ShellExit as stop:
    print(stop.status)       # 42
```