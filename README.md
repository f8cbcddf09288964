# cellcli

A small, dependency-free command interpreter for line-oriented consoles.
You register commands, feed it text, and it matches each line against the
commands, fills in their arguments and either calls a callback or queues the
result.

## What it does

- Splits input into lines (on `\r`, `\n` and an unescaped `;;` outside
  double quotes) and lines into words on spaces that are neither quoted nor
  escaped.
- Matches words against name templates. In `r/elay` the part before the
  slash is a short form: the template accepts `r` or `relay`. Commas
  separate alternative names, as in `ls,list`. Matching ignores ASCII case
  unless told otherwise.
- Supports three kinds of commands (`CommandType`):
  - `NORMAL` commands with named (`-name value`), positional and flag
    arguments,
  - `BOUNDLESS` commands that take any number of values,
  - `SINGLE` commands that receive the rest of the line as one value.
- Removes double quotes and backslash escapes from argument values.
- Reports problems as `CommandError` objects (command not found, unknown
  argument, missing argument, unclosed quote), either through an error
  callback or queued for later.
- Supports pausing: while paused, parsed commands and errors are queued
  instead of dispatched, and `unpause()` hands them on.

## Modules

| Module | Contents |
| --- | --- |
| `cellcli.comparator` | `compare()` – name matching with `/` short forms and `,` alternatives |
| `cellcli.parser` | `parse_lines()`, `parse_words()`, `Line` |
| `cellcli.argument` | `Argument`, `ArgumentType`, `UnclosedQuoteError` |
| `cellcli.errors` | `CommandError`, `CommandErrorType` |
| `cellcli.command` | `Command`, `CommandType` |
| `cellcli.cli` | `SimpleCLI` – the command registry and dispatcher |

## Using the interpreter

```python
from cellcli.cli import SimpleCLI

cli = SimpleCLI()

def on_ping(command):
    print("ping", command.get_argument("host").value)

ping = cli.add_command("ping", on_ping)
ping.add_positional_argument("host")
ping.add_flag_argument("v")

cli.set_on_error(lambda error: print("ERROR:", error))

cli.parse("ping example.com -v")   # prints: ping example.com
cli.parse("pong")                  # prints: ERROR: Command not found at 'pong'
```

`add_command()`, `add_boundless_command()` and
`add_single_argument_command()` return the new `Command`. On a normal
command, `add_argument()` and `add_positional_argument()` add arguments that
are required unless a default is given; `add_flag_argument()` adds an
optional flag. Adding arguments to a boundless or single-argument command
raises `ValueError`.

Inside a callback, `command.get_argument(key)` looks an argument up by
position or by name and returns `None` when there is none. An `Argument`
has `value` (the parsed value, else the default, else `""`), `is_set`,
`required` and `optional`.

Without callbacks, parsed commands and errors are queued and can be taken
one at a time with `pop_command()` and `pop_error()`; `available`,
`errored`, `queued_commands` and `queued_errors` tell what is waiting. The
queues are bounded by the `command_queue_size` and `error_queue_size`
arguments of `SimpleCLI` (10 each); when a queue overflows, its oldest entry
is dropped.

`pause()` queues everything even when callbacks are set. `unpause()` passes
queued errors to the error callback, runs queued commands that have a
callback and leaves the rest in the queue.

`get_command(name)` returns the registered command whose template fits
`name`. `to_string()` renders a help text listing every command with its
arguments and, unless `descriptions=False`, its description.
`set_case_sensitive(True)` switches all commands, present and future, to
case-sensitive matching.

## Errors

`CommandError` is false when parsing succeeded and true otherwise. Its
`type` is a `CommandErrorType`, `message` a short description, and
`command`, `argument` and `data` (the offending word) say where it happened;
`str()` joins them, as in `Missing argument at command 'ping' at argument
'-host <value>'`. Errors compare by their type with `<`, `<=`, `>` and `>=`.

## Lower-level pieces

`parse_lines(text)` returns `Line` objects with the raw `text`, its `words`
and their `offsets`; `Line.rest` is everything after the first word.
`parse_words(text)` returns the raw words of one line. `compare(user_text,
template, case_sensitive)` is the name matcher used throughout.
`Command.parse(line)` matches one `Line` against one command and returns a
`CommandError`; `Command.reset()` clears what it filled in.

## What this package does not do

It is only the interpreter. It does not read from a terminal or serial
port or write anywhere: you pass strings to `parse()` and print from your
callbacks. It comes with no ready-made commands, no device settings or
storage, and no Modbus support.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.