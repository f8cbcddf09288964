"""A console that matches input lines against registered commands.

Matched commands run their callback straight away. A command without a
callback, or one matched while parsing is paused, is queued instead. Parse
errors go to the error callback when there is one and parsing is not
paused; otherwise they are queued as well.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Optional

from .command import Callback, Command, CommandType
from .errors import CommandError, CommandErrorType
from .parser import parse_lines

__all__ = ["SimpleCLI"]

ErrorCallback = Callable[[CommandError], None]


def _bounded_queue(size: int) -> deque:
    # A queue that already holds `size` entries still takes one more before
    # the oldest is dropped; a size below one keeps nothing at all.
    return deque(maxlen=size + 1 if size >= 1 else 0)


class SimpleCLI:
    """A set of commands together with queues of parsed commands and errors."""

    def __init__(self, command_queue_size: int = 10, error_queue_size: int = 10) -> None:
        self.commands: list[Command] = []
        self._case_sensitive = False
        self._paused = False
        self._on_error: Optional[ErrorCallback] = None
        self._command_queue: deque[Command] = _bounded_queue(command_queue_size)
        self._error_queue: deque[CommandError] = _bounded_queue(error_queue_size)

    # ----- registration -----

    def _register(self, name: str, kind: CommandType, callback: Optional[Callback]) -> Command:
        command = Command(name=name, type=kind, callback=callback)
        command.case_sensitive = self._case_sensitive
        self.commands.append(command)
        return command

    def add_command(self, name: str, callback: Optional[Callback] = None) -> Command:
        """Register a command with named, positional and flag arguments."""
        return self._register(name, CommandType.NORMAL, callback)

    def add_boundless_command(self, name: str, callback: Optional[Callback] = None) -> Command:
        """Register a command that takes any number of anonymous values."""
        return self._register(name, CommandType.BOUNDLESS, callback)

    def add_single_argument_command(self, name: str, callback: Optional[Callback] = None) -> Command:
        """Register a command that takes the rest of the line as one value."""
        return self._register(name, CommandType.SINGLE, callback)

    # ----- parsing -----

    def _report(self, error: CommandError) -> None:
        if self._on_error is not None and not self._paused:
            self._on_error(error)
        else:
            self._error_queue.append(error)

    def parse(self, text: Optional[str]) -> None:
        """Parse *text*, which may hold several lines, and act on each line."""
        if text is None:
            return
        for line in parse_lines(text):
            success = False
            errored = False
            for command in self.commands:
                result = command.parse(line)
                if not result:
                    if command.callback is not None and not self._paused:
                        command.callback(command)
                    else:
                        self._command_queue.append(command.copy())
                    success = True
                elif result.type > CommandErrorType.COMMAND_NOT_FOUND:
                    self._report(result)
                    errored = True
                command.reset()
                if success or errored:
                    break

            if not success and not errored:
                first = line.words[0] if line.words else None
                self._report(CommandError.not_found(None, first))

    # ----- pausing -----

    def pause(self) -> None:
        """Queue commands and errors instead of handing them to callbacks."""
        self._paused = True

    def unpause(self) -> None:
        """Resume, delivering queued errors and running queued callbacks."""
        self._paused = False

        while self._on_error is not None and self._error_queue:
            self._on_error(self._error_queue.popleft())

        pending = list(self._command_queue)
        self._command_queue.clear()
        for command in pending:
            if command.callback is not None:
                command.callback(command)
            else:
                self._command_queue.append(command)

    @property
    def paused(self) -> bool:
        return self._paused

    # ----- queues -----

    @property
    def available(self) -> bool:
        """True when parsed commands are waiting in the queue."""
        return bool(self._command_queue)

    @property
    def errored(self) -> bool:
        """True when parse errors are waiting in the queue."""
        return bool(self._error_queue)

    @property
    def queued_commands(self) -> int:
        return len(self._command_queue)

    @property
    def queued_errors(self) -> int:
        return len(self._error_queue)

    def pop_command(self) -> Optional[Command]:
        """Take the oldest parsed command from the queue, or None."""
        return self._command_queue.popleft() if self._command_queue else None

    def pop_error(self) -> Optional[CommandError]:
        """Take the oldest parse error from the queue, or None."""
        return self._error_queue.popleft() if self._error_queue else None

    # ----- lookup and settings -----

    def get_command(self, name: Optional[str]) -> Optional[Command]:
        """Return the registered command whose name template fits *name*."""
        if name is None:
            return None
        return next((command for command in self.commands if command.matches(name)), None)

    def to_string(self, descriptions: bool = True) -> str:
        """Render the usage of every registered command."""
        parts = []
        for command in self.commands:
            parts.append(command.to_string(descriptions))
            if descriptions:
                parts.append("\r\n")
            parts.append("\r\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def set_case_sensitive(self, case_sensitive: bool = True) -> None:
        """Set case sensitivity for all commands, present and future."""
        self._case_sensitive = case_sensitive
        for command in self.commands:
            command.case_sensitive = case_sensitive

    def set_on_error(self, callback: Optional[ErrorCallback]) -> None:
        """Set the function that receives parse errors."""
        self._on_error = callback