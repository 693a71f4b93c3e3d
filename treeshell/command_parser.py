#!/usr/bin/env python3
"""
Command parser for the treeshell terminal.

Translates one input line into a Command. The grammar is deliberately small:
a command name followed by at most one whitespace-separated argument. There
is no quoting, no flags and no multi-segment paths.
"""

from typing import List, Optional
from dataclasses import dataclass, field


@dataclass
class Command:
    """
    A single parsed command.

    ``argument`` is the first token after the name, or None when the line
    holds the command name alone.
    """
    name: str
    argument: Optional[str] = None
    extra: List[str] = field(default_factory=list)  # Tokens past the argument

    def __str__(self) -> str:
        if self.argument is None:
            return self.name
        return f"{self.name} {self.argument}"


class CommandParser:
    """Parser for `<command> [<argument>]` lines."""

    def parse(self, command_line: str) -> Optional[Command]:
        """
        Parse a command line.

        Returns None for empty or whitespace-only input.
        """
        if not command_line or command_line.strip() == '':
            return None

        tokens = command_line.split()
        name = tokens[0]
        argument = tokens[1] if len(tokens) > 1 else None
        return Command(name=name, argument=argument, extra=tokens[2:])
