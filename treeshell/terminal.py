#!/usr/bin/env python3
"""
Terminal front end for treeshell.

This module provides the REPL on top of a Session. It parses each input
line, dispatches it to the session and turns the outcome, success or
failure, into the text shown to the user.

Design Principles:
- Parsing, dispatch and the tree itself stay separate
- Every command error is recovered here and reported as one line
- No global state: each TerminalSession owns its own tree and cursor
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .command_parser import CommandParser, Command
from .session import Session, PARENT
from .treestore import TreeStore, TreeError, AlreadyExists, AlreadyAtRoot, NotFound


logger = logging.getLogger(__name__)

WELCOME = "Welcome to the In-Memory File System!"
FAREWELL = "Exiting the File System. Goodbye!"
INPUT_ERROR = "Error reading input. Exiting."

COMMAND_USAGE = [
    'cd <directory_name>',
    'mkdir <directory_name>',
    'touch <file_name>',
    'ls',
    'print',
    'help',
    'exit',
]


@dataclass
class TerminalConfig:
    """Configuration for a terminal session."""
    root_name: str = 'root'
    prompt: str = '>> '
    show_banner: bool = True
    history_size: int = 1000


@dataclass
class CommandResult:
    """Text produced by a command and its exit status."""
    text: str = ''
    exit_code: int = 0

    def __str__(self) -> str:
        return self.text

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def usage_text() -> str:
    """List of available commands, as shown in the banner and by help."""
    lines = ["Available commands:"]
    lines.extend(f"  {usage}" for usage in COMMAND_USAGE)
    return '\n'.join(lines)


class CommandExecutor:
    """
    Executes parsed commands against a Session.

    Each handler takes the command argument (possibly None) and returns a
    CommandResult. Tree errors raised by the session are translated into
    failure results here, so the caller never sees an exception for an
    ordinary user mistake.
    """

    # Commands that need an argument, and what the argument names
    REQUIRED_ARGUMENT = {
        'cd': 'directory',
        'mkdir': 'directory',
        'touch': 'file',
    }

    def __init__(self, session: Session):
        self.session = session
        self.handlers: Dict[str, Callable[[Optional[str]], CommandResult]] = {
            'cd': self._cd,
            'mkdir': self._mkdir,
            'touch': self._touch,
            'ls': self._ls,
            'print': self._print,
            'help': self._help,
        }

    def execute(self, command: Command) -> CommandResult:
        """Execute a single command and return its result."""
        handler = self.handlers.get(command.name)
        if handler is None:
            logger.info("unknown command %r", command.name)
            return CommandResult(
                text=f"Error: Unknown command '{command.name}'.",
                exit_code=1
            )

        kind = self.REQUIRED_ARGUMENT.get(command.name)
        if kind and command.argument is None:
            logger.info("%s called without an argument", command.name)
            return CommandResult(
                text=f"Error: '{command.name}' command requires a {kind} name.",
                exit_code=1
            )

        if command.extra:
            logger.debug("ignoring extra arguments to %s: %s",
                         command.name, command.extra)

        try:
            return handler(command.argument)
        except TreeError as e:
            logger.info("%s %s failed: %s", command.name, command.argument, e)
            return CommandResult(text=self._describe_error(e), exit_code=1)

    def _describe_error(self, error: TreeError) -> str:
        if isinstance(error, AlreadyExists):
            if error.kind == 'file':
                return f"File with name {error.name} already exists here"
            return f"SubDirectory with name {error.name} already exists here"
        if isinstance(error, AlreadyAtRoot):
            return "You are already at root directory"
        if isinstance(error, NotFound):
            return "No such subdirectory here"
        return f"Error: {error}"

    # Handlers

    def _cd(self, name: str) -> CommandResult:
        directory = self.session.change_directory(name)
        if name == PARENT:
            return CommandResult(text=f"Switched to parent directory {directory.name}")
        return CommandResult(text=f"Switched to directory {name}")

    def _mkdir(self, name: str) -> CommandResult:
        self.session.make_directory(name)
        return CommandResult(text=f"Created SubDirectory {name}")

    def _touch(self, name: str) -> CommandResult:
        self.session.touch_file(name)
        return CommandResult(text=f"Created file {name}")

    def _ls(self, _argument: Optional[str] = None) -> CommandResult:
        listing = self.session.list()
        lines = ["Directories:"]
        lines.extend(f"  {name}/" for name in listing.directories)
        lines.append("Files:")
        lines.extend(f"  {name}" for name in listing.files)
        return CommandResult(text='\n'.join(lines))

    def _print(self, _argument: Optional[str] = None) -> CommandResult:
        return CommandResult(text=self.session.print_all())

    def _help(self, _argument: Optional[str] = None) -> CommandResult:
        return CommandResult(text=usage_text())


class CommandHistory:
    """Bounded history of the lines entered in a session."""

    def __init__(self, max_size: int = 1000):
        self.max_size = max_size
        self.history: List[str] = []

    def add(self, command: str):
        """Add a non-blank line to history."""
        if command and command.strip():
            self.history.append(command)
            if len(self.history) > self.max_size:
                self.history.pop(0)

    def __len__(self) -> int:
        return len(self.history)


class TerminalSession:
    """
    Main terminal session manager.

    Owns the tree, the cursor over it and the REPL loop. Independent
    instances never share state.
    """

    def __init__(self, config: Optional[TerminalConfig] = None,
                 session: Optional[Session] = None):
        self.config = config or TerminalConfig()
        self.session = session or Session(TreeStore(self.config.root_name))
        self.parser = CommandParser()
        self.executor = CommandExecutor(self.session)
        self.history = CommandHistory(self.config.history_size)
        self.running = False

    def banner(self) -> str:
        return f"{WELCOME}\n{usage_text()}\n"

    def execute_command(self, command_line: str) -> Optional[str]:
        """
        Execute a command line and return the output.

        Returns '' for blank input and None for the exit command.
        """
        command = self.parser.parse(command_line)
        if command is None:
            return ''

        if command.name == 'exit':
            return None

        return self.executor.execute(command).text

    def run_interactive(self) -> int:
        """Run the REPL until exit or end of input. Returns the exit status."""
        self.running = True

        if self.config.show_banner:
            print(self.banner())

        while self.running:
            try:
                command_line = input(self.config.prompt)
            except EOFError:
                print(INPUT_ERROR)
                break
            except KeyboardInterrupt:
                print("^C")
                continue

            self.history.add(command_line)
            output = self.execute_command(command_line)

            if output is None:
                print(FAREWELL)
                break

            if output:
                print(output)

        self.running = False
        return 0

    def run_command(self, command_line: str) -> str:
        """
        Run a single command and return output.

        This method is useful for non-interactive use.
        """
        output = self.execute_command(command_line)
        return FAREWELL if output is None else output

    def run_script(self, script_lines: List[str]) -> List[str]:
        """
        Run a script (list of command lines) and return outputs.

        Blank lines and '#' comments are skipped; 'exit' ends the script.
        """
        outputs = []
        for line in script_lines:
            line = line.strip()
            if not line or line.startswith('#'):
                continue

            output = self.execute_command(line)
            if output is None:
                outputs.append(FAREWELL)
                break
            outputs.append(output)

        return outputs


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='treeshell',
        description='In-memory hierarchical filesystem shell'
    )
    parser.add_argument('-c', '--command', help='Execute command and exit')
    parser.add_argument('-s', '--script', type=argparse.FileType('r'),
                        help='Execute commands from a file and exit')
    parser.add_argument('--root-name', default='root',
                        help='Name of the root directory (default: root)')
    parser.add_argument('--prompt', default='>> ', help='Prompt string')
    parser.add_argument('--no-banner', action='store_true',
                        help='Do not print the welcome banner')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Diagnostic log level on stderr (default: WARNING)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the treeshell terminal."""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    config = TerminalConfig(
        root_name=args.root_name,
        prompt=args.prompt,
        show_banner=not args.no_banner
    )
    terminal = TerminalSession(config=config)

    if args.command:
        output = terminal.run_command(args.command)
        if output:
            print(output)
        return 0

    if args.script:
        with args.script:
            for output in terminal.run_script(args.script.readlines()):
                if output:
                    print(output)
        return 0

    return terminal.run_interactive()


if __name__ == '__main__':
    sys.exit(main())
