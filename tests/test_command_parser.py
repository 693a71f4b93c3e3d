#!/usr/bin/env python3
"""
Tests for the treeshell command parser.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest

from treeshell.command_parser import CommandParser, Command


class TestCommandParser(unittest.TestCase):
    """Test the command parser."""

    def setUp(self):
        """Set up test fixtures."""
        self.parser = CommandParser()

    def test_parse_command_without_argument(self):
        cmd = self.parser.parse("ls")
        self.assertEqual(cmd.name, "ls")
        self.assertIsNone(cmd.argument)
        self.assertEqual(cmd.extra, [])

    def test_parse_command_with_argument(self):
        cmd = self.parser.parse("mkdir docs")
        self.assertEqual(cmd, Command(name="mkdir", argument="docs"))

    def test_parse_parent_argument(self):
        cmd = self.parser.parse("cd ..")
        self.assertEqual(cmd.argument, "..")

    def test_extra_tokens_are_kept_apart(self):
        cmd = self.parser.parse("touch a b c")
        self.assertEqual(cmd.argument, "a")
        self.assertEqual(cmd.extra, ["b", "c"])

    def test_surrounding_whitespace(self):
        cmd = self.parser.parse("   cd\t  docs  \n")
        self.assertEqual(cmd.name, "cd")
        self.assertEqual(cmd.argument, "docs")

    def test_empty_input(self):
        self.assertIsNone(self.parser.parse(""))
        self.assertIsNone(self.parser.parse("   "))
        self.assertIsNone(self.parser.parse("\n"))

    def test_no_path_splitting(self):
        cmd = self.parser.parse("cd a/b/c")
        self.assertEqual(cmd.argument, "a/b/c")

    def test_str(self):
        self.assertEqual(str(self.parser.parse("ls")), "ls")
        self.assertEqual(str(self.parser.parse("cd  docs")), "cd docs")


if __name__ == '__main__':
    unittest.main()
