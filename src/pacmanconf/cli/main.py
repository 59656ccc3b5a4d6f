#!/usr/bin/env python3
"""
PACMANCONF CLI
--------------
Thin command-line wrapper around ConfigReader:

    pacmanconf show     tables of [options] and repositories
    pacmanconf expand   canonical pacman.conf text, Includes inlined
    pacmanconf export   YAML dump

Author: pacmanconf maintainers
Date: 2026-10-18
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.logging import RichHandler

from pacmanconf import __version__
from pacmanconf.cli.formatter import ConfFormatter, err_console
from pacmanconf.core.engine import DEFAULT_CONFIG_PATH, ConfigReader
from pacmanconf.core.errors import PacmanConfError
from pacmanconf.parsing.exporter import ConfigExporter


class PacmanConfCLI:
    """
    Translates command-line arguments into a single ConfigReader read
    and renders the result.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="pacmanconf",
            description="pacmanconf - inspect pacman.conf without running pacman",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self.formatter = ConfFormatter()
        self.exporter = ConfigExporter()
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("--version", action="version", version=f"pacmanconf v{__version__}")
        self.parser.add_argument("-v", "--verbose", action="store_true",
                                 help="Log skipped directives and included files")

        common = argparse.ArgumentParser(add_help=False)
        common.add_argument("-c", "--config", default=DEFAULT_CONFIG_PATH,
                            help=f"Configuration file to read (default: {DEFAULT_CONFIG_PATH})")
        common.add_argument("--root", default=None, help="Override RootDir, like pacman --root")

        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")
        subparsers.add_parser("show", parents=[common], help="Show options and repositories as tables")
        subparsers.add_parser("expand", parents=[common], help="Print canonical pacman.conf text")
        subparsers.add_parser("export", parents=[common], help="Print the configuration as YAML")

    def _configure_logging(self, verbose: bool):
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(name)s: %(message)s",
            handlers=[RichHandler(console=err_console, show_time=False)],
            force=True,
        )

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit status."""
        args = self.parser.parse_args(argv)
        if not args.command:
            self.parser.print_help()
            return 0

        self._configure_logging(args.verbose)

        reader = ConfigReader().config_path(args.config)
        if args.root:
            reader.root_dir(args.root)

        try:
            config = reader.read()
        except PacmanConfError as e:
            self.formatter.print_error(str(e))
            return 1

        if args.command == "show":
            self.formatter.print_options(config, args.config)
            self.formatter.print_repos(config)
        elif args.command == "expand":
            self.formatter.print_text(self.exporter.to_ini(config), "ini", args.config)
        elif args.command == "export":
            self.formatter.print_text(self.exporter.to_yaml(config), "yaml", args.config)
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Application entry point with interrupt handling."""
    try:
        return PacmanConfCLI().run(argv)
    except KeyboardInterrupt:
        err_console.print("\n[bold red]Terminated by user.[/bold red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
