#!/usr/bin/env python3
"""
PACMANCONF SCANNER - Event Parser
---------------------------------
Streams a configuration file through the Lexer, tracks the active
section and forwards every directive to a DirectiveHandler.

The scanner knows nothing about pacman semantics; any object that
implements DirectiveHandler can consume its events.

Author: pacmanconf maintainers
Date: 2026-10-18
"""

import logging
from abc import ABC, abstractmethod
from typing import IO, Iterator, NamedTuple, Optional

from pacmanconf.core.errors import ConfigIOError
from pacmanconf.core.models import LineKind
from pacmanconf.parsing.lexer import ConfLexer

logger = logging.getLogger("pacmanconf.scanner")


class Location(NamedTuple):
    """Where a directive was read from."""
    path: str
    line_no: int


class DirectiveHandler(ABC):
    """
    Receives one call per section header and per directive line, in
    file order. Exceptions raised here abort the scan unchanged.
    """

    def on_section(self, name: str, location: Location) -> None:
        """Called for every section header. Does nothing by default."""

    @abstractmethod
    def on_directive(self, section: Optional[str], key: str,
                     value: Optional[str], location: Location) -> None:
        ...


class EventScanner:
    """
    Drives a DirectiveHandler over one file. Recursive scans (Include)
    are started by the handler itself through `parse`.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.lexer = ConfLexer()
        self.encoding = encoding

    def _read_lines(self, fp: IO[str], path: str) -> Iterator[str]:
        try:
            for line in fp:
                yield line
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigIOError(path, e) from e

    def parse(self, path: str, initial_section: Optional[str],
              handler: DirectiveHandler) -> Optional[str]:
        """
        Scans `path` starting in `initial_section`.

        Section headers only affect the rest of this file. Returns the
        section that was active at end of file.
        """
        try:
            fp = open(path, "r", encoding=self.encoding)
        except OSError as e:
            raise ConfigIOError(path, e) from e

        logger.debug(f"Scanning {path} (section: {initial_section})")
        section = initial_section

        with fp:
            for line_no, line in enumerate(self._read_lines(fp, path), 1):
                parsed = self.lexer.classify(line, line_no, path)

                if parsed.kind is LineKind.SECTION:
                    section = parsed.name
                    handler.on_section(section, Location(path, line_no))
                elif parsed.kind is LineKind.DIRECTIVE:
                    handler.on_directive(section, parsed.key, parsed.value, Location(path, line_no))

        return section
