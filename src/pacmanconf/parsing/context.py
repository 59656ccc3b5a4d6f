#!/usr/bin/env python3
"""
PACMANCONF INCLUDE CONTEXT
--------------------------
Tracks the active inclusion chain of a single read: the files
currently open on the call stack, in order. Each file is kept twice,
once canonical (for the cycle check) and once as it was opened (for
resolving relative Include patterns).

Author: pacmanconf maintainers
Date: 2026-10-18
"""

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List

from pacmanconf.core.errors import CyclicIncludeError, IncludeDepthError

DEFAULT_MAX_INCLUDE_DEPTH = 32


@dataclass
class IncludeContext:
    """
    The stack of files being parsed. A path is only present while its
    file is open, so the same file may be included again from an
    unrelated branch.
    """
    max_depth: int = DEFAULT_MAX_INCLUDE_DEPTH
    chain: List[str] = field(default_factory=list)  # canonical paths, root first
    opened: List[str] = field(default_factory=list)  # absolute, symlinks kept

    @property
    def depth(self) -> int:
        return len(self.chain)

    @property
    def current_dir(self) -> str:
        """Directory of the file being parsed, for relative patterns."""
        if not self.opened:
            return os.getcwd()
        return os.path.dirname(self.opened[-1])

    @staticmethod
    def canonical(path: str) -> str:
        return os.path.realpath(path)

    @contextmanager
    def enter(self, path: str) -> Iterator[str]:
        """
        Pushes `path` for the duration of the block. The root file
        counts as depth one.
        """
        canonical = self.canonical(path)
        if canonical in self.chain:
            raise CyclicIncludeError(path)
        if self.depth > self.max_depth:
            raise IncludeDepthError(path, self.max_depth)

        self.chain.append(canonical)
        self.opened.append(os.path.abspath(path))
        try:
            yield canonical
        finally:
            self.opened.pop()
            self.chain.pop()
