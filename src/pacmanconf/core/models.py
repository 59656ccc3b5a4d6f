#!/usr/bin/env python3
"""
PACMANCONF CORE MODELS
----------------------
Defines the data structures shared across the pacmanconf parser.
ParsedLine is the per-line unit produced by the Lexer; Options,
Repository and Config form the immutable result handed to callers.

Author: pacmanconf maintainers
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

OPTIONS_SECTION = "options"


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    SECTION = "section"
    DIRECTIVE = "directive"


@dataclass(frozen=True)
class ParsedLine:
    """
    One classified line of a configuration file.

    Produced by the Lexer and consumed immediately by the EventScanner;
    never retained in the final Config.
    """
    kind: LineKind
    line_no: int = 0            # 1-based line number within its file
    name: Optional[str] = None  # Section name for SECTION lines
    key: Optional[str] = None   # Directive key (e.g. 'IgnorePkg')
    value: Optional[str] = None # Trimmed value, None for bare directives
    raw_line: str = ""          # The original unmutated line


@dataclass(frozen=True)
class Options:
    """
    The global [options] section.

    See pacman.conf(5) for the meaning of each field. Defaults match
    pacman's compiled-in defaults.
    """
    root_dir: str = "/"
    db_path: str = "/var/lib/pacman/"
    log_file: str = "/var/log/pacman.log"
    gpg_dir: str = "/etc/pacman.d/gnupg/"
    hook_dir: str = "/etc/pacman.d/hooks/"

    cache_dir: Tuple[str, ...] = ()
    hold_pkg: Tuple[str, ...] = ()
    ignore_pkg: Tuple[str, ...] = ()
    ignore_group: Tuple[str, ...] = ()
    architecture: Tuple[str, ...] = ()
    no_upgrade: Tuple[str, ...] = ()
    no_extract: Tuple[str, ...] = ()
    clean_method: Tuple[str, ...] = ()
    sig_level: Tuple[str, ...] = ()
    local_file_sig_level: Tuple[str, ...] = ()
    remote_file_sig_level: Tuple[str, ...] = ()

    use_syslog: bool = False
    color: bool = False
    no_confirm: bool = False
    check_space: bool = False
    verbose_pkg_lists: bool = False
    i_love_candy: bool = False
    disable_sandbox: bool = False
    disable_download_timeout: bool = False

    xfer_command: str = ""
    download_user: str = ""
    parallel_downloads: int = 1


@dataclass(frozen=True)
class Repository:
    """A package repository, i.e. any section other than [options]."""
    name: str
    servers: Tuple[str, ...] = ()
    sig_level: Tuple[str, ...] = ()
    usage: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Config:
    """
    The fully parsed configuration.

    `repos` keeps the order in which section headers first appeared
    across the root file and every included file.
    """
    options: Options = field(default_factory=Options)
    repos: Tuple[Repository, ...] = ()

    @property
    def repo_names(self) -> Tuple[str, ...]:
        return tuple(repo.name for repo in self.repos)

    def repo(self, name: str) -> Optional[Repository]:
        """Returns the repository called `name` (case-sensitive), or None."""
        for repo in self.repos:
            if repo.name == name:
                return repo
        return None
