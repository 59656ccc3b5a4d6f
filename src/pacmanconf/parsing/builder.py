#!/usr/bin/env python3
"""
PACMANCONF BUILDER - The Interpreter
------------------------------------
Consumes directive events from the EventScanner and builds the Config
model: option effects, repository accumulation, recursive Include and
the final defaults pass.

Per-key behaviour lives in two static tables (OPTION_EFFECTS and
REPO_EFFECTS); recognising a new key is a one-line edit there.

Author: pacmanconf maintainers
Date: 2026-10-18
"""

import glob
import logging
import os
import posixpath
import re
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from pacmanconf.core.errors import GlobPatternError, InvalidValueError
from pacmanconf.core.models import OPTIONS_SECTION, Config, Options, Repository
from pacmanconf.parsing.context import IncludeContext
from pacmanconf.parsing.scanner import DirectiveHandler, EventScanner, Location

logger = logging.getLogger("pacmanconf.builder")

INCLUDE_KEY = "Include"
DEFAULT_CACHE_DIR = "/var/cache/pacman/pkg/"

# Scalar paths that pacman derives from RootDir when they are not set.
ROOTED_PATHS = ("db_path", "log_file", "gpg_dir", "hook_dir")


class Effect(Enum):
    SCALAR = "scalar"      # last value wins
    SEQUENCE = "sequence"  # whitespace-split tokens are appended
    FLAG = "flag"          # presence sets True
    INTEGER = "integer"    # last value wins, must be a positive int
    SERVER = "server"      # the whole value is appended as one entry


OPTION_EFFECTS: Dict[str, Tuple[Effect, str]] = {
    "RootDir": (Effect.SCALAR, "root_dir"),
    "DBPath": (Effect.SCALAR, "db_path"),
    "LogFile": (Effect.SCALAR, "log_file"),
    "GPGDir": (Effect.SCALAR, "gpg_dir"),
    "HookDir": (Effect.SCALAR, "hook_dir"),
    "XferCommand": (Effect.SCALAR, "xfer_command"),
    "DownloadUser": (Effect.SCALAR, "download_user"),
    "ParallelDownloads": (Effect.INTEGER, "parallel_downloads"),
    "CacheDir": (Effect.SEQUENCE, "cache_dir"),
    "HoldPkg": (Effect.SEQUENCE, "hold_pkg"),
    "IgnorePkg": (Effect.SEQUENCE, "ignore_pkg"),
    "IgnoreGroup": (Effect.SEQUENCE, "ignore_group"),
    "Architecture": (Effect.SEQUENCE, "architecture"),
    "NoUpgrade": (Effect.SEQUENCE, "no_upgrade"),
    "NoExtract": (Effect.SEQUENCE, "no_extract"),
    "CleanMethod": (Effect.SEQUENCE, "clean_method"),
    "SigLevel": (Effect.SEQUENCE, "sig_level"),
    "LocalFileSigLevel": (Effect.SEQUENCE, "local_file_sig_level"),
    "RemoteFileSigLevel": (Effect.SEQUENCE, "remote_file_sig_level"),
    "UseSyslog": (Effect.FLAG, "use_syslog"),
    "Color": (Effect.FLAG, "color"),
    "NoConfirm": (Effect.FLAG, "no_confirm"),
    "CheckSpace": (Effect.FLAG, "check_space"),
    "VerbosePkgLists": (Effect.FLAG, "verbose_pkg_lists"),
    "ILoveCandy": (Effect.FLAG, "i_love_candy"),
    "DisableSandbox": (Effect.FLAG, "disable_sandbox"),
    "DisableDownloadTimeout": (Effect.FLAG, "disable_download_timeout"),
}

REPO_EFFECTS: Dict[str, Tuple[Effect, str]] = {
    "Server": (Effect.SERVER, "servers"),
    "SigLevel": (Effect.SEQUENCE, "sig_level"),
    "Usage": (Effect.SEQUENCE, "usage"),
}


@dataclass
class RepositoryDraft:
    """Mutable repository state while parsing is in progress."""
    name: str
    servers: List[str] = field(default_factory=list)
    sig_level: List[str] = field(default_factory=list)
    usage: List[str] = field(default_factory=list)


def _check_pattern(pattern: str) -> None:
    """Rejects character classes that are never closed."""
    i = 0
    while i < len(pattern):
        if pattern[i] == '[':
            j = i + 1
            if j < len(pattern) and pattern[j] in '!^':
                j += 1
            if j < len(pattern) and pattern[j] == ']':
                j += 1
            close = pattern.find(']', j)
            if close == -1:
                raise GlobPatternError(pattern, "unterminated character class")
            i = close
        i += 1


class ConfigBuilder(DirectiveHandler):
    """
    Owns the in-progress model for exactly one top-level read.
    """

    def __init__(self, scanner: Optional[EventScanner] = None,
                 context: Optional[IncludeContext] = None):
        self.scanner = scanner or EventScanner()
        self.context = context or IncludeContext()

        # Seed every option with its default
        self._options: Dict[str, object] = {
            f.name: (list(f.default) if isinstance(f.default, tuple) else f.default)
            for f in fields(Options)
        }
        self._explicit: Set[str] = set()
        self._repos: Dict[str, RepositoryDraft] = {}

    # --- ENTRY ---

    def build(self, path: str) -> "ConfigBuilder":
        """Parses the root file and everything it includes."""
        with self.context.enter(path):
            self.scanner.parse(path, None, self)
        return self

    # --- EVENTS ---

    def on_section(self, name: str, location: Location) -> None:
        # Headers register repositories, so order follows the headers
        if name != OPTIONS_SECTION:
            self._repository(name)

    def on_directive(self, section: Optional[str], key: str,
                     value: Optional[str], location: Location) -> None:
        if key == INCLUDE_KEY:
            self._include(section, value, location)
        elif section is None:
            logger.debug(f"{location.path}:{location.line_no}: '{key}' outside of any section, skipped")
        elif section == OPTIONS_SECTION:
            self._apply_option(key, value, location)
        else:
            self._apply_repo(section, key, value, location)

    def _repository(self, name: str) -> RepositoryDraft:
        """Returns the draft for `name`, registering it on first use."""
        repo = self._repos.get(name)
        if repo is None:
            repo = self._repos[name] = RepositoryDraft(name=name)
        return repo

    def _apply_option(self, key: str, value: Optional[str], location: Location) -> None:
        effect = OPTION_EFFECTS.get(key)
        if effect is None:
            logger.debug(f"{location.path}:{location.line_no}: unknown option '{key}', skipped")
            return

        kind, attr = effect
        if kind is Effect.FLAG:
            self._options[attr] = True
        elif value is None:
            # Valued keys given without '=' carry nothing to store
            return
        elif kind is Effect.SEQUENCE:
            self._options[attr].extend(value.split())
        elif kind is Effect.INTEGER:
            self._options[attr] = self._parse_positive_int(key, value, location)
            self._explicit.add(attr)
        else:
            self._options[attr] = value
            self._explicit.add(attr)

    def _apply_repo(self, section: str, key: str, value: Optional[str], location: Location) -> None:
        repo = self._repository(section)
        effect = REPO_EFFECTS.get(key)
        if effect is None:
            logger.debug(f"{location.path}:{location.line_no}: unknown key '{key}' in [{section}], skipped")
            return

        kind, attr = effect
        if not value:
            return
        if kind is Effect.SERVER:
            getattr(repo, attr).append(value)
        else:
            getattr(repo, attr).extend(value.split())

    def _parse_positive_int(self, key: str, value: str, location: Location) -> int:
        # ASCII digits only; no sign, underscores or other scripts
        if not re.fullmatch(r"[0-9]+", value):
            raise InvalidValueError(location.path, location.line_no, key, value)
        number = int(value)
        if number < 1:
            raise InvalidValueError(location.path, location.line_no, key, value)
        return number

    # --- INCLUDE ---

    def _resolve_pattern(self, pattern: str) -> List[str]:
        if not os.path.isabs(pattern):
            pattern = os.path.join(glob.escape(self.context.current_dir), pattern)
        return sorted(glob.glob(pattern))

    def _include(self, section: Optional[str], value: Optional[str], location: Location) -> None:
        if not value:
            raise GlobPatternError(value or "", "Include requires a value")
        _check_pattern(value)

        matches = self._resolve_pattern(value)
        if not matches:
            logger.debug(f"{location.path}:{location.line_no}: Include '{value}' matched no files")
            return

        for path in matches:
            with self.context.enter(path):
                self.scanner.parse(path, section, self)

    # --- FINALIZATION ---

    def _rebase(self, root: str, path: str) -> str:
        """Joins an absolute default path under `root`."""
        return posixpath.join(root, path.lstrip("/"))

    def finalize(self, root_override: Optional[str] = None) -> Config:
        """
        Applies defaults that depend on the whole file tree and freezes
        the result.
        """
        options = dict(self._options)

        if root_override is not None:
            options["root_dir"] = root_override
        root = options["root_dir"]

        cache_dir = options["cache_dir"] or [DEFAULT_CACHE_DIR]
        if root != "/":
            for attr in ROOTED_PATHS:
                if attr not in self._explicit:
                    options[attr] = self._rebase(root, options[attr])
            if not options["cache_dir"]:
                cache_dir = [self._rebase(root, DEFAULT_CACHE_DIR)]
        options["cache_dir"] = cache_dir

        frozen = Options(**{
            name: (tuple(value) if isinstance(value, list) else value)
            for name, value in options.items()
        })

        repos = tuple(
            Repository(
                name=draft.name,
                servers=tuple(draft.servers),
                sig_level=tuple(draft.sig_level) or frozen.sig_level,
                usage=tuple(draft.usage),
            )
            for draft in self._repos.values()
        )
        return Config(options=frozen, repos=repos)
