#!/usr/bin/env python3
"""
PACMANCONF ENGINE - Public Entry Point
--------------------------------------
Picks the source file, wires a fresh EventScanner and ConfigBuilder
together and returns the finished Config. Every read is independent:
nothing is shared between calls, so readers may be used from several
threads at once.

Usage:
    config = pacmanconf.parse()
    config = pacmanconf.parse_file("tests/fixtures/pacman.conf")
    config = ConfigReader().config_path("/etc/pacman.conf").root_dir("/mnt").read()

Author: pacmanconf maintainers
Date: 2026-10-18
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from pacmanconf.core.models import Config
from pacmanconf.parsing.builder import ConfigBuilder
from pacmanconf.parsing.context import DEFAULT_MAX_INCLUDE_DEPTH, IncludeContext
from pacmanconf.parsing.exporter import ConfigExporter
from pacmanconf.parsing.scanner import EventScanner

logger = logging.getLogger("pacmanconf.engine")

DEFAULT_CONFIG_PATH = "/etc/pacman.conf"


@dataclass(frozen=True)
class ReaderSettings:
    """Everything a ConfigReader can be told before it reads."""
    config_path: str = DEFAULT_CONFIG_PATH
    root_dir: Optional[str] = None   # overrides the file's RootDir
    max_include_depth: int = DEFAULT_MAX_INCLUDE_DEPTH
    encoding: str = "utf-8"


class ConfigReader:
    """
    Collects read settings, then performs a single terminal `read()`.
    Setter methods return the reader so calls can be chained.
    """

    def __init__(self, settings: Optional[ReaderSettings] = None):
        self.settings = settings or ReaderSettings()

    def config_path(self, path: str) -> "ConfigReader":
        """Parse `path` instead of the system default."""
        self.settings = replace(self.settings, config_path=path)
        return self

    def root_dir(self, path: str) -> "ConfigReader":
        """Use `path` as RootDir, like pacman's --root."""
        self.settings = replace(self.settings, root_dir=path)
        return self

    def max_include_depth(self, depth: int) -> "ConfigReader":
        self.settings = replace(self.settings, max_include_depth=depth)
        return self

    def read(self) -> Config:
        """
        Parses the configured file and its includes.
        Raises a PacmanConfError subclass on the first failure.
        """
        settings = self.settings
        builder = ConfigBuilder(
            scanner=EventScanner(encoding=settings.encoding),
            context=IncludeContext(max_depth=settings.max_include_depth),
        )
        try:
            builder.build(settings.config_path)
        except Exception as e:
            logger.debug(f"Reading {settings.config_path} failed: {e}")
            raise

        config = builder.finalize(root_override=settings.root_dir)
        logger.info(f"Read {settings.config_path}: {len(config.repos)} repositories")
        return config

    def expand(self) -> str:
        """Reads the configuration and renders it as canonical pacman.conf text."""
        return ConfigExporter().to_ini(self.read())


def parse() -> Config:
    """Parses the system configuration at DEFAULT_CONFIG_PATH."""
    return ConfigReader().config_path(DEFAULT_CONFIG_PATH).read()


def parse_file(path: str) -> Config:
    return ConfigReader().config_path(path).read()
