"""
pacmanconf - a parser for pacman.conf and its Include tree.

    import pacmanconf
    config = pacmanconf.parse()
    for repo in config.repos:
        print(repo.name, repo.servers)
"""

from pacmanconf.core.engine import DEFAULT_CONFIG_PATH, ConfigReader, ReaderSettings, parse, parse_file
from pacmanconf.core.errors import (
    ConfigIOError,
    ConfigSyntaxError,
    CyclicIncludeError,
    GlobPatternError,
    IncludeDepthError,
    InvalidValueError,
    PacmanConfError,
)
from pacmanconf.core.models import Config, Options, Repository

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "Config",
    "ConfigIOError",
    "ConfigReader",
    "ConfigSyntaxError",
    "CyclicIncludeError",
    "GlobPatternError",
    "IncludeDepthError",
    "InvalidValueError",
    "Options",
    "PacmanConfError",
    "ReaderSettings",
    "Repository",
    "parse",
    "parse_file",
]
