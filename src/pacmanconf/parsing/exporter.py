#!/usr/bin/env python3
"""
PACMANCONF EXPORTER - Canonical Rendering
-----------------------------------------
Renders a parsed Config back out, either as flat pacman.conf text
(every Include already expanded, one line per field) or as YAML.

Author: pacmanconf maintainers
Date: 2026-10-18
"""

import io
from typing import Any, Dict, List

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from pacmanconf.core.models import OPTIONS_SECTION, Config, Repository
from pacmanconf.parsing.builder import OPTION_EFFECTS, REPO_EFFECTS, Effect


class ConfigExporter:
    """
    The Reconstructor: turns a Config into text. Keys are written with
    pacman's own names, in the order of the builder's effect tables.
    """

    def __init__(self):
        self.yaml = YAML(typ='rt')
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self.yaml.width = 4096
        self.yaml.default_flow_style = False

    def _option_lines(self, config: Config) -> List[str]:
        lines = []
        for key, (kind, attr) in OPTION_EFFECTS.items():
            value = getattr(config.options, attr)
            if kind is Effect.FLAG:
                if value:
                    lines.append(key)
            elif kind is Effect.SEQUENCE:
                if value:
                    lines.append(f"{key} = {' '.join(value)}")
            elif value != "":
                lines.append(f"{key} = {value}")
        return lines

    def _repo_lines(self, repo: Repository) -> List[str]:
        lines = [f"[{repo.name}]"]
        for key, (kind, attr) in REPO_EFFECTS.items():
            values = getattr(repo, attr)
            if not values:
                continue
            if kind is Effect.SERVER:
                lines.extend(f"{key} = {server}" for server in values)
            else:
                lines.append(f"{key} = {' '.join(values)}")
        return lines

    def to_ini(self, config: Config) -> str:
        """
        Renders canonical pacman.conf text. Parsing the output again
        yields an equal Config.
        """
        blocks = [[f"[{OPTIONS_SECTION}]"] + self._option_lines(config)]
        blocks.extend(self._repo_lines(repo) for repo in config.repos)
        return "\n\n".join("\n".join(block) for block in blocks) + "\n"

    def to_mapping(self, config: Config) -> Dict[str, Any]:
        """Plain nested dict/list form, keyed by pacman names."""
        options = CommentedMap()
        for key, (kind, attr) in OPTION_EFFECTS.items():
            value = getattr(config.options, attr)
            options[key] = list(value) if kind is Effect.SEQUENCE else value

        repos = CommentedMap()
        for repo in config.repos:
            entry = CommentedMap()
            for key, (_, attr) in REPO_EFFECTS.items():
                entry[key] = list(getattr(repo, attr))
            repos[repo.name] = entry

        mapping = CommentedMap()
        mapping[OPTIONS_SECTION] = options
        mapping["repos"] = repos
        return mapping

    def to_yaml(self, config: Config) -> str:
        stream = io.StringIO()
        self.yaml.dump(self.to_mapping(config), stream)
        return stream.getvalue()
