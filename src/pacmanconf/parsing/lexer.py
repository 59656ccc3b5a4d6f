#!/usr/bin/env python3
"""
PACMANCONF LEXER - Line Classifier
----------------------------------
Turns a single raw line of pacman.conf into a ParsedLine:
BLANK, COMMENT, SECTION or DIRECTIVE.

The dialect has no quoting and no escapes. A '#' anywhere on the line
starts a comment, and a directive is split on its first '='.

Author: pacmanconf maintainers
Date: 2026-10-18
"""

from typing import Optional, Tuple

from pacmanconf.core.errors import ConfigSyntaxError
from pacmanconf.core.models import LineKind, ParsedLine


class ConfLexer:
    """
    Stateless classifier for pacman.conf lines.
    """

    def _clean_artifacts(self, line: str, line_no: int) -> str:
        """Removes the line terminator, and a UTF-8 BOM on the first line."""
        if line_no == 1 and line.startswith('\ufeff'):
            line = line[1:]
        return line.rstrip('\r\n')

    def _strip_comment(self, text: str) -> str:
        """Cuts everything from the first '#' on."""
        idx = text.find('#')
        return text[:idx] if idx != -1 else text

    def _split_directive(self, code: str) -> Tuple[str, Optional[str]]:
        """
        Splits 'Key = Value' into ('Key', 'Value').
        Example: "Color" -> ("Color", None), "Key =" -> ("Key", "")
        """
        key, sep, value = code.partition('=')
        if not sep:
            return key.strip(), None
        return key.strip(), value.strip()

    def classify(self, line: str, line_no: int = 0, path: str = "<string>") -> ParsedLine:
        """
        Classifies one line. Raises ConfigSyntaxError for a malformed
        section header or a directive without a key.
        """
        raw_line = self._clean_artifacts(line, line_no)
        code = self._strip_comment(raw_line).strip()

        if not code:
            kind = LineKind.COMMENT if raw_line.strip().startswith('#') else LineKind.BLANK
            return ParsedLine(kind=kind, line_no=line_no, raw_line=raw_line)

        if code.startswith('['):
            if not code.endswith(']'):
                raise ConfigSyntaxError(path, line_no, raw_line, "unterminated section header")
            name = code[1:-1]
            if not name:
                raise ConfigSyntaxError(path, line_no, raw_line, "empty section name")
            return ParsedLine(kind=LineKind.SECTION, line_no=line_no, name=name, raw_line=raw_line)

        key, value = self._split_directive(code)
        if not key:
            raise ConfigSyntaxError(path, line_no, raw_line, "directive without a key")

        return ParsedLine(
            kind=LineKind.DIRECTIVE,
            line_no=line_no,
            key=key,
            value=value,
            raw_line=raw_line
        )
