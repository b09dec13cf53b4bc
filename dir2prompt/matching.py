"""Glob patterns matched against whole relative paths.

A ``*`` matches any run of characters, path separators included, so
``*.go`` matches ``dir/file.go`` as well as ``file.go``.
"""

from __future__ import annotations

import regex


class PatternError(ValueError):
    """Raised when a glob pattern cannot be compiled."""


class _Parser:
    """Turns glob syntax into a regular expression."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _peek(self) -> str:
        return self.source[self.pos]

    def parse(self) -> str:
        return self._sequence(in_alternatives=False)

    def _sequence(self, in_alternatives: bool) -> str:
        parts: list[str] = []
        while not self._at_end():
            ch = self._peek()
            if in_alternatives and ch in ",}":
                break
            self.pos += 1
            if ch == "*":
                while not self._at_end() and self._peek() == "*":
                    self.pos += 1
                parts.append(".*")
            elif ch == "?":
                parts.append(".")
            elif ch == "[":
                parts.append(self._char_class())
            elif ch == "{":
                parts.append(self._alternatives())
            elif ch == "\\":
                parts.append(regex.escape(self._escaped()))
            else:
                parts.append(regex.escape(ch))
        return "".join(parts)

    def _escaped(self) -> str:
        if self._at_end():
            raise PatternError(f"unexpected end of pattern after escape in {self.source!r}")
        ch = self._peek()
        self.pos += 1
        return ch

    def _alternatives(self) -> str:
        options: list[str] = []
        while True:
            options.append(self._sequence(in_alternatives=True))
            if self._at_end():
                raise PatternError(f"unclosed '{{' in pattern {self.source!r}")
            ch = self._peek()
            self.pos += 1
            if ch == "}":
                break
        return "(?:" + "|".join(options) + ")"

    def _char_class(self) -> str:
        negate = False
        if not self._at_end() and self._peek() == "!":
            negate = True
            self.pos += 1
        items: list[str] = []
        while True:
            if self._at_end():
                raise PatternError(f"unclosed '[' in pattern {self.source!r}")
            ch = self._peek()
            self.pos += 1
            if ch == "]":
                break
            if ch == "\\":
                ch = self._escaped()
            if (
                self.pos + 1 < len(self.source)
                and self._peek() == "-"
                and self.source[self.pos + 1] != "]"
            ):
                self.pos += 1
                high = self._peek()
                self.pos += 1
                if high == "\\":
                    high = self._escaped()
                if high < ch:
                    raise PatternError(f"invalid range {ch}-{high} in pattern {self.source!r}")
                items.append(f"{regex.escape(ch)}-{regex.escape(high)}")
            else:
                items.append(regex.escape(ch))
        if not items:
            raise PatternError(f"empty character class in pattern {self.source!r}")
        return "[" + ("^" if negate else "") + "".join(items) + "]"


class GlobPattern:
    """A compiled glob pattern.

    Supports ``*``, ``**``, ``?``, ``[abc]``, ``[a-z]``, ``[!abc]``,
    ``{alt1,alt2}`` and backslash escapes.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._regex = regex.compile(_Parser(pattern).parse(), regex.DOTALL)

    def match(self, text: str) -> bool:
        """Return True if the whole of ``text`` matches the pattern."""
        return self._regex.fullmatch(text) is not None

    def __repr__(self) -> str:
        return f"GlobPattern({self.pattern!r})"