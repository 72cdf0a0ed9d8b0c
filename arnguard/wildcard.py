"""Wildcard matching for resource patterns.

Only two metacharacters are recognised: ``*`` matches any run of
characters (including ``/``) and ``?`` matches exactly one character.
Everything else, brackets included, is literal.
"""

from __future__ import annotations

from typing import Protocol


class GlobMatcher(Protocol):
    """Matching capability consumed by :class:`arnguard.resource.Resource`."""

    def match(self, pattern: str, text: str) -> bool:
        ...

    def match_as_pattern_prefix(self, pattern: str, text: str) -> bool:
        ...


class WildcardMatcher:
    """Default ``*``/``?`` matcher. Stateless.

    Matching runs in O(len(pattern) * len(text)) regardless of how many
    stars the pattern holds.
    """

    def match(self, pattern: str, text: str) -> bool:
        if pattern == "":
            return text == ""
        if pattern == "*":
            return True
        p = t = 0
        star = -1
        resume = 0
        while t < len(text):
            if p < len(pattern) and pattern[p] == "*":
                star = p
                resume = t
                p += 1
            elif p < len(pattern) and (pattern[p] == "?" or pattern[p] == text[t]):
                p += 1
                t += 1
            elif star != -1:
                # retry with the last star absorbing one more character
                p = star + 1
                resume += 1
                t = resume
            else:
                return False
        while p < len(pattern) and pattern[p] == "*":
            p += 1
        return p == len(pattern)

    def match_as_pattern_prefix(self, pattern: str, text: str) -> bool:
        """Return True if ``text`` can begin some string matched by ``pattern``."""

        for pattern_char, text_char in zip(pattern, text):
            if pattern_char == "*":
                return True
            if pattern_char == "?":
                continue
            if pattern_char != text_char:
                return False
        return len(text) <= len(pattern)


default_matcher = WildcardMatcher()


def match(pattern: str, text: str) -> bool:
    return default_matcher.match(pattern, text)


def match_as_pattern_prefix(pattern: str, text: str) -> bool:
    return default_matcher.match_as_pattern_prefix(pattern, text)
