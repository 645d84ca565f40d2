"""Subsequence fuzzy matching with ranking of the matches."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

_FIRST_CHAR_BONUS = 10
_SEPARATOR_BONUS = 20
_CAMEL_CASE_BONUS = 20
_ADJACENT_BONUS = 5
_LEADING_PENALTY = -5
_MAX_LEADING_PENALTY = -15
_SEPARATORS = frozenset("/-_ .\\")


@dataclass(frozen=True)
class Match:
    """A candidate that matched the pattern."""

    str: str
    index: int
    matched_indexes: list[int] = field(default_factory=list)
    score: int = 0


def _match_one(pattern: str, candidate: str) -> tuple[list[int], int] | None:
    pattern_lower = pattern.lower()
    matched: list[int] = []
    score = 0
    position = 0
    previous = ""
    for offset, char in enumerate(candidate):
        if position >= len(pattern_lower):
            break
        if char.lower() == pattern_lower[position]:
            bonus = 0
            if offset == 0:
                bonus += _FIRST_CHAR_BONUS
            if previous and previous.islower() and char.isupper():
                bonus += _CAMEL_CASE_BONUS
            if offset > 0 and previous in _SEPARATORS:
                bonus += _SEPARATOR_BONUS
            if matched and matched[-1] == offset - 1:
                bonus += _ADJACENT_BONUS
            score += bonus
            matched.append(offset)
            position += 1
        previous = char
    if position < len(pattern_lower):
        return None
    score += max(matched[0] * _LEADING_PENALTY, _MAX_LEADING_PENALTY)
    score -= len(candidate) - len(matched)
    return matched, score


def find(pattern: str, data: Sequence[str]) -> list[Match]:
    """Candidates containing the pattern as a case-insensitive subsequence, best first."""
    if not pattern:
        return []
    matches = []
    for index, candidate in enumerate(data):
        result = _match_one(pattern, candidate)
        if result is not None:
            indexes, score = result
            matches.append(Match(candidate, index, indexes, score))
    matches.sort(key=lambda match: -match.score)
    return matches