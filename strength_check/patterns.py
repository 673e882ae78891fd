"""Predictable-pattern penalties.

Every rule takes the password, plus the character-class presence it
ignores so it can be folded alongside the scoring bonuses, and returns a
``(delta, suggestion)`` pair: ``(PENALTY, message)`` when the pattern is
present, ``(0, None)`` otherwise.
"""
import re
from typing import Optional, Tuple

PENALTY = -10

REPEATED_RUN = re.compile(r'(\w)\1{2,}', re.ASCII)
PREDICTABLE_SEQUENCE = re.compile(r'1234|abcd|qwerty', re.IGNORECASE)
YEAR = re.compile(r'(?:19|20)[0-9]{2}')

REPEATED_MESSAGE = "Avoid repeated characters."
SEQUENCE_MESSAGE = "Avoid predictable sequences."
YEAR_MESSAGE = "Avoid using years."

RuleResult = Tuple[int, Optional[str]]


def _penalize(pattern, password: str, message: str) -> RuleResult:
    if pattern.search(password):
        return PENALTY, message
    return 0, None


def repeated_characters(password: str, presence=None) -> RuleResult:
    return _penalize(REPEATED_RUN, password, REPEATED_MESSAGE)


def predictable_sequence(password: str, presence=None) -> RuleResult:
    return _penalize(PREDICTABLE_SEQUENCE, password, SEQUENCE_MESSAGE)


def embedded_year(password: str, presence=None) -> RuleResult:
    return _penalize(YEAR, password, YEAR_MESSAGE)


PATTERN_RULES = (repeated_characters, predictable_sequence, embedded_year)
