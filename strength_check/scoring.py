import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

from strength_check.charset import CharacterClassPresence, classify
from strength_check.common import is_common
from strength_check.entropy import entropy
from strength_check.patterns import PATTERN_RULES, RuleResult

logger = logging.getLogger(__name__)

MAX_SCORE = 100
MIN_SCORE = 0

COMMON_PASSWORD_MESSAGE = "Avoid common passwords."
USERNAME_MESSAGE = "Password should not contain or resemble your username."


class Rating(str, Enum):
    START = "Start typing..."
    WEAK = "Weak"
    FAIR = "Fair"
    STRONG = "Strong"


class ColorHint(str, Enum):
    """Strength bar colour; values are CSS colours a UI can apply as-is."""
    NEUTRAL = "#ddd"
    POSITIVE = "green"
    CAUTION = "orange"
    ELEVATED = "tomato"
    ALERT = "red"


# (exclusive lower bound, rating, colour), first match wins
RATING_BANDS = (
    (70, Rating.STRONG, ColorHint.POSITIVE),
    (50, Rating.FAIR, ColorHint.CAUTION),
    (30, Rating.WEAK, ColorHint.ELEVATED),
)


@dataclass(frozen=True)
class AnalysisResult:
    score: int
    rating: Rating
    color: ColorHint
    suggestions: Tuple[str, ...] = field(default_factory=tuple)
    entropy_bits: float = 0.0

    @property
    def strength_text(self) -> str:
        return f"Strength: {self.rating.value}"

    @property
    def entropy_text(self) -> str:
        return f"Entropy: {self.entropy_bits:.2f} bits"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "rating": self.rating.value,
            "color": self.color.value,
            "suggestions": list(self.suggestions),
            "entropy": round(self.entropy_bits, 2),
        }


def uppercase_bonus(password: str, presence: CharacterClassPresence) -> RuleResult:
    if presence.has_upper:
        return 10, None
    return 0, "Add uppercase letters."


def lowercase_bonus(password: str, presence: CharacterClassPresence) -> RuleResult:
    if presence.has_lower:
        return 10, None
    return 0, "Add lowercase letters."


def digit_bonus(password: str, presence: CharacterClassPresence) -> RuleResult:
    if presence.has_digit:
        return 10, None
    return 0, "Include numbers."


def symbol_bonus(password: str, presence: CharacterClassPresence) -> RuleResult:
    if presence.has_symbol:
        return 20, None
    return 0, "Include symbols like !@#$."


def length_bonus(password: str, presence: CharacterClassPresence) -> RuleResult:
    length = len(password)
    if length >= 12:
        return 50, None
    if length >= 8:
        return 25, None
    return 0, "Use at least 8 characters."


# Ordered so the suggestions come out as: penalties, then missing upper,
# lower, digit, symbol and finally the length hint.
RULES = PATTERN_RULES + (
    uppercase_bonus,
    lowercase_bonus,
    digit_bonus,
    symbol_bonus,
    length_bonus,
)


def clamp(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def rate(score: int) -> Tuple[Rating, ColorHint]:
    """Map a clamped score to its rating and colour hint"""
    for floor, rating, color in RATING_BANDS:
        if score > floor:
            return rating, color
    return Rating.WEAK, ColorHint.ALERT


def apply_rules(password: str, rules=RULES) -> Tuple[int, Tuple[str, ...]]:
    """Fold every rule over a running score starting at 0.

    Returns the unclamped score (it may be negative) and the suggestions
    in rule order.
    """
    presence = classify(password)
    score = 0
    suggestions = []
    for rule in rules:
        delta, suggestion = rule(password, presence)
        score += delta
        if suggestion:
            suggestions.append(suggestion)
    return score, tuple(suggestions)


def _username_local_part(username: str) -> str:
    return username.split("@", 1)[0].lower()


def resembles_username(username: str, password: str) -> bool:
    if not username:
        return False
    local_part = _username_local_part(username)
    return bool(local_part) and local_part in password.lower()


def _rejected(password: str, message: str) -> AnalysisResult:
    return AnalysisResult(
        score=0,
        rating=Rating.WEAK,
        color=ColorHint.ALERT,
        suggestions=(message,),
        entropy_bits=entropy(password),
    )


def analyze(username: str, password: str) -> AnalysisResult:
    """Score a password for the given username.

    ``None`` is accepted for either argument and treated as an empty
    string. Any other non-string value is the caller's mistake and is
    not coerced.
    """
    username = username or ""
    password = password or ""

    if not password:
        return AnalysisResult(score=0, rating=Rating.START, color=ColorHint.NEUTRAL)

    if is_common(password):
        logger.debug("Rejected common password (length %d)", len(password))
        return _rejected(password, COMMON_PASSWORD_MESSAGE)

    if resembles_username(username, password):
        logger.debug("Rejected password containing the username")
        return _rejected(password, USERNAME_MESSAGE)

    raw_score, suggestions = apply_rules(password)
    score = clamp(raw_score)
    rating, color = rate(score)
    logger.debug("Scored password of length %d: raw=%d clamped=%d", len(password), raw_score, score)

    return AnalysisResult(
        score=score,
        rating=rating,
        color=color,
        suggestions=suggestions,
        entropy_bits=entropy(password),
    )
