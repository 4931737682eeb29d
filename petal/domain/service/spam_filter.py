"""Heuristic spam scoring for new comments.

The score is additive and deterministic:

    more than 2 links ........................ +30
    more than 5 links ........................ +50 (on top of the +30)
    over 30% uppercase letters ............... +20
    one character repeated 5+ times in a row . +15
    each spam term found ..................... +25

and is capped at 100.
"""

import re

from petal.domain.value import CommentStatus

from .base import Service

MAX_SCORE = 100
DEFAULT_SPAM_THRESHOLD = 70

SPAM_TERMS = ("viagra", "casino", "lottery", "prize", "winner", "free money")

_LINK = re.compile(r"https?://")
_UPPERCASE = re.compile(r"[A-Z]")
_REPEATED_CHAR = re.compile(r"(.)\1{4,}")


def calculate_spam_score(content: str) -> int:
    """Score comment text for spam likelihood.

    Args:
        content: Comment text, already validated as non-empty

    Returns:
        Integer score between 0 and 100
    """
    score = 0

    link_count = len(_LINK.findall(content))
    if link_count > 2:
        score += 30
    if link_count > 5:
        score += 50

    caps_ratio = len(_UPPERCASE.findall(content)) / len(content)
    if caps_ratio > 0.3:
        score += 20

    if _REPEATED_CHAR.search(content):
        score += 15

    lowered = content.lower()
    score += 25 * sum(1 for term in SPAM_TERMS if term in lowered)

    return min(score, MAX_SCORE)


class SpamFilter(Service):
    """Scores submissions and picks their starting moderation status."""

    def __init__(self, threshold: int = DEFAULT_SPAM_THRESHOLD) -> None:
        """Initialize spam filter.

        Args:
            threshold: Scores at or above this value are filed as spam
        """
        self.threshold = threshold

    def score(self, content: str) -> int:
        return calculate_spam_score(content)

    def initial_status(self, spam_score: int) -> CommentStatus:
        """Status a new comment starts in, given its spam score."""
        if spam_score >= self.threshold:
            return CommentStatus.SPAM
        return CommentStatus.PENDING
