"""
Lexicon-based sentiment scoring for journal text.

Uses the VADER compound score, a normalized polarity in [-1, 1]. The label
thresholds are the ones recommended by the VADER authors.
"""
from dataclasses import dataclass
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer
from moodjournal.models.journal import SentimentLabel

POSITIVE_THRESHOLD = 0.05
NEGATIVE_THRESHOLD = -0.05

_analyzer = SentimentIntensityAnalyzer()


@dataclass(frozen=True)
class SentimentResult:
    score: float
    label: SentimentLabel


def label_for_score(score: float) -> SentimentLabel:
    """Map a compound score to Positive / Neutral / Negative."""
    if score >= POSITIVE_THRESHOLD:
        return SentimentLabel.POSITIVE
    if score <= NEGATIVE_THRESHOLD:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def analyze_sentiment(text: str) -> SentimentResult:
    """
    Score free text. Deterministic: the same text always yields the same result.
    Text without sentiment-bearing tokens (including empty text) scores 0.0.
    """
    if not text or not text.strip():
        return SentimentResult(score=0.0, label=SentimentLabel.NEUTRAL)

    compound = _analyzer.polarity_scores(text)["compound"]
    score = round(compound, 4)
    return SentimentResult(score=score, label=label_for_score(score))
