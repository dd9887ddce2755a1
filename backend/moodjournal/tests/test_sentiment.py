"""
Tests for the sentiment classifier.
"""
import pytest
from moodjournal.models.journal import SentimentLabel
from moodjournal.services.sentiment_service import analyze_sentiment, label_for_score


def test_positive_text():
    result = analyze_sentiment("I love this, it's wonderful and amazing")
    assert result.score >= 0.05
    assert result.label == SentimentLabel.POSITIVE


def test_negative_text():
    result = analyze_sentiment("I hate this, it's terrible and awful")
    assert result.score <= -0.05
    assert result.label == SentimentLabel.NEGATIVE


@pytest.mark.parametrize("text", ["", "   "])
def test_empty_text_is_neutral(text):
    result = analyze_sentiment(text)
    assert result.score == 0.0
    assert result.label == SentimentLabel.NEUTRAL


def test_text_without_sentiment_words_is_neutral():
    result = analyze_sentiment("The meeting is on Tuesday.")
    assert result.score == 0.0
    assert result.label == SentimentLabel.NEUTRAL


def test_deterministic():
    text = "Great day at the beach, though the drive home was tiring."
    assert analyze_sentiment(text) == analyze_sentiment(text)


@pytest.mark.parametrize("score,label", [
    (0.05, SentimentLabel.POSITIVE),
    (0.0499, SentimentLabel.NEUTRAL),
    (0.0, SentimentLabel.NEUTRAL),
    (-0.0499, SentimentLabel.NEUTRAL),
    (-0.05, SentimentLabel.NEGATIVE),
    (-0.9, SentimentLabel.NEGATIVE),
])
def test_label_thresholds(score, label):
    assert label_for_score(score) == label
