"""
Tests for the recommendation composer.
"""
import asyncio
import json
import httpx
import pytest
from moodjournal.core.errors import UpstreamError, ValidationError
from moodjournal.services.recommendation_service import (
    AI_SEPARATOR, MOOD_SUGGESTIONS, RecommendationComposer, get_mood_suggestion
)
from moodjournal.models.journal import SentimentLabel


def test_combines_static_and_ai_suggestion(test_settings, fake_openai):
    composer = RecommendationComposer(test_settings, transport=fake_openai.transport())
    result = asyncio.run(composer.recommend("Positive", 0.8))

    assert result == (
        MOOD_SUGGESTIONS[SentimentLabel.POSITIVE] + AI_SEPARATOR + fake_openai.content
    )


def test_prompt_embeds_label(test_settings, fake_openai):
    composer = RecommendationComposer(test_settings, transport=fake_openai.transport())
    asyncio.run(composer.recommend("Negative", -0.6))

    request = fake_openai.requests[0]
    body = json.loads(request.content)
    assert request.headers["Authorization"] == "Bearer test-openai-key"
    assert body["model"] == test_settings.OPENAI_MODEL
    assert body["messages"][0] == {"role": "system", "content": "You are an AI wellness assistant"}
    assert "I'm feeling Negative." in body["messages"][1]["content"]


def test_unknown_label_fails_before_upstream_call(test_settings, fake_openai):
    composer = RecommendationComposer(test_settings, transport=fake_openai.transport())
    with pytest.raises(ValidationError):
        asyncio.run(composer.recommend("Ecstatic", 0.9))
    assert fake_openai.requests == []


def test_upstream_error_status(test_settings, fake_openai):
    fake_openai.status_code = 429
    composer = RecommendationComposer(test_settings, transport=fake_openai.transport())
    with pytest.raises(UpstreamError):
        asyncio.run(composer.recommend("Neutral", 0.0))


def test_malformed_upstream_response(test_settings):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"choices": []}))
    composer = RecommendationComposer(test_settings, transport=transport)
    with pytest.raises(UpstreamError):
        asyncio.run(composer.recommend("Neutral", 0.0))


def test_upstream_timeout(test_settings):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    composer = RecommendationComposer(test_settings, transport=httpx.MockTransport(handler))
    with pytest.raises(UpstreamError):
        asyncio.run(composer.recommend("Positive", 0.5))


def test_missing_api_key(test_settings, fake_openai):
    settings = test_settings.model_copy(update={"OPENAI_API_KEY": ""})
    composer = RecommendationComposer(settings, transport=fake_openai.transport())
    with pytest.raises(UpstreamError):
        asyncio.run(composer.recommend("Positive", 0.5))
    assert fake_openai.requests == []


def test_each_label_has_a_suggestion():
    for label in SentimentLabel:
        assert get_mood_suggestion(label.value)
