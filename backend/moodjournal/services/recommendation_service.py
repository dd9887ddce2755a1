"""
Mood recommendation service using OpenAI API.

Combines a fixed suggestion for the sentiment label with a short list of
activities generated by the Chat Completions API. A failed upstream call
fails the whole recommendation; nothing is cached or retried.
"""
import logging
from typing import Optional
import httpx
from moodjournal.core.config import Settings
from moodjournal.core.errors import UpstreamError, ValidationError
from moodjournal.models.journal import SentimentLabel

logger = logging.getLogger(__name__)

MOOD_SUGGESTIONS = {
    SentimentLabel.POSITIVE: (
        "You're in a great mood! Here are some suggestions: Try sharing your positivity "
        "with others, plan a fun activity, or enjoy a nature walk."
    ),
    SentimentLabel.NEGATIVE: (
        "It seems like you're feeling down. Take some time for self-care. Consider "
        "activities like meditation, deep breathing, or connecting with a friend."
    ),
    SentimentLabel.NEUTRAL: (
        "You're feeling neutral. A productive task or a small creative activity "
        "might lift your spirits."
    ),
}

AI_SEPARATOR = " Also, here's a suggestion from AI: "
SYSTEM_PROMPT = "You are an AI wellness assistant"
UPSTREAM_FAILURE_MESSAGE = "Server error while generating recommendations"


def get_mood_suggestion(label: str) -> str:
    """Return the fixed suggestion for a label; unknown labels are rejected."""
    try:
        return MOOD_SUGGESTIONS[SentimentLabel(label)]
    except ValueError as e:
        raise ValidationError(f"Unrecognized sentiment label: {label}") from e


class RecommendationComposer:
    """
    Builds the combined recommendation string.

    Args:
        settings: Application settings (API key, URL, model, timeout)
        transport: Optional httpx transport, used by tests to stub the API
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    async def generate_ai_suggestion(self, label: str) -> str:
        """Ask the text-generation service for activities matching the mood."""
        if not self.settings.OPENAI_API_KEY:
            logger.error("OpenAI API key not configured. Cannot generate recommendations.")
            raise UpstreamError(UPSTREAM_FAILURE_MESSAGE)

        payload = {
            "model": self.settings.OPENAI_MODEL,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": f"I'm feeling {label}. Suggest some activities based on this mood."
                }
            ]
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.OPENAI_TIMEOUT_SECONDS,
                transport=self.transport
            ) as client:
                response = await client.post(
                    self.settings.OPENAI_API_URL,
                    headers={
                        "Authorization": f"Bearer {self.settings.OPENAI_API_KEY}",
                        "Content-Type": "application/json"
                    },
                    json=payload
                )
                response.raise_for_status()
                result = response.json()
        except httpx.TimeoutException as e:
            logger.error("OpenAI API request timed out.")
            raise UpstreamError(UPSTREAM_FAILURE_MESSAGE) from e
        except httpx.HTTPStatusError as e:
            logger.error(f"OpenAI API error {e.response.status_code}")
            raise UpstreamError(UPSTREAM_FAILURE_MESSAGE) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"OpenAI API request failed: {e}")
            raise UpstreamError(UPSTREAM_FAILURE_MESSAGE) from e

        try:
            content = result["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error("OpenAI API returned a malformed response.")
            raise UpstreamError(UPSTREAM_FAILURE_MESSAGE) from e

        if not isinstance(content, str) or not content.strip():
            logger.error("OpenAI API returned an empty completion.")
            raise UpstreamError(UPSTREAM_FAILURE_MESSAGE)
        return content.strip()

    async def recommend(self, label: str, score: float) -> str:
        """
        Combine the fixed suggestion for ``label`` with an AI suggestion.

        The score is accepted as computed by the caller and only logged; the
        label alone selects the suggestion and frames the prompt.
        """
        mood_suggestion = get_mood_suggestion(label)
        logger.info(f"Generating recommendation for label={label} score={score}")
        ai_suggestion = await self.generate_ai_suggestion(label)
        return f"{mood_suggestion}{AI_SEPARATOR}{ai_suggestion}"
