"""
Inference client for resume_interview

Thin async wrapper around a Hugging Face style inference endpoint:
- Text generation (project extraction, question enhancement)
- Sentiment classification (answer analysis)

Every failure (transport, timeout, non-success status, unusable reply)
surfaces as InferenceError so callers can fall back in one place.
"""

import logging
from typing import Any

import httpx

from resume_interview.config.settings import IntegrationConfig
from resume_interview.models.evaluation import Sentiment

logger = logging.getLogger(__name__)


class InferenceError(Exception):
    """An external inference call failed or returned something unusable."""


class InferenceClient:
    """
    Async client for the optional inference endpoints.

    The client is only useful when the config carries a credential;
    callers check IntegrationConfig before invoking it.
    """

    def __init__(
        self,
        config: IntegrationConfig,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the inference client.

        Args:
            config: Integration settings (credential, models, timeout)
            client: Pre-built HTTP client; one is created when omitted
        """
        self.config = config
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=config.inference_base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {config.hf_api_key}",
                "Content-Type": "application/json",
            },
            timeout=config.request_timeout_seconds,
        )

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    # =========================================================================
    # TRANSPORT
    # =========================================================================

    async def _post(self, model: str, payload: dict) -> Any:
        try:
            response = await self.client.post(
                f"/{model}",
                json=payload,
                timeout=self.config.request_timeout_seconds,
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            raise InferenceError(f"Inference request to {model} failed: {e}") from e
        except ValueError as e:
            raise InferenceError(f"Inference reply from {model} was not JSON: {e}") from e

    # =========================================================================
    # TEXT GENERATION
    # =========================================================================

    async def complete(
        self,
        prompt: str,
        max_new_tokens: int = 1024,
        temperature: float = 0.1,
    ) -> str:
        """
        Run a text-generation request.

        Args:
            prompt: The prompt to send
            max_new_tokens: Generation budget
            temperature: Sampling temperature

        Returns:
            Generated text

        Raises:
            InferenceError: on any transport or envelope problem
        """
        payload = {
            "inputs": prompt,
            "parameters": {
                "max_new_tokens": max_new_tokens,
                "temperature": temperature,
                "return_full_text": False,
            },
        }
        logger.debug(f"Completion request: model={self.config.completion_model}, prompt_chars={len(prompt)}")

        result = await self._post(self.config.completion_model, payload)
        text = extract_generated_text(result)
        if not text.strip():
            raise InferenceError("Inference reply contained no generated text")
        return text

    # =========================================================================
    # SENTIMENT
    # =========================================================================

    async def classify_sentiment(self, text: str) -> tuple[Sentiment, int]:
        """
        Classify the sentiment of a piece of text.

        Returns:
            (sentiment, confidence 0-100)

        Raises:
            InferenceError: on any transport or envelope problem
        """
        result = await self._post(self.config.sentiment_model, {"inputs": text})
        label, score = extract_top_label(result)
        return map_sentiment_label(label), _to_percent(score)


# =============================================================================
# REPLY ENVELOPES
# =============================================================================

def extract_generated_text(result: Any) -> str:
    """Extract generated text from the reply envelopes the endpoints use."""
    if isinstance(result, str):
        return result

    if isinstance(result, list) and result:
        first = result[0]
        if isinstance(first, dict):
            for key in ("generated_text", "text"):
                if isinstance(first.get(key), str):
                    return first[key]
        if isinstance(first, str):
            return first

    if isinstance(result, dict):
        if isinstance(result.get("generated_text"), str):
            return result["generated_text"]

        # Chat-completion style envelope
        choices = result.get("choices")
        if isinstance(choices, list) and choices and isinstance(choices[0], dict):
            content = choices[0].get("message", {}).get("content", "")
            if isinstance(content, list):
                text_parts = []
                for part in content:
                    if isinstance(part, str):
                        text_parts.append(part)
                    elif isinstance(part, dict) and "text" in part:
                        text_parts.append(str(part["text"]))
                content = "".join(text_parts)
            if isinstance(content, str):
                return content

        if "error" in result:
            raise InferenceError(f"Inference endpoint returned an error: {result['error']}")

    raise InferenceError(f"Unrecognized generation reply: {str(result)[:200]}")


def extract_top_label(result: Any) -> tuple[str, float]:
    """Pick the highest-scoring {label, score} entry from a classifier reply."""
    candidates: list[dict] = []

    if isinstance(result, dict):
        if "error" in result:
            raise InferenceError(f"Classifier returned an error: {result['error']}")
        candidates = [result]
    elif isinstance(result, list) and result:
        first = result[0]
        candidates = first if isinstance(first, list) else result

    labelled = [
        c for c in candidates
        if isinstance(c, dict) and isinstance(c.get("label"), str)
    ]
    if not labelled:
        raise InferenceError(f"Unrecognized classifier reply: {str(result)[:200]}")

    def _score(entry: dict) -> float:
        try:
            return float(entry.get("score", 0.5))
        except (TypeError, ValueError):
            return 0.5

    top = max(labelled, key=_score)
    return top["label"], _score(top)


# cardiffnlp models without an id2label mapping answer with LABEL_n
_NUMBERED_LABELS = {
    "label_0": Sentiment.NEGATIVE,
    "label_1": Sentiment.NEUTRAL,
    "label_2": Sentiment.POSITIVE,
}


def map_sentiment_label(label: str) -> Sentiment:
    """Map a classifier label onto positive / neutral / negative."""
    lab = label.strip().lower()
    if lab in _NUMBERED_LABELS:
        return _NUMBERED_LABELS[lab]
    if "pos" in lab:
        return Sentiment.POSITIVE
    if "neg" in lab:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def _to_percent(score: float) -> int:
    return max(0, min(100, round(score * 100)))
