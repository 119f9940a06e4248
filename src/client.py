import requests

from src.errors import TransportError, EnvelopeDecodeError
from settings import MODEL_NAME, OLLAMA_URL


class OllamaClient:
    """
    Minimal client for Ollama's /api/generate endpoint.

    One blocking POST per call, no retries.
    """

    def __init__(self, url: str = OLLAMA_URL, model: str = MODEL_NAME):
        self.url = url
        self.model = model

    def complete(self, prompt: str) -> str:
        """
        Send a prompt and return the model's raw text.

        Raises:
            TransportError: Connection failure, timeout, or any other transport problem
            EnvelopeDecodeError: Response body is not a generate envelope
        """
        payload = {
            "model": self.model,
            "prompt": prompt,
            "format": "json",
            "stream": False,
        }

        try:
            response = requests.post(
                self.url,
                headers={"Content-Type": "application/json"},
                json=payload,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"API call failed: {e}") from e

        try:
            envelope = response.json()
        except ValueError as e:
            raise EnvelopeDecodeError(f"failed to parse API response: {e}") from e

        if not isinstance(envelope, dict):
            raise EnvelopeDecodeError("failed to parse API response: expected a JSON object")

        text = envelope.get("response")
        if not isinstance(text, str):
            # Ollama reports problems such as an unknown model as {"error": "..."}
            reason = envelope.get("error") or "missing 'response' field"
            raise EnvelopeDecodeError(f"failed to parse API response: {reason}")

        return text
