import json
import re
from typing import Any, Optional

import httpx

from src.config.config import GeminiConfig
from src.utils.constants import GeminiConst
from src.utils.decorators import try_except_decorator
from src.utils.exceptions import MalformedGenerationOutput

_CODE_FENCE_RE = re.compile(r"```(?:\w+)?\n?|```")
_JSON_DECODER = json.JSONDecoder()


class GeminiGateway:
    def __init__(self, config: Optional[GeminiConfig] = None) -> None:
        self.config = config or GeminiConfig.from_env()

    @try_except_decorator("Gemini")
    def generate(self, prompt: str) -> str:
        """Send one prompt to generateContent and return the candidate text (JSON mode)."""
        url = f"{GeminiConst.BASE_URL}/{self.config.model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {"responseMimeType": GeminiConst.RESPONSE_MIME_TYPE},
        }
        response = httpx.post(
            url,
            params={"key": self.config.api_key},
            json=payload,
            timeout=self.config.timeout,
        )
        response.raise_for_status()
        data = response.json()
        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            raise MalformedGenerationOutput("response contained no candidate text")

    def generate_json(self, prompt: str, expect: type = list, key: Optional[str] = None) -> Any:
        """
        Generate and decode a JSON value of type *expect*.

        When a list is expected and the model wrapped it in an object,
        the list found under *key* is returned instead.
        """
        value = self.parse_generation_json(self.generate(prompt))
        if expect is list and isinstance(value, dict) and key and isinstance(value.get(key), list):
            value = value[key]
        if not isinstance(value, expect):
            raise MalformedGenerationOutput(
                f"expected a JSON {'array' if expect is list else 'object'}, got {type(value).__name__}"
            )
        return value

    @staticmethod
    def parse_generation_json(raw: str) -> Any:
        """
        Extract and decode the first JSON value from a model reply.

        Handles
        -------
        • Removes code-fence markers ``` and ```json (or any language tag).
        • Ignores any prose before/after the JSON block.
        • Accepts a top-level array or object.

        Raises
        ------
        MalformedGenerationOutput
            If the reply is empty, contains no JSON, or the JSON is malformed.
        """
        if not isinstance(raw, str) or not raw.strip():
            raise MalformedGenerationOutput("empty response")

        cleaned = _CODE_FENCE_RE.sub("", raw).strip()

        starts = [i for i in (cleaned.find("["), cleaned.find("{")) if i != -1]
        if not starts:
            raise MalformedGenerationOutput("no JSON found in response")

        try:
            value, _ = _JSON_DECODER.raw_decode(cleaned[min(starts):])
        except json.JSONDecodeError as e:
            raise MalformedGenerationOutput(f"malformed JSON: {e.msg}") from e
        return value
