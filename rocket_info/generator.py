# rocket_info/generator.py
from __future__ import annotations

import json
import logging
from typing import Optional

import requests

from .config import Settings
from .errors import ChatCompletionError, ConfigurationError

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "API key not found in environment variables"


def _first_message_text(data) -> Optional[str]:
    """OpenAI-формат: {"choices":[{"message":{"content":"..."}}]}."""
    if not isinstance(data, dict):
        return None
    ch = data.get("choices")
    if not isinstance(ch, list) or not ch or not isinstance(ch[0], dict):
        return None
    msg = ch[0].get("message") or {}
    content = msg.get("content") if isinstance(msg, dict) else None
    return content if isinstance(content, str) else None


class ChatClient:
    def __init__(self, url: str, key: str, model: str, timeout: Optional[float] = None):
        self.url = url
        self.key = key
        self.model = model
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChatClient":
        """Фабрика. Без ключа — ConfigurationError до любого сетевого вызова."""
        if not settings.openai_api_key:
            logger.error(MISSING_KEY_MESSAGE)
            raise ConfigurationError(MISSING_KEY_MESSAGE)
        return cls(
            url=settings.openai_url,
            key=settings.openai_api_key,
            model=settings.openai_model,
            timeout=settings.request_timeout_sec,
        )

    def complete(self, prompt: str) -> str:
        """Один промпт — один запрос. Возвращаем текст первого сообщения без изменений."""
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }
        try:
            resp = requests.post(
                self.url,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                    "Authorization": f"Bearer {self.key}",
                },
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Chat completion request failed: %s", e)
            raise ChatCompletionError(f"Chat completion request failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            # Попробуем показать полезную ошибку
            try:
                detail = json.dumps(resp.json(), ensure_ascii=False)
            except ValueError:
                detail = resp.text
            logger.error("Chat completion HTTP %s: %s", resp.status_code, detail)
            raise ChatCompletionError(f"Chat completion HTTP {resp.status_code}: {detail}")

        try:
            data = resp.json()
        except ValueError as e:
            raise ChatCompletionError(f"Chat completion parse error: {e}") from e

        text = _first_message_text(data)
        if text is None:
            logger.error("Chat completion reply has no message text")
            raise ChatCompletionError(
                f"Chat completion reply has no message text: {json.dumps(data, ensure_ascii=False)}"
            )
        return text
