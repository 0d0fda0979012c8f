# rocket_info/service.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from .config import Settings
from .generator import ChatClient
from .launches import LaunchFeedClient
from .prompt import build_prompt, format_timestamp

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RocketInfoService:
    """
    Обработка одного вопроса:
      1) фабрика чат-клиента (без ключа — ошибка без сетевых вызовов);
      2) загрузка фида запусков;
      3) сборка промпта;
      4) запрос к chat completions.
    Состояния между запросами нет.
    """

    def __init__(
        self,
        settings: Settings,
        feed: Optional[LaunchFeedClient] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.settings = settings
        self.feed = feed or LaunchFeedClient(settings.launches_url, timeout=settings.request_timeout_sec)
        self.clock = clock

    def resolve_question(self, raw: Optional[str]) -> str:
        # Пустой/пробельный вопрос заменяем дефолтным, остальное — как есть
        if raw is None or not raw.strip():
            return self.settings.default_question
        return raw

    def make_chat_client(self) -> ChatClient:
        return ChatClient.from_settings(self.settings)

    def answer(self, question: str) -> str:
        client = self.make_chat_client()
        launch_data = self.feed.fetch()

        now = self.clock()
        logger.info("Current UTC date and time: %s", format_timestamp(now))

        prompt = build_prompt(question, launch_data, now=now, variant=self.settings.prompt_variant)
        return client.complete(prompt)
