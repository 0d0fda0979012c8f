# rocket_info/launches.py
from __future__ import annotations

import logging
from typing import Optional

import requests

from .errors import LaunchFeedError

logger = logging.getLogger(__name__)


class LaunchFeedClient:
    """Клиент фида ближайших запусков. Ответ не парсим — это блоб для промпта."""

    def __init__(self, url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self) -> str:
        """Один GET на вызов; 2xx — тело как есть, иначе LaunchFeedError. Без ретраев."""
        try:
            resp = self.session.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Error fetching rocket launch data: %s", e)
            raise LaunchFeedError(f"Error fetching rocket launch data: {e}") from e

        # raise_for_status пропускает 3xx, поэтому проверяем диапазон сами
        if not 200 <= resp.status_code < 300:
            msg = f"Error fetching rocket launch data: HTTP {resp.status_code} for url: {self.url}"
            logger.error(msg)
            raise LaunchFeedError(msg)
        return resp.text
