# rocket_info/errors.py
"""Ошибки сервиса: конфигурация отдельно, внешние вызовы отдельно."""


class RocketInfoError(Exception):
    """Базовая ошибка; status_code читает граница обработчика."""

    status_code = 500


class ConfigurationError(RocketInfoError):
    """Нет обязательной настройки (например, OPENAI_API_KEY)."""


class TransportError(RocketInfoError):
    """Сбой исходящего HTTP-вызова."""


class LaunchFeedError(TransportError):
    pass


class ChatCompletionError(TransportError):
    pass
