# rocket_info/config.py
# Совместимо с Python 3.10 и Pydantic v2 / pydantic-settings v2

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Единая конфигурация сервиса RocketInfo.
    - Значения читаются из переменных окружения и файла .env (если он есть).
    - Отсутствие OPENAI_API_KEY при старте допустимо: ключ проверяется
      фабрикой чат-клиента на каждом запросе, и запрос получает ответ 500.
    """

    # Ключ OpenAI. Переменная окружения: OPENAI_API_KEY
    openai_api_key: Optional[str] = None

    # Эндпоинт chat completions и модель
    openai_url: str = Field(default="https://api.openai.com/v1/chat/completions")
    openai_model: str = Field(default="gpt-4o")

    # Фид ближайших запусков. Переменная окружения: LAUNCHES_URL
    launches_url: str = Field(default="https://fdo.rocketlaunch.live/json/launches/next/5")

    # Таймаут исходящих HTTP-запросов (сек); None — поведение клиента по умолчанию
    # Переменная окружения: REQUEST_TIMEOUT_SEC
    request_timeout_sec: Optional[float] = Field(default=None)

    # Шаблон промпта: "detailed" (с датой и правилами для TBD) или "basic"
    # Переменная окружения: PROMPT_VARIANT
    prompt_variant: str = Field(default="detailed")

    # Вопрос, если параметр question пустой или не передан
    default_question: str = Field(default="Tell me about the upcoming rocket launches")

    # Переменная окружения: LOG_LEVEL
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


# Глобальный объект настроек
settings = Settings()
