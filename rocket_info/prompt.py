# rocket_info/prompt.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

DETAILED_TEMPLATE = """You are a helpful assistant with knowledge about rockets and space.
You have access to up-to-date information about upcoming rocket launches that the user does not directly see.

The current UTC date and time is: {now}

Here is the JSON data about the next 5 rocket launches:
{launch_data}

When presenting launch information:
- If a launch name is "TBD" or similar placeholder text, present it as "Unnamed Mission" or describe it by its rocket/provider instead of using the placeholder
- For unnamed launches, you can refer to them as "[Rocket Name] Mission" or "Unnamed [Provider] Launch"
- Always include all available mission details even for unnamed launches

Based strictly on this information, answer the following question. Only use details found in the data.
If the question cannot be answered using this data, respond that you can only answer questions about the upcoming launches you know about.

Question:
{question}"""

BASIC_TEMPLATE = """You are a helpful assistant with knowledge about rockets and space.
Here is the JSON data about the next 5 rocket launches:
{launch_data}

Based strictly on this information, answer the following question. Only use details found in the data.
If the question cannot be answered using this data, respond that you can only answer questions about the upcoming launches you know about.

Question:
{question}"""

VARIANTS = ("detailed", "basic")


def format_timestamp(now: datetime) -> str:
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(TIMESTAMP_FORMAT)


def build_prompt(question: str, launch_data: str, now: Optional[datetime] = None, variant: str = "detailed") -> str:
    """
    Собирает промпт из шаблона.
    Подстановка без str.format: фигурные скобки в JSON фида и в вопросе
    должны попасть в промпт как есть.
    """
    if variant == "detailed":
        stamp = format_timestamp(now or datetime.now(timezone.utc))
        head, tail = DETAILED_TEMPLATE.split("{launch_data}")
        head = head.replace("{now}", stamp)
    elif variant == "basic":
        head, tail = BASIC_TEMPLATE.split("{launch_data}")
    else:
        raise ValueError(f"unknown prompt variant: {variant!r}")

    tail = tail[: -len("{question}")]
    return head + launch_data + tail + question
