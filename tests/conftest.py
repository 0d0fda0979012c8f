# tests/conftest.py
from __future__ import annotations

import csv
import json
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest
import requests


RESULTS_DIR = Path("results")
RESULTS_DIR.mkdir(parents=True, exist_ok=True)

JSONL_PATH = RESULTS_DIR / "test_results.jsonl"
CSV_PATH   = RESULTS_DIR / "test_results.csv"

FEED_JSON = '[{"name":"TBD","t0":"2025-01-01T00:00:00Z"}]'


def make_response(status: int, body: str, url: str = "https://example.test/") -> requests.Response:
    """Настоящий requests.Response без сети."""
    resp = requests.Response()
    resp.status_code = status
    resp._content = body.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = url
    return resp


def completion_body(text: str) -> str:
    return json.dumps({"choices": [{"index": 0, "message": {"role": "assistant", "content": text}}]})


def _append_jsonl(record: Dict[str, Any]) -> None:
    with JSONL_PATH.open("a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")


def _append_csv(record: Dict[str, Any]) -> None:
    exists = CSV_PATH.exists()
    fieldnames = ["ts", "nodeid", "case", "status", "duration_sec", "question", "response", "status_code"]
    with CSV_PATH.open("a", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        if not exists:
            w.writeheader()
        w.writerow({k: record.get(k) for k in fieldnames})


@pytest.fixture(scope="session", autouse=True)
def _clean_results_dir() -> None:
    for p in (JSONL_PATH, CSV_PATH):
        if p.exists():
            p.unlink()


@pytest.fixture
def record_result(request) -> Callable[..., None]:
    """Пишет итог сценария в results/ (JSONL + CSV)."""
    nodeid = request.node.nodeid

    def _record(
        *,
        case: str,
        status: str,
        duration_sec: float,
        question: str = "",
        response: str = "",
        status_code: Optional[int] = None,
    ) -> None:
        rec = {
            "ts": time.strftime("%Y-%m-%d %H:%M:%S"),
            "nodeid": nodeid,
            "case": case,
            "status": status,
            "duration_sec": round(float(duration_sec), 3),
            "question": question,
            "response": response,
            "status_code": status_code,
        }
        _append_jsonl(rec)
        _append_csv(rec)

    return _record


class Recorder:
    """Запоминает исходящие вызовы и отдаёт заданный ответ."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        self.calls: List[Dict[str, Any]] = []


@pytest.fixture
def api_key(monkeypatch):
    from rocket_info import main
    monkeypatch.setattr(main.settings, "openai_api_key", "sk-test")
    return "sk-test"


@pytest.fixture
def feed(monkeypatch) -> Recorder:
    """Подменяет GET фида; по умолчанию отдаёт FEED_JSON со статусом 200."""
    from rocket_info import main
    rec = Recorder(200, FEED_JSON)

    def fake_get(url, timeout=None):
        rec.calls.append({"url": url, "timeout": timeout})
        return make_response(rec.status, rec.body, url)

    monkeypatch.setattr(main.service.feed.session, "get", fake_get)
    return rec


@pytest.fixture
def chat(monkeypatch) -> Recorder:
    """Подменяет POST в chat completions; запоминает payload каждого вызова."""
    rec = Recorder(200, completion_body("stub answer"))

    def fake_post(url, headers=None, json=None, timeout=None):
        rec.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        return make_response(rec.status, rec.body, url)

    monkeypatch.setattr("rocket_info.generator.requests.post", fake_post)
    return rec
