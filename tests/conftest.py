from __future__ import annotations

from typing import Any

import pytest
import requests

from percy_client.config import Settings


class FakeDriver:
    """Driver mínimo: ejecuta 'scripts' y expone current_url/capabilities."""

    def __init__(self, dom: Any = "<html><body>hola</body></html>",
                 url: str = "http://example.com/", fail_on: int | None = None) -> None:
        self.dom = dom
        self.url = url
        self.fail_on = fail_on
        self.scripts: list[str] = []
        self.capabilities = {
            "browserName": "chrome",
            "browserVersion": "120.0",
            "platformName": "LINUX",
        }

    def execute_script(self, script: str, *args: Any) -> Any:
        self.scripts.append(script)
        if self.fail_on is not None and len(self.scripts) == self.fail_on:
            from selenium.common.exceptions import WebDriverException
            raise WebDriverException("boom")
        if "percyAgentClient.snapshot" in script:
            return self.dom
        return None

    @property
    def current_url(self) -> str:
        return self.url


class PostRecorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.error: Exception | None = None
        self.status_code = 200

    def __call__(self, url: str, **kwargs: Any) -> Any:
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        resp = requests.Response()
        resp.status_code = self.status_code
        return resp

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return [kw["json"] for _, kw in self.calls]


def make_settings(**overrides: Any) -> Settings:
    base = dict(
        AGENT_HOST="localhost",
        AGENT_PORT=5338,
        AGENT_JS_PATH="",
        REQUEST_TIMEOUT_SEC=15,
        DEBUG=False,
        PAGE_URL="",
        SNAPSHOT_NAME="",
        WIDTHS=(),
        MIN_HEIGHT=None,
        ENABLE_JAVASCRIPT=False,
        SELENIUM_BROWSER="chrome",
        HEADLESS=True,
    )
    base.update(overrides)
    return Settings(**base)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def post(monkeypatch: pytest.MonkeyPatch) -> PostRecorder:
    recorder = PostRecorder()
    monkeypatch.setattr("percy_client.percy.requests.post", recorder)
    return recorder
