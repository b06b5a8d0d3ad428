from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import httpx
import pytest


_REPO_ROOT = Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if _SRC.exists():
    sys.path.insert(0, str(_SRC))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.upper().startswith("SCCP_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def oas_json():
    def build(title: str, paths: dict) -> bytes:
        return json.dumps(
            {"openapi": "3.0.0", "info": {"title": title, "version": "1"}, "paths": paths}
        ).encode()

    return build


@pytest.fixture
def routes():
    """url -> httpx.Response | Exception, served by `mock_transport`."""

    return {}


@pytest.fixture
def mock_transport(routes):
    def handler(request: httpx.Request) -> httpx.Response:
        answer = routes.get(str(request.url))
        if answer is None:
            raise httpx.ConnectError("connection refused", request=request)
        if isinstance(answer, Exception):
            raise answer
        return answer

    return httpx.MockTransport(handler)
