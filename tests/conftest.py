"""Shared test fixtures."""

from __future__ import annotations

import base64
import json
from pathlib import Path

import httpx
import pytest

from mergesvg.engine.resolver import register_sources

register_sources()


CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

# No viewBox: geometry has to be derived from width/height
BADGE_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="128" height="32">
  <rect width="128" height="32" rx="4" fill="#4ECDC4"/>
  <text x="8" y="21" font-size="14">build passing</text>
</svg>
'''

# Shifted coordinate system plus a frozen-preview override injected by a generator
SPINNER_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="-10 -10 120 40" preserveAspectRatio="xMidYMid meet">
  <style>* { animation-duration: 0s !important; animation-delay: 0s !important; }</style>
  <style>.spin { animation: spin 2s linear infinite; transform-origin: 50px 10px; }
@keyframes spin { to { transform: rotate(360deg); } }</style>
  <defs><circle id="dot" r="4"/></defs>
  <g class="spin"><use xlink:href="#dot" x="50" y="0"/></g>
</svg>'''

FILLED_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#4ECDC4"/>
  <circle cx="50" cy="50" r="20" fill="#FF6B6B"/>
</svg>'''


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def mock_client(routes: dict[str, httpx.Response | Exception]) -> httpx.Client:
    """httpx client answering from a URL -> response table; unknown URLs get 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        result = routes.get(str(request.url))
        if isinstance(result, Exception):
            raise result
        if result is None:
            return httpx.Response(404, text="not found")
        return result

    return httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def badge_svg() -> str:
    return BADGE_SVG


@pytest.fixture
def spinner_svg() -> str:
    return SPINNER_SVG


@pytest.fixture
def write_layout(tmp_path: Path):
    """Write a layout dict to tmp_path/layout.json and return the path."""

    def _write(layout: dict, name: str = "layout.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(layout), encoding="utf-8")
        return path

    return _write
