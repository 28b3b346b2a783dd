"""Shared test fixtures."""

import json

import pytest

from json_markup.domain.models import RenderOptions
from json_markup.output.formatter import MarkupFormatter


# ── Sample documents ─────────────────────────────────────────────────────

NESTED_DOCUMENT = {
    'name': 'json-markup',
    'version': 1.5,
    'tags': ['html', 'json'],
    'homepage': 'see https://example.com/docs for details',
    'maintainer': {'email': 'mailto:dev@example.com', 'active': True},
    'license': None,
}

HOSTILE_STRING = 'He said "hi" <script>alert(1)</script> & left'


# ── Helpers ──────────────────────────────────────────────────────────────

def expected_pair(key, content, tag, length=None):
    """Markup the renderer is expected to produce for one pair."""
    attrs = f'data-type="{tag}"' + ('' if length is None else f' data-length="{length}"')
    key_text = '' if key is None else f'"{key}"'
    separator = '' if key is None else ': '
    return (
        f'<span class="toggler" {attrs}></span>'
        f'<span class="key" {attrs}>{key_text}</span>'
        f'<span class="separator" {attrs}>{separator}</span>'
        f'<span class="value" {attrs}>{content}</span>'
    )


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def formatter():
    return MarkupFormatter(RenderOptions())


@pytest.fixture
def tmp_json(tmp_path):
    """Write a value as JSON to a temp file and return its path."""
    def _write(value, filename: str = "input.json") -> str:
        path = tmp_path / filename
        path.write_text(json.dumps(value), encoding="utf-8")
        return str(path)
    return _write
