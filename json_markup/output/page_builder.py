"""Builds a standalone HTML page around a rendered fragment."""

import html
import json
import os
import uuid

from json_markup.engine import JSONMarkup

STYLESHEET = """\
.jsoner{font-family:'SF Mono','Menlo',monospace;font-size:13px;line-height:1.5;color:#222}
.jsoner ul{list-style:none;margin:0;padding-left:1.5em}
.jsoner .toggler{display:inline-block;width:1em;cursor:default}
.jsoner .toggler[data-length]:not([data-length="0"]){cursor:pointer}
.jsoner .toggler[data-length]:not([data-length="0"])::before{content:"\\25BE"}
.jsoner .toggler.collapsed::before{content:"\\25B8"}
.jsoner .toggler.collapsed ~ .value > ul{display:none}
.jsoner .toggler.collapsed ~ .value::after{content:" " attr(data-length) " items";color:#999}
.jsoner .key{color:#881391}
.jsoner .value[data-type="string"]{color:#c41a16}
.jsoner .value[data-type="number"]{color:#1c00cf}
.jsoner .value[data-type="boolean"]{color:#0d22aa}
.jsoner .value[data-type="null"],.jsoner .value[data-type="function"]{color:#808080}
.jsoner .value[data-type="date"]{color:#007400}
.jsoner a{color:inherit}
"""

# Listener is bound to the host element only; dispose() removes it.
# Only non-empty containers toggle.
COLLAPSE_SCRIPT = """\
(function(host){
  if (!host) return;
  function onClick(e){
    var target = e.target;
    if (!target.classList || !target.classList.contains('toggler')) return;
    if (!target.parentElement || !host.contains(target.parentElement)) return;
    var length = target.getAttribute('data-length');
    if (!length || length === '0') return;
    target.classList.toggle('collapsed');
  }
  host.addEventListener('click', onClick, false);
  host.dispose = function(){ host.removeEventListener('click', onClick, false); };
})(document.getElementById(%s));
"""


class PageBuilder:
    """Wraps an engine's markup in a document with styles and collapse behaviour."""

    def build_fragment(self, engine: JSONMarkup, host_id: str | None = None) -> str:
        """Markup plus the collapse script bound to its host element."""
        host_id = host_id or f"json-markup-{uuid.uuid4().hex[:8]}"
        return (
            f'<div id="{html.escape(host_id)}">{engine.to_html()}</div>\n'
            f'<script>\n{COLLAPSE_SCRIPT % _script_literal(host_id)}</script>'
        )

    def build(self, engine: JSONMarkup, title: str = 'JSON', host_id: str | None = None) -> str:
        stylesheet = STYLESHEET.replace('.jsoner', f'.{engine.options.container_class}')
        return '\n'.join([
            '<!DOCTYPE html>',
            '<html lang="en"><head><meta charset="UTF-8">',
            f'<title>{html.escape(title)}</title>',
            f'<style>\n{stylesheet}</style></head><body>',
            self.build_fragment(engine, host_id),
            '</body></html>',
        ])

    @staticmethod
    def write(page: str, path: str) -> None:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(page)


def _script_literal(text: str) -> str:
    """JavaScript string literal for ``text`` that is safe inside a <script> element."""
    return json.dumps(text).replace('</', '<\\/')
