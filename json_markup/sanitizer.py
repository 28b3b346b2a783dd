"""String sanitizing for rendered markup.

Every string value goes through three fixed stages:
  1. escape   → literal double quotes become ``\\"``
  2. encode   → ``&``, ``<`` and ``>`` become character references
  3. linkify  → URLs and ``mailto:``/``tel:`` URIs become anchors

The order matters: linkify runs on encoded text, so anchors it emits are the
only markup in the result.
"""

import html
import re

# (boundary)(scheme)(marker)(rest)
URL_PATTERN = re.compile(r'(^|\s)(http|https|ftp|irc|smb|file)(://)(\S+)')
URI_PATTERN = re.compile(r'(^|\s)(mailto|tel)(:)(\S+)')


class StringSanitizer:
    """Escapes, encodes and hyperlink-annotates string content."""

    LINK_PATTERNS = (URL_PATTERN, URI_PATTERN)

    def sanitize(self, raw: str) -> str:
        return self.linkify(self.encode(self.escape(raw)))

    def sanitize_key(self, raw: str) -> str:
        """Sanitize a mapping key. Keys are never linkified."""
        return self.encode(self.escape(raw))

    @staticmethod
    def escape(value: str) -> str:
        return value.replace('"', '\\"')

    @staticmethod
    def encode(value: str) -> str:
        return html.escape(value, quote=False)

    def linkify(self, value: str) -> str:
        for pattern in self.LINK_PATTERNS:
            value = pattern.sub(self._anchor, value)
        return value

    @staticmethod
    def _anchor(match: re.Match) -> str:
        boundary, scheme, marker, rest = match.groups()
        target = scheme + marker + rest
        href = target.replace('"', '&quot;')
        return f'{boundary}<a href="{href}" target="_blank">{target}</a>'
