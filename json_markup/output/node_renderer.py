"""Markup templates for a single rendered key/value pair."""

from json_markup.domain.enums import TypeTag


class NodeRenderer:
    """Builds the four adjacent spans of one rendered pair.

    Output structure:
        <span class="toggler" ...></span>
        <span class="key" ...>"name"</span>
        <span class="separator" ...>: </span>
        <span class="value" ...>content</span>

    Every span carries ``data-type`` and, for containers, ``data-length`` so
    stylesheets and the collapse script can select on them.
    """

    UNIT_CLASSES = ('toggler', 'key', 'separator', 'value')

    @staticmethod
    def template(content: str, class_name: str, tag: TypeTag, child_count: int | None = None) -> str:
        length = '' if child_count is None else f' data-length="{child_count}"'
        return f'<span class="{class_name}" data-type="{tag.value}"{length}>{content}</span>'

    def render(self, key: str | None, content: str, tag: TypeTag, child_count: int | None = None) -> str:
        """Render a pair. ``key`` must already be sanitized; None for array elements and the root."""
        has_key = key is not None
        contents = (
            '',
            f'"{key}"' if has_key else '',
            ': ' if has_key else '',
            content,
        )
        return ''.join(
            self.template(text, class_name, tag, child_count)
            for class_name, text in zip(self.UNIT_CLASSES, contents)
        )
