"""Render page Markdown into HTML with syntax-highlighted code blocks."""

from __future__ import annotations

import re
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?([ \t]+[^\r\n]+)$", re.MULTILINE
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


class HtmlContentRenderer:
    """Render markdown with consistent code styling."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
            output_format="html",
        )
        html = md.convert(normalized)
        return self._annotate_codehilite(html, normalized)

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        """Dedent fences and drop meta strings such as ``title="x.ts"``."""
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_meta(match: re.Match[str]) -> str:
            fence, language, _meta = match.groups()
            return f"{fence}{language or ''}"

        return FENCE_LABEL_PATTERN.sub(_strip_meta, without_indent)


__all__ = ["CODE_BLOCK_PATTERN", "HtmlContentRenderer"]
