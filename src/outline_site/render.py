"""Markdown rendering and the page template."""

from pathlib import Path
from typing import Any

import markdown
from jinja2 import Environment, Template, TemplateError, select_autoescape
from markupsafe import Markup

from outline_site.errors import ConfigError

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]

# Context values that already hold HTML and must not be escaped again.
_RAW_HTML_KEYS = ("html", "favicon")


def markdown_to_html(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


class PageTemplate:
    """A page template compiled once at startup."""

    def __init__(self, source: str, *, name: str = "<template>") -> None:
        env = Environment(autoescape=select_autoescape(default_for_string=True, default=True))
        try:
            self._template: Template = env.from_string(source)
        except TemplateError as e:
            msg = f"Cannot compile template {name}: {e}"
            raise ConfigError(msg) from e
        self.name = name

    @classmethod
    def from_file(cls, path: Path) -> "PageTemplate":
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            msg = f"Cannot read template {path}: {e}"
            raise ConfigError(msg) from e
        return cls(source, name=str(path))

    def render(self, context: dict[str, Any]) -> str:
        values = dict(context)
        for key in _RAW_HTML_KEYS:
            if values.get(key) is not None:
                values[key] = Markup(values[key])
        return self._template.render(**values)
