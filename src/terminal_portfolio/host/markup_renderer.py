"""Renders output markup as prompt_toolkit formatted text."""

from html.parser import HTMLParser

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

from ..core.themes import THEMES, DEFAULT_THEME

# Markup classes that have a console style
STYLE_CLASSES = {"title", "tag", "dim", "code", "link"}


class _MarkupParser(HTMLParser):
    """Collects (style, text) fragments from one output line."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.fragments: list[tuple[str, str]] = []
        self._styles: list[str] = []
        self._href: list[str | None] = []
        self._link_text: list[str] = []

    def _current_style(self) -> str:
        return " ".join(s for s in self._styles if s)

    def handle_starttag(self, tag, attrs):
        attrs = dict(attrs)
        if tag == "a":
            self._styles.append("class:link")
            self._href.append(attrs.get("href"))
            self._link_text.append("")
            return

        classes = (attrs.get("class") or "").split()
        style = " ".join(f"class:{c}" for c in classes if c in STYLE_CLASSES)
        if tag == "code" and not style:
            style = "class:code"
        self._styles.append(style)

    def handle_endtag(self, tag):
        if not self._styles:
            return
        self._styles.pop()

        if tag == "a" and self._href:
            href = self._href.pop()
            label = self._link_text.pop()
            target = href[len("mailto:"):] if href and href.startswith("mailto:") else href
            if target and target != "#" and target != label:
                self.fragments.append(("class:dim", f" <{target}>"))

    def handle_data(self, data):
        if self._link_text:
            self._link_text[-1] += data
        self.fragments.append((self._current_style(), data))


def render_markup(line: str) -> FormattedText:
    """Convert one output line to styled console text."""
    parser = _MarkupParser()
    parser.feed(line)
    parser.close()
    return FormattedText(parser.fragments)


def theme_style(theme: str) -> Style:
    """Build the console style for a theme palette."""
    palette = THEMES.get(theme, THEMES[DEFAULT_THEME])
    return Style.from_dict(
        {
            "": palette["fg"],
            "title": f"{palette['accent']} bold",
            "tag": palette["tag"],
            "dim": palette["muted"],
            "code": palette["accent"],
            "link": f"{palette['link']} underline",
            "prompt.user": palette["tag"],
            "prompt.sep": palette["muted"],
            "prompt.host": palette["accent"],
        }
    )
