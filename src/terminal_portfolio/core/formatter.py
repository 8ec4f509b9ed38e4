"""Markup-safe formatting of output lines.

Every output line is assembled from fragments. A fragment is either
``Safe`` (markup produced by the render helpers below) or ``Escape``
(free text that must be escaped). Bare strings count as ``Escape``, so
text from content or user input can't reach the markup unescaped.
"""

import html
import re
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Safe:
    """Trusted markup, emitted verbatim."""

    markup: str


@dataclass(frozen=True)
class Escape:
    """Untrusted text, escaped on output."""

    text: str


Fragment = Union[Safe, Escape, str]

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)

_TAG_RE = re.compile(r"<[^>]*>")


def escape(text: str) -> str:
    """Escape the five markup-sensitive characters."""
    # & must go first so later entities aren't double-escaped
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def fragment_markup(fragment: Fragment) -> str:
    """Return the markup for a single fragment."""
    if isinstance(fragment, Safe):
        return fragment.markup
    if isinstance(fragment, Escape):
        return escape(fragment.text)
    return escape(str(fragment))


def markup(*fragments: Fragment) -> str:
    """Join fragments into one output line."""
    return "".join(fragment_markup(f) for f in fragments)


def render_tag(text: str) -> Safe:
    """Pill-style inline element."""
    return Safe(f"<span class='tag'>{escape(text)}</span>")


def render_title(text: str) -> Safe:
    """Accent-coloured inline element."""
    return Safe(f"<span class='title'>{escape(text)}</span>")


def render_code(text: str) -> Safe:
    """Inline code element."""
    return Safe(f"<code class='code'>{escape(text)}</code>")


def render_dim(*fragments: Fragment) -> Safe:
    """Muted inline element wrapping other fragments."""
    return Safe(f"<span class='dim'>{markup(*fragments)}</span>")


def render_link(url: str, label: Fragment) -> Safe:
    """
    Anchor that opens in a new browsing context.

    The URL comes from static configuration and is emitted as-is; the
    label is escaped unless it is already ``Safe``.
    """
    return Safe(
        f"<a href='{url}' target='_blank' rel='noreferrer'>{fragment_markup(label)}</a>"
    )


def render_mail_link(email: str) -> Safe:
    """mailto: anchor for a configured address."""
    return Safe(f"<a href='mailto:{email}'>{email}</a>")


def render_tags(items: tuple[str, ...] | list[str]) -> Safe:
    """Space-separated pills."""
    return Safe(" ".join(render_tag(item).markup for item in items))


def to_plain_text(line: str) -> str:
    """Strip tags and decode entities, for logs and plain consoles."""
    return html.unescape(_TAG_RE.sub("", line))
