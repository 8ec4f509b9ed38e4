"""Theme names and their colour palettes."""

DEFAULT_THEME = "dark"

THEMES: dict[str, dict[str, str]] = {
    "dark": {
        "bg": "#0b0e14",
        "fg": "#e6edf3",
        "muted": "#9aa4b2",
        "accent": "#7aa2f7",
        "cursor": "#d0d7de",
        "link": "#93c5fd",
        "tag": "#10b981",
    },
    "matrix": {
        "bg": "#000000",
        "fg": "#c2f5c2",
        "muted": "#79c379",
        "accent": "#00ff66",
        "cursor": "#b8ffb8",
        "link": "#7cffb2",
        "tag": "#00e676",
    },
    "solarized": {
        "bg": "#002b36",
        "fg": "#eee8d5",
        "muted": "#93a1a1",
        "accent": "#b58900",
        "cursor": "#fdf6e3",
        "link": "#6c71c4",
        "tag": "#2aa198",
    },
    "light": {
        "bg": "#f8fafc",
        "fg": "#0f172a",
        "muted": "#334155",
        "accent": "#2563eb",
        "cursor": "#0f172a",
        "link": "#1d4ed8",
        "tag": "#059669",
    },
}

# Order shown in usage text
THEME_NAMES = ("light", "dark", "matrix", "solarized")


def normalize_theme(name: str | None) -> str | None:
    """Return the canonical theme name, or None if unknown."""
    if not name:
        return None
    lowered = name.lower()
    return lowered if lowered in THEMES else None


def toggled_theme(current: str) -> str:
    """Theme the header toggle switches to."""
    return "dark" if current == "light" else "light"
