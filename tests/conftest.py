"""Pytest configuration and fixtures."""

import pytest

from terminal_portfolio.core import Bio, ContentStore, Preferences, Project
from terminal_portfolio.interfaces import Browser, Clipboard, ClipboardError
from terminal_portfolio.interpreter import Interpreter
from terminal_portfolio.stores import MemoryStore


class FakeBrowser(Browser):
    """Browser that records opened URLs."""

    def __init__(self):
        self.opened = []

    def open_url(self, url: str) -> None:
        self.opened.append(url)


class FakeClipboard(Clipboard):
    """Clipboard that records writes, or rejects them all."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.written = []

    def write_text(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("Write permission denied")
        self.written.append(text)


@pytest.fixture
def sample_projects():
    """Six projects, enough for two pages of five."""
    return [
        Project(
            title="zensu",
            description="calm productivity tool",
            tech=["Next.js", "TypeScript"],
            demo_url="https://zensu.example.com",
            source_url="https://github.com/example/zensu",
        ),
        Project(
            title="danger ahead",
            description="Realtime hazard alerts with map overlays.",
            tech=["React", "Maplibre"],
            demo_url="https://danger.example.com",
            source_url="https://github.com/example/danger-ahead",
        ),
        Project(
            title="groceryCMS",
            description="Headless CMS starter for small grocery catalogs.",
            tech=["Next.js", "Prisma", "SQLite"],
            demo_url="https://grocery.example.com",
            source_url="https://github.com/example/grocerycms",
        ),
        Project(
            title="echomeets",
            description="Audio-first meeting notes with transcripts.",
            tech=["TypeScript", "Web Audio"],
            demo_url="https://echo.example.com",
            source_url="https://github.com/example/echomeets",
        ),
        Project(
            title="<script>alert(1)</script>",
            description="Tricky & \"quoted\" <b>text</b>",
            tech=["<img src=x>"],
            demo_url="https://xss.example.com",
            source_url="https://github.com/example/xss",
        ),
        Project(
            title="mapper",
            description="Offline map tiles for hikers.",
            tech=["Python", "SQLite"],
            demo_url="https://mapper.example.com",
            source_url="https://github.com/example/mapper",
        ),
    ]


@pytest.fixture
def content(sample_projects):
    """ContentStore with six projects and page size five."""
    return ContentStore(
        bio=Bio(
            name="Ada Example",
            role="Frontend Engineer",
            location="Somewhere <Earth>",
            about="I build <fast> & accessible apps.",
            skills=["TypeScript", "React", "<script>"],
        ),
        projects=sample_projects,
        email="ada@example.com",
        socials={
            "GitHub": "https://github.com/example",
            "LinkedIn": "https://www.linkedin.com/in/example/",
        },
        resume_url="https://example.com/resume.pdf",
        page_size=5,
    )


@pytest.fixture
def browser():
    return FakeBrowser()


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def interpreter(content, browser, clipboard, store):
    """Interpreter wired to fakes and an in-memory store."""
    return Interpreter(
        content=content,
        browser=browser,
        clipboard=clipboard,
        preferences=Preferences(store),
    )
