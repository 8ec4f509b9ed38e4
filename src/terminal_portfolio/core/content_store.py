"""Static profile, project and contact data."""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml


@dataclass(frozen=True)
class Project:
    """A portfolio project."""

    title: str
    description: str
    tech: tuple[str, ...] = field(default_factory=tuple)
    demo_url: str = "#"
    source_url: str = "#"

    def __init__(
        self,
        title: str,
        description: str,
        tech: list[str] | tuple[str, ...] | None = None,
        demo_url: str = "#",
        source_url: str = "#",
    ):
        object.__setattr__(self, "title", title)
        object.__setattr__(self, "description", description)
        object.__setattr__(self, "tech", tuple(tech) if tech else ())
        object.__setattr__(self, "demo_url", demo_url)
        object.__setattr__(self, "source_url", source_url)

    def haystack(self) -> str:
        """Lowercased text that search terms are matched against."""
        return f"{self.title} {self.description} {' '.join(self.tech)}".lower()


@dataclass(frozen=True)
class Bio:
    """Who the portfolio belongs to."""

    name: str
    role: str
    location: str
    about: str
    skills: tuple[str, ...] = field(default_factory=tuple)

    def __init__(
        self,
        name: str,
        role: str,
        location: str,
        about: str,
        skills: list[str] | tuple[str, ...] | None = None,
    ):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "role", role)
        object.__setattr__(self, "location", location)
        object.__setattr__(self, "about", about)
        object.__setattr__(self, "skills", tuple(skills) if skills else ())


class ContentStore:
    """Read-only registry of everything the commands display.

    Loaded once at startup and never changed during a session.
    """

    DEFAULT_PAGE_SIZE = 5

    def __init__(
        self,
        bio: Bio,
        projects: list[Project] | tuple[Project, ...],
        email: str,
        socials: Mapping[str, str] | None = None,
        resume_url: str = "#",
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        self._bio = bio
        self._projects = tuple(projects)
        self._email = email
        self._socials = MappingProxyType(dict(socials or {}))
        self._resume_url = resume_url
        self._page_size = page_size

    @property
    def bio(self) -> Bio:
        return self._bio

    @property
    def projects(self) -> tuple[Project, ...]:
        return self._projects

    @property
    def email(self) -> str:
        return self._email

    @property
    def socials(self) -> Mapping[str, str]:
        return self._socials

    @property
    def resume_url(self) -> str:
        return self._resume_url

    @property
    def page_size(self) -> int:
        return self._page_size

    def project(self, number: int) -> Project | None:
        """
        Get a project by its 1-based number.

        Returns None if the number is out of range.
        """
        if number < 1 or number > len(self._projects):
            return None
        return self._projects[number - 1]

    def page(self, page: int) -> tuple[int, tuple[Project, ...]]:
        """
        Slice the project list into one page.

        Args:
            page: 1-based page number.

        Returns:
            Tuple of (1-based number of the first project, projects on the page).
        """
        start = (page - 1) * self._page_size
        return start + 1, self._projects[start:start + self._page_size]

    def total_pages(self) -> int:
        """Number of project pages, never less than one."""
        return max(1, -(-len(self._projects) // self._page_size))


def _require(data: dict, key: str, section: str) -> str:
    value = data.get(key)
    if value is None or value == "":
        raise ValueError(f"Missing '{key}' in {section}")
    return str(value)


def content_from_dict(data: dict, page_size: int = ContentStore.DEFAULT_PAGE_SIZE) -> ContentStore:
    """
    Build a ContentStore from plain data.

    Args:
        data: Mapping with bio, email, resume_url, socials and projects.
        page_size: Projects per page for /projects.

    Returns:
        The populated ContentStore.

    Raises:
        ValueError: If a required field is missing or malformed.
    """
    bio_data = data.get("bio")
    if not isinstance(bio_data, dict):
        raise ValueError("Missing 'bio' section")

    bio = Bio(
        name=_require(bio_data, "name", "bio"),
        role=_require(bio_data, "role", "bio"),
        location=str(bio_data.get("location", "")),
        about=str(bio_data.get("about", "")),
        skills=[str(s) for s in bio_data.get("skills") or []],
    )

    projects = []
    for i, item in enumerate(data.get("projects") or [], 1):
        if not isinstance(item, dict):
            raise ValueError(f"Project {i} must be a mapping")
        projects.append(
            Project(
                title=_require(item, "title", f"project {i}"),
                description=str(item.get("description", "")),
                tech=[str(t) for t in item.get("tech") or []],
                demo_url=str(item.get("demo_url", "#")),
                source_url=str(item.get("source_url", "#")),
            )
        )

    socials = data.get("socials") or {}
    if not isinstance(socials, dict):
        raise ValueError("'socials' must be a mapping of platform to URL")

    return ContentStore(
        bio=bio,
        projects=projects,
        email=_require(data, "email", "content"),
        socials={str(k): str(v) for k, v in socials.items()},
        resume_url=str(data.get("resume_url", "#")),
        page_size=page_size,
    )


def load_content(path: str | Path, page_size: int = ContentStore.DEFAULT_PAGE_SIZE) -> ContentStore:
    """
    Load portfolio content from a YAML file.

    Raises:
        FileNotFoundError: If the content file doesn't exist.
        ValueError: If the content is incomplete or not valid YAML.
    """
    content_path = Path(path).expanduser()

    if not content_path.exists():
        raise FileNotFoundError(f"Content file not found: {path}")

    with open(content_path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Content file must hold a mapping: {path}")

    return content_from_dict(data, page_size=page_size)


DEFAULT_CONTENT = {
    "bio": {
        "name": "Alok Kumar Sah",
        "role": "Frontend Engineer",
        "location": "Somewhere, Earth",
        "about": "I craft fast, accessible web apps. I enjoy systems design, DX, and beautiful UIs.",
        "skills": ["TypeScript", "React", "Next.js", "Node.js", "Tailwind CSS", "Testing"],
    },
    "email": "hello@example.com",
    "resume_url": "https://www.w3.org/WAI/ER/tests/xhtml/testfiles/resources/pdf/dummy.pdf",
    "socials": {
        "GitHub": "https://github.com/yourname",
        "LinkedIn": "https://www.linkedin.com/in/yourname/",
        "Twitter": "https://twitter.com/yourname",
    },
    "projects": [
        {
            "title": "zensu",
            "description": "A calm productivity tool focused on flow and minimal UI.",
            "tech": ["Next.js", "TypeScript", "Tailwind"],
            "demo_url": "#",
            "source_url": "https://github.com/alokkumax/zensu",
        },
        {
            "title": "danger ahead",
            "description": "Realtime hazard alerts demo with map overlays.",
            "tech": ["React", "WebSocket", "Maplibre"],
            "demo_url": "#",
            "source_url": "https://github.com/alokkumax/danger-ahead",
        },
        {
            "title": "groceryCMS",
            "description": "Headless CMS starter for small grocery catalogs.",
            "tech": ["Next.js", "Prisma", "SQLite"],
            "demo_url": "#",
            "source_url": "https://github.com/alokkumax/groceryCMS",
        },
        {
            "title": "echomeets",
            "description": "Lightweight audio-first meeting notes with transcripts.",
            "tech": ["TypeScript", "Web Audio", "VAD"],
            "demo_url": "#",
            "source_url": "https://github.com/alokkumax/echomeets",
        },
    ],
}


def default_content(page_size: int = ContentStore.DEFAULT_PAGE_SIZE) -> ContentStore:
    """The sample profile used when no content file is given."""
    return content_from_dict(DEFAULT_CONTENT, page_size=page_size)
