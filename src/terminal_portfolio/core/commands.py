"""Built-in command handlers."""

import logging

from ..interfaces import ClipboardError
from .command_parser import parse_int, parse_leading_int
from .formatter import (
    markup,
    render_code,
    render_dim,
    render_link,
    render_mail_link,
    render_tags,
    render_title,
)
from .registry import CommandContext, CommandRegistry, CommandResult, CommandSpec
from .themes import THEME_NAMES, normalize_theme

logger = logging.getLogger(__name__)

THEME_CHOICES = "|".join(THEME_NAMES)

OPEN_USAGE = "Usage: open <n> — open the nth project demo."
COPY_USAGE = "Usage: copy email"
THEME_USAGE = f"Usage: /theme <{THEME_CHOICES}>"
SEARCH_USAGE = "Usage: search <term>"
OPEN_HINT = "Type 'open <n>' to open demo in a new tab."


def help_command(ctx: CommandContext) -> CommandResult:
    """List commands, or show the usage of one."""
    if ctx.args:
        spec = ctx.registry.resolve(ctx.args)
        text = spec.usage if spec else f"No details for '{ctx.args}'."
        return CommandResult(lines=[markup(text)])

    lines = [markup(render_title("Available commands:"))]
    lines.extend(markup(render_code(hint)) for hint in ctx.registry.syntax_hints())
    return CommandResult(lines=lines)


def projects_command(ctx: CommandContext) -> CommandResult:
    """Show one page of projects."""
    token = ctx.tokens[0] if ctx.tokens else None
    page = max(1, parse_leading_int(token) or 1)

    first, projects = ctx.content.page(page)
    if not projects:
        return CommandResult(lines=[markup(f"No projects on page {page}."), markup(OPEN_HINT)])

    lines = [markup(f"Projects (page {page}/{ctx.content.total_pages()}):")]
    for number, project in enumerate(projects, first):
        lines.append(
            markup(
                f"{number}. ",
                render_title(project.title),
                " — ",
                project.description,
                " ",
                render_dim(render_tags(project.tech)),
                " \n ",
                render_link(project.demo_url, "demo"),
                " · ",
                render_link(project.source_url, "source"),
            )
        )
    lines.append(markup(OPEN_HINT))
    return CommandResult(lines=lines)


def open_command(ctx: CommandContext) -> CommandResult:
    """Open a project demo by its number."""
    number = parse_int(ctx.tokens[0] if ctx.tokens else None)
    if number is None or number < 1:
        return CommandResult(lines=[markup(OPEN_USAGE)])

    project = ctx.content.project(number)
    if project is None:
        return CommandResult(lines=[markup(f"Project {number} not found.")])

    logger.debug(f"Opening project {number}: {project.demo_url}")
    ctx.browser.open_url(project.demo_url)
    return CommandResult(lines=[markup(f"Opening {project.title}...")])


def about_command(ctx: CommandContext) -> CommandResult:
    """Show the bio."""
    bio = ctx.content.bio
    return CommandResult(
        lines=[
            markup(render_title(f"{bio.name} — {bio.role}")),
            markup(bio.location),
            markup(bio.about),
            markup("Skills: ", render_tags(bio.skills)),
        ]
    )


def contact_command(ctx: CommandContext) -> CommandResult:
    """Show email and social links."""
    lines = [markup("Email: ", render_mail_link(ctx.content.email), " (type 'copy email')")]
    for platform, url in ctx.content.socials.items():
        lines.append(markup(f"{platform}: ", render_link(url, url)))
    return CommandResult(lines=lines)


def copy_command(ctx: CommandContext) -> CommandResult:
    """Copy the email address to the clipboard."""
    if ctx.args.lower() != "email":
        return CommandResult(lines=[markup(COPY_USAGE)])

    try:
        ctx.clipboard.write_text(ctx.content.email)
    except ClipboardError as e:
        logger.warning(f"Clipboard write failed: {e}")
        return CommandResult(lines=[markup("Copy failed — your browser blocked clipboard access.")])

    return CommandResult(lines=[markup("Email copied to clipboard.")])


def resume_command(ctx: CommandContext) -> CommandResult:
    """Open the resume."""
    logger.debug(f"Opening resume: {ctx.content.resume_url}")
    ctx.browser.open_url(ctx.content.resume_url)
    return CommandResult(lines=[markup("Opening resume.pdf …")])


def theme_command(ctx: CommandContext) -> CommandResult:
    """Switch the colour theme."""
    theme = normalize_theme(ctx.tokens[0] if ctx.tokens else None)
    if theme is None:
        return CommandResult(lines=[markup(THEME_USAGE)])
    return CommandResult(lines=[markup(f"Theme set to {theme}.")], theme=theme)


def clear_command(ctx: CommandContext) -> CommandResult:
    """Empty the scrollback."""
    return CommandResult(clear=True)


def search_command(ctx: CommandContext) -> CommandResult:
    """Find projects containing every search term."""
    term = ctx.args.lower()
    if not term:
        return CommandResult(lines=[markup(SEARCH_USAGE)])

    terms = term.split()
    matches = [
        (number, project)
        for number, project in enumerate(ctx.content.projects, 1)
        if all(t in project.haystack() for t in terms)
    ]

    if not matches:
        return CommandResult(lines=[markup(f"No matches for '{term}'.")])

    lines = [markup(render_title(f"Search results ({len(matches)}):"))]
    for number, project in matches:
        lines.append(markup(f"{number}. ", render_title(project.title), " — ", project.description))
    return CommandResult(lines=lines)


def build_registry() -> CommandRegistry:
    """Create a registry holding the built-in commands."""
    registry = CommandRegistry()

    specs = [
        CommandSpec(
            name="/help",
            usage="Usage: /help [command] — show available commands or details.",
            handler=help_command,
            syntax=("/help", "/help <command>"),
        ),
        CommandSpec(
            name="/projects",
            usage="Usage: /projects [page] — paginated list. 'open <n>' to open.",
            handler=projects_command,
            syntax=("/projects [page]",),
        ),
        CommandSpec(
            name="open",
            usage=OPEN_USAGE,
            handler=open_command,
            syntax=("open <n>",),
        ),
        CommandSpec(
            name="/about",
            usage="Usage: /about — short bio, role, location, skills.",
            handler=about_command,
        ),
        CommandSpec(
            name="/contact",
            usage="Usage: /contact — email and socials. 'copy email' to clipboard.",
            handler=contact_command,
        ),
        CommandSpec(
            name="copy",
            usage="Usage: copy email — copy the email address to the clipboard.",
            handler=copy_command,
            syntax=("copy email",),
        ),
        CommandSpec(
            name="/resume",
            usage="Usage: /resume — open/download resume PDF.",
            handler=resume_command,
        ),
        CommandSpec(
            name="/theme",
            usage=f"Usage: /theme <{THEME_CHOICES}> — switch theme.",
            handler=theme_command,
            syntax=(f"/theme <{THEME_CHOICES}>",),
        ),
        CommandSpec(
            name="/clear",
            usage="Usage: /clear — clear terminal history (alias: cls).",
            handler=clear_command,
            syntax=("/clear | cls",),
            aliases=("cls",),
        ),
        CommandSpec(
            name="search",
            usage="Usage: search <term> — find projects matching every word.",
            handler=search_command,
            syntax=("search <term>",),
        ),
    ]

    for spec in specs:
        registry.register(spec)

    return registry
