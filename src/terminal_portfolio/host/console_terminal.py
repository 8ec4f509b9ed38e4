"""Interactive console front end for the interpreter."""

import logging

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.shortcuts import clear
from prompt_toolkit.styles import DynamicStyle
from pubsub import pub

from ..config import Config
from ..interpreter import Interpreter, TOPIC_CLEAR, TOPIC_OUTPUT, TOPIC_THEME
from ..core.session import OutputBlock
from .markup_renderer import render_markup, theme_style

logger = logging.getLogger(__name__)


def build_key_bindings(interpreter: Interpreter) -> KeyBindings:
    """Up/Down walk the interpreter's history, Ctrl-T toggles the theme."""
    kb = KeyBindings()

    def _show(event, text: str) -> None:
        event.app.current_buffer.document = Document(text, cursor_position=len(text))

    @kb.add("up")
    def _history_up(event):
        _show(event, interpreter.history_up())

    @kb.add("down")
    def _history_down(event):
        _show(event, interpreter.history_down())

    @kb.add("c-t")
    def _toggle_theme(event):
        interpreter.toggle_theme()
        event.app.invalidate()

    return kb


class ConsoleTerminal:
    """Prompt loop that feeds lines to the interpreter and prints its output.

    Output, clear and theme changes arrive over pubsub, so commands run
    from the prompt and from ``run_commands`` print the same way.
    """

    WELCOME = "Type /help to begin…  (↑↓ history • Enter run • Ctrl-T theme)"

    def __init__(self, interpreter: Interpreter, config: Config | None = None):
        self.interpreter = interpreter
        self.config = config or Config()
        self._style = theme_style(interpreter.state.theme)

        pub.subscribe(self._on_output, TOPIC_OUTPUT)
        pub.subscribe(self._on_clear, TOPIC_CLEAR)
        pub.subscribe(self._on_theme, TOPIC_THEME)

    def close(self) -> None:
        """Stop listening for interpreter events."""
        pub.unsubscribe(self._on_output, TOPIC_OUTPUT)
        pub.unsubscribe(self._on_clear, TOPIC_CLEAR)
        pub.unsubscribe(self._on_theme, TOPIC_THEME)

    def _on_output(self, block: OutputBlock, interpreter: Interpreter) -> None:
        if interpreter is not self.interpreter:
            return
        for line in block.lines:
            print_formatted_text(render_markup(line), style=self._style)

    def _on_clear(self, interpreter: Interpreter) -> None:
        if interpreter is not self.interpreter:
            return
        clear()

    def _on_theme(self, theme: str, interpreter: Interpreter) -> None:
        if interpreter is not self.interpreter:
            return
        self._style = theme_style(theme)

    def prompt_message(self) -> FormattedText:
        """The user@host:location$ prompt."""
        return FormattedText(
            [
                ("class:prompt.user", self.config.prompt_user),
                ("class:prompt.sep", "@"),
                ("class:prompt.host", self.config.prompt_host),
                ("class:prompt.sep", f":{self.config.location}$ "),
            ]
        )

    def run_commands(self, commands: list[str]) -> None:
        """Run lines without prompting."""
        for command in commands:
            self.interpreter.submit(command)

    def run(self) -> None:
        """Prompt until Ctrl-D or Ctrl-C."""
        session = PromptSession(
            key_bindings=build_key_bindings(self.interpreter),
            style=DynamicStyle(lambda: self._style),
        )
        session.default_buffer.on_text_changed += lambda buf: self.interpreter.set_input(buf.text)

        print_formatted_text(FormattedText([("class:dim", self.WELCOME)]), style=self._style)

        while True:
            try:
                line = session.prompt(self.prompt_message)
            except (EOFError, KeyboardInterrupt):
                logger.debug("Prompt closed")
                break

            self.interpreter.submit(line)
