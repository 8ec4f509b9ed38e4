"""Tests for the console host."""

import pytest
from unittest.mock import MagicMock, patch

import pyperclip
from prompt_toolkit.styles import Style

from terminal_portfolio.core import Preferences
from terminal_portfolio.core.formatter import markup, render_dim, render_link, render_mail_link, render_tag, render_title
from terminal_portfolio.core.session import OutputBlock
from terminal_portfolio.config import Config
from terminal_portfolio.host import ConsoleTerminal, SystemClipboard, WebBrowser, build_key_bindings
from terminal_portfolio.host.markup_renderer import render_markup, theme_style
from terminal_portfolio.interfaces import ClipboardError
from terminal_portfolio.interpreter import Interpreter
from terminal_portfolio.stores import MemoryStore

from conftest import FakeBrowser, FakeClipboard


class TestWebBrowser:
    """Tests for WebBrowser."""

    @patch("terminal_portfolio.host.capabilities.webbrowser")
    def test_opens_new_tab(self, mock_webbrowser):
        WebBrowser().open_url("https://example.com")
        mock_webbrowser.open_new_tab.assert_called_once_with("https://example.com")

    @patch("terminal_portfolio.host.capabilities.webbrowser")
    def test_no_browser_logged(self, mock_webbrowser, caplog):
        mock_webbrowser.open_new_tab.return_value = False
        WebBrowser().open_url("https://example.com")
        assert "No browser available" in caplog.text


class TestSystemClipboard:
    """Tests for SystemClipboard."""

    @patch("terminal_portfolio.host.capabilities.pyperclip.copy")
    def test_copies(self, mock_copy):
        SystemClipboard().write_text("ada@example.com")
        mock_copy.assert_called_once_with("ada@example.com")

    @patch("terminal_portfolio.host.capabilities.pyperclip.copy")
    def test_failure_becomes_clipboard_error(self, mock_copy):
        mock_copy.side_effect = pyperclip.PyperclipException("no clipboard")
        with pytest.raises(ClipboardError):
            SystemClipboard().write_text("ada@example.com")


class TestRenderMarkup:
    """Tests for render_markup."""

    def test_plain_text(self):
        assert list(render_markup("hello")) == [("", "hello")]

    def test_entities_decoded(self):
        assert "".join(text for _, text in render_markup(markup("a & <b>"))) == "a & <b>"

    def test_title_style(self):
        assert ("class:title", "Hi") in list(render_markup(markup(render_title("Hi"))))

    def test_nested_styles(self):
        """Inner spans keep the outer style."""
        fragments = list(render_markup(markup(render_dim(render_tag("py")))))
        assert ("class:dim class:tag", "py") in fragments

    def test_link_shows_url(self):
        fragments = list(render_markup(markup(render_link("https://x.example", "demo"))))
        assert ("class:link", "demo") in fragments
        assert ("class:dim", " <https://x.example>") in fragments

    def test_link_same_label_not_repeated(self):
        fragments = list(render_markup(markup(render_link("https://x.example", "https://x.example"))))
        assert len(fragments) == 1

    def test_placeholder_link_not_shown(self):
        fragments = list(render_markup(markup(render_link("#", "demo"))))
        assert fragments == [("class:link", "demo")]

    def test_mail_link(self):
        fragments = list(render_markup(markup(render_mail_link("a@x.example"))))
        assert fragments == [("class:link", "a@x.example")]


class TestThemeStyle:
    """Tests for theme_style."""

    @pytest.mark.parametrize("name", ["light", "dark", "matrix", "solarized", "unknown"])
    def test_builds_style(self, name):
        assert isinstance(theme_style(name), Style)


class TestConsoleTerminal:
    """Tests for ConsoleTerminal."""

    @pytest.fixture
    def terminal(self, interpreter):
        terminal = ConsoleTerminal(interpreter, Config(prompt_user="ada", prompt_host="home"))
        yield terminal
        terminal.close()

    def test_prompt_message(self, terminal):
        text = "".join(t for _, t in terminal.prompt_message())
        assert text == "ada@home:~/$ "

    @patch("terminal_portfolio.host.console_terminal.print_formatted_text")
    def test_run_commands_prints_output(self, mock_print, terminal):
        terminal.run_commands(["/about", "", "/theme light"])
        printed = ["".join(t for _, t in call.args[0]) for call in mock_print.call_args_list]
        assert printed[0] == "Ada Example — Frontend Engineer"
        assert printed[-1] == "Theme set to light."
        assert len(printed) == 5

    @patch("terminal_portfolio.host.console_terminal.clear")
    def test_clear_clears_screen(self, mock_clear, terminal):
        terminal.run_commands(["cls"])
        mock_clear.assert_called_once()

    @patch("terminal_portfolio.host.console_terminal.print_formatted_text")
    def test_theme_change_restyles(self, mock_print, terminal):
        before = terminal._style
        terminal.run_commands(["/theme matrix"])
        assert terminal._style is not before

    def test_close_stops_listening(self, interpreter):
        terminal = ConsoleTerminal(interpreter)
        terminal.close()
        with patch("terminal_portfolio.host.console_terminal.print_formatted_text") as mock_print:
            interpreter.submit("/about")
        mock_print.assert_not_called()

    @patch("terminal_portfolio.host.console_terminal.PromptSession")
    @patch("terminal_portfolio.host.console_terminal.print_formatted_text")
    def test_run_until_eof(self, mock_print, mock_session_cls, terminal, interpreter):
        session = MagicMock()
        session.prompt.side_effect = ["/about", EOFError()]
        mock_session_cls.return_value = session

        terminal.run()

        assert interpreter.state.history == ("/about",)
        assert session.prompt.call_count == 2

    def test_on_output_prints_each_line(self, terminal):
        with patch("terminal_portfolio.host.console_terminal.print_formatted_text") as mock_print:
            terminal._on_output(OutputBlock("x", ["a", "b"]), interpreter=terminal.interpreter)
        assert mock_print.call_count == 2

    def test_ignores_other_interpreters(self, terminal, content):
        """Events from another interpreter are skipped."""
        other = Interpreter(content, FakeBrowser(), FakeClipboard(), Preferences(MemoryStore()))
        before = terminal._style
        with patch("terminal_portfolio.host.console_terminal.print_formatted_text") as mock_print, \
                patch("terminal_portfolio.host.console_terminal.clear") as mock_clear:
            other.submit("/about")
            other.submit("cls")
            other.submit("/theme matrix")
        mock_print.assert_not_called()
        mock_clear.assert_not_called()
        assert terminal._style is before


class TestKeyBindings:
    """Tests for the history key bindings."""

    def _handler(self, bindings, key):
        for binding in bindings.bindings:
            if [k.value if hasattr(k, "value") else k for k in binding.keys] == [key]:
                return binding.handler
        raise AssertionError(f"No binding for {key}")

    def test_up_down_update_buffer(self, interpreter):
        for line in ["a", "b"]:
            interpreter.submit(line)
        bindings = build_key_bindings(interpreter)
        event = MagicMock()

        self._handler(bindings, "up")(event)
        assert event.app.current_buffer.document.text == "b"

        self._handler(bindings, "down")(event)
        assert event.app.current_buffer.document.text == ""

    def test_ctrl_t_toggles_theme(self, interpreter):
        bindings = build_key_bindings(interpreter)
        self._handler(bindings, "c-t")(MagicMock())
        assert interpreter.state.theme == "light"
