"""Button-driven Textual front end for a logging session."""

from typing import Any, Dict, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Horizontal, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, Static

from .constants import LoggerConstants
from .controller import AppendController
from .model import Document
from .persistence import save_document
from .session import LogSession
from .settings import get_persistence


def document_to_text(document: Document) -> Text:
    """Build a rich Text with one line per paragraph, keeping run colors."""
    text = Text()
    for index, paragraph in enumerate(document.paragraphs):
        if index:
            text.append(LoggerConstants.LINE_BREAK)
        for run in paragraph.runs:
            text.append(run.text, style=run.color or "")
    return text


class TokenLogApp(App):
    """Letter buttons, newline/remark/clear/undo buttons and a remark input."""

    CSS = """
    #log-scroll {
        height: 1fr;
        border: round $primary;
    }
    #letters {
        grid-size: 13;
        grid-gutter: 0 1;
        height: auto;
    }
    #letters Button {
        min-width: 5;
        width: 100%;
    }
    #actions {
        height: auto;
    }
    #remark {
        width: 1fr;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+n", "newline", "Newline"),
        Binding("ctrl+l", "clear_log", "Clear"),
        Binding("ctrl+z", "undo", "Undo"),
    ]

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        super().__init__()
        if settings is None:
            settings = get_persistence().load_settings()
        self.settings = settings
        self.log_dir = settings['log_dir']
        self.session = LogSession(undo_limit=settings.get('undo_limit'))
        self.controller = AppendController(
            self.session,
            line_end_marker=settings.get('line_end_marker', LoggerConstants.DEFAULT_LINE_END_MARKER),
            remark_color=settings.get('remark_color', LoggerConstants.REMARK_COLOR),
        )
        # Button id -> tag
        self.letter_buttons = {
            f"letter-{index}": tag
            for index, tag in enumerate(settings.get('letters', {}).values())
        }
        self.saved_path: Optional[str] = None
        self._saved = False

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="log-scroll"):
            yield Static(id="log")
        with Grid(id="letters"):
            for button_id, tag in self.letter_buttons.items():
                yield Button(tag, id=button_id)
        with Horizontal(id="actions"):
            yield Button("Newline", id="newline", variant="primary")
            yield Input(placeholder=LoggerConstants.REMARK_PLACEHOLDER, id="remark")
            yield Button("Remark", id="commit-remark")
            yield Button("Clear", id="clear", variant="warning")
            yield Button("Undo", id="undo")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "tokenlog"
        self.refresh_log()

    def refresh_log(self) -> None:
        self.query_one("#log", Static).update(document_to_text(self.session.document))
        self.query_one("#log-scroll", VerticalScroll).scroll_end(animate=False)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id in self.letter_buttons:
            self.controller.append_letter(self.letter_buttons[button_id])
        elif button_id == "newline":
            self.controller.append_newline()
        elif button_id == "commit-remark":
            self.commit_remark()
        elif button_id == "clear":
            self.controller.clear()
        elif button_id == "undo":
            self.controller.undo()
        self.refresh_log()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.commit_remark()
        self.refresh_log()

    def commit_remark(self) -> None:
        remark_input = self.query_one("#remark", Input)
        if self.controller.append_remark(remark_input.value):
            remark_input.value = ""

    def action_newline(self) -> None:
        self.controller.append_newline()
        self.refresh_log()

    def action_clear_log(self) -> None:
        self.controller.clear()
        self.refresh_log()

    def action_undo(self) -> None:
        self.controller.undo()
        self.refresh_log()

    async def action_quit(self) -> None:
        self.shutdown()
        self.exit()

    def shutdown(self) -> Optional[str]:
        """Save the log once; later calls return the first result."""
        if not self._saved:
            self._saved = True
            self.saved_path = save_document(self.session.document, self.log_dir)
        return self.saved_path
