"""Language switch with one button per supported language."""

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button

from ..i18n import Language


class LanguageSwitch(Horizontal):
    """Row of 한국어 / 中文 / EN buttons; the current language is highlighted."""

    DEFAULT_CSS = """
    LanguageSwitch {
        height: auto;
        width: auto;
    }

    LanguageSwitch Button {
        min-width: 8;
        margin-right: 1;
    }

    LanguageSwitch Button.active {
        background: $accent;
        text-style: bold;
    }
    """

    class LanguageSelected(Message):
        """Message sent when a language button is pressed."""

        def __init__(self, lang: Language) -> None:
            super().__init__()
            self.lang = lang

    def __init__(self, current: Language = Language.KO, **kwargs) -> None:
        super().__init__(**kwargs)
        self._current = current

    def compose(self) -> ComposeResult:
        for lang in Language:
            button = Button(lang.button_label, id=f"lang-{lang.value}")
            if lang is self._current:
                button.add_class("active")
            yield button

    def set_active(self, lang: Language) -> None:
        """Highlight the button for ``lang``."""
        self._current = lang
        for button in self.query(Button):
            button.set_class(button.id == f"lang-{lang.value}", "active")

    @on(Button.Pressed)
    def _language_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        lang = Language.parse((event.button.id or "").removeprefix("lang-"))
        self.post_message(self.LanguageSelected(lang))
