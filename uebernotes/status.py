"""The one-line status bar that also takes search and command input."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from uebernotes.communicator import Command, Communicator
from uebernotes.components import CatchEvent, Component, Event, Key

_log = logging.getLogger("uebernotes.linux")

WELCOME_MESSAGE = "Welcome to uebernotes"
CANCELED_MESSAGE = "Canceled input"


class Mode(Enum):
    """What the status bar is doing."""

    STATUS = "status"
    SEARCH = "search"
    COMMAND = "command"


# prompt, placeholder, prefix of an entered input, message for an empty input
_PROMPTS = {
    Mode.SEARCH: ("/", "search", "Search", "Empty search"),
    Mode.COMMAND: (":", "command", "Command", "Empty command"),
}


class _Input(Component):
    """Edits the status bar's input buffer; Return submits it."""

    def __init__(self, controller: StatusController) -> None:
        super().__init__()
        self._controller = controller

    def on_event(self, event: Event) -> bool:
        controller = self._controller
        if event == Key.RETURN:
            controller.submit()
            return True
        if event == Key.BACKSPACE:
            controller.input_buffer = controller.input_buffer[:-1]
            return True
        if isinstance(event, str) and len(event) == 1 and event.isprintable():
            controller.input_buffer += event
            return True
        return False

    def focusable(self) -> bool:
        return True


class _WhileEditing(Component):
    """Passes events to its child only while a condition holds."""

    def __init__(self, child: Component, active: Callable[[], bool]) -> None:
        super().__init__(child)
        self._active = active

    def on_event(self, event: Event) -> bool:
        return self._active() and super().on_event(event)

    def focusable(self) -> bool:
        return self._active() and super().focusable()


class StatusController:
    """Shows the latest message, or a prompt while search or command input is typed."""

    def __init__(self) -> None:
        self.name = "Status"
        self.mode = Mode.STATUS
        self.message = WELCOME_MESSAGE
        self.input_buffer = ""
        self.component: Component | None = None
        self._last_input = ""
        self._communicator: Communicator | None = None

    def create_component(self, communicator: Communicator) -> Component:
        self._communicator = communicator
        component: Component = _Input(self)
        component = CatchEvent(component, self._on_escape)
        component = _WhileEditing(component, lambda: self.mode is not Mode.STATUS)
        self.component = component
        return component

    def _require_communicator(self) -> Communicator:
        if self._communicator is None:
            raise RuntimeError("status bar has no component yet")
        return self._communicator

    def _on_escape(self, event: Event) -> bool:
        if event != Key.ESCAPE:
            return False
        communicator = self._require_communicator()
        self.set_mode(Mode.STATUS)
        self.input_buffer = ""
        communicator.cmd.append(Command.INPUT_CANCELED)
        communicator.ntf.append(CANCELED_MESSAGE)
        return True

    def last_input(self) -> str:
        """The last input that was entered."""
        return self._last_input

    def set_message(self, message: str) -> None:
        self.message = message

    def set_mode(self, mode: Mode) -> None:
        self.mode = mode

    def on_event(self, event: Event) -> bool:
        """Pass a key event to the component; True if it was handled."""
        if self.component is None:
            raise RuntimeError("status bar has no component yet")
        return self.component.on_event(event)

    def submit(self) -> None:
        """Finish the input: report it, queue a command and go back to status mode."""
        communicator = self._require_communicator()
        if self.mode is Mode.STATUS:
            _log.error("Input received in Status mode")
            self.input_buffer = ""
            communicator.cmd.append(Command.INPUT_CANCELED)
            return

        _, _, prefix, empty_message = _PROMPTS[self.mode]
        if self.input_buffer:
            self.message = f"{prefix}: {self.input_buffer}"
            self._last_input = self.input_buffer
            self.input_buffer = ""
            communicator.cmd.append(Command.INPUT_ENTERED)
        else:
            self.message = empty_message
            communicator.cmd.append(Command.INPUT_CANCELED)

        communicator.ntf.append(self.message)
        self.mode = Mode.STATUS

    def render(self, width: int) -> str:
        """One row of exactly ``width`` cells."""
        if self.mode is Mode.STATUS:
            line = self.message
        else:
            prompt, placeholder, _, _ = _PROMPTS[self.mode]
            line = prompt + (self.input_buffer or placeholder)
        width = max(width, 0)
        return line[:width].ljust(width)