import logging

from app_state import InputAction, InputContext, Mode
from keys import key_text
from list_manager import ListManager
from navigation import Direction, NavigationController
from text_editor import TextEditor

logger = logging.getLogger(__name__)

QUIT = "quit"


class ListEditor:
    """Routes key names to list, navigation and text operations by mode."""

    NORMAL_KEYS = {
        "q": "_quit",
        "esc": "_quit",
        "ctrl+c": "_quit",
        "up": "_move_up",
        "k": "_move_up",
        "down": "_move_down",
        "j": "_move_down",
        "a": "_toggle_all",
        "enter": "_toggle_selected",
        "space": "_toggle_selected",
        "n": "_start_create",
        "e": "_start_edit",
        "d": "_delete_selected",
    }

    INPUT_KEYS = {
        "enter": "_submit",
        "esc": "exit_input_mode",
        "backspace": "_backspace",
        "left": "_cursor_left",
        "right": "_cursor_right",
        "home": "_cursor_start",
        "ctrl+a": "_cursor_start",
        "end": "_cursor_end",
        "ctrl+e": "_cursor_end",
    }

    def __init__(self, state):
        self.state = state
        self.lists = ListManager(state)
        self.nav = NavigationController(state)
        self.text = TextEditor(state)

    # ---------- public entrypoint ----------
    def handle_key(self, key):
        """Process one key name; returns QUIT when the session should end."""
        if key is None:
            return None
        if self.state.mode == Mode.INPUT:
            return self._handle_input(key)
        return self._handle_normal(key)

    def record_error(self, err):
        self.state.last_error = err
        logger.warning("%s", err)

    def clear_error(self):
        self.state.last_error = None

    # ---------- mode transitions ----------
    def enter_input_mode(self, action, initial_value=""):
        self.state.mode = Mode.INPUT
        self.state.input = InputContext(
            cursor=len(initial_value),
            content=initial_value,
            initial_value=initial_value,
            action=action,
        )
        logger.debug("Entered input mode (%s)", action.value)

    def exit_input_mode(self):
        self.state.mode = Mode.NORMAL
        self.state.input = InputContext()

    # ---------- normal mode ----------
    def _handle_normal(self, key):
        handler = self.NORMAL_KEYS.get(key)
        if handler is None:
            return None
        return getattr(self, handler)()

    def _quit(self):
        return QUIT

    def _move_up(self):
        self.nav.move_cursor(Direction.UP)

    def _move_down(self):
        self.nav.move_cursor(Direction.DOWN)

    def _toggle_all(self):
        self.lists.toggle_all_items()

    def _toggle_selected(self):
        err = self.lists.toggle_item(self.state.selection)
        if err is not None:
            self.record_error(err)

    def _start_create(self):
        self.enter_input_mode(InputAction.CREATE, "")

    def _start_edit(self):
        if not self.state.has_items():
            return
        self.enter_input_mode(InputAction.EDIT, self.state.selected_item().title)

    def _delete_selected(self):
        if not self.state.has_items():
            return
        err = self.lists.delete_item(self.state.selection)
        if err is not None:
            self.record_error(err)

    # ---------- input mode ----------
    def _handle_input(self, key):
        handler = self.INPUT_KEYS.get(key)
        if handler is not None:
            getattr(self, handler)()
            return None
        text = key_text(key)
        if text is not None:
            self.text.insert_at_cursor(text)
        return None

    def _backspace(self):
        self.text.backspace()

    def _cursor_left(self):
        self.text.move_left()

    def _cursor_right(self):
        self.text.move_right()

    def _cursor_start(self):
        self.text.jump_start()

    def _cursor_end(self):
        self.text.jump_end()

    def _submit(self):
        trimmed = self.state.input.content.strip()
        if not trimmed:
            return

        action = self.state.input.action
        if action == InputAction.CREATE:
            err = self.lists.add_item(trimmed)
            if err is not None:
                self.record_error(err)
                return
        elif action == InputAction.EDIT:
            if trimmed == self.state.input.initial_value:
                logger.debug("Edit left title unchanged: %r", trimmed)
            else:
                # emptiness already ruled out above
                self.state.items[self.state.selection].title = trimmed

        logger.debug("Submitted %s: %r", action.value if action else None, trimmed)
        self.exit_input_mode()
