import curses
import logging

from keys import translate
from list_editor import QUIT, ListEditor
from list_pane import ListPane
from screen_layout import ScreenLayout

logger = logging.getLogger(__name__)

# curses.raw() turns off SIGINT, so Ctrl+C / Ctrl+X end the session here from any mode
HARD_EXIT_KEYS = ("ctrl+c", "ctrl+x")


class Orchestrator:
    def __init__(self, stdscr, app_state):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)

        self.state = app_state
        self.layout = ScreenLayout(stdscr)
        self.pane = ListPane()
        self.editor = ListEditor(app_state)

    # ---------------- UI ----------------

    def redraw(self):
        self.pane.draw(self.layout.list_win, self.state)
        self.pane.draw_footer(self.layout.footer_win, self.state)
        curses.doupdate()

    def _resize(self):
        curses.update_lines_cols()
        self.stdscr.clear()
        self.stdscr.refresh()
        self.layout = ScreenLayout(self.stdscr)

    def _read_key(self):
        try:
            return self.stdscr.get_wch()
        except curses.error:
            return None

    # ---------------- main loop ----------------

    def run(self):
        logger.info("Session started with %d items", len(self.state.items))
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self._read_key()
            if ch is None:
                continue

            if ch == curses.KEY_RESIZE:
                self._resize()
                self.redraw()
                continue

            key = translate(ch)
            if key in HARD_EXIT_KEYS:
                break

            if self.editor.handle_key(key) == QUIT:
                break

            self.redraw()

        logger.info("Session ended with %d items", len(self.state.items))
