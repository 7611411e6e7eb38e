import curses

from render import render_body, render_footer

# lines above the first item: header + blank
HEADER_LINES = 2


class ListPane:
    def __init__(self):
        self.row_offset = 0

    def adjust_viewport(self, state, height):
        """Scroll so the selected item stays inside a window of `height` rows."""
        if state.last_error is not None or not state.items:
            self.row_offset = 0
            return
        target = HEADER_LINES + state.selection
        if target < self.row_offset:
            self.row_offset = target
        elif target >= self.row_offset + height:
            self.row_offset = target - height + 1
        max_offset = max(0, HEADER_LINES + len(state.items) + 1 - height)
        self.row_offset = max(0, min(self.row_offset, max_offset))

    def draw(self, win, state):
        win.erase()
        h, w = win.getmaxyx()
        self.adjust_viewport(state, h)
        lines = render_body(state)
        for y, line in enumerate(lines[self.row_offset : self.row_offset + h]):
            attr = curses.A_REVERSE if line.startswith(">") else curses.A_NORMAL
            try:
                win.addnstr(y, 0, line, max(0, w - 1), attr)
            except curses.error:
                pass
        win.noutrefresh()

    def draw_footer(self, win, state):
        win.erase()
        h, w = win.getmaxyx()
        for y, line in enumerate(render_footer(state)[:h]):
            try:
                win.addnstr(y, 0, line, max(0, w - 1))
            except curses.error:
                pass
        win.noutrefresh()
