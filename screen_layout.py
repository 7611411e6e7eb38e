import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: list (main), footer (prompt or key hint, 2 lines)
        self.footer_h = 2
        self.list_h = max(1, self.H - self.footer_h)

        self.list_win = curses.newwin(self.list_h, self.W, 0, 0)
        # list pane must never own cursor
        self.list_win.leaveok(True)

        self.footer_win = curses.newwin(self.footer_h, self.W, self.list_h, 0)
