import curses

# curses special keys (ints from get_wch)
_SPECIAL = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_ENTER: "enter",
}

# control characters (strs from get_wch)
_CONTROL = {
    "\n": "enter",
    "\r": "enter",
    "\x1b": "esc",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x01": "ctrl+a",
    "\x03": "ctrl+c",
    "\x05": "ctrl+e",
    "\x18": "ctrl+x",
    " ": "space",
}


def translate(ch):
    """Map a curses key (str or int) to a key name, or None if it has none."""
    if isinstance(ch, int):
        if ch in _SPECIAL:
            return _SPECIAL[ch]
        # getch() hands printable and control chars back as ints too
        if 0 <= ch < curses.KEY_MIN:
            ch = chr(ch)
        else:
            return None

    if not isinstance(ch, str) or len(ch) != 1:
        return None
    if ch in _CONTROL:
        return _CONTROL[ch]
    if ch.isprintable():
        return ch
    return None


def key_text(key):
    """Text a key inserts into the input buffer, or None."""
    if key == "space":
        return " "
    if key and len(key) == 1 and key.isprintable():
        return key
    return None
