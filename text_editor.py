class TextEditor:
    """Caret editing over the InputContext buffer.

    Offsets count str characters, so multi-byte text is never split.
    """

    def __init__(self, state):
        self.state = state

    @property
    def ctx(self):
        return self.state.input

    def insert_at_cursor(self, text: str):
        if not text:
            return
        buf = self.ctx.content
        idx = self.ctx.cursor
        self.ctx.content = buf[:idx] + text + buf[idx:]
        self.ctx.cursor += len(text)

    def backspace(self):
        if self.ctx.cursor > 0 and self.ctx.content:
            buf = self.ctx.content
            idx = self.ctx.cursor
            self.ctx.content = buf[: idx - 1] + buf[idx:]
            self.ctx.cursor -= 1

    def move_left(self):
        self.ctx.cursor = max(0, self.ctx.cursor - 1)

    def move_right(self):
        self.ctx.cursor = min(len(self.ctx.content), self.ctx.cursor + 1)

    def jump_start(self):
        self.ctx.cursor = 0

    def jump_end(self):
        self.ctx.cursor = len(self.ctx.content)
