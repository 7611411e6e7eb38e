from types import SimpleNamespace

from app_state import InputContext
from text_editor import TextEditor


def _editor(content="", cursor=None):
    cursor = len(content) if cursor is None else cursor
    state = SimpleNamespace(input=InputContext(cursor=cursor, content=content))
    return TextEditor(state), state.input


def test_insert_in_middle_advances_cursor():
    editor, ctx = _editor("held", cursor=3)
    editor.insert_at_cursor("lo wor")
    assert ctx.content == "hello word"
    assert ctx.cursor == 9


def test_backspace_removes_char_before_cursor():
    editor, ctx = _editor("abc", cursor=2)
    editor.backspace()
    assert ctx.content == "ac"
    assert ctx.cursor == 1


def test_backspace_at_start_is_a_no_op():
    editor, ctx = _editor("abc", cursor=0)
    editor.backspace()
    assert ctx.content == "abc"
    assert ctx.cursor == 0


def test_left_right_clamp_without_wrapping():
    editor, ctx = _editor("ab", cursor=0)
    editor.move_left()
    assert ctx.cursor == 0
    editor.move_right()
    editor.move_right()
    editor.move_right()
    assert ctx.cursor == 2


def test_jump_start_and_end():
    editor, ctx = _editor("hello", cursor=2)
    editor.jump_start()
    assert ctx.cursor == 0
    editor.jump_end()
    assert ctx.cursor == 5


def test_multibyte_text_stays_intact():
    editor, ctx = _editor("caf", cursor=3)
    editor.insert_at_cursor("é")
    assert ctx.cursor == 4
    editor.insert_at_cursor("!")
    editor.move_left()
    editor.backspace()
    assert ctx.content == "caf!"
    assert ctx.cursor == 3
