from app_state import InputAction, Mode

NORMAL_HINT = (
    "up/down: move cursor, enter/space: toggle, a: toggle all, "
    "n: new item, e: edit, d: delete, q/esc: quit"
)


def render_body(state):
    """Header and item lines; just the error screen when an error is recorded."""
    if state.last_error is not None:
        return [f"Error: {state.last_error}", "Press q to quit."]

    lines = [f"you have {len(state.items)} items on your list:", ""]
    for i, item in enumerate(state.items):
        cursor = ">" if i == state.selection else " "
        checked = "x" if item.completed else " "
        lines.append(f"{cursor} [{checked}] {item.title}")
    lines.append("")
    return lines


def render_footer(state):
    if state.last_error is not None:
        return []
    if state.mode == Mode.INPUT:
        ctx = state.input
        if ctx.action == InputAction.CREATE:
            action_text = "enter new item"
        else:
            action_text = "edit item"
        return [
            f"{action_text} (esc to cancel):",
            f"> {ctx.content[: ctx.cursor]}|{ctx.content[ctx.cursor :]}",
        ]
    return [NORMAL_HINT]


def render_lines(state):
    """
    Turn the app state into display lines.
    state fields: items, selection, mode, input, last_error
    """
    return render_body(state) + render_footer(state)


def render_view(state):
    return "\n".join(render_lines(state)) + "\n"
