from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Mode(Enum):
    NORMAL = "normal"
    INPUT = "input"


class InputAction(Enum):
    CREATE = "create"
    EDIT = "edit"


class ValidationError(Exception):
    """A list operation refused its arguments.

    Returned (not raised) by ListManager so the controller can record it.
    """

    def __init__(self, operation: str, cause: str):
        super().__init__(f"todo operation: {operation}: {cause}")
        self.operation = operation
        self.cause = cause


@dataclass
class Item:
    title: str
    completed: bool = False


@dataclass
class InputContext:
    cursor: int = 0
    content: str = ""
    initial_value: str = ""
    action: Optional[InputAction] = None


@dataclass
class AppState:
    items: list[Item] = field(default_factory=list)
    selection: int = 0
    mode: Mode = Mode.NORMAL
    input: InputContext = field(default_factory=InputContext)
    last_error: Optional[Exception] = None

    @classmethod
    def from_titles(cls, titles):
        return cls(items=[Item(title=t) for t in titles])

    def has_items(self) -> bool:
        return len(self.items) > 0

    def selected_item(self) -> Optional[Item]:
        if not self.items:
            return None
        return self.items[self.selection]
