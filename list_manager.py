import logging
from typing import Optional

from app_state import Item, ValidationError

logger = logging.getLogger(__name__)


class ListManager:
    """Adds, removes and toggles items on the shared AppState."""

    def __init__(self, state):
        self.state = state

    def _is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.state.items)

    def _clamp_selection(self):
        total = len(self.state.items)
        if total == 0:
            self.state.selection = 0
        elif self.state.selection >= total:
            self.state.selection = total - 1

    def add_item(self, title: str) -> Optional[ValidationError]:
        title = (title or "").strip()
        if not title:
            return ValidationError("validate", "item title cannot be empty")
        self.state.items.append(Item(title=title))
        logger.debug("Added item %r at %d", title, len(self.state.items) - 1)
        return None

    def delete_item(self, index: int) -> Optional[ValidationError]:
        if not self._is_valid_index(index):
            return ValidationError("delete", "invalid index")
        removed = self.state.items.pop(index)
        self._clamp_selection()
        logger.debug("Deleted item %r from %d", removed.title, index)
        return None

    def toggle_item(self, index: int) -> Optional[ValidationError]:
        if not self._is_valid_index(index):
            return ValidationError("toggle", "invalid index")
        item = self.state.items[index]
        item.completed = not item.completed
        return None

    def toggle_all_items(self) -> None:
        all_completed = all(item.completed for item in self.state.items)
        for item in self.state.items:
            item.completed = not all_completed
