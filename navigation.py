from enum import Enum


class Direction(Enum):
    UP = "up"
    DOWN = "down"


class NavigationController:
    def __init__(self, state):
        self.state = state

    def move_cursor(self, direction):
        if direction == Direction.UP:
            self.move_up()
        elif direction == Direction.DOWN:
            self.move_down()

    def move_up(self):
        total = len(self.state.items)
        if total == 0:
            return
        # wrap from the top row to the last one
        if self.state.selection > 0:
            self.state.selection -= 1
        else:
            self.state.selection = total - 1

    def move_down(self):
        total = len(self.state.items)
        if total == 0:
            return
        if self.state.selection < total - 1:
            self.state.selection += 1
        else:
            self.state.selection = 0
