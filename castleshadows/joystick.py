"""Directional button state for a controllable character."""

from dataclasses import dataclass


@dataclass
class Joystick:
    """Four movement buttons, each either pressed or released."""

    right: bool = False
    left: bool = False
    up: bool = False
    down: bool = False

    def toggle_right(self) -> None:
        """Flip the state of the right button."""
        self.right = not self.right

    def toggle_left(self) -> None:
        """Flip the state of the left button."""
        self.left = not self.left

    def toggle_up(self) -> None:
        """Flip the state of the up button."""
        self.up = not self.up

    def toggle_down(self) -> None:
        """Flip the state of the down button."""
        self.down = not self.down