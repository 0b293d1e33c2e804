"""Drawing and collision helpers shared by the screens."""

from __future__ import annotations

from enum import Enum

import pygame

from castleshadows.entities import Character

BORDER_OFFSET = 2


class Align(Enum):
    """Horizontal anchoring of text relative to its x coordinate."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


def collision_2d(a: Character, b: Character) -> bool:
    """Whether two square characters overlap."""
    ha = a.side // 2
    hb = b.side // 2
    return (
        a.x + ha > b.x - hb
        and a.x - ha < b.x + hb
        and a.y + ha > b.y - hb
        and a.y - ha < b.y + hb
    )


def draw_outlined_text(surface, font, x, y, align, text, color, border_color) -> None:
    """Draw text with a one-colour outline, offset by a couple of pixels each way."""
    border = font.render(text, True, border_color)
    body = font.render(text, True, color)
    width = body.get_width()
    if align is Align.CENTER:
        left = x - width / 2
    elif align is Align.RIGHT:
        left = x - width
    else:
        left = x
    for dx, dy in ((-BORDER_OFFSET, 0), (BORDER_OFFSET, 0), (0, -BORDER_OFFSET), (0, BORDER_OFFSET)):
        surface.blit(border, (left + dx, y + dy))
    surface.blit(body, (left, y))


__all__ = ["Align", "collision_2d", "draw_outlined_text", "pygame"]