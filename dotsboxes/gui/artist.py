"""Artist: primitives de dessin pygame pour le plateau.

Conventions visuelles:
- Points: petits disques, plus grands et plus clairs dès qu'une arête
  adjacente est jouée
- Arêtes: lignes fines grises tant qu'elles sont libres, épaisses et à la
  couleur du joueur une fois prises
- Faces: rectangles pleins à la couleur du propriétaire, ancrés sur le coin
  supérieur gauche de la cellule
"""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from dotsboxes.engine.board import Player
from dotsboxes.gui.geometry import ScreenPoint


# Couleurs (palette sobre)
COLOR_BG = (30, 60, 90)
COLOR_POINT = (200, 200, 200)
COLOR_POINT_OWNED = (255, 255, 255)
COLOR_EDGE = (70, 100, 130)

# Tailles
POINT_RADIUS = 5
POINT_RADIUS_OWNED = 7
EDGE_WIDTH = 2
EDGE_WIDTH_OWNED = 6
FACE_INSET = 4  # retrait en pixels pour garder les arêtes visibles


class Artist:
    """Wrappe une surface pygame et expose les primitives du renderer."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def clear(self, width: float, height: float) -> None:
        pygame.draw.rect(self.surface, COLOR_BG, pygame.Rect(0, 0, int(width), int(height)))

    def draw_point(self, position: ScreenPoint, owned: bool) -> None:
        color = COLOR_POINT_OWNED if owned else COLOR_POINT
        radius = POINT_RADIUS_OWNED if owned else POINT_RADIUS
        pygame.draw.circle(self.surface, color, (position.x, position.y), radius)

    def draw_edge(self, start: ScreenPoint, end: ScreenPoint, owner: Optional[Player]) -> None:
        if owner is None:
            pygame.draw.line(self.surface, COLOR_EDGE, start, end, width=EDGE_WIDTH)
        else:
            pygame.draw.line(self.surface, owner.color, start, end, width=EDGE_WIDTH_OWNED)

    def draw_face(
        self,
        color: Tuple[int, int, int],
        anchor: ScreenPoint,
        box_size: ScreenPoint,
    ) -> None:
        """Remplit la cellule dont `anchor` est le coin supérieur gauche."""

        rect = pygame.Rect(
            int(anchor.x + FACE_INSET),
            int(anchor.y + FACE_INSET),
            max(int(box_size.x - 2 * FACE_INSET), 0),
            max(int(box_size.y - 2 * FACE_INSET), 0),
        )
        pygame.draw.rect(self.surface, color, rect)


__all__ = [
    "Artist",
    "COLOR_BG",
    "COLOR_POINT",
    "COLOR_POINT_OWNED",
    "COLOR_EDGE",
]
