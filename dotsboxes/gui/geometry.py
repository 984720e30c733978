"""Geometry utilities for board rendering.

Ce module fournit la classe BoardGeometry qui calcule les coordonnées écran
des points de la grille, et l'inverse: retrouver les extrémités de l'arête la
plus proche d'une position écran.

Utilisé par BoardRenderer pour abstraire les calculs de transformation
logique <-> écran. La géométrie est recalculée à partir de la taille courante
de la surface, ce qui permet le redimensionnement de la fenêtre.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple, Optional, Tuple

from dotsboxes.engine.board import Board

logger = logging.getLogger(__name__)


class ScreenPoint(NamedTuple):
    x: float
    y: float


def round_half_up(value: float) -> int:
    """Arrondi à l'entier le plus proche, les demis vers +inf."""

    return math.floor(value + 0.5)


def clamp(value: float, lower: float, upper: float) -> float:
    return min(max(value, lower), upper)


class BoardGeometry:
    """Compute screen coordinates from logical board positions.

    Chaque point occupe le centre d'une cellule de `client_width / width` par
    `client_height / height` pixels; la marge entre le bord de la surface et
    le premier point vaut donc une demi-cellule.
    """

    def __init__(self, client_width: float, client_height: float) -> None:
        """Initialize geometry calculator.

        Args:
            client_width: Width of the drawing surface in pixels
            client_height: Height of the drawing surface in pixels
        """
        self.client_width = client_width
        self.client_height = client_height

    def box_size(self, board: Board) -> ScreenPoint:
        """Dimensions en pixels d'une cellule de la grille."""

        return ScreenPoint(self.client_width / board.width, self.client_height / board.height)

    def screen_margin(self, board: Board) -> ScreenPoint:
        """Décalage entre le bord de la surface et le premier point."""

        box = self.box_size(board)
        return ScreenPoint(box.x / 2, box.y / 2)

    def point_position(self, point: int, board: Board) -> ScreenPoint:
        """Get screen position for a point index.

        Args:
            point: row-major index of the point
            board: board providing the grid dimensions

        Returns:
            ScreenPoint at the centre of the point's cell
        """
        col = point % board.width
        row = point // board.width
        margin = self.screen_margin(board)
        return ScreenPoint(
            self.client_width * col / board.width + margin.x,
            self.client_height * row / board.height + margin.y,
        )

    def edge_ends_at(
        self, screen_point: Tuple[float, float], board: Board
    ) -> Optional[Tuple[int, int]]:
        """Extrémités (p1, p2) de l'arête la plus proche de `screen_point`.

        Retourne None quand la ligne ou la colonne retenue sort de la grille,
        ce qui arrive pour les positions au-delà des points extrêmes.
        """
        sx, sy = screen_point
        box = self.box_size(board)
        margin = self.screen_margin(board)

        # Position relative parmi les (dimension - 1) intervalles entre points
        x_factor = (sx - margin.x) / (self.client_width - box.x)
        y_factor = (sy - margin.y) / (self.client_height - box.y)
        logger.debug("xFactor: %s yFactor: %s", x_factor, y_factor)

        x_ratio = x_factor * (board.width - 1)
        y_ratio = y_factor * (board.height - 1)
        logger.debug("Ratio: %s, %s", x_ratio, y_ratio)

        x_round = round_half_up(x_ratio)
        y_round = round_half_up(y_ratio)
        logger.debug("Rounded: %s, %s", x_round, y_round)

        x_error = abs(x_round - x_ratio)
        y_error = abs(y_round - y_ratio)
        logger.debug("x: %s vs y: %s", x_error, y_error)

        if y_error < x_error:
            # Plus proche d'une ligne horizontale
            row, col = y_round, math.floor(x_ratio)
            if not (0 <= row < board.height and 0 <= col < board.width - 1):
                return None
            p1 = row * board.width + col
            return p1, p1 + 1

        row, col = math.floor(y_ratio), x_round
        if not (0 <= row < board.height - 1 and 0 <= col < board.width):
            return None
        p1 = row * board.width + col
        return p1, p1 + board.width

    def clamp_to_play_area(self, screen_point: Tuple[float, float], board: Board) -> ScreenPoint:
        """Ramène une position dans la zone jouable [marge, taille - marge]."""

        sx, sy = screen_point
        margin = self.screen_margin(board)
        return ScreenPoint(
            clamp(sx, margin.x, self.client_width - margin.x),
            clamp(sy, margin.y, self.client_height - margin.y),
        )


__all__ = ["BoardGeometry", "ScreenPoint", "clamp", "round_half_up"]
