"""BoardRenderer: rendu pygame du plateau et saisie des coups.

Responsabilités:
- Parcourir le graphe points/arêtes/faces en largeur depuis le point 0 et
  dessiner chaque élément une seule fois
- Convertir les indices de points en coordonnées écran (dessin)
- Convertir une position pointeur en arête (hit-testing) puis jouer le coup

Le renderer ne modifie jamais le plateau lui-même: la seule mutation passe
par `board.play()` lors d'un clic.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Set, Tuple

import pygame

from dotsboxes.engine.board import Board, Edge, Face, Player
from dotsboxes.gui.artist import Artist
from dotsboxes.gui.geometry import BoardGeometry, ScreenPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgeSelection:
    """Arête désignée par un clic et résultat de `board.play()`."""

    edge: Edge
    played: bool


class BoardRenderer:
    """Rendu du plateau et traduction des clics en coups."""

    def __init__(
        self,
        surface: pygame.Surface,
        artist: Optional[Artist] = None,
        *,
        offset: Tuple[int, int] = (0, 0),
    ) -> None:
        """Initialize renderer with a pygame surface.

        Args:
            surface: pygame surface to draw on
            artist: drawing primitives (defaults to an Artist on `surface`)
            offset: top-left corner of `surface` in window coordinates,
                used to convert pointer positions
        """
        self.surface = surface
        self.artist = artist if artist is not None else Artist(surface)
        self.offset = offset

    @property
    def geometry(self) -> BoardGeometry:
        return BoardGeometry(self.surface.get_width(), self.surface.get_height())

    # ------------------------------------------------------------------
    # Rendu
    # ------------------------------------------------------------------

    def draw(self, board: Board) -> None:
        """Redessine entièrement le plateau."""

        self.artist.clear(self.surface.get_width(), self.surface.get_height())
        box_size = self.get_box_size(board)

        to_visit: Deque[int] = deque([0])
        queued: Set[int] = {0}
        drawn_points: Set[int] = set()
        drawn_edges: Set[int] = set()
        drawn_faces: Set[int] = set()

        while to_visit:
            point = to_visit.popleft()
            position = self.map_point_to_screen(point, board)
            neighbours = board.edge_pool[point]

            for other, edge in neighbours.items():
                for face in edge.faces:
                    if face.owner is not None and face.face_id not in drawn_faces:
                        anchor = self.map_point_to_screen(self._face_anchor(face), board)
                        self.artist.draw_face(face.color, anchor, box_size)
                        drawn_faces.add(face.face_id)

                if edge.edge_id not in drawn_edges:
                    other_position = self.map_point_to_screen(other, board)
                    self.artist.draw_edge(position, other_position, edge.owner)
                    drawn_edges.add(edge.edge_id)

            if point not in drawn_points:
                owned = any(edge.owner is not None for edge in neighbours.values())
                self.artist.draw_point(position, owned)
                drawn_points.add(point)

            for other in neighbours:
                if other not in drawn_points and other not in queued:
                    to_visit.append(other)
                    queued.add(other)

        logger.debug(
            "Rendu: %d points, %d arêtes, %d faces",
            len(drawn_points),
            len(drawn_edges),
            len(drawn_faces),
        )

    @staticmethod
    def _face_anchor(face: Face) -> int:
        points = {p for edge in face.edges for p in edge.ends}
        return min(points)

    # ------------------------------------------------------------------
    # Transformations logique <-> écran
    # ------------------------------------------------------------------

    def map_point_to_screen(self, point: int, board: Board) -> ScreenPoint:
        return self.geometry.point_position(point, board)

    def get_box_size(self, board: Board) -> ScreenPoint:
        return self.geometry.box_size(board)

    def get_screen_margin(self, board: Board) -> ScreenPoint:
        return self.geometry.screen_margin(board)

    def map_screen_to_edge(self, screen_point: Tuple[float, float], board: Board) -> Optional[Edge]:
        """Find the edge closest to a surface-local position.

        Args:
            screen_point: (x, y) coordinates relative to the surface
            board: board to query

        Returns:
            The edge, or None when the position maps outside the grid
        """
        ends = self.geometry.edge_ends_at(screen_point, board)
        if ends is None:
            return None
        return board.get_edge(*ends)

    # ------------------------------------------------------------------
    # Saisie
    # ------------------------------------------------------------------

    def get_pointer_position(self, event: pygame.event.Event, board: Board) -> ScreenPoint:
        """Position du pointeur relative à la surface, bornée à la zone jouable."""

        x, y = event.pos
        local = (x - self.offset[0], y - self.offset[1])
        return self.geometry.clamp_to_play_area(local, board)

    def select_edge(
        self,
        event: pygame.event.Event,
        player: Player,
        board: Board,
    ) -> Optional[EdgeSelection]:
        """Joue l'arête sous le pointeur pour `player` puis redessine.

        La légalité du coup reste du ressort du plateau: une arête déjà prise
        est tout de même transmise à `board.play()`, dont le résultat est
        retourné dans `EdgeSelection.played`.
        """
        position = self.get_pointer_position(event, board)
        edge = self.map_screen_to_edge(position, board)
        if edge is None:
            logger.debug("Aucune arête sous le pointeur %s", position)
            return None

        played = board.play(edge, player)
        self.draw(board)
        return EdgeSelection(edge=edge, played=played)


__all__ = ["BoardRenderer", "EdgeSelection"]
