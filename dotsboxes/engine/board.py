"""Plateau de points et carrés.

Cette implémentation expose une grille complète:
- points indexés en ordre ligne par ligne (`p = row * width + col`)
- arêtes entre points voisins (horizontales et verticales), indexées par `edge_pool`
- faces (carrés unitaires) bornées par quatre arêtes
- règles de tour: compléter un carré le donne au joueur qui rejoue
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from dotsboxes.engine.rules import (
    DEFAULT_PLAYER_NAMES,
    MAX_PLAYERS,
    MIN_GRID_SIZE,
    MIN_PLAYERS,
    PLAYER_COLORS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Player:
    player_id: int
    name: str
    color: Tuple[int, int, int]


@dataclass(eq=False)
class Edge:
    """Segment entre deux points voisins."""

    edge_id: int
    ends: Tuple[int, int]
    owner: Optional[Player] = None
    faces: List["Face"] = field(default_factory=list, repr=False)


@dataclass(eq=False)
class Face:
    """Carré unitaire borné par quatre arêtes."""

    face_id: int
    edges: List[Edge] = field(default_factory=list, repr=False)
    owner: Optional[Player] = None

    @property
    def color(self) -> Optional[Tuple[int, int, int]]:
        return self.owner.color if self.owner is not None else None

    @property
    def is_complete(self) -> bool:
        return all(edge.owner is not None for edge in self.edges)


class Board:
    """Grille de `width` x `height` points et état de la partie."""

    def __init__(self, width: int, height: int, players: Sequence[Player]) -> None:
        if width < MIN_GRID_SIZE or height < MIN_GRID_SIZE:
            raise ValueError(
                f"Grille invalide {width}x{height}: minimum {MIN_GRID_SIZE}x{MIN_GRID_SIZE}"
            )
        if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
            raise ValueError(
                f"Nombre de joueurs invalide: {len(players)} "
                f"(attendu entre {MIN_PLAYERS} et {MAX_PLAYERS})"
            )

        self.width = width
        self.height = height
        self.players: Tuple[Player, ...] = tuple(players)
        self.current_player_index = 0

        self.edge_pool: Dict[int, Dict[int, Edge]] = {p: {} for p in range(self.point_count)}
        self._edges: List[Edge] = []
        self._faces: List[Face] = []
        self._build_edges()
        self._build_faces()

    @classmethod
    def new_game(
        cls,
        width: int,
        height: int,
        player_names: Optional[Sequence[str]] = None,
    ) -> "Board":
        """Construit un plateau vierge avec les couleurs par défaut."""

        names = list(player_names) if player_names is not None else list(DEFAULT_PLAYER_NAMES)
        if len(names) > len(PLAYER_COLORS):
            raise ValueError(f"Au plus {len(PLAYER_COLORS)} joueurs sont supportés")
        players = [
            Player(player_id=idx, name=name, color=PLAYER_COLORS[idx])
            for idx, name in enumerate(names)
        ]
        return cls(width, height, players)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _build_edges(self) -> None:
        for p in range(self.point_count):
            row, col = self.point_position(p)
            if col < self.width - 1:
                self._add_edge(p, p + 1)
            if row < self.height - 1:
                self._add_edge(p, p + self.width)

    def _add_edge(self, p1: int, p2: int) -> None:
        edge = Edge(edge_id=len(self._edges), ends=(p1, p2))
        self._edges.append(edge)
        self.edge_pool[p1][p2] = edge
        self.edge_pool[p2][p1] = edge

    def _build_faces(self) -> None:
        for row in range(self.height - 1):
            for col in range(self.width - 1):
                p = row * self.width + col
                face = Face(face_id=len(self._faces))
                face.edges = [
                    self.edge_pool[p][p + 1],
                    self.edge_pool[p][p + self.width],
                    self.edge_pool[p + 1][p + 1 + self.width],
                    self.edge_pool[p + self.width][p + self.width + 1],
                ]
                for edge in face.edges:
                    edge.faces.append(face)
                self._faces.append(face)

    # ------------------------------------------------------------------
    # Accès
    # ------------------------------------------------------------------

    @property
    def point_count(self) -> int:
        return self.width * self.height

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def faces(self) -> Tuple[Face, ...]:
        return tuple(self._faces)

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    def point_position(self, point: int) -> Tuple[int, int]:
        """Retourne (row, col) pour un indice de point."""

        return point // self.width, point % self.width

    def get_edge(self, p1: int, p2: int) -> Optional[Edge]:
        """Arête entre `p1` et `p2`, ou None si hors grille ou non voisins."""

        return self.edge_pool.get(p1, {}).get(p2)

    def scores(self) -> Dict[int, int]:
        """Nombre de carrés possédés par joueur (player_id -> score)."""

        totals = {player.player_id: 0 for player in self.players}
        for face in self._faces:
            if face.owner is not None:
                totals[face.owner.player_id] += 1
        return totals

    @property
    def is_game_over(self) -> bool:
        return all(edge.owner is not None for edge in self._edges)

    @property
    def winners(self) -> Tuple[Player, ...]:
        """Joueur(s) de meilleur score; vide tant que la partie continue."""

        if not self.is_game_over:
            return ()
        scores = self.scores()
        best = max(scores.values())
        return tuple(p for p in self.players if scores[p.player_id] == best)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def play(self, edge: Edge, player: Player) -> bool:
        """Attribue `edge` à `player` et ferme les carrés complétés.

        Returns:
            True si le coup a été joué, False si l'arête était déjà prise
            ou la partie terminée.

        Raises:
            ValueError: si ce n'est pas le tour de `player` ou si l'arête
                n'appartient pas à ce plateau.
        """
        a, b = edge.ends
        if self.get_edge(a, b) is not edge:
            raise ValueError(f"Arête étrangère au plateau: {edge}")
        if edge.owner is not None or self.is_game_over:
            logger.debug("Coup ignoré sur l'arête %s (déjà jouée)", edge.ends)
            return False
        if player != self.current_player:
            raise ValueError(
                f"Ce n'est pas le tour de {player.name} (tour de {self.current_player.name})"
            )

        edge.owner = player
        completed = [face for face in edge.faces if face.is_complete]
        for face in completed:
            face.owner = player
        logger.debug(
            "%s joue %s (%d carré(s) fermé(s))", player.name, edge.ends, len(completed)
        )

        if not completed:
            self.current_player_index = (self.current_player_index + 1) % len(self.players)

        if self.is_game_over:
            logger.info(
                "Partie terminée, scores: %s, gagnant(s): %s",
                self.scores(),
                ", ".join(p.name for p in self.winners),
            )
        return True


__all__ = ["Player", "Edge", "Face", "Board"]
