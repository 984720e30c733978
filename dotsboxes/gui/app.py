"""Orchestrateur principal de la GUI points et carrés.

Ce module fournit un modèle testable indépendant de la boucle pygame. Il
expose:
- un objet `DotsBoxesApp` coordonnant le plateau et le renderer,
- un état d'interface (`UIState`) synthétisant le joueur courant, les
  scores et la fin de partie.

La boucle d'évènements elle-même vit dans `play_gui.py`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import pygame

from dotsboxes.engine.board import Board, Edge
from dotsboxes.engine.rules import DEFAULT_GRID_SIZE, DEFAULT_PLAYER_NAMES
from dotsboxes.gui.renderer import BoardRenderer

logger = logging.getLogger(__name__)

# Constantes écran
SCREEN_WIDTH = 600
SCREEN_HEIGHT = 680
HUD_HEIGHT = 80

__all__ = ["PlayerPanel", "UIState", "DotsBoxesApp", "SCREEN_WIDTH", "SCREEN_HEIGHT", "HUD_HEIGHT"]


@dataclass(frozen=True)
class PlayerPanel:
    """Données pour l'affichage HUD d'un joueur."""

    player_id: int
    name: str
    color: Tuple[int, int, int]
    score: int
    is_current_player: bool


@dataclass(frozen=True)
class UIState:
    """Données agrégées pour la couche de présentation GUI."""

    instructions: str
    player_panels: Tuple[PlayerPanel, ...]
    is_game_over: bool
    winners: Tuple[str, ...]
    last_edge: Optional[Tuple[int, int]]


class DotsBoxesApp:
    """Orchestrateur principal de la GUI.

    Cette classe ne gère pas la boucle pygame directement mais fournit
    les opérations nécessaires à l'UI:
    - démarrer une partie,
    - gérer les clics sur le plateau,
    - exposer un état synthétique prêt à rendre.
    """

    def __init__(self, *, screen: Optional[pygame.Surface] = None) -> None:
        self.screen = screen
        self._board: Optional[Board] = None
        self._board_renderer: Optional[BoardRenderer] = None
        self._last_edge: Optional[Edge] = None

    def start_new_game(
        self,
        *,
        width: int = DEFAULT_GRID_SIZE,
        height: int = DEFAULT_GRID_SIZE,
        player_names: Optional[Sequence[str]] = None,
    ) -> None:
        """Initialise une nouvelle partie et (ré)instancie le renderer."""

        self._board = Board.new_game(width, height, player_names or list(DEFAULT_PLAYER_NAMES))

        if self.screen is None:
            # Crée une surface si non fournie (utile hors tests)
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))

        board_height = max(self.screen.get_height() - HUD_HEIGHT, 1)
        board_surface = self.screen.subsurface(
            pygame.Rect(0, 0, self.screen.get_width(), board_height)
        )
        self._board_renderer = BoardRenderer(board_surface, offset=(0, 0))
        self._last_edge = None

        logger.info(
            "Nouvelle partie %dx%d: %s",
            width,
            height,
            ", ".join(p.name for p in self._board.players),
        )
        self.render()

    @property
    def board(self) -> Board:
        """Plateau courant (erreur si aucune partie lancée)."""

        if self._board is None:
            raise RuntimeError("Aucune partie initialisée. Utiliser start_new_game().")
        return self._board

    @property
    def renderer(self) -> BoardRenderer:
        """Retourne le renderer pygame associé (initialisé après start)."""

        if self._board_renderer is None:
            raise RuntimeError("BoardRenderer indisponible tant que la partie n'est pas démarrée")
        return self._board_renderer

    def render(self) -> None:
        self.renderer.draw(self.board)

    def handle_pointer(self, event: pygame.event.Event) -> bool:
        """Joue le coup désigné par un clic pour le joueur courant.

        Returns:
            True si un coup a effectivement été joué.
        """
        board = self.board
        if board.is_game_over:
            return False

        selection = self.renderer.select_edge(event, board.current_player, board)
        if selection is None:
            return False

        if selection.played:
            self._last_edge = selection.edge
        return selection.played

    def get_ui_state(self) -> UIState:
        board = self.board
        scores = board.scores()
        current = board.current_player
        panels = tuple(
            PlayerPanel(
                player_id=player.player_id,
                name=player.name,
                color=player.color,
                score=scores[player.player_id],
                is_current_player=not board.is_game_over and player == current,
            )
            for player in board.players
        )
        winners = tuple(player.name for player in board.winners)
        return UIState(
            instructions=self._build_instructions(board, winners),
            player_panels=panels,
            is_game_over=board.is_game_over,
            winners=winners,
            last_edge=self._last_edge.ends if self._last_edge is not None else None,
        )

    @staticmethod
    def _build_instructions(board: Board, winners: Tuple[str, ...]) -> str:
        if not board.is_game_over:
            return f"{board.current_player.name}: cliquez sur une arête libre"
        if len(winners) == 1:
            return f"Victoire de {winners[0]} ! (N: nouvelle partie)"
        return f"Égalité entre {', '.join(winners)} (N: nouvelle partie)"
