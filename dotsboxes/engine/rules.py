"""Règles et constantes de la partie.

Ce module expose le contrat minimal attendu par le plateau et la GUI:
- bornes de la grille (`MIN_GRID_SIZE`, `MAX_GRID_SIZE`)
- nombre de joueurs autorisé
- palette de couleurs des joueurs
"""

from typing import Tuple

# Dimensions de la grille (en points)
MIN_GRID_SIZE: int = 2
MAX_GRID_SIZE: int = 12
DEFAULT_GRID_SIZE: int = 5

# Joueurs
MIN_PLAYERS: int = 2
MAX_PLAYERS: int = 4
DEFAULT_PLAYER_NAMES: Tuple[str, ...] = ("Bleu", "Orange")

PLAYER_COLORS: Tuple[Tuple[int, int, int], ...] = (
    (30, 100, 200),  # Bleu
    (255, 140, 50),  # Orange
    (80, 170, 90),  # Vert
    (190, 70, 160),  # Violet
)

__all__ = [
    "MIN_GRID_SIZE",
    "MAX_GRID_SIZE",
    "DEFAULT_GRID_SIZE",
    "MIN_PLAYERS",
    "MAX_PLAYERS",
    "DEFAULT_PLAYER_NAMES",
    "PLAYER_COLORS",
]
