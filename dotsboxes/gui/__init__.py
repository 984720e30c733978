"""GUI package: interface graphique points et carrés avec pygame.

Modules:
- geometry: calculs de transformation logique <-> écran
- artist: primitives de dessin pygame
- renderer: parcours du plateau et sélection d'arête au pointeur
- app: orchestrateur principal (modèle testable sans boucle pygame)
"""

__all__ = [
    "geometry",
    "artist",
    "renderer",
    "app",
]
