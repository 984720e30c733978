"""dotsboxes: jeu de points et carrés (dots-and-boxes) avec rendu pygame."""

__all__ = ["engine", "gui"]
