#!/usr/bin/env python3
"""Lance la GUI points et carrés (pygame, joueurs humains en local).

Ce script fournit une boucle d'évènements minimale permettant de jouer
manuellement en s'appuyant sur `dotsboxes.gui.app.DotsBoxesApp`.

Commandes:
- clic gauche : jouer l'arête la plus proche du pointeur
- N           : nouvelle partie
- ESC         : quitter
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

import pygame

from dotsboxes.engine.rules import (
    DEFAULT_GRID_SIZE,
    DEFAULT_PLAYER_NAMES,
    MAX_GRID_SIZE,
    MAX_PLAYERS,
    MIN_GRID_SIZE,
    MIN_PLAYERS,
)
from dotsboxes.gui.app import HUD_HEIGHT, DotsBoxesApp, UIState
from dotsboxes.gui.artist import COLOR_BG

logger = logging.getLogger(__name__)

MIN_WINDOW_SIZE = 100


def grid_size(value: str) -> int:
    size = int(value)
    if not MIN_GRID_SIZE <= size <= MAX_GRID_SIZE:
        raise argparse.ArgumentTypeError(
            f"la taille doit être comprise entre {MIN_GRID_SIZE} et {MAX_GRID_SIZE}"
        )
    return size


def window_size(value: str) -> int:
    size = int(value)
    if size < MIN_WINDOW_SIZE:
        raise argparse.ArgumentTypeError(
            f"la zone de jeu doit mesurer au moins {MIN_WINDOW_SIZE} pixels"
        )
    return size


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Points et carrés, partie locale")

    parser.add_argument(
        "--width",
        type=grid_size,
        default=DEFAULT_GRID_SIZE,
        help="Nombre de points par ligne",
    )
    parser.add_argument(
        "--height",
        type=grid_size,
        default=DEFAULT_GRID_SIZE,
        help="Nombre de points par colonne",
    )
    parser.add_argument(
        "--size",
        type=window_size,
        default=600,
        help="Côté de la zone de jeu en pixels",
    )
    parser.add_argument(
        "--players",
        nargs="+",
        default=list(DEFAULT_PLAYER_NAMES),
        help=f"Noms des joueurs ({MIN_PLAYERS} à {MAX_PLAYERS})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Journalisation détaillée (hit-testing compris)",
    )

    args = parser.parse_args(argv)
    if not MIN_PLAYERS <= len(args.players) <= MAX_PLAYERS:
        parser.error(f"entre {MIN_PLAYERS} et {MAX_PLAYERS} joueurs requis")
    return args


def render_hud(screen: pygame.Surface, font: pygame.font.Font, ui_state: UIState) -> None:
    top = screen.get_height() - HUD_HEIGHT
    pygame.draw.rect(screen, (20, 40, 60), pygame.Rect(0, top, screen.get_width(), HUD_HEIGHT))

    x = 16
    for panel in ui_state.player_panels:
        prefix = "▶ " if panel.is_current_player else ""
        text = font.render(f"{prefix}{panel.name}: {panel.score}", True, panel.color)
        screen.blit(text, (x, top + 12))
        x += text.get_width() + 32

    instructions = font.render(ui_state.instructions, True, (230, 230, 230))
    screen.blit(instructions, (16, top + 44))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.size, args.size + HUD_HEIGHT))
        pygame.display.set_caption("Points et carrés")
        screen.fill(COLOR_BG)

        app = DotsBoxesApp(screen=screen)
        app.start_new_game(width=args.width, height=args.height, player_names=args.players)

        clock = pygame.time.Clock()
        font = pygame.font.SysFont("Arial", 20, bold=True)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_n:
                        app.start_new_game(
                            width=args.width, height=args.height, player_names=args.players
                        )
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if event.pos[1] < screen.get_height() - HUD_HEIGHT:
                        app.handle_pointer(event)

            render_hud(screen, font, app.get_ui_state())
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()

    logger.info("Fermeture de la partie")
    return 0


if __name__ == "__main__":
    sys.exit(main())
