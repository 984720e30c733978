"""Tests du BoardRenderer (parcours de rendu et sélection d'arête).

Le rendu est vérifié via un artiste enregistreur: on compare les appels de
dessin plutôt que les pixels. Les surfaces pygame servent uniquement à
fournir les dimensions client.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Tuple

import pygame
import pytest

from dotsboxes.engine.board import Board, Edge, Player
from dotsboxes.gui.geometry import ScreenPoint
from dotsboxes.gui.renderer import BoardRenderer, EdgeSelection


class RecordingArtist:
    """Enregistre les appels de dessin au lieu de toucher une surface."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def clear(self, width, height) -> None:
        self.calls.append(("clear", width, height))

    def draw_point(self, position, owned) -> None:
        self.calls.append(("point", tuple(position), owned))

    def draw_edge(self, start, end, owner) -> None:
        self.calls.append(("edge", frozenset({tuple(start), tuple(end)}), owner))

    def draw_face(self, color, anchor, box_size) -> None:
        self.calls.append(("face", color, tuple(anchor), tuple(box_size)))

    def of_kind(self, kind: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == kind]


class SpyBoard(Board):
    """Plateau réel qui trace les appels à play()."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.play_calls: List[Tuple[Edge, Player, bool]] = []

    def play(self, edge: Edge, player: Player) -> bool:
        result = super().play(edge, player)
        self.play_calls.append((edge, player, result))
        return result


def _make_board(width: int = 3, height: int = 3) -> SpyBoard:
    players = [Player(0, "Alice", (30, 100, 200)), Player(1, "Bob", (255, 140, 50))]
    return SpyBoard(width, height, players)


def _click(pos: Tuple[float, float]) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def _play(board: Board, p1: int, p2: int) -> None:
    board.play(board.get_edge(p1, p2), board.current_player)


@pytest.fixture
def artist() -> RecordingArtist:
    return RecordingArtist()


@pytest.fixture
def renderer(artist) -> BoardRenderer:
    return BoardRenderer(pygame.Surface((300, 300)), artist)


@pytest.fixture
def board() -> SpyBoard:
    return _make_board()


# ----------------------------------------------------------------------
# Transformations
# ----------------------------------------------------------------------


def test_map_point_to_screen_centre(renderer, board) -> None:
    assert renderer.map_point_to_screen(4, board) == pytest.approx((150.0, 150.0))
    assert renderer.map_point_to_screen(0, board) == pytest.approx((50.0, 50.0))


def test_box_size_and_margin(renderer, board) -> None:
    assert renderer.get_box_size(board) == ScreenPoint(100.0, 100.0)
    assert renderer.get_screen_margin(board) == ScreenPoint(50.0, 50.0)


def test_map_screen_to_edge_near_top_left_horizontal_edge(renderer, board) -> None:
    edge = renderer.map_screen_to_edge((100, 50), board)
    assert edge is board.get_edge(0, 1)


def test_map_screen_to_edge_above_board_returns_none(renderer, board) -> None:
    # Sans bornage, y=0 sort de la grille: l'égalité sur x donne une arête verticale hors plateau
    assert renderer.map_screen_to_edge((50, 0), board) is None


@pytest.mark.parametrize(
    "screen_point",
    [
        (300, 100),  # à droite de la colonne 2, ne doit pas revenir sur la colonne 0
        (300, 50),
        (290, 250),
        (100, 300),  # sous la dernière ligne
        (250, 290),
        (0, 150),  # à gauche de la colonne 0
        (-50, 100),
    ],
)
def test_map_screen_to_edge_outside_play_area_returns_none(renderer, board, screen_point) -> None:
    assert renderer.map_screen_to_edge(screen_point, board) is None


@pytest.mark.parametrize("width,height,size", [(3, 3, (300, 300)), (5, 3, (500, 300)), (5, 5, (500, 500))])
def test_point_round_trip_resolves_incident_edge(width, height, size) -> None:
    board = _make_board(width, height)
    renderer = BoardRenderer(pygame.Surface(size), RecordingArtist())

    for point in range(board.point_count):
        edge = renderer.map_screen_to_edge(renderer.map_point_to_screen(point, board), board)
        row, _ = board.point_position(point)
        if row < height - 1:
            assert edge is not None
            assert point in edge.ends
        else:
            # Égalité sur un point de la dernière ligne: arête verticale hors grille
            assert edge is None


# ----------------------------------------------------------------------
# Rendu
# ----------------------------------------------------------------------


def test_draw_clears_surface_first(renderer, artist, board) -> None:
    renderer.draw(board)
    assert artist.calls[0] == ("clear", 300, 300)


def test_draw_visits_every_point_and_edge_once(renderer, artist, board) -> None:
    renderer.draw(board)

    points = [call[1] for call in artist.of_kind("point")]
    edges = [call[1] for call in artist.of_kind("edge")]

    expected_points = {
        tuple(renderer.map_point_to_screen(p, board)) for p in range(board.point_count)
    }
    assert len(points) == board.point_count
    assert set(points) == expected_points
    assert len(edges) == len(board.edges)
    assert len(set(edges)) == len(board.edges)
    assert artist.of_kind("face") == []


def test_unowned_board_draws_neutral_style(renderer, artist, board) -> None:
    renderer.draw(board)
    assert all(owner is None for _, _, owner in artist.of_kind("edge"))
    assert all(not owned for _, _, owned in artist.of_kind("point"))


def test_owned_face_drawn_once_at_min_point(renderer, artist, board) -> None:
    alice, bob = board.players
    for ends in [(0, 1), (0, 3), (1, 4), (3, 4)]:
        _play(board, *ends)

    renderer.draw(board)

    faces = artist.of_kind("face")
    assert faces == [("face", bob.color, (50.0, 50.0), (100.0, 100.0))]


def test_face_shared_by_two_edges_of_a_point_drawn_once(renderer, artist, board) -> None:
    # Le carré central est atteint depuis plusieurs arêtes et plusieurs points
    for ends in [(4, 5), (1, 4), (4, 7), (3, 4)]:
        _play(board, *ends)
    for ends in [(0, 1), (0, 3), (1, 2), (2, 5), (3, 6), (6, 7), (5, 8), (7, 8)]:
        _play(board, *ends)

    renderer.draw(board)

    anchors = Counter(call[2] for call in artist.of_kind("face"))
    assert len(anchors) == 4
    assert set(anchors.values()) == {1}


def test_edge_owner_and_point_style(renderer, artist, board) -> None:
    alice, _ = board.players
    _play(board, 0, 1)

    renderer.draw(board)

    owners = Counter(owner for _, _, owner in artist.of_kind("edge"))
    assert owners == Counter({None: len(board.edges) - 1, alice: 1})

    points = {position: owned for _, position, owned in artist.of_kind("point")}
    assert points[tuple(renderer.map_point_to_screen(0, board))] is True
    assert points[tuple(renderer.map_point_to_screen(1, board))] is True
    assert points[tuple(renderer.map_point_to_screen(8, board))] is False


def test_draw_is_repeatable(renderer, artist, board) -> None:
    for ends in [(0, 1), (0, 3), (1, 4), (3, 4), (4, 5)]:
        _play(board, *ends)

    renderer.draw(board)
    first = list(artist.calls)
    artist.calls.clear()
    renderer.draw(board)

    assert artist.calls == first


def test_draw_rectangular_board() -> None:
    board = _make_board(5, 2)
    artist = RecordingArtist()
    BoardRenderer(pygame.Surface((500, 200)), artist).draw(board)

    assert len(artist.of_kind("point")) == 10
    assert len(artist.of_kind("edge")) == len(board.edges)


# ----------------------------------------------------------------------
# Sélection au pointeur
# ----------------------------------------------------------------------


def test_select_edge_plays_and_redraws(renderer, artist, board) -> None:
    alice, _ = board.players

    selection = renderer.select_edge(_click((100, 50)), alice, board)

    edge = board.get_edge(0, 1)
    assert selection == EdgeSelection(edge=edge, played=True)
    assert board.play_calls == [(edge, alice, True)]
    assert edge.owner == alice
    assert artist.calls[0][0] == "clear"


def test_select_edge_on_owned_edge_still_calls_play(renderer, board) -> None:
    alice, bob = board.players
    renderer.select_edge(_click((100, 50)), alice, board)

    selection = renderer.select_edge(_click((102, 48)), bob, board)

    edge = board.get_edge(0, 1)
    assert selection == EdgeSelection(edge=edge, played=False)
    assert len(board.play_calls) == 2
    assert board.play_calls[1] == (edge, bob, False)
    assert edge.owner == alice


def test_select_edge_clamps_pointer_outside_play_area(renderer, board) -> None:
    alice, _ = board.players

    # Au-dessus du plateau: ramené sur la première ligne
    selection = renderer.select_edge(_click((100, -40)), alice, board)

    assert selection.edge is board.get_edge(0, 1)


def test_select_edge_clamps_pointer_right_of_play_area(renderer, board) -> None:
    alice, _ = board.players

    # Ramené sur la colonne de droite: arête verticale 2-5
    selection = renderer.select_edge(_click((400, 100)), alice, board)

    assert selection.edge is board.get_edge(2, 5)


def test_select_edge_uses_surface_offset(artist, board) -> None:
    renderer = BoardRenderer(pygame.Surface((300, 300)), artist, offset=(20, 40))
    alice, _ = board.players

    selection = renderer.select_edge(_click((120, 90)), alice, board)

    assert selection.edge is board.get_edge(0, 1)


def test_select_edge_without_match_is_noop(renderer, artist, board) -> None:
    alice, _ = board.players

    # Coin inférieur gauche: égalité -> arête verticale hors grille
    selection = renderer.select_edge(_click((0, 300)), alice, board)

    assert selection is None
    assert board.play_calls == []
    assert artist.calls == []


class _NoEdgeBoard:
    """Plateau minimal dont get_edge ne trouve jamais rien."""

    width = 3
    height = 3
    edge_pool: dict = {}

    def __init__(self) -> None:
        self.played: List[object] = []

    def get_edge(self, p1: int, p2: int) -> Optional[Edge]:
        return None

    def play(self, edge, player) -> bool:
        self.played.append(edge)
        return True


def test_select_edge_never_plays_when_board_finds_nothing(renderer) -> None:
    board = _NoEdgeBoard()
    assert renderer.select_edge(_click((100, 50)), object(), board) is None
    assert board.played == []
