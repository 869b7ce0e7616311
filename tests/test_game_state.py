import pytest

from logic.errors import (
    AlreadyStarted,
    GameAlreadyOver,
    InvalidPlayers,
    NotStarted,
    TileAlreadySet,
    TileOutOfBounds,
)
from logic.game_state import Game
from logic.types import GameStatus, Sign, Tile, ZERO_IDENTITY, new_identity
from logic.win_checker import WinChecker


def play_all(game, moves):
    for row, col in moves:
        game.play(Tile(row, col))


def test_new_game_is_not_started():
    game = Game()
    assert game.turn == 0
    assert not game.is_started()
    assert game.players == (ZERO_IDENTITY, ZERO_IDENTITY)
    assert len(game.empty_cells()) == 9


def test_start_sets_first_turn(players):
    game = Game()
    game.start(players)

    assert game.turn == 1
    assert game.players == players
    assert game.status == GameStatus.active()
    assert game.board == [[None] * 3 for _ in range(3)]


def test_second_start_fails_and_changes_nothing(game, players):
    game.play(Tile(1, 1))
    before = game.copy()

    with pytest.raises(AlreadyStarted):
        game.start((new_identity(), new_identity()))

    assert game == before
    assert game.players == players


@pytest.mark.parametrize("bad_players", [
    "same",
    "short",
    "three",
])
def test_start_rejects_bad_players(bad_players):
    p = new_identity()
    candidates = {
        "same": (p, p),
        "short": (p, b"\x01" * 31),
        "three": (p, new_identity(), new_identity()),
    }
    game = Game()

    with pytest.raises(InvalidPlayers):
        game.start(candidates[bad_players])

    assert game.turn == 0


def test_play_before_start_fails():
    game = Game()
    with pytest.raises(NotStarted):
        game.play(Tile(0, 0))
    with pytest.raises(NotStarted):
        game.current_player()


def test_current_player_alternates(game, players):
    seen = []
    for row, col in [(0, 0), (1, 1), (0, 1), (1, 0)]:
        seen.append(game.current_player())
        game.play(Tile(row, col))
    seen.append(game.current_player())

    assert seen == [players[0], players[1], players[0], players[1], players[0]]


def test_player_one_plays_x_and_player_two_plays_o(game):
    play_all(game, [(0, 0), (2, 2)])
    assert game.board[0][0] == Sign.X
    assert game.board[2][2] == Sign.O


def test_accepted_play_changes_exactly_one_cell(game):
    play_all(game, [(0, 0), (1, 1)])
    before = [row[:] for row in game.board]

    game.play(Tile(2, 1))

    changed = [
        (r, c) for r in range(3) for c in range(3)
        if before[r][c] != game.board[r][c]
    ]
    assert changed == [(2, 1)]
    assert before[2][1] is None
    assert game.turn == 4


def test_same_tile_twice_fails(game):
    game.play(Tile(1, 2))
    with pytest.raises(TileAlreadySet):
        game.play(Tile(1, 2))
    assert game.turn == 2


@pytest.mark.parametrize("row,col", [(3, 0), (0, 3), (-1, 1), (1, -1), (5, 1), (255, 255)])
def test_out_of_bounds_fails_without_change(game, row, col):
    game.play(Tile(0, 0))
    before = game.copy()

    with pytest.raises(TileOutOfBounds):
        game.play(Tile(row, col))

    assert game == before
    assert game.turn == 2


def test_scenario_top_row_win(game, players):
    play_all(game, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])

    assert game.status == GameStatus.won(players[0])
    assert game.turn == 5

    with pytest.raises(GameAlreadyOver):
        game.play(Tile(2, 2))
    assert game.turn == 5


ROW_MAJOR_MOVES = [
    (0, 0), (0, 1), (0, 2),
    (1, 0), (1, 1), (1, 2),
    (2, 0), (2, 1), (2, 2),
]


def test_row_major_fill_ties_without_diagonals(players):
    game = Game(win_checker=WinChecker(check_diagonals=False))
    game.start(players)

    play_all(game, ROW_MAJOR_MOVES)

    assert game.status == GameStatus.tie()
    assert game.turn == 9


def test_row_major_fill_ends_on_anti_diagonal(game, players):
    play_all(game, ROW_MAJOR_MOVES[:7])

    assert game.status == GameStatus.won(players[0])
    assert game.turn == 7
    with pytest.raises(GameAlreadyOver):
        game.play(Tile(2, 1))


def test_tie_keeps_turn_at_nine(game):
    # X O X / X O O / O X X, no line for either player
    play_all(game, [
        (0, 0), (0, 1), (0, 2),
        (1, 1), (1, 0), (2, 0),
        (2, 1), (1, 2), (2, 2),
    ])
    assert [[c.name for c in row] for row in game.board] == [
        ["X", "O", "X"],
        ["X", "O", "O"],
        ["O", "X", "X"],
    ]
    assert game.status == GameStatus.tie()
    assert game.turn == 9
    assert game.empty_cells() == []

    with pytest.raises(GameAlreadyOver):
        game.play(Tile(0, 0))


def test_column_win_for_second_player(game, players):
    play_all(game, [(0, 0), (0, 1), (2, 2), (1, 1), (1, 0), (2, 1)])
    assert game.status == GameStatus.won(players[1])
    assert game.turn == 6


def test_diagonal_win(game, players):
    play_all(game, [(0, 0), (0, 1), (1, 1), (2, 1), (2, 2)])
    assert game.status == GameStatus.won(players[0])
    assert game.turn == 5


def test_game_over_checked_before_bounds(game):
    play_all(game, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
    with pytest.raises(GameAlreadyOver):
        game.play(Tile(9, 9))


def test_bounds_checked_before_occupancy(game):
    game.play(Tile(0, 0))
    with pytest.raises(TileOutOfBounds):
        game.play(Tile(0, 3))


def test_occupied_cells_track_turn(game):
    for move, (row, col) in enumerate([(0, 0), (1, 1), (2, 2), (0, 2)], start=1):
        game.play(Tile(row, col))
        occupied = 9 - len(game.empty_cells())
        assert occupied == game.turn - 1 == move


def test_render_shows_marks(game):
    play_all(game, [(0, 0), (1, 1)])
    text = game.render()
    assert "│ X │   │   │ 0" in text
    assert "│   │ O │   │ 1" in text


def test_play_accepts_row_column_pair(game):
    game.play((1, 2))
    assert game.board[1][2] == Sign.X
    with pytest.raises(TileOutOfBounds):
        game.play((3, 0))
    assert game.turn == 2


def test_status_is_over_only_after_the_game_ends(game, players):
    assert not game.status.is_over
    assert game.is_active()

    play_all(game, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])

    assert game.status.is_over
    assert not game.is_active()
    assert GameStatus.tie().is_over
