"""
Fixed-size binary record for a Game.

Layout (packed, no padding):
    players   2 x 32 bytes
    turn      u8
    board     9 x (presence u8, sign u8), row-major
    status    u8 tag (0 active, 1 tie, 2 won)
    winner    32 bytes, zeros unless won

Stored records start with an 8-byte discriminator so a buffer holding
something else is never read as a game. A buffer that is still all
zeros (freshly allocated, never written) reads as a new Game().
"""

import hashlib

import numpy as np

from .config import GameConfig
from .game_state import Game
from .types import GameStatus, Sign, StatusKind, ZERO_IDENTITY
from .win_checker import WinChecker


class RecordError(ValueError):
    """A stored record could not be read."""


_SIZE = GameConfig.BOARD_SIZE

CELL_DTYPE = np.dtype([("present", "u1"), ("sign", "u1")])

GAME_DTYPE = np.dtype([
    ("players", "u1", (GameConfig.PLAYER_COUNT, GameConfig.IDENTITY_SIZE)),
    ("turn", "u1"),
    ("board", CELL_DTYPE, (_SIZE, _SIZE)),
    ("status", "u1"),
    ("winner", "u1", (GameConfig.IDENTITY_SIZE,)),
])

# (32 * 2) + 1 + (9 * (1 + 1)) + (32 + 1)
MAXIMUM_SIZE = GAME_DTYPE.itemsize

DISCRIMINATOR = hashlib.sha256(
    f"account:{GameConfig.ACCOUNT_NAME}".encode()
).digest()[:GameConfig.DISCRIMINATOR_SIZE]

# Bytes to allocate for one stored game
SPACE = GameConfig.DISCRIMINATOR_SIZE + MAXIMUM_SIZE

_TURN_MAX = np.iinfo(np.uint8).max


def encode(game: Game) -> bytes:
    """
    Serialize a game into its fixed-size record.

    Args:
        game: The game to store.

    Returns:
        SPACE bytes, discriminator first.
    """
    if not 0 <= game.turn <= _TURN_MAX:
        raise RecordError(f"Turn {game.turn} does not fit in the record")

    record = np.zeros((), dtype=GAME_DTYPE)
    record["players"] = [np.frombuffer(p, dtype=np.uint8) for p in game.players]
    record["turn"] = game.turn

    for row in range(_SIZE):
        for col in range(_SIZE):
            cell = game.board[row][col]
            if cell is not None:
                record["board"][row, col] = (1, cell.value)

    record["status"] = game.status.kind.value
    if game.status.kind is StatusKind.WON:
        record["winner"] = np.frombuffer(game.status.winner, dtype=np.uint8)

    return DISCRIMINATOR + record.tobytes()


def decode(data: bytes, win_checker: WinChecker = None) -> Game:
    """
    Read a game back from its record.

    Args:
        data: SPACE bytes, as written by encode() or freshly zeroed.
        win_checker: Rules to attach to the loaded game.

    Returns:
        The stored Game.

    Raises:
        RecordError: If the bytes are not a valid game record.
    """
    data = bytes(data)
    if len(data) != SPACE:
        raise RecordError(f"Expected {SPACE} bytes, got {len(data)}")

    head = data[:GameConfig.DISCRIMINATOR_SIZE]
    body = data[GameConfig.DISCRIMINATOR_SIZE:]
    if win_checker is None:
        win_checker = WinChecker()

    if not any(data):
        return Game(win_checker=win_checker)

    if head != DISCRIMINATOR:
        raise RecordError("Record is not a game")

    record = np.frombuffer(body, dtype=GAME_DTYPE)[0]

    board = []
    for row in range(_SIZE):
        cells = []
        for col in range(_SIZE):
            cell = record["board"][row, col]
            present, sign = int(cell["present"]), int(cell["sign"])
            if present not in (0, 1) or sign not in (0, 1):
                raise RecordError(f"Bad cell ({row}, {col})")
            if not present and sign:
                raise RecordError(f"Empty cell ({row}, {col}) has a sign")
            cells.append(Sign(sign) if present else None)
        board.append(cells)

    try:
        kind = StatusKind(int(record["status"]))
    except ValueError:
        raise RecordError(f"Unknown status tag {int(record['status'])}") from None

    winner = record["winner"].tobytes()
    if kind is StatusKind.WON:
        status = GameStatus.won(winner)
    elif winner != ZERO_IDENTITY:
        raise RecordError("Winner set on a game that is not won")
    else:
        status = GameStatus(kind)

    turn = int(record["turn"])
    marks = sum(cell is not None for row in board for cell in row)
    if marks != _expected_marks(turn, kind):
        raise RecordError(f"{marks} marks on the board do not match turn {turn}")

    return Game(
        players=tuple(p.tobytes() for p in record["players"]),
        turn=turn,
        board=board,
        status=status,
        win_checker=win_checker,
    )


def _expected_marks(turn: int, kind: StatusKind) -> int:
    """Marks a consistent board holds for this turn and status."""
    if turn == 0:
        # Never started: only an untouched active game is valid
        return 0 if kind is StatusKind.ACTIVE else -1
    if kind is StatusKind.ACTIVE:
        return turn - 1
    if kind is StatusKind.TIE and turn != GameConfig.CELL_COUNT:
        return -1
    # The final move does not advance the turn
    return turn
