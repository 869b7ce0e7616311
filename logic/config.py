"""
Game configuration for the TicTacToe arbiter.
All the fixed rules and record settings live here.
"""


class GameConfig:
    """
    Configuration class for the game engine.
    These values are part of the rules, change them with care!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Number of cells on the board
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9

    # Diagonal lines count as wins.
    # Set to False for the old rows-and-columns-only scan.
    CHECK_DIAGONALS = True

    # ==================== PLAYER SETTINGS ====================
    # Player identities are opaque 32-byte values
    IDENTITY_SIZE = 32

    PLAYER_COUNT = 2

    # ==================== ERROR SETTINGS ====================
    # First numeric error code, errors are numbered in declaration order
    ERROR_CODE_OFFSET = 6000

    # ==================== RECORD SETTINGS ====================
    # Name hashed into the 8-byte record discriminator
    ACCOUNT_NAME = "Game"
    DISCRIMINATOR_SIZE = 8
