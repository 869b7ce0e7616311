"""
Host configuration for the TicTacToe arbiter.
Settings for game storage and the ledger.
"""


class HostConfig:
    """
    Configuration class for the host side.
    """

    # ==================== LEDGER SETTINGS ====================
    # Units moved by one reward transfer
    REWARD_AMOUNT = 1

    # Balance of an identity the ledger has never seen
    DEFAULT_BALANCE = 0
