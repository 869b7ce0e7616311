"""
Host module for the TicTacToe arbiter.
Provisions game records, checks who is playing, and moves value.
"""

from .config import HostConfig
from .errors import HostError, AccountInUse, AccountNotFound, InsufficientFunds
from .store import GameStore
from .ledger import Ledger
