"""
Ledger for the TicTacToe arbiter.
Keeps balances per identity and moves value between them.
Nothing here knows about games.
"""

import logging
import threading
from typing import Dict

from logic.types import Identity

from .config import HostConfig
from .errors import InsufficientFunds

logger = logging.getLogger(__name__)


class Ledger:
    """
    Balances per player identity.
    """

    def __init__(self):
        self._balances: Dict[Identity, int] = {}
        self._lock = threading.Lock()

    def balance(self, identity: Identity) -> int:
        return self._balances.get(identity, HostConfig.DEFAULT_BALANCE)

    def deposit(self, identity: Identity, amount: int):
        """Add funds to an identity."""
        if amount <= 0:
            raise ValueError(f"Deposit must be positive, got {amount}")
        with self._lock:
            self._balances[identity] = self.balance(identity) + amount

    def transfer(self, sender: Identity, recipient: Identity, amount: int):
        """
        Move funds from sender to recipient.

        Args:
            sender: Pays the amount.
            recipient: Receives the amount.
            amount: Units to move, must be positive.

        Raises:
            InsufficientFunds: If the sender cannot cover the amount.
        """
        if amount <= 0:
            raise ValueError(f"Transfer must be positive, got {amount}")

        with self._lock:
            available = self.balance(sender)
            if available < amount:
                raise InsufficientFunds(
                    f"Sender has {available}, needs {amount}"
                )
            self._balances[sender] = available - amount
            self._balances[recipient] = self.balance(recipient) + amount

        logger.info(
            "Transferred %d from %s to %s",
            amount, sender.hex()[:8], recipient.hex()[:8]
        )

    def reward(self, sender: Identity, recipient: Identity):
        """Send the fixed reward amount from sender to recipient."""
        self.transfer(sender, recipient, HostConfig.REWARD_AMOUNT)
