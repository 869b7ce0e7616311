"""
Errors raised by the host collaborators (storage and ledger).
"""


class HostError(Exception):
    """Base class for host failures."""


class AccountInUse(HostError):
    """An address already holds a game record."""


class AccountNotFound(HostError):
    """No game record is stored at an address."""


class InsufficientFunds(HostError):
    """The sender cannot cover a transfer."""
