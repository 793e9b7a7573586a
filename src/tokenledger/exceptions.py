class LedgerError(Exception):
    """Base error for the token ledger."""


class EntityStoreError(LedgerError):
    """A load or upsert against the entity store failed."""


class BalanceError(LedgerError):
    """A balance or supply left its allowed range."""


class BalanceUnderflowError(BalanceError):
    pass


class BalanceOverflowError(BalanceError):
    pass
