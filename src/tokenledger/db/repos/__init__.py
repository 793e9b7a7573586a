from tokenledger.db.repos.ledger_repo import LedgerRepo

__all__ = ["LedgerRepo"]
