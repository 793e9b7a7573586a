"""Range checks applied when strict balances are enabled."""

from tokenledger.domain.constants import UINT256_MAX
from tokenledger.exceptions import BalanceOverflowError, BalanceUnderflowError


def check_balance(address: str, balance: int) -> None:
    if balance < 0:
        raise BalanceUnderflowError(f"Balance of {address} would become {balance}")
    if balance > UINT256_MAX:
        raise BalanceOverflowError(f"Balance of {address} would exceed uint256: {balance}")


def check_supply(token_name: str, supply: int) -> None:
    if supply < 0:
        raise BalanceUnderflowError(f"Total supply of {token_name} would become {supply}")
    if supply > UINT256_MAX:
        raise BalanceOverflowError(f"Total supply of {token_name} would exceed uint256: {supply}")
