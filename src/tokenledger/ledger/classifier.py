from tokenledger.domain.constants import ZERO_ADDRESS
from tokenledger.domain.enums import TransactionType


def classify(from_address: str, to_address: str, zero_address: str = ZERO_ADDRESS) -> TransactionType:
    """MINT if tokens come from the zero address, BURN if they go to it, else TRANSFER.

    Mint is checked first, so a zero -> zero transfer is a MINT.
    """
    zero = zero_address.lower()
    if from_address.lower() == zero:
        return TransactionType.MINT
    if to_address.lower() == zero:
        return TransactionType.BURN
    return TransactionType.TRANSFER
