"""Event folder: applies one decoded Transfer event to the ledger state."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, Iterable
from typing import TYPE_CHECKING

from tokenledger.domain.constants import ZERO_ADDRESS
from tokenledger.domain.enums import UserRole
from tokenledger.domain.models.events import TransferEvent
from tokenledger.domain.models.ledger import User
from tokenledger.ledger.guards import check_balance
from tokenledger.ledger.transactions import get_or_create_transaction
from tokenledger.ledger.users import get_or_create_user
from tokenledger.store.base import EntityStore

if TYPE_CHECKING:
    from tokenledger.config import Settings

logger = logging.getLogger(__name__)


class EventFolder:
    """TransferEvent -> sender/receiver Users + Transaction log + GlobalCounters.

    Every call re-loads what it needs from the store; nothing is cached
    between events. Balance deltas are applied even when the transaction
    hash was already recorded, so re-delivering an event moves balances
    twice while the transaction log and counters stay deduplicated.

    Sender and receiver are loaded as separate copies and the receiver is
    written last, so a self-transfer of v leaves the address at balance + v.
    With net_self_transfers one copy serves both roles and the deltas cancel.
    """

    def __init__(
        self,
        store: EntityStore,
        token_name: str = "GAL",
        zero_address: str = ZERO_ADDRESS,
        strict_balances: bool = False,
        net_self_transfers: bool = False,
    ) -> None:
        self._store = store
        self._token_name = token_name
        self._zero_address = zero_address.lower()
        self._strict_balances = strict_balances
        self._net_self_transfers = net_self_transfers

    @classmethod
    def from_settings(cls, store: EntityStore, settings: "Settings") -> "EventFolder":
        return cls(
            store,
            token_name=settings.token_name,
            zero_address=settings.zero_address,
            strict_balances=settings.strict_balances,
            net_self_transfers=settings.net_self_transfers,
        )

    async def on_transfer(self, event: TransferEvent) -> None:
        sender = await get_or_create_user(self._store, UserRole.SENDER, event, self._token_name)
        if self._net_self_transfers and event.to_address == event.from_address:
            # One record for both roles so the deltas cancel
            receiver = sender
        else:
            receiver = await get_or_create_user(self._store, UserRole.RECEIVER, event, self._token_name)

        if self._strict_balances:
            self._check_balances(sender, receiver, event)

        await get_or_create_transaction(
            self._store, event, self._token_name, self._zero_address, strict=self._strict_balances,
        )

        sender.balance -= event.value
        self._touch(sender, event)
        await self._store.upsert(sender)

        receiver.balance += event.value
        self._touch(receiver, event)
        await self._store.upsert(receiver)

        logger.debug(
            "Folded %s: %s -> %s (%d) at block %d",
            event.tx_hash, event.from_address, event.to_address, event.value, event.block.number,
        )

    def _check_balances(self, sender: User, receiver: User, event: TransferEvent) -> None:
        """Reject the fold before any balance is written. The zero address may go negative."""
        if sender.id != self._zero_address:
            check_balance(sender.id, sender.balance - event.value)
        if receiver.id != self._zero_address and receiver is not sender:
            check_balance(receiver.id, receiver.balance + event.value)

    @staticmethod
    def _touch(user: User, event: TransferEvent) -> None:
        user.modified_at_block = event.block.number
        user.modified_at_timestamp = event.block.timestamp


async def fold_events(folder: EventFolder, events: Iterable[TransferEvent] | AsyncIterable[TransferEvent]) -> int:
    """Fold events one at a time, in order. Returns the number folded."""
    count = 0
    if isinstance(events, AsyncIterable):
        async for event in events:
            await folder.on_transfer(event)
            count += 1
    else:
        for event in events:
            await folder.on_transfer(event)
            count += 1
    logger.info("Folded %d transfer events", count)
    return count
