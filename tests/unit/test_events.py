import pytest
from pydantic import ValidationError

from tokenledger.domain.constants import UINT256_MAX
from tokenledger.domain.models.events import TransferEvent


def _payload(**overrides) -> dict:
    data = {
        "from_address": "0x" + "A" * 40,
        "to_address": "0x" + "b" * 40,
        "value": 100,
        "block": {"number": 1, "timestamp": 1700000000, "gas_used": 21000},
        "transaction": {"hash": "0xABCDEF", "gas_limit": 60000, "gas_price": 1},
    }
    data.update(overrides)
    return data


class TestTransferEvent:
    def test_addresses_lowercased(self):
        event = TransferEvent(**_payload())
        assert event.from_address == "0x" + "a" * 40
        assert event.to_address == "0x" + "b" * 40

    def test_hash_lowercased(self):
        event = TransferEvent(**_payload())
        assert event.tx_hash == "0xabcdef"

    def test_string_amounts_coerced(self):
        event = TransferEvent(**_payload(value="1000000000000000000000"))
        assert event.value == 10**21

    def test_uint256_max_accepted(self):
        event = TransferEvent(**_payload(value=UINT256_MAX))
        assert event.value == UINT256_MAX

    def test_value_above_uint256_rejected(self):
        with pytest.raises(ValidationError):
            TransferEvent(**_payload(value=UINT256_MAX + 1))

    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError):
            TransferEvent(**_payload(value=-1))

    def test_short_address_rejected(self):
        with pytest.raises(ValidationError):
            TransferEvent(**_payload(from_address="0xaaa"))

    def test_non_hex_address_rejected(self):
        with pytest.raises(ValidationError):
            TransferEvent(**_payload(to_address="0x" + "z" * 40))

    def test_gas_defaults(self):
        event = TransferEvent(**_payload(
            block={"number": 5, "timestamp": 10},
            transaction={"hash": "0x01"},
        ))
        assert event.block.gas_used == 0
        assert event.transaction.gas_limit == 0
        assert event.transaction.gas_price == 0

    def test_from_json(self):
        raw = (
            '{"from_address": "0x' + "1" * 40 + '", "to_address": "0x' + "2" * 40 + '", '
            '"value": "115792089237316195423570985008687907853269984665640564039457584007913129639935", '
            '"block": {"number": 7, "timestamp": 99}, "transaction": {"hash": "0xFF"}}'
        )
        event = TransferEvent.model_validate_json(raw)
        assert event.value == UINT256_MAX
        assert event.block.number == 7
