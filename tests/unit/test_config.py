from tokenledger.config import Settings
from tokenledger.domain.constants import ZERO_ADDRESS


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.token_name == "GAL"
        assert s.zero_address == ZERO_ADDRESS
        assert s.strict_balances is False
        assert s.net_self_transfers is False

    def test_database_url(self):
        s = Settings(_env_file=None, db_user="u", db_password="p", db_host="h", db_port=1, db_name="d")
        assert s.database_url == "postgresql+asyncpg://u:p@h:1/d"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TOKEN_NAME", "XYZ")
        monkeypatch.setenv("STRICT_BALANCES", "true")
        monkeypatch.setenv("NET_SELF_TRANSFERS", "1")
        s = Settings(_env_file=None)
        assert s.token_name == "XYZ"
        assert s.strict_balances is True
        assert s.net_self_transfers is True
