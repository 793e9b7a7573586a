from pydantic_settings import BaseSettings

from tokenledger.domain.constants import ZERO_ADDRESS


class Settings(BaseSettings):
    db_host: str = "localhost"
    db_port: int = 54377
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "tokenledger"
    token_name: str = "GAL"  # Singleton id of the counters record
    zero_address: str = ZERO_ADDRESS
    strict_balances: bool = False  # Reject negative / out-of-range balances and supply
    net_self_transfers: bool = False  # from == to leaves the balance unchanged
    debug: bool = False

    @property
    def database_url(self) -> str:
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    class Config:
        env_file = ".env"

