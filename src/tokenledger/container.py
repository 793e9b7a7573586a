from dependency_injector import containers, providers
from sqlalchemy.ext.asyncio import AsyncSession

from tokenledger.config import Settings
from tokenledger.db.session import build_engine, build_session_factory
from tokenledger.ledger.folder import EventFolder
from tokenledger.store.sql import SqlEntityStore


def build_folder(session: AsyncSession, settings: Settings) -> EventFolder:
    """EventFolder writing through a SqlEntityStore bound to session."""
    return EventFolder.from_settings(SqlEntityStore(session), settings)


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    engine = providers.Singleton(
        build_engine,
        database_url=settings.provided.database_url,
        echo=settings.provided.debug,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=engine,
    )

    # Call with session=...; one folder per unit of work
    folder = providers.Factory(build_folder, settings=settings)
