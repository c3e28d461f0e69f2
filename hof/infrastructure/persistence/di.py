from typing import AsyncIterable

from dishka import provide
from sqlalchemy.ext.asyncio import AsyncEngine

from hof.config import Config
from hof.domain.report.port.store import ReportStore
from hof.infrastructure.persistence.database import create_db_engine
from hof.infrastructure.persistence.store.report import SQLAlchemyReportStore
from hof.util.di.base import Provider
from hof.util.di.scope import Scope


class PersistenceProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.database)
        yield engine
        await engine.dispose()

    # One store per process: its lock is what serialises writers
    @provide(scope=Scope.APP)
    def get_report_store(self, engine: AsyncEngine) -> ReportStore:
        return SQLAlchemyReportStore(engine)
