from dishka import AsyncContainer, from_context, make_async_container

from hof.config import Config
from hof.domain.auth.util.di import AuthProvider
from hof.domain.report.util.di import ReportProvider
from hof.infrastructure.persistence import PersistenceProvider
from hof.util.di.base import Provider
from hof.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config) -> AsyncContainer:
    return make_async_container(
        ConfigProvider(),
        PersistenceProvider(),
        AuthProvider(),
        ReportProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
