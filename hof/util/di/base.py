from dishka import Provider as DishkaProvider


class Provider(DishkaProvider):
    """Base for all DI providers.

    Every ``provide`` declares its scope explicitly with ``hof.util.di.scope.Scope``;
    dishka's built-in scopes are never mixed in.
    """
