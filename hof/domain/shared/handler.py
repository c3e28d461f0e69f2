"""Shared machinery for command and query handlers.

Subclasses of a handler base become dataclasses (collaborators are
injected through ``__init__``) and their ``run`` is wrapped so the
class-level ``__auth__`` gate is checked on every call.
"""

from abc import ABCMeta
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import Any, dataclass_transform

from hof.domain.shared.authorization.gate import enforce

_Run = Callable[..., Coroutine[Any, Any, Any]]


def guard_run(run: _Run) -> _Run:
    @wraps(run)
    async def guarded(self: Any, message: Any) -> Any:
        enforce(self)
        return await run(self, message)

    return guarded


@dataclass_transform()
class HandlerMeta(ABCMeta):
    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        # The abstract bases themselves stay plain classes
        if not any(isinstance(base, mcs) for base in bases):
            return cls

        cls = dataclass(cls)
        if "run" in cls.__dict__:
            cls.run = guard_run(cls.__dict__["run"])
        return cls
