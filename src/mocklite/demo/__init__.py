"""The registry caching scenario, runnable from the command line."""

from __future__ import annotations

from typing import Any, Callable

from ..core import MockSession
from ..errors import VerificationAssertionError
from ..verification import times


class Registry:
    def lookup(self, name: str) -> Any:
        raise NotImplementedError


class RegistryCacheDecorator(Registry):
    """Caches lookups so the decorated registry sees each name once."""

    def __init__(self, registry: Registry):
        self._registry = registry
        self._cache: dict[str, Any] = {}

    def lookup(self, name: str) -> Any:
        if name not in self._cache:
            self._cache[name] = self._registry.lookup(name)
        return self._cache[name]


def run_demo(echo: Callable[[str], Any] = print) -> bool:
    """Run the scenario step by step; return True when every check held."""

    session = MockSession()
    registry = session.mock(Registry, name="registry")
    decorator = RegistryCacheDecorator(registry)

    session.when(registry.lookup("datasource")).then_return("BasicDataSource")
    session.when(registry.lookup("userstore")).then_return("UserStore")
    echo("stubbed lookup('datasource') -> 'BasicDataSource'")
    echo("stubbed lookup('userstore') -> 'UserStore'")

    for name in ("datasource", "datasource", "userstore"):
        echo(f"decorator.lookup({name!r}) = {decorator.lookup(name)!r}")

    checks = [
        ("datasource", 1),
        ("userstore", 1),
        ("nonexistent", 0),
    ]
    ok = True
    for name, count in checks:
        try:
            session.verify(registry, times(count)).lookup(name)
        except VerificationAssertionError as exc:
            ok = False
            echo(f"verify times({count}) lookup({name!r}): FAILED\n{exc}")
        else:
            echo(f"verify times({count}) lookup({name!r}): ok")
    return ok
