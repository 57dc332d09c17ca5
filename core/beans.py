# =============================================================================
# core/beans.py - Named Providers ("beans")
# =============================================================================
# Injection itself is done by FastAPI's Depends(). This module only keeps a
# named catalog of the provider functions so that they can be:
# - listed at startup (names and count)
# - resolved by name when several providers return the same type
#
# Scopes:
# - singleton: provider runs once per process, result is cached
# - prototype: provider runs on every resolution
#
# Usage:
#   from core.beans import catalog, some_bean
#
#   @router.get("/")
#   def handler(value: Annotated[str, Depends(some_bean)]): ...
#
#   catalog.get("StringBean")  # -> "Just a String bean"
# =============================================================================

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar, get_type_hints

from app.exceptions import AmbiguousBeanError, BeanNotFoundError, DuplicateBeanError
from core.services.some_service import SomeService
from core.validation import BeanValidator

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[[], Any])


class Scope(str, Enum):
    """
    How often a provider runs.

    - singleton: once per process (cached)
    - prototype: on every resolution
    """
    SINGLETON = "singleton"
    PROTOTYPE = "prototype"


@dataclass(frozen=True)
class BeanDefinition:
    """A registered provider and how it should be resolved."""
    name: str
    provider: Callable[[], Any]
    scope: Scope
    bean_type: Any


class BeanCatalog:
    """
    Ordered registry of named providers.

    Registration order is preserved so listings are stable.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, BeanDefinition] = {}

    def bean(
        self,
        name: str | None = None,
        scope: Scope = Scope.SINGLETON,
    ) -> Callable[[F], F]:
        """
        Register a zero-argument provider.

        The bean name defaults to the function name. Singleton providers are
        wrapped in lru_cache, and the wrapped function is what gets returned,
        so calling it directly or through Depends() shares the same instance.

        Raises:
            DuplicateBeanError: If the name is already taken
        """
        def decorator(func: F) -> F:
            bean_name = name or func.__name__
            if bean_name in self._definitions:
                raise DuplicateBeanError(bean_name)

            bean_scope = Scope(scope)
            provider = lru_cache(maxsize=None)(func) if bean_scope == Scope.SINGLETON else func
            self._definitions[bean_name] = BeanDefinition(
                name=bean_name,
                provider=provider,
                scope=bean_scope,
                bean_type=get_type_hints(func).get("return", Any),
            )
            logger.debug(f"Registered {bean_scope.value} bean '{bean_name}'")
            return provider  # type: ignore[return-value]

        return decorator

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def definition(self, name: str) -> BeanDefinition:
        try:
            return self._definitions[name]
        except KeyError:
            raise BeanNotFoundError(name, self.names()) from None

    def get(self, name: str) -> Any:
        """
        Resolve a bean by name.

        Raises:
            BeanNotFoundError: If nothing is registered under `name`
        """
        return self.definition(name).provider()

    def of_type(self, bean_type: type) -> list[str]:
        """Names of every bean whose provider returns `bean_type` (or a subclass)."""
        return [
            d.name
            for d in self._definitions.values()
            if isinstance(d.bean_type, type) and issubclass(d.bean_type, bean_type)
        ]

    def get_unique(self, bean_type: type) -> Any:
        """
        Resolve the single bean of `bean_type`.

        Raises:
            BeanNotFoundError: If no bean has that type
            AmbiguousBeanError: If more than one does; resolve by name instead
        """
        candidates = self.of_type(bean_type)
        if not candidates:
            raise BeanNotFoundError(bean_type.__name__, self.names())
        if len(candidates) > 1:
            raise AmbiguousBeanError(bean_type.__name__, candidates)
        return self.get(candidates[0])

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    def names(self) -> list[str]:
        return list(self._definitions)

    def count(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return self.count()

    def reset(self) -> None:
        """Drop cached singleton instances; the next resolution rebuilds them."""
        for d in self._definitions.values():
            if d.scope == Scope.SINGLETON:
                d.provider.cache_clear()


# =============================================================================
# Application Beans
# =============================================================================

catalog = BeanCatalog()


@catalog.bean(name="StringBean")
def some_bean() -> str:
    return "Just a String bean"


@catalog.bean()
def another_bean() -> str:
    return "Just another String bean"


@catalog.bean()
def some_service() -> SomeService:
    return SomeService()


@catalog.bean()
def bean_validator() -> BeanValidator:
    return BeanValidator()
