# storefront/core/container.py
"""
Dependency Injection Container.
Maps contracts to bindings and resolves them with a transient or singleton lifetime.
"""

import inspect
import logging
import threading
import typing
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Lifetime(str, Enum):
    """Resolution policy of a binding"""

    TRANSIENT = "transient"
    SINGLETON = "singleton"


@dataclass
class Binding:
    """Registry entry for a contract"""

    contract: Type
    factory: Callable[[], Any]
    lifetime: Lifetime = Lifetime.TRANSIENT


class DependencyInjectionError(Exception):
    """Error in dependency injection"""

    pass


class BindingNotFoundError(DependencyInjectionError):
    """Resolution requested for a contract with no binding"""

    def __init__(self, contract: Any):
        self.contract = contract
        super().__init__(f"No registration found for {_name_of(contract)}")


class IDependencyContainer(ABC):
    """Interface for dependency injection container"""

    @abstractmethod
    def register(
        self, contract: Type[T], factory: Callable[[], T], lifetime: Lifetime
    ) -> None:
        """Register a factory with a lifetime"""
        pass

    @abstractmethod
    def register_instance(self, contract: Type[T], instance: T) -> None:
        """Register a pre-built instance"""
        pass

    @abstractmethod
    def resolve(self, contract: Type[T]) -> T:
        """Resolve an instance of the contract"""
        pass

    @abstractmethod
    def has_registration(self, contract: Type[T]) -> bool:
        """Check if contract is registered"""
        pass


class DependencyContainer(IDependencyContainer):
    """
    Dependency injection container implementation.

    Singletons are memoized in the cache of the active scope. When no scope
    is open on the current thread they are memoized for the whole process.
    Instances given to ``register_instance`` always live for the process.
    """

    def __init__(self):
        self._bindings: Dict[Type, Binding] = {}
        self._instances: Dict[Type, Any] = {}
        self._singletons: Dict[Type, Any] = {}
        self._local = threading.local()

    # Registration

    def register(
        self,
        contract: Type[T],
        factory: Callable[[], T],
        lifetime: Lifetime = Lifetime.TRANSIENT,
    ) -> None:
        """Register a factory, replacing any earlier binding of the contract"""
        if not self._is_valid_contract(contract):
            raise DependencyInjectionError(f"Invalid contract: {contract}")

        if not callable(factory):
            raise DependencyInjectionError("Factory must be callable")

        self._forget(contract)
        self._bindings[contract] = Binding(contract, factory, Lifetime(lifetime))
        logger.debug(
            "Registered %s binding for %s", Lifetime(lifetime).value, _name_of(contract)
        )

    def register_factory(self, contract: Type[T], factory: Callable[[], T]) -> None:
        """Register a transient factory"""
        self.register(contract, factory, Lifetime.TRANSIENT)

    def register_singleton(self, contract: Type[T], factory: Callable[[], T]) -> None:
        """Register a factory whose result is shared within a scope"""
        self.register(contract, factory, Lifetime.SINGLETON)

    def register_instance(self, contract: Type[T], instance: T) -> None:
        """Register a pre-built instance shared by the whole process"""
        if not self._is_valid_contract(contract):
            raise DependencyInjectionError(f"Invalid contract: {contract}")

        self._forget(contract)
        self._instances[contract] = instance
        logger.debug("Registered instance for %s", _name_of(contract))

    def register_type(
        self,
        contract: Type[T],
        implementation: Type[T],
        lifetime: Lifetime = Lifetime.TRANSIENT,
    ) -> None:
        """Register a class binding, autowiring its constructor"""
        if not self._is_valid_implementation(implementation):
            raise DependencyInjectionError(f"Invalid implementation: {implementation}")

        self.register(contract, lambda: self.build(implementation), lifetime)
        logger.debug(
            "Registered type mapping %s -> %s",
            _name_of(contract),
            implementation.__name__,
        )

    def has_registration(self, contract: Type[T]) -> bool:
        """Check if contract is registered"""
        return contract in self._instances or contract in self._bindings

    def clear_registrations(self) -> None:
        """Clear all registrations (useful for testing)"""
        self._bindings.clear()
        self._instances.clear()
        self._singletons.clear()
        self._local.__dict__.clear()
        logger.debug("Cleared all registrations")

    # Resolution

    def resolve(self, contract: Type[T]) -> T:
        """Resolve an instance of the contract"""
        resolving = self._resolving()
        if contract in resolving:
            raise DependencyInjectionError(
                f"Circular dependency detected for {_name_of(contract)}"
            )

        try:
            resolving.add(contract)
            return self._resolve_internal(contract)
        finally:
            resolving.discard(contract)

    def try_resolve(self, contract: Type[T]) -> Optional[T]:
        """Try to resolve an instance without raising exception"""
        try:
            return self.resolve(contract)
        except DependencyInjectionError:
            return None

    def build(self, implementation: Type[T]) -> T:
        """
        Instantiate a class, resolving each annotated constructor parameter
        that has a registration. Parameters with defaults are left alone
        when their type is not registered.
        """
        try:
            hints = typing.get_type_hints(implementation.__init__)
        except (NameError, TypeError):
            hints = {}

        kwargs = {}
        for name, param in inspect.signature(implementation).parameters.items():
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue
            annotation = hints.get(name)
            if annotation is not None and self.has_registration(annotation):
                kwargs[name] = self.resolve(annotation)
            elif param.default is param.empty:
                raise DependencyInjectionError(
                    f"Cannot resolve parameter '{name}' of {implementation.__name__}"
                )

        try:
            return implementation(**kwargs)
        except DependencyInjectionError:
            raise
        except Exception as e:
            raise DependencyInjectionError(
                f"Error creating instance of {implementation.__name__}: {e}"
            ) from e

    def _resolve_internal(self, contract: Type[T]) -> T:
        """Internal resolution logic"""
        if contract in self._instances:
            return self._instances[contract]

        binding = self._bindings.get(contract)
        if binding is None:
            raise BindingNotFoundError(contract)

        if binding.lifetime is Lifetime.TRANSIENT:
            return self._invoke(binding)

        cache = self._singleton_cache()
        if contract not in cache:
            cache[contract] = self._invoke(binding)
            logger.debug("Created singleton for %s", _name_of(contract))
        return cache[contract]

    def _invoke(self, binding: Binding) -> Any:
        try:
            return binding.factory()
        except DependencyInjectionError:
            raise
        except Exception as e:
            raise DependencyInjectionError(
                f"Factory for {_name_of(binding.contract)} failed: {e}"
            ) from e

    # Scopes

    def begin_scope(self) -> None:
        """Open a scope on the current thread; singletons memoize inside it"""
        self._local.scoped = {}
        logger.debug("Scope opened")

    def end_scope(self) -> None:
        """Close the current scope, dropping its singleton instances"""
        scoped = getattr(self._local, "scoped", None)
        self._local.scoped = None
        if scoped is not None:
            logger.debug("Scope closed, released %d singleton(s)", len(scoped))

    def in_scope(self) -> bool:
        """Check if a scope is open on the current thread"""
        return getattr(self._local, "scoped", None) is not None

    @contextmanager
    def scope(self):
        """Context manager wrapping begin_scope/end_scope"""
        self.begin_scope()
        try:
            yield self
        finally:
            self.end_scope()

    def _singleton_cache(self) -> Dict[Type, Any]:
        scoped = getattr(self._local, "scoped", None)
        return self._singletons if scoped is None else scoped

    def _resolving(self) -> set:
        if not hasattr(self._local, "resolving"):
            self._local.resolving = set()
        return self._local.resolving

    def _forget(self, contract: Type) -> None:
        self._bindings.pop(contract, None)
        self._instances.pop(contract, None)
        self._singletons.pop(contract, None)
        scoped = getattr(self._local, "scoped", None)
        if scoped:
            scoped.pop(contract, None)

    def _is_valid_contract(self, contract: Type) -> bool:
        """Check if contract is valid"""
        return contract is not None and isinstance(contract, type)

    def _is_valid_implementation(self, implementation: Type) -> bool:
        """Check if implementation is valid"""
        return (
            implementation is not None
            and isinstance(implementation, type)
            and not inspect.isabstract(implementation)
        )


def _name_of(contract: Any) -> str:
    return getattr(contract, "__name__", repr(contract))


# Global container instance
container = DependencyContainer()


# Context manager for testing
class ContainerTestContext:
    """Context manager for testing with temporary container state"""

    def __init__(self, target: Optional[DependencyContainer] = None):
        self._container = target or container
        self._backup_bindings = {}
        self._backup_instances = {}
        self._backup_singletons = {}
        self._backup_scoped = None

    def __enter__(self):
        self._backup_bindings = self._container._bindings.copy()
        self._backup_instances = self._container._instances.copy()
        self._backup_singletons = self._container._singletons.copy()
        scoped = getattr(self._container._local, "scoped", None)
        self._backup_scoped = None if scoped is None else scoped.copy()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._container._bindings = self._backup_bindings
        self._container._instances = self._backup_instances
        self._container._singletons = self._backup_singletons
        # scope cache of the calling thread only
        self._container._local.scoped = self._backup_scoped

    def register_mock(self, contract: Type[T], mock_instance: T) -> None:
        """Register a mock for testing"""
        self._container.register_instance(contract, mock_instance)


def create_test_container(
    target: Optional[DependencyContainer] = None,
) -> ContainerTestContext:
    """Create a test container context"""
    return ContainerTestContext(target)
