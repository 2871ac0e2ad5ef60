import threading
from abc import ABC, abstractmethod

import pytest

from storefront.core.container import (
    BindingNotFoundError,
    DependencyContainer,
    DependencyInjectionError,
    Lifetime,
    create_test_container,
)


class IService(ABC):
    @abstractmethod
    def ping(self):
        pass


class ConcreteService(IService):
    def __init__(self):
        self.state = []

    def ping(self):
        return "pong"


class OtherService(IService):
    def ping(self):
        return "other"


class Consumer:
    def __init__(self, service: IService, retries: int = 3):
        self.service = service
        self.retries = retries


class NeedsUnbound:
    def __init__(self, service: IService):
        self.service = service


class CycleA:
    pass


class CycleB:
    pass


@pytest.fixture
def target():
    return DependencyContainer()


def test_transient_returns_new_instance(target):
    target.register(IService, ConcreteService, Lifetime.TRANSIENT)

    first = target.resolve(IService)
    second = target.resolve(IService)

    assert first is not second
    first.state.append("x")
    assert second.state == []


def test_singleton_returns_same_instance(target):
    target.register(IService, ConcreteService, Lifetime.SINGLETON)

    first = target.resolve(IService)
    second = target.resolve(IService)

    assert first is second
    first.state.append("x")
    assert second.state == ["x"]


def test_singleton_factory_invoked_once(target):
    calls = []

    def factory():
        calls.append(1)
        return ConcreteService()

    target.register_singleton(IService, factory)
    for _ in range(3):
        target.resolve(IService)

    assert len(calls) == 1


def test_transient_factory_invoked_every_time(target):
    calls = []

    def factory():
        calls.append(1)
        return ConcreteService()

    target.register_factory(IService, factory)
    for _ in range(3):
        target.resolve(IService)

    assert len(calls) == 3


def test_unregistered_contract_raises(target):
    with pytest.raises(BindingNotFoundError) as info:
        target.resolve(IService)

    assert info.value.contract is IService
    assert isinstance(info.value, DependencyInjectionError)


def test_register_overwrites_previous_binding(target):
    target.register_singleton(IService, ConcreteService)
    assert isinstance(target.resolve(IService), ConcreteService)

    target.register_singleton(IService, OtherService)

    assert isinstance(target.resolve(IService), OtherService)


def test_register_instance_is_returned_as_is(target):
    service = ConcreteService()
    target.register_instance(IService, service)

    assert target.resolve(IService) is service
    assert target.has_registration(IService)


def test_invalid_contract_rejected(target):
    with pytest.raises(DependencyInjectionError):
        target.register("service", ConcreteService)


def test_non_callable_factory_rejected(target):
    with pytest.raises(DependencyInjectionError):
        target.register(IService, "not callable")


def test_try_resolve_returns_none_when_unbound(target):
    assert target.try_resolve(IService) is None


def test_factory_error_is_wrapped(target):
    def broken():
        raise RuntimeError("boom")

    target.register_factory(IService, broken)

    with pytest.raises(DependencyInjectionError, match="boom"):
        target.resolve(IService)


def test_register_type_autowires_constructor(target):
    target.register_type(IService, ConcreteService, Lifetime.SINGLETON)
    target.register_type(Consumer, Consumer)

    consumer = target.resolve(Consumer)

    assert consumer.service is target.resolve(IService)
    assert consumer.retries == 3


def test_register_type_rejects_abstract_implementation(target):
    with pytest.raises(DependencyInjectionError):
        target.register_type(IService, IService)


def test_build_fails_for_unbound_required_parameter(target):
    with pytest.raises(DependencyInjectionError, match="service"):
        target.build(NeedsUnbound)


def test_circular_dependency_detected(target):
    target.register_factory(CycleA, lambda: target.resolve(CycleB))
    target.register_factory(CycleB, lambda: target.resolve(CycleA))

    with pytest.raises(DependencyInjectionError, match="Circular"):
        target.resolve(CycleA)


def test_singleton_is_memoized_per_scope(target):
    target.register_singleton(IService, ConcreteService)

    with target.scope():
        first = target.resolve(IService)
        assert target.resolve(IService) is first

    with target.scope():
        second = target.resolve(IService)

    assert second is not first


def test_singleton_outside_scope_lives_for_process(target):
    target.register_singleton(IService, ConcreteService)
    process_wide = target.resolve(IService)

    with target.scope():
        scoped = target.resolve(IService)

    assert scoped is not process_wide
    assert target.resolve(IService) is process_wide


def test_scope_is_per_thread(target):
    target.register_singleton(IService, ConcreteService)
    seen = {}

    def worker():
        with target.scope():
            seen["thread"] = target.resolve(IService)

    with target.scope():
        mine = target.resolve(IService)
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

    assert seen["thread"] is not mine


def test_end_scope_without_begin_is_harmless(target):
    target.end_scope()
    assert not target.in_scope()


def test_clear_registrations(target):
    target.register_singleton(IService, ConcreteService)
    target.resolve(IService)

    target.clear_registrations()

    assert not target.has_registration(IService)


def test_test_context_restores_bindings(target):
    original = ConcreteService()
    target.register_instance(IService, original)

    with create_test_container(target) as ctx:
        mock = OtherService()
        ctx.register_mock(IService, mock)
        assert target.resolve(IService) is mock

    assert target.resolve(IService) is original


def test_test_context_restores_scoped_singletons(target):
    target.register_singleton(IService, ConcreteService)
    target.begin_scope()
    before = target.resolve(IService)

    with create_test_container(target):
        target.register_singleton(IService, OtherService)
        inside = target.resolve(IService)

    after = target.resolve(IService)
    target.end_scope()

    assert isinstance(inside, OtherService)
    assert after is before


def test_test_context_drops_scope_opened_inside(target):
    target.register_singleton(IService, ConcreteService)

    with create_test_container(target):
        target.begin_scope()
        target.resolve(IService)

    assert not target.in_scope()
