# -*- coding: utf-8 -*-
import pytest

from dialer.base_step import BaseStep
from dialer.plan import PlanStep
from dialer.registry import StepRegistry


class _NoopStep(BaseStep):
    def build(self, request):
        return PlanStep(name=self.name, resource_type="exec", title=self.name)


@pytest.fixture
def register_steps():
    """Register throwaway steps and remove them again after the test."""
    registered = []

    def _register(name, **metadata):
        step_class = type(f"Step_{name}", (_NoopStep,), {})
        StepRegistry.register(name, metadata=metadata)(step_class)
        registered.append(name)
        return step_class

    yield _register

    for name in registered:
        StepRegistry.unregister(name)


def test_register_sets_name_and_merges_metadata(register_steps):
    step_class = register_steps("test_alpha", description="Alpha")
    assert step_class.name == "test_alpha"
    assert step_class.get_description() == "Alpha"
    assert step_class.get_dependencies() == []
    assert step_class.applies_to("ODS")
    assert StepRegistry.get_step("test_alpha") is step_class


def test_duplicate_registration_is_rejected(register_steps):
    register_steps("test_alpha")
    with pytest.raises(ValueError, match="already registered"):
        StepRegistry.register("test_alpha")(type("Other", (_NoopStep,), {}))


def test_unknown_step_raises_key_error():
    with pytest.raises(KeyError, match="No step registered"):
        StepRegistry.get_step("test_missing")


def test_products_restrict_applicability(register_steps):
    step_class = register_steps("test_ccs_only", products=["CCS"])
    assert step_class.applies_to("CCS")
    assert not step_class.applies_to("ODS")


def test_resolve_puts_dependencies_first(register_steps):
    register_steps("test_a")
    register_steps("test_b", dependencies=["test_a"])
    register_steps("test_c", dependencies=["test_b"])
    assert StepRegistry.resolve_dependencies(["test_c"]) == ["test_a", "test_b", "test_c"]


def test_resolve_skips_dependencies_outside_available(register_steps):
    register_steps("test_a")
    register_steps("test_b", dependencies=["test_a", "test_unused"])
    assert StepRegistry.resolve_dependencies(["test_b"], available=["test_b"]) == ["test_b"]


def test_resolve_unknown_dependency_raises(register_steps):
    register_steps("test_b", dependencies=["test_unknown"])
    with pytest.raises(KeyError):
        StepRegistry.resolve_dependencies(["test_b"])


def test_circular_dependency_is_detected(register_steps):
    register_steps("test_x", dependencies=["test_y"])
    register_steps("test_y", dependencies=["test_x"])
    with pytest.raises(ValueError, match="Circular dependency"):
        StepRegistry.resolve_dependencies(["test_x"])


def test_get_all_steps_returns_a_copy(register_steps):
    register_steps("test_a")
    steps = StepRegistry.get_all_steps()
    steps.pop("test_a")
    assert "test_a" in StepRegistry.get_all_steps()
