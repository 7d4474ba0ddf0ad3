"""
Registry for plan steps.

This module provides a registry for step classes to register themselves
and a decorator for registering them.
"""

from typing import Any, Dict, Iterable, List, Optional, Set, Type

from dialer.base_step import BaseStep


class StepRegistry:
    """
    Registry for plan steps.

    Steps are kept in registration order, which is also the tie-break order
    when the planner sorts steps of the same phase.
    """

    _registry: Dict[str, Type[BaseStep]] = {}

    @classmethod
    def register(cls, name: str, metadata: Optional[Dict[str, Any]] = None):
        """
        Decorator for registering step classes.

        Args:
            name: The name of the step.
            metadata: Optional metadata for the step: dependencies, products,
                      phase and description.

        Returns:
            A decorator function that registers the step class.
        """

        def decorator(step_class: Type[BaseStep]) -> Type[BaseStep]:
            if name in cls._registry:
                raise ValueError(f"Step with name '{name}' already registered")

            if metadata:
                step_class.metadata = {**BaseStep.metadata, **metadata}
            step_class.name = name

            cls._registry[name] = step_class
            return step_class

        return decorator

    @classmethod
    def get_step(cls, name: str) -> Type[BaseStep]:
        """
        Get a step class by name.

        Raises:
            KeyError: If no step with the given name is registered.
        """
        if name not in cls._registry:
            raise KeyError(f"No step registered with name '{name}'")

        return cls._registry[name]

    @classmethod
    def get_all_steps(cls) -> Dict[str, Type[BaseStep]]:
        """Get all registered steps, in registration order."""
        return cls._registry.copy()

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._registry.pop(name, None)

    @classmethod
    def get_step_dependencies(cls, name: str) -> List[str]:
        """
        Get the dependencies of a step.

        Raises:
            KeyError: If no step with the given name is registered.
        """
        return cls.get_step(name).get_dependencies()

    @classmethod
    def resolve_dependencies(
        cls,
        steps: List[str],
        available: Optional[Iterable[str]] = None,
    ) -> List[str]:
        """
        Resolve dependencies for a list of steps.

        Args:
            steps: A list of step names.
            available: Optional set of step names that may appear in the
                result. Dependencies outside this set are ignored, which is
                how a step that only follows product-specific steps stays
                valid for every product.

        Returns:
            A list of step names in the order they should be applied.

        Raises:
            KeyError: If any of the steps or their dependencies are not registered.
            ValueError: If there is a circular dependency.
        """
        allowed: Optional[Set[str]] = set(available) if available is not None else None
        result: List[str] = []
        visited: Set[str] = set()
        temp_visited: Set[str] = set()

        def visit(step: str):
            if step in temp_visited:
                raise ValueError(f"Circular dependency detected involving '{step}'")

            if step in visited:
                return

            temp_visited.add(step)

            for dependency in cls.get_step_dependencies(step):
                if allowed is not None and dependency not in allowed:
                    continue
                visit(dependency)

            temp_visited.remove(step)
            visited.add(step)
            result.append(step)

        for step in steps:
            if step not in visited:
                visit(step)

        return result
