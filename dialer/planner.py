"""
Planner for the dialer profile.

This module provides the InstallPlanner class, which validates an install
request, selects the steps that apply to the requested product, resolves
their dependencies and builds the ordered plan.
"""

import importlib
import logging
import os
import pkgutil
from typing import Dict, List, Optional, Type

from common.command_utils import log_dialer
from dialer.base_step import BaseStep
from dialer.config_models import DialerSettings, InstallRequest
from dialer.plan import InstallPlan
from dialer.registry import StepRegistry
from dialer.validator import validate_request


class InstallPlanner:
    """
    Builds install plans from requests.

    The planner never applies anything; it only decides which resources are
    declared and in which order.
    """

    def __init__(
        self,
        settings: Optional[DialerSettings] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the planner.

        Args:
            settings: The profile settings. Defaults are used when omitted.
            logger: Optional logger instance. If not provided, a new logger will be created.
        """
        self.settings = settings or DialerSettings()
        self.logger = logger or logging.getLogger(self.__class__.__name__)

        self._import_step_modules()

    def _import_step_modules(self):
        """
        Import all step modules to ensure they are registered.
        """
        import dialer.steps

        steps_path = os.path.dirname(dialer.steps.__file__)
        for _, module_name, _ in pkgutil.iter_modules([steps_path]):
            importlib.import_module(f"dialer.steps.{module_name}")
            self.logger.debug(f"Imported step module: {module_name}")

    def get_available_steps(self) -> Dict[str, Type[BaseStep]]:
        return StepRegistry.get_all_steps()

    def applicable_steps(self, product: str) -> List[str]:
        """
        Names of the steps that apply to a product, sorted by phase and then
        by registration order.
        """
        registered = list(StepRegistry.get_all_steps().items())
        selected = []
        for index, (name, step_class) in enumerate(registered):
            if step_class.applies_to(product):
                log_dialer(f"Including step '{name}' for {product}", "debug", self.logger)
                selected.append((step_class.get_phase(), index, name))
            else:
                log_dialer(f"Skipping step '{name}' for {product}", "debug", self.logger)
        return [name for _, _, name in sorted(selected)]

    def plan(self, request: InstallRequest) -> InstallPlan:
        """
        Validate a request and build its plan.

        Raises:
            DialerValidationError: If the request is invalid.
        """
        validate_request(request, self.logger)

        candidates = self.applicable_steps(request.product)
        ordered = StepRegistry.resolve_dependencies(candidates, available=candidates)
        included = set(ordered)

        steps = []
        for name in ordered:
            step_class = StepRegistry.get_step(name)
            plan_step = step_class(self.settings, self.logger).build(request)
            plan_step.requires = [
                dependency
                for dependency in step_class.get_dependencies()
                if dependency in included
            ]
            steps.append(plan_step)

        log_dialer(
            f"Planned {len(steps)} steps for {request.product} {request.version}: {', '.join(ordered)}",
            "info",
            self.logger,
        )
        return InstallPlan(request=request, steps=steps)


def build_install_plan(
    request: InstallRequest,
    settings: Optional[DialerSettings] = None,
    current_logger: Optional[logging.Logger] = None,
) -> InstallPlan:
    """Validate a request and return its plan using a one-off planner."""
    return InstallPlanner(settings, current_logger).plan(request)
