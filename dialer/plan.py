# dialer/plan.py
# -*- coding: utf-8 -*-
"""
Plan data structures.

A plan is the ordered list of resource declarations the configuration
engine has to apply for one install request.
"""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field

from dialer.config_models import InstallRequest

ResourceType = Literal["exec", "package", "file"]


class PlanStep(BaseModel):
    """One resource declaration in an install plan."""

    name: str = Field(description="Stable identifier of the step, e.g. 'mount_media'.")
    resource_type: ResourceType = Field(description="Engine primitive the step maps onto.")
    title: str = Field(description="Resource title as the engine sees it.")
    attributes: Dict[str, Any] = Field(default_factory=dict)
    requires: List[str] = Field(
        default_factory=list,
        description="Names of steps that must be applied before this one.",
    )


class InstallPlan(BaseModel):
    """Ordered steps produced for a validated install request."""

    request: InstallRequest
    steps: List[PlanStep] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.steps)

    def step_names(self) -> List[str]:
        return [step.name for step in self.steps]

    def contains(self, name: str) -> bool:
        return any(step.name == name for step in self.steps)

    def get_step(self, name: str) -> PlanStep:
        """
        Get a step by name.

        Raises:
            KeyError: If the plan has no step with the given name.
        """
        for step in self.steps:
            if step.name == name:
                return step
        raise KeyError(f"No step named '{name}' in plan")
