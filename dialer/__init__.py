"""
Dialer installation profile.

This package validates dialer install requests and turns them into ordered
plans of package, file and exec resources for the configuration engine.
"""

from dialer.config_models import DialerSettings, InstallRequest
from dialer.exceptions import DialerError, DialerValidationError
from dialer.plan import InstallPlan, PlanStep
from dialer.planner import InstallPlanner, build_install_plan
from dialer.registry import StepRegistry

__all__ = [
    "DialerError",
    "DialerSettings",
    "DialerValidationError",
    "InstallPlan",
    "InstallPlanner",
    "InstallRequest",
    "PlanStep",
    "StepRegistry",
    "build_install_plan",
]
