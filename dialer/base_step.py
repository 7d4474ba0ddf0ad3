"""
Base step class for all plan steps.

This module provides the base class that every plan step must inherit from.
A step turns a validated install request into one resource declaration.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from dialer.config_models import DialerSettings, InstallRequest
from dialer.plan import PlanStep


class BaseStep(ABC):
    """
    Base class for all plan steps.

    Subclasses declare which products they apply to and which steps they
    depend on through the registry decorator, and implement build().
    """

    # Class-level metadata that can be overridden by subclasses or set by the registry decorator
    metadata: Dict[str, Any] = {
        "dependencies": [],  # Names of steps that must come first
        "products": None,  # Products the step applies to; None means every product
        "phase": 0,  # Coarse ordering bucket, lower phases are planned first
        "description": "",
    }

    name: str = ""

    def __init__(
        self,
        settings: DialerSettings,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the step.

        Args:
            settings: The profile settings.
            logger: Optional logger instance. If not provided, a new logger will be created.
        """
        self.settings = settings
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def build(self, request: InstallRequest) -> PlanStep:
        """
        Build the resource declaration for a validated request.

        The planner fills in PlanStep.requires; implementations leave it empty.
        """

    @classmethod
    def applies_to(cls, product: str) -> bool:
        products = cls.metadata.get("products")
        return products is None or product in products

    @classmethod
    def get_dependencies(cls) -> List[str]:
        return list(cls.metadata.get("dependencies", []))

    @classmethod
    def get_phase(cls) -> int:
        return int(cls.metadata.get("phase", 0))

    @classmethod
    def get_description(cls) -> str:
        return str(cls.metadata.get("description", ""))

    @property
    def media_drive(self) -> str:
        return self.settings.media.drive.rstrip("\\/")
