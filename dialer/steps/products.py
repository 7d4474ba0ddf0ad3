# dialer/steps/products.py
# -*- coding: utf-8 -*-
"""
Product package steps. Exactly one of them applies to a request.
"""

from dialer.base_step import BaseStep
from dialer.config_models import PRODUCT_CCS, PRODUCT_ODS, SUPPORTED_ENSURE, InstallRequest
from dialer.plan import PlanStep
from dialer.registry import StepRegistry


class ProductPackageStep(BaseStep):
    """Installs the MSI of one product variant, versioned by the request."""

    product: str = ""

    def build(self, request: InstallRequest) -> PlanStep:
        product_settings = self.settings.products[self.product]
        source = product_settings.msi_template.format(
            drive=self.media_drive,
            version=request.version,
        )
        return PlanStep(
            name=self.name,
            resource_type="package",
            title=product_settings.package_name,
            attributes={
                "ensure": SUPPORTED_ENSURE,
                "source": source,
            },
        )


@StepRegistry.register(
    name="ods_package",
    metadata={
        "dependencies": ["mount_media", "dotnet35"],
        "products": [PRODUCT_ODS],
        "phase": 20,
        "description": "Installs the ODS product package.",
    },
)
class OdsPackageStep(ProductPackageStep):
    product = PRODUCT_ODS


@StepRegistry.register(
    name="ccs_package",
    metadata={
        "dependencies": ["mount_media", "dotnet35"],
        "products": [PRODUCT_CCS],
        "phase": 20,
        "description": "Installs the CCS product package.",
    },
)
class CcsPackageStep(ProductPackageStep):
    product = PRODUCT_CCS
