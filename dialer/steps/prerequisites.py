# dialer/steps/prerequisites.py
# -*- coding: utf-8 -*-
"""
Runtime prerequisites shared by both products: .NET Framework 3.5 and the
SQL Server Native Client. Both are installed from the mounted media.
"""

from common.command_utils import join_windows_path, powershell_command
from dialer.base_step import BaseStep
from dialer.config_models import SUPPORTED_ENSURE, InstallRequest
from dialer.plan import PlanStep
from dialer.registry import StepRegistry

NETFX3_FEATURE = "NetFx3"


@StepRegistry.register(
    name="dotnet35",
    metadata={
        "dependencies": ["mount_media"],
        "phase": 10,
        "description": "Enables .NET Framework 3.5 from the mounted media.",
    },
)
class DotNet35Step(BaseStep):
    """Enables the NetFx3 optional feature with DISM, offline from the media."""

    def build(self, request: InstallRequest) -> PlanStep:
        source = join_windows_path(self.media_drive, self.settings.media.dotnet35_source)
        return PlanStep(
            name=self.name,
            resource_type="exec",
            title="install-dotnet35",
            attributes={
                "command": (
                    f"dism.exe /online /enable-feature /featurename:{NETFX3_FEATURE} "
                    f"/all /source:{source} /limitaccess /norestart"
                ),
                "unless": powershell_command(
                    f"if ((Get-WindowsOptionalFeature -Online -FeatureName {NETFX3_FEATURE}).State "
                    "-eq 'Enabled') { exit 0 } else { exit 1 }"
                ),
                "timeout": 1800,
                "path": self.settings.exec_path,
                "logoutput": "on_failure",
            },
        )


@StepRegistry.register(
    name="sql_native_client",
    metadata={
        "dependencies": ["mount_media"],
        "phase": 10,
        "description": "Installs SQL Server Native Client from the mounted media.",
    },
)
class SqlNativeClientStep(BaseStep):
    def build(self, request: InstallRequest) -> PlanStep:
        media = self.settings.media
        return PlanStep(
            name=self.name,
            resource_type="package",
            title=media.sqlncli_package,
            attributes={
                "ensure": SUPPORTED_ENSURE,
                "source": join_windows_path(self.media_drive, media.sqlncli_msi),
                "install_options": ["IACCEPTSQLNCLILICENSETERMS=YES"],
            },
        )
