# dialer/steps/media.py
# -*- coding: utf-8 -*-
"""
Steps that mount and dismount the dialer installation ISO.

The ISO is mounted before anything else and dismounted once every step that
reads from it has been applied.
"""

from common.command_utils import powershell_command, quote_powershell
from dialer.base_step import BaseStep
from dialer.config_models import InstallRequest
from dialer.plan import PlanStep
from dialer.registry import StepRegistry


def _attached_check(iso_path: str) -> str:
    return (
        f"if ((Get-DiskImage -ImagePath {quote_powershell(iso_path)}).Attached) "
        "{ exit 0 } else { exit 1 }"
    )


@StepRegistry.register(
    name="mount_media",
    metadata={
        "dependencies": [],
        "phase": 0,
        "description": "Mounts the dialer installation ISO.",
    },
)
class MountMediaStep(BaseStep):
    def build(self, request: InstallRequest) -> PlanStep:
        iso_path = self.settings.media.iso_path
        return PlanStep(
            name=self.name,
            resource_type="exec",
            title="mount-dialer-media",
            attributes={
                "command": powershell_command(
                    f"Mount-DiskImage -ImagePath {quote_powershell(iso_path)}"
                ),
                "unless": powershell_command(_attached_check(iso_path)),
                "path": self.settings.exec_path,
                "logoutput": "on_failure",
            },
        )


@StepRegistry.register(
    name="unmount_media",
    metadata={
        "dependencies": [
            "sql_native_client",
            "ods_package",
            "ccs_package",
            "ccs_database_script",
            "ccs_database",
            "ccs_connection_file",
        ],
        "phase": 90,
        "description": "Dismounts the installation ISO once everything that reads from it has run.",
    },
)
class UnmountMediaStep(BaseStep):
    def build(self, request: InstallRequest) -> PlanStep:
        iso_path = self.settings.media.iso_path
        return PlanStep(
            name=self.name,
            resource_type="exec",
            title="unmount-dialer-media",
            attributes={
                "command": powershell_command(
                    f"Dismount-DiskImage -ImagePath {quote_powershell(iso_path)}"
                ),
                "onlyif": powershell_command(_attached_check(iso_path)),
                "path": self.settings.exec_path,
                "logoutput": "on_failure",
            },
        )
