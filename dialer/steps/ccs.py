# dialer/steps/ccs.py
# -*- coding: utf-8 -*-
"""
CCS provisioning: stage the database creation script, run it against the
CCS SQL Server instance, then write the connection file the CCS services
read at startup.
"""

from dialer.base_step import BaseStep
from dialer.config_models import PRODUCT_CCS, InstallRequest
from dialer.plan import PlanStep
from dialer.registry import StepRegistry

CONNECTION_FILE_TEMPLATE = """\
[oledb]
; Everything after this line is an OLE DB initstring
Provider=SQLNCLI11.1;Integrated Security=SSPI;Persist Security Info=False;\
Initial Catalog={database};Data Source={server}
"""


@StepRegistry.register(
    name="ccs_database_script",
    metadata={
        "dependencies": ["ccs_package"],
        "products": [PRODUCT_CCS],
        "phase": 30,
        "description": "Stages the CCS database creation script from the media.",
    },
)
class CcsDatabaseScriptStep(BaseStep):
    def build(self, request: InstallRequest) -> PlanStep:
        ccs = self.settings.ccs
        return PlanStep(
            name=self.name,
            resource_type="file",
            title=ccs.script_path,
            attributes={
                "ensure": "file",
                "source": ccs.script_source.format(drive=self.media_drive),
                "source_permissions": "ignore",
            },
        )


@StepRegistry.register(
    name="ccs_database",
    metadata={
        "dependencies": ["ccs_database_script"],
        "products": [PRODUCT_CCS],
        "phase": 30,
        "description": "Creates the CCS database on the CCS SQL Server instance.",
    },
)
class CcsDatabaseStep(BaseStep):
    """Runs the staged script with sqlcmd unless the database already exists."""

    def build(self, request: InstallRequest) -> PlanStep:
        ccs = self.settings.ccs
        server = request.ccs_server_name
        exists_query = (
            f"IF DB_ID('{ccs.database}') IS NULL RAISERROR('missing', 16, 1)"
        )
        return PlanStep(
            name=self.name,
            resource_type="exec",
            title=f"create-ccs-database-{ccs.database}",
            attributes={
                "command": (
                    f'{ccs.sqlcmd} -S "{server}" -E -b -i "{ccs.script_path}" '
                    f'-v DatabaseName="{ccs.database}"'
                ),
                "unless": f'{ccs.sqlcmd} -S "{server}" -E -b -Q "{exists_query}"',
                "path": self.settings.exec_path,
                "logoutput": "on_failure",
            },
        )


@StepRegistry.register(
    name="ccs_connection_file",
    metadata={
        "dependencies": ["ccs_database"],
        "products": [PRODUCT_CCS],
        "phase": 30,
        "description": "Writes the CCS connection file pointing at the CCS database.",
    },
)
class CcsConnectionFileStep(BaseStep):
    def build(self, request: InstallRequest) -> PlanStep:
        ccs = self.settings.ccs
        return PlanStep(
            name=self.name,
            resource_type="file",
            title=ccs.connection_file,
            attributes={
                "ensure": "file",
                "content": CONNECTION_FILE_TEMPLATE.format(
                    database=ccs.database,
                    server=request.ccs_server_name,
                ),
            },
        )
