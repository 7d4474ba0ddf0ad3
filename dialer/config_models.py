# dialer/config_models.py
# -*- coding: utf-8 -*-
"""
Pydantic models for the dialer installation profile.

This module defines the structured settings for the profile (media layout,
per-product packages, CCS database provisioning, logging) and the
InstallRequest record that the planner validates.
"""

import string
from typing import Dict, Iterable, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Default Static Values (can be overridden by config file/env/cli) ---
LOG_PREFIX_DEFAULT: str = "[DIALER]"
SUPPORTED_OPERATING_SYSTEM: str = "Windows"
SUPPORTED_ENSURE: str = "installed"
PRODUCT_ODS: str = "ODS"
PRODUCT_CCS: str = "CCS"
SUPPORTED_PRODUCTS = (PRODUCT_ODS, PRODUCT_CCS)

ISO_PATH_DEFAULT: str = "C:\\install\\dialer\\dialer.iso"
MEDIA_DRIVE_DEFAULT: str = "D:"
DOTNET35_SOURCE_DEFAULT: str = "sources\\sxs"
SQLNCLI_PACKAGE_DEFAULT: str = "Microsoft SQL Server 2012 Native Client"
SQLNCLI_MSI_DEFAULT: str = "prereqs\\sqlncli.msi"

ODS_PACKAGE_DEFAULT: str = "Dialer ODS"
ODS_MSI_TEMPLATE_DEFAULT: str = "{drive}\\ODS\\DialerODS_{version}.msi"
CCS_PACKAGE_DEFAULT: str = "Dialer CCS"
CCS_MSI_TEMPLATE_DEFAULT: str = "{drive}\\CCS\\DialerCCS_{version}.msi"

CCS_DATABASE_DEFAULT: str = "DialerCCS"
CCS_SCRIPT_SOURCE_DEFAULT: str = "{drive}\\CCS\\sql\\create_database.sql"
CCS_SCRIPT_STAGING_DEFAULT: str = "C:\\ProgramData\\Dialer\\sql\\create_database.sql"
CCS_CONNECTION_FILE_DEFAULT: str = "C:\\ProgramData\\Dialer\\ccs_connection.udl"
SQLCMD_DEFAULT: str = "sqlcmd.exe"
EXEC_PATH_DEFAULT: str = (
    "C:\\Windows\\System32;"
    "C:\\Windows\\System32\\WindowsPowerShell\\v1.0;"
    "C:\\Program Files\\Microsoft SQL Server\\Client SDK\\ODBC\\110\\Tools\\Binn"
)

SYMBOLS_DEFAULT: Dict[str, str] = {
    "success": "✅", "error": "❌", "warning": "⚠️", "info": "ℹ️",
    "step": "➡️", "gear": "⚙️", "package": "📦", "rocket": "🚀",
    "sparkles": "✨", "critical": "🔥", "debug": "🐛",
}


def _check_placeholders(template: str, allowed: Iterable[str]) -> str:
    """Rejects path templates using placeholders other than the allowed ones."""
    allowed = set(allowed)
    try:
        fields = [name for _, name, _, _ in string.Formatter().parse(template) if name is not None]
    except ValueError as e:
        raise ValueError(f"malformed template '{template}': {e}") from e
    unknown = sorted(set(fields) - allowed)
    if unknown:
        raise ValueError(
            f"template '{template}' uses unknown placeholder(s) {', '.join(unknown)}; "
            f"allowed: {', '.join(sorted(allowed))}"
        )
    return template


class InstallRequest(BaseModel):
    """
    Parameters and facts describing one dialer installation.

    Fields are plain strings; dialer.validator checks the constraints and
    reports the first one violated.
    """

    operating_system: str = Field(default="", description="Operating system fact of the target node.")
    product: str = Field(default="", description="Product variant to install, either ODS or CCS.")
    ensure: str = Field(default=SUPPORTED_ENSURE, description="Desired package state. Only 'installed' is supported.")
    version: Optional[str] = Field(default=None, description="Product version to install.")
    ccs_server_name: Optional[str] = Field(
        default=None,
        description="SQL Server instance hosting the CCS database. Required when product is CCS.",
    )


class MediaSettings(BaseSettings):
    """Installation media layout."""
    model_config = SettingsConfigDict(env_prefix="DIALER_MEDIA_", extra="ignore")

    iso_path: str = Field(default=ISO_PATH_DEFAULT, description="Path of the dialer installation ISO.")
    drive: str = Field(default=MEDIA_DRIVE_DEFAULT, description="Drive letter the ISO is mounted on.")
    dotnet35_source: str = Field(
        default=DOTNET35_SOURCE_DEFAULT,
        description="Folder on the media holding the .NET 3.5 feature payload.",
    )
    sqlncli_package: str = Field(
        default=SQLNCLI_PACKAGE_DEFAULT,
        description="Display name of the SQL Server Native Client package.",
    )
    sqlncli_msi: str = Field(default=SQLNCLI_MSI_DEFAULT, description="Native Client MSI, relative to the media root.")


class ProductSettings(BaseModel):
    """Package definition for one product variant."""

    package_name: str = Field(description="Display name of the installed package.")
    msi_template: str = Field(description="MSI path template. Supports {drive} and {version}.")

    @field_validator("msi_template")
    @classmethod
    def _msi_template_placeholders(cls, value: str) -> str:
        return _check_placeholders(value, ("drive", "version"))


class CcsSettings(BaseSettings):
    """CCS database and connection file settings."""
    model_config = SettingsConfigDict(env_prefix="DIALER_CCS_", extra="ignore")

    database: str = Field(default=CCS_DATABASE_DEFAULT, description="Name of the CCS database.")
    script_source: str = Field(
        default=CCS_SCRIPT_SOURCE_DEFAULT,
        description="Database creation script on the media. Supports {drive}.",
    )
    script_path: str = Field(default=CCS_SCRIPT_STAGING_DEFAULT, description="Where the script is staged locally.")
    connection_file: str = Field(default=CCS_CONNECTION_FILE_DEFAULT, description="Path of the CCS connection file.")
    sqlcmd: str = Field(default=SQLCMD_DEFAULT, description="sqlcmd executable used to provision the database.")

    @field_validator("script_source")
    @classmethod
    def _script_source_placeholders(cls, value: str) -> str:
        return _check_placeholders(value, ("drive",))


def _default_products() -> Dict[str, ProductSettings]:
    return {
        PRODUCT_ODS: ProductSettings(package_name=ODS_PACKAGE_DEFAULT, msi_template=ODS_MSI_TEMPLATE_DEFAULT),
        PRODUCT_CCS: ProductSettings(package_name=CCS_PACKAGE_DEFAULT, msi_template=CCS_MSI_TEMPLATE_DEFAULT),
    }


class DialerSettings(BaseSettings):
    """Main profile settings."""
    model_config = SettingsConfigDict(env_prefix="DIALER_", env_nested_delimiter="__", extra="ignore")

    log_prefix: str = Field(default=LOG_PREFIX_DEFAULT, description="Prefix for log messages from the profile tooling.")
    exec_path: str = Field(
        default=EXEC_PATH_DEFAULT,
        description="Search path for the executables that exec steps call (dism, powershell, sqlcmd).",
    )

    media: MediaSettings = Field(default_factory=MediaSettings)
    products: Dict[str, ProductSettings] = Field(default_factory=_default_products)
    ccs: CcsSettings = Field(default_factory=CcsSettings)

    symbols: Dict[str, str] = Field(default_factory=lambda: dict(SYMBOLS_DEFAULT))
