# dialer/validator.py
# -*- coding: utf-8 -*-
"""
Validation of install requests.

Checks run in a fixed order and the first violation is raised, so a caller
always sees one actionable message. Operating system and ensure values
compare case-insensitively, the way the configuration engine compares
strings; the product name must match exactly.
"""

import logging
from typing import Optional

from common.command_utils import log_dialer
from dialer.config_models import (
    PRODUCT_CCS,
    SUPPORTED_ENSURE,
    SUPPORTED_OPERATING_SYSTEM,
    SUPPORTED_PRODUCTS,
    InstallRequest,
)
from dialer.exceptions import DialerValidationError

module_logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _fail(field: str, message: str, logger: logging.Logger) -> None:
    log_dialer(f"Invalid install request: {message}", "error", logger)
    raise DialerValidationError(message, field=field)


def validate_request(
    request: InstallRequest,
    current_logger: Optional[logging.Logger] = None,
) -> InstallRequest:
    """
    Validates an install request.

    Args:
        request: The request to validate.
        current_logger: Optional logger to use instead of the module logger.

    Returns:
        The request, unchanged, when it is valid.

    Raises:
        DialerValidationError: For the first violated constraint.
    """
    logger = current_logger if current_logger else module_logger

    if request.operating_system.lower() != SUPPORTED_OPERATING_SYSTEM.lower():
        _fail(
            "operating_system",
            f"Unsupported OS '{request.operating_system}': the dialer profile only supports {SUPPORTED_OPERATING_SYSTEM}",
            logger,
        )

    if _is_blank(request.product) or request.product not in SUPPORTED_PRODUCTS:
        _fail(
            "product",
            f"product must be either ODS or CCS, got '{request.product}'",
            logger,
        )

    if request.ensure.lower() != SUPPORTED_ENSURE:
        _fail(
            "ensure",
            f"only {SUPPORTED_ENSURE} is supported for the ensure parameter at this time, got '{request.ensure}'",
            logger,
        )

    if _is_blank(request.version):
        _fail("version", "version must be specified", logger)

    if request.product == PRODUCT_CCS and _is_blank(request.ccs_server_name):
        _fail(
            "ccs_server_name",
            "ccs_server_name must be specified when product is CCS",
            logger,
        )

    log_dialer(
        f"Install request for {request.product} {request.version} is valid",
        "debug",
        logger,
    )
    return request
