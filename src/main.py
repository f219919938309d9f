"""
Composition root - builds a SignUpController from injected collaborators.

Collaborators are created and owned by the caller; this module only wires
them into the controller and applies logging configuration.
"""

import logging

from src.config.logging_config import configure_logging
from src.config.settings import Settings, get_settings
from src.domain.ports import AddAccount, EmailValidator
from src.presentation.controllers.signup import SignUpController

logger = logging.getLogger(__name__)


def make_signup_controller(
    email_validator: EmailValidator,
    add_account: AddAccount,
    settings: Settings | None = None,
) -> SignUpController:
    """
    Create a sign-up controller with injected collaborators.

    Args:
        email_validator: EmailValidator implementation
        add_account: AddAccount implementation
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        Ready-to-use SignUpController
    """
    settings = settings or get_settings()
    configure_logging(settings)
    logger.info("Building %s sign-up controller", settings.app_name)
    return SignUpController(email_validator=email_validator, add_account=add_account)
