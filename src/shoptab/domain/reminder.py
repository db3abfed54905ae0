"""Hand-off of reminder messages to the user's messaging surface."""

import logging
import os
import sys
from dataclasses import dataclass
from urllib.parse import quote

import click
import pyperclip

from shoptab.domain.entities import Customer
from shoptab.domain.errors import DeliveryError, ValidationError
from shoptab.domain.template import render

logger = logging.getLogger(__name__)

METHOD_AUTO = "auto"
METHOD_SMS = "sms"
METHOD_CLIPBOARD = "clipboard"
METHOD_PRINT = "print"
METHODS = (METHOD_AUTO, METHOD_SMS, METHOD_CLIPBOARD, METHOD_PRINT)


@dataclass(frozen=True)
class ReminderResult:
    """Outcome of a dispatched reminder."""

    method: str
    message: str


def build_sms_uri(phone: str, message: str) -> str:
    """Build an ``sms:`` URI with the message as a percent-encoded body."""
    return f"sms:{phone}?body={quote(message, safe='')}"


def supports_sms_intent() -> bool:
    """True on platforms with a native messaging handler (Android)."""
    return sys.platform == "android" or "ANDROID_ROOT" in os.environ


class ReminderService:
    """Service that renders reminders and passes them on for sending."""

    def resolve_method(self, method: str) -> str:
        """Turn 'auto' into a concrete delivery method."""
        if method not in METHODS:
            raise ValidationError(
                f"Unknown delivery method '{method}'. Supported: {', '.join(METHODS)}"
            )
        if method == METHOD_AUTO:
            return METHOD_SMS if supports_sms_intent() else METHOD_CLIPBOARD
        return method

    def dispatch(self, phone: str, message: str, method: str = METHOD_AUTO) -> str:
        """Send message to the messaging app or clipboard.

        Args:
            phone: Recipient phone number
            message: Rendered reminder text
            method: One of METHODS; 'print' hands nothing off

        Returns:
            The method actually used

        Raises:
            DeliveryError: If the messaging app or clipboard is unavailable
        """
        method = self.resolve_method(method)

        if method == METHOD_PRINT:
            logger.debug(f"Reminder for {phone} left for the caller to print")
            return method

        if method == METHOD_SMS:
            uri = build_sms_uri(phone, message)
            exit_code = click.launch(uri)
            if exit_code != 0:
                raise DeliveryError(f"Could not open messaging app (exit code {exit_code})")
            logger.info(f"Opened SMS intent for {phone}")
            return method

        try:
            pyperclip.copy(message)
        except pyperclip.PyperclipException as e:
            raise DeliveryError(f"Could not copy message: {e}")
        logger.info(f"Copied reminder for {phone} to clipboard")
        return method

    def send_reminder(
        self, customer: Customer, template: str, method: str = METHOD_AUTO
    ) -> ReminderResult:
        """Render the template for a customer and dispatch it."""
        message = render(template, customer)
        used = self.dispatch(customer.phone, message, method)
        return ReminderResult(method=used, message=message)
