"""Notifier that writes user notifications to the log."""

import logging

from admin_console.application.interfaces import Notifier, Severity

logger = logging.getLogger(__name__)

_LEVELS = {
    Severity.SUCCESS: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class LoggingNotifier(Notifier):
    def notify(self, message: str, severity: Severity = Severity.SUCCESS) -> None:
        severity = Severity(severity)
        logger.log(_LEVELS[severity], "[%s] %s", severity.value, message)
