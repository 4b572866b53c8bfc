# errors.py
"""
Exception hierarchy for the tanker loading log.

Every error raised by the core descends from ``SCGError`` so the UI can
catch the whole family, show a localized message and let the operator retry.
"""

from typing import Dict, Optional


class SCGError(Exception):
    """Root of the application exception hierarchy."""

    # Translation key the UI shows for this error
    message_key = "form.error"


class Unauthenticated(SCGError):
    """A mutating call was made without an acting operator."""

    message_key = "error.unauthenticated"


class PersistenceError(SCGError):
    """The durable copy of the record collection could not be read or written."""

    message_key = "error.persistence"


class ReportRenderError(SCGError):
    """The document backend failed; no output artifact was kept."""

    message_key = "export.error"


class EmptyExportError(SCGError):
    """An export was requested but no record was selected."""

    message_key = "dashboard.noRecords"


class ValidationError(SCGError):
    """
    Input rejected at the form boundary.

    ``errors`` maps each offending field name to a translation key.
    """

    message_key = "login.fillAllFields"

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        if message is None:
            message = "Invalid fields: " + ", ".join(sorted(self.errors))
        super().__init__(message)
