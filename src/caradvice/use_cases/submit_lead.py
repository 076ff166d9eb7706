from __future__ import annotations

import logging
from dataclasses import dataclass

from caradvice.domain.lead import Lead

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SubmitLeadResponse:
    ok: bool = True


class SubmitLead:
    """
    Accept a lead from the contact forms.

    Leads are validated and logged only; there is no CRM, mailer or
    database behind this endpoint yet.
    """

    def execute(self, lead: Lead) -> SubmitLeadResponse:
        """
        Raises:
            ValidationError: If name or email are blank
        """
        lead.validate()

        logger.info(
            "Lead received",
            extra={"source": lead.source, "has_phone": bool(lead.phone)},
        )
        return SubmitLeadResponse(ok=True)
