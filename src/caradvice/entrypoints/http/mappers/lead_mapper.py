from __future__ import annotations

from caradvice.domain.lead import Lead
from caradvice.entrypoints.http.dtos.leads import LeadRequestDTO, LeadResponseDTO
from caradvice.use_cases.submit_lead import SubmitLeadResponse


class LeadMapper:
    """Maps between REST DTOs and the domain Lead."""

    @staticmethod
    def to_domain(dto: LeadRequestDTO) -> Lead:
        """
        Converts the request payload to a domain Lead.

        Optional fields are trimmed; blank ones become None.
        """

        def optional(value: str | None) -> str | None:
            if value is None:
                return None
            return value.strip() or None

        return Lead(
            name=dto.name.strip(),
            email=dto.email.strip(),
            phone=optional(dto.phone),
            message=optional(dto.message),
            source=optional(dto.source),
        )

    @staticmethod
    def to_response(result: SubmitLeadResponse) -> LeadResponseDTO:
        return LeadResponseDTO(ok=result.ok)
