from fastapi import APIRouter, Depends

from caradvice.entrypoints.http.dependencies import get_submit_lead_use_case
from caradvice.entrypoints.http.dtos.leads import LeadRequestDTO, LeadResponseDTO
from caradvice.entrypoints.http.error_responses import ErrorResponse
from caradvice.entrypoints.http.mappers.lead_mapper import LeadMapper
from caradvice.use_cases.submit_lead import SubmitLead


router = APIRouter(tags=["Leads"])


@router.post(
    "/leads",
    response_model=LeadResponseDTO,
    summary="Submit a contact lead",
    description="""
    Receives the contact forms. `name` and `email` are required.
    Leads are acknowledged and logged; nothing is persisted yet.
    """,
    responses={
        422: {"model": ErrorResponse, "description": "Missing name or email"},
    },
)
def submit_lead(
    payload: LeadRequestDTO,
    use_case: SubmitLead = Depends(get_submit_lead_use_case),
) -> LeadResponseDTO:
    lead = LeadMapper.to_domain(payload)
    result = use_case.execute(lead)
    return LeadMapper.to_response(result)
