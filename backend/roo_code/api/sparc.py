"""
SPARC methodology API routes.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from roo_code.api.deps import get_configuration_manager, get_sparc_methodology
from roo_code.schemas import AssistantResponse, SparcAssistanceRequest, SparcPhaseInfo, SparcReviewRequest
from roo_code.services.configuration import ConfigurationManager
from roo_code.services.sparc import EditorContext, PhaseNotFoundError, SparcMethodology

router = APIRouter(prefix="/sparc", tags=["SPARC"])


def _ensure_enabled(configuration: ConfigurationManager) -> None:
    if not configuration.is_sparc_integration_enabled():
        raise HTTPException(status_code=403, detail="SPARC integration is disabled in settings")


@router.get("/phases", response_model=List[SparcPhaseInfo])
async def list_phases(sparc: SparcMethodology = Depends(get_sparc_methodology)):
    """Phases in methodology order."""
    return [SparcPhaseInfo.model_validate(phase) for phase in sparc.list_phases()]


@router.get("/phases/{phase_key}/template", response_model=AssistantResponse)
async def create_template(
    phase_key: str,
    sparc: SparcMethodology = Depends(get_sparc_methodology),
    configuration: ConfigurationManager = Depends(get_configuration_manager),
):
    _ensure_enabled(configuration)
    try:
        return sparc.create_template(phase_key)
    except PhaseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/phases/{phase_key}/assistance", response_model=AssistantResponse)
async def get_assistance(
    phase_key: str,
    request: SparcAssistanceRequest,
    sparc: SparcMethodology = Depends(get_sparc_methodology),
    configuration: ConfigurationManager = Depends(get_configuration_manager),
):
    _ensure_enabled(configuration)
    context = EditorContext(
        selection=request.selection,
        file_name=request.file_name,
        language_id=request.language_id,
    )
    try:
        return await sparc.get_assistance(phase_key, context)
    except PhaseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/phases/{phase_key}/review", response_model=AssistantResponse)
async def review_phase(
    phase_key: str,
    request: SparcReviewRequest,
    sparc: SparcMethodology = Depends(get_sparc_methodology),
    configuration: ConfigurationManager = Depends(get_configuration_manager),
):
    _ensure_enabled(configuration)
    try:
        return await sparc.review_phase(phase_key, request.document)
    except PhaseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
