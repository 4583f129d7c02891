"""Lab catalog routes."""

from fastapi import APIRouter, HTTPException

from app.schemas.api import LabListResponse, LabResponse
from app.services.content import get_lab, list_labs

router = APIRouter()


@router.get("/labs", response_model=LabListResponse)
async def get_labs() -> LabListResponse:
    """List all labs."""
    return LabListResponse(labs=list_labs())


@router.get("/labs/{lab_id}", response_model=LabResponse)
async def get_lab_by_id(lab_id: str) -> LabResponse:
    """Get one lab with its prerequisites and steps."""
    lab = get_lab(lab_id)
    if lab is None:
        raise HTTPException(status_code=404, detail="Lab not found")
    return lab
