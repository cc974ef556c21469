"""Health and root endpoints. Neither requires authentication."""

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

router = APIRouter(tags=["System"])


@router.get("/status")
def status():
    return {"status": "OK"}


@router.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/status")
