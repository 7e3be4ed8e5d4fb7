"""
General endpoints for health checks.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from src.database import get_session
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["general"])


@router.get(
    "/health",
    summary="Health check",
    description="Check that the API is running and can reach its database",
    response_description="Health status",
    responses={
        503: {"description": "Database unavailable"},
        200: {"description": "Service healthy"},
    },
)
async def health_check(session: Session = Depends(get_session)):
    try:
        session.exec(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check database query failed: {str(e)}")
        raise HTTPException(status_code=503, detail="Database unavailable")
    return {"status": "healthy"}
