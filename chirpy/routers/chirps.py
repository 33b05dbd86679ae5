"""
Chirp routes

Both endpoints enforce the 140 character limit and mask denylisted words.
/api/validate_chirp only returns the cleaned text, /api/chirps stores it.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_queries
from ..models import (
    Chirp,
    CleanedChirp,
    CreateChirpRequest,
    ErrorResponse,
    ValidateChirpRequest,
)
from ..profanity import ChirpTooLongError, clean_body, validate_chirp_length

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Chirps"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


def _validated_body(body: str) -> str:
    try:
        validate_chirp_length(body)
    except ChirpTooLongError as e:
        logger.warning(f"Rejected chirp of {e.length} characters")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return clean_body(body)


@router.post("/validate_chirp", response_model=CleanedChirp)
async def handler_validate_chirp(request: ValidateChirpRequest):
    return CleanedChirp(cleaned_body=_validated_body(request.body))


@router.post("/chirps", response_model=Chirp, status_code=status.HTTP_201_CREATED)
async def handler_create_chirp(request: CreateChirpRequest, queries=Depends(get_queries)):
    """Validate, clean and store a chirp for an existing user"""
    cleaned = _validated_body(request.body)

    if not cleaned or request.user_id == uuid.UUID(int=0):
        logger.warning("Rejected chirp with empty body or nil user_id")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="invalid request"
        )

    try:
        chirp = await queries.create_chirp(cleaned, request.user_id)
    except Exception as e:
        logger.error(
            f"Error creating chirp for user {request.user_id}: {type(e).__name__}: {e}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Couldn't create chirp",
        )

    logger.info(f"Created chirp {chirp['id']} for user {request.user_id}")
    return Chirp(**chirp)
