import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_queries
from ..models import CreateUserRequest, ErrorResponse, User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Users"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("/users", response_model=User, status_code=status.HTTP_201_CREATED)
async def handler_create_user(request: CreateUserRequest, queries=Depends(get_queries)):
    """Create a user from an email address"""
    if not request.email:
        logger.warning("Rejected user creation without email")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="invalid request"
        )

    try:
        user = await queries.create_user(request.email)
    except Exception as e:
        logger.error(
            f"Error creating user {request.email}: {type(e).__name__}: {e}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Couldn't create user",
        )

    logger.info(f"Created user {user['id']}")
    return User(**user)
