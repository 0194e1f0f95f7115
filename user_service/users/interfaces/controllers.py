"""
Users Controllers (API Routes)
==============================

FastAPI routes for user lookups.

Controllers are thin - they delegate to ``UserService``. Repository errors
are not handled here; the application-wide exception handler maps them.
"""

from fastapi import APIRouter, Depends, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.infrastructure.database import get_session
from user_service.shared.infrastructure.logging import get_logger
from user_service.users.application import (
    ErrorResponse,
    IUserRepository,
    SetupResponse,
    UserService,
)
from user_service.users.infrastructure import SQLAlchemyUserRepository

logger = get_logger(__name__)
router = APIRouter(tags=["Users"])


# ========== Example payloads for Swagger ==========

USER_ROW_EXAMPLE = {
    "id": 1,
    "name": "Admin",
    "email": "admin123@gmail.com",
    "password_hash": "$2b$12$...",
    "role": "admin"
}

ERROR_RESPONSE_EXAMPLE = {
    "error": "Error fetching user",
    "details": "invalid input syntax for type integer: \"abc\""
}


# ========== Dependencies ==========

async def get_user_repository(
    session: AsyncSession = Depends(get_session)
) -> IUserRepository:
    """Get user repository bound to the request's session."""
    return SQLAlchemyUserRepository(session)


async def get_user_service(
    user_repository: IUserRepository = Depends(get_user_repository)
) -> UserService:
    """Get user service instance."""
    return UserService(user_repository)


# ========== Route Handlers ==========

@router.get(
    "/setup/{id}",
    response_model=SetupResponse,
    summary="Look up a user with query metadata",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "message": "User fetched successfully",
                        "data": [USER_ROW_EXAMPLE],
                        "command": "SELECT"
                    }
                }
            }
        },
        500: {"model": ErrorResponse, "content": {"application/json": {"example": ERROR_RESPONSE_EXAMPLE}}}
    }
)
async def setup_user(
    id: str,
    user_service: UserService = Depends(get_user_service)
):
    """Return every row matching ``id`` together with the command tag."""
    result = await user_service.get_user(id)
    return SetupResponse(
        message="User fetched successfully",
        data=result.rows,
        command=result.command,
    )


@router.get(
    "/user/{id}",
    summary="Get a user row",
    description="""
    Returns the first matching row exactly as stored.

    An unknown id is not an error: the response is **200 with an empty body**.
    """,
    responses={
        200: {"content": {"application/json": {"example": USER_ROW_EXAMPLE}}},
        500: {"model": ErrorResponse, "content": {"application/json": {"example": ERROR_RESPONSE_EXAMPLE}}}
    }
)
async def get_user(
    id: str,
    user_service: UserService = Depends(get_user_service)
):
    result = await user_service.get_user(id)

    if result.first is None:
        logger.info("No user matched", extra={"identifier": id})
        return Response(status_code=200)

    return JSONResponse(content=jsonable_encoder(result.first))
