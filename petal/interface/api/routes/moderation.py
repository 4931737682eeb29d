"""Moderation routes.

All routes here require a signed-in user with the admin role.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, status
from pydantic import BaseModel

from petal.application.usecase.moderation import (
    ListPendingCommentsRequest,
    ListPendingCommentsResponse,
    ListPendingCommentsUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)
from petal.config import AuthSettings
from petal.domain.error import ConcurrentModificationError, NotFoundError
from petal.domain.service import JWTService
from petal.domain.value import ModerationAction
from petal.interface.api.auth import require_moderator
from petal.persistence.error import PersistenceError

router = APIRouter(
    prefix="/moderation/comments", tags=["moderation"], route_class=DishkaRoute
)


@router.get("/pending", response_model=ListPendingCommentsResponse)
async def list_pending_comments(
    request: Request,
    list_pending_use_case: FromDishka[ListPendingCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> ListPendingCommentsResponse:
    """List comments awaiting moderation, newest first."""
    require_moderator(request, jwt_service, auth_settings)

    return await list_pending_use_case.execute(
        ListPendingCommentsRequest(limit=limit, offset=offset)
    )


class ModerateCommentAPIRequest(BaseModel):
    """API request for a moderation decision."""

    action: ModerationAction
    reason: str | None = None


@router.post("/{comment_id}", response_model=ModerateCommentResponse)
async def moderate_comment(
    comment_id: str,
    body: ModerateCommentAPIRequest,
    request: Request,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> ModerateCommentResponse:
    """Approve, reject or flag a comment as spam.

    Any decision can be made from any status.
    """
    moderator = require_moderator(request, jwt_service, auth_settings)

    try:
        return await moderate_comment_use_case.execute(
            ModerateCommentRequest(
                comment_id=comment_id,
                moderator_id=moderator.user_id,
                action=body.action,
                reason=body.reason,
            )
        )
    except NotFoundError as e:
        logfire.warn("Moderation failed - comment not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConcurrentModificationError as e:
        logfire.warn("Moderation conflict", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PersistenceError as e:
        logfire.error("Failed to save moderation decision", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to moderate comment",
        )
