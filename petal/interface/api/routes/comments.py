"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel, Field

from petal.application.usecase.comment import (
    CommentItem,
    EditCommentRequest,
    EditCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from petal.config import AuthSettings
from petal.domain.error import (
    ConcurrentModificationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from petal.domain.service import JWTService
from petal.domain.value import FavoriteFlower, Mood
from petal.interface.api.auth import client_details, get_current_user, require_user
from petal.persistence.error import PersistenceError

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CommentAuthorAPIRequest(BaseModel):
    """Author details from the comment form."""

    name: str
    email: str
    website: str = ""


class SubmitCommentAPIRequest(BaseModel):
    """API request for submitting a comment."""

    author: CommentAuthorAPIRequest
    content: str
    parent_id: str | None = None  # Parent comment ID for replies
    favorite_flower: FavoriteFlower = FavoriteFlower.OTHER
    mood: Mood = Mood.OTHER


@router.post(
    "/posts/{post_id}/comments",
    response_model=SubmitCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_comment(
    post_id: str,
    body: SubmitCommentAPIRequest,
    request: Request,
    submit_comment_use_case: FromDishka[SubmitCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> SubmitCommentResponse:
    """Submit a comment on a post or a reply to another comment.

    Signing in is optional; a signed-in commenter's account is linked so they
    can edit the comment later. Submissions scored as spam are still accepted
    and come back with ``status = "spam"``.

    Raises:
        HTTPException: 404 if the post or parent is missing, 400 if invalid
    """
    user = get_current_user(request, jwt_service, auth_settings)
    ip_address, user_agent = client_details(request)

    try:
        use_case_request = SubmitCommentRequest(
            post_id=post_id,
            author_name=body.author.name,
            author_email=body.author.email,
            author_website=body.author.website,
            author_user_id=user.user_id if user else None,
            content=body.content,
            parent_id=body.parent_id,
            ip_address=ip_address,
            user_agent=user_agent,
            favorite_flower=body.favorite_flower,
            mood=body.mood,
        )
        return await submit_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment submission failed - not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (ValidationError, ValueError) as e:
        logfire.warn("Comment submission validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PersistenceError as e:
        logfire.error("Failed to save comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit comment",
        )


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get approved comments for a post.

    Top-level comments come newest first, each with its approved replies
    oldest first.
    """
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


class EditCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(min_length=1)


@router.patch("/comments/{comment_id}", response_model=CommentItem)
async def edit_comment(
    comment_id: str,
    body: EditCommentAPIRequest,
    request: Request,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CommentItem:
    """Edit a comment's text.

    Only the signed-in author of the comment can edit it.

    Raises:
        HTTPException: If not authenticated, not the author, or validation fails
    """
    user = require_user(
        request,
        jwt_service,
        auth_settings,
        detail="Authentication required to edit comments",
    )

    try:
        return await edit_comment_use_case.execute(
            EditCommentRequest(
                comment_id=comment_id, user_id=user.user_id, content=body.content
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment edit attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this comment",
        )
    except ConcurrentModificationError as e:
        logfire.warn("Comment edit conflict", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except (ValidationError, ValueError) as e:
        logfire.warn("Comment edit validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PersistenceError as e:
        logfire.error("Failed to save comment edit", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to edit comment",
        )


@router.post("/comments/{comment_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    comment_id: str,
    request: Request,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> ToggleLikeResponse:
    """Like a comment, or remove the caller's like if already present."""
    user = require_user(
        request,
        jwt_service,
        auth_settings,
        detail="Authentication required to like comments",
    )

    try:
        return await toggle_like_use_case.execute(
            ToggleLikeRequest(comment_id=comment_id, user_id=user.user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConcurrentModificationError as e:
        logfire.warn("Like toggle conflict", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PersistenceError as e:
        logfire.error("Failed to save like", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to toggle like",
        )
