"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import Field

from featurevote.application.usecase.base import CamelModel
from featurevote.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    ListVotesRequest,
    ListVotesUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
    VoteListItem,
)
from featurevote.interface.api.schemas import EMAIL_PATTERN, ApiResponse

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(CamelModel):
    """API request identifying the voter."""

    user_email: str = Field(pattern=EMAIL_PATTERN)


@router.post("/features/{feature_id}/vote", response_model=ApiResponse[CastVoteResponse])
async def cast_vote(
    feature_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> ApiResponse[CastVoteResponse]:
    """Vote for a feature.

    A user holds one vote. Voting for another feature moves it there;
    voting again for the same feature changes nothing.

    Args:
        feature_id: Feature UUID
        request: Voter's email
        cast_vote_use_case: Cast vote use case from DI

    Returns:
        The vote, the feature's new count and the action taken
    """
    response = await cast_vote_use_case.execute(
        CastVoteRequest(feature_id=str(feature_id), user_email=request.user_email)
    )
    return ApiResponse(data=response)


@router.delete(
    "/features/{feature_id}/vote", response_model=ApiResponse[RemoveVoteResponse]
)
async def remove_vote(
    feature_id: UUID,
    request: VoteAPIRequest,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
) -> ApiResponse[RemoveVoteResponse]:
    """Withdraw a vote from a feature.

    Args:
        feature_id: Feature UUID
        request: Voter's email
        remove_vote_use_case: Remove vote use case from DI

    Returns:
        Confirmation and the feature's new count

    Raises:
        NotFoundError: If the user has no vote on this feature (mapped to 404)
    """
    response = await remove_vote_use_case.execute(
        RemoveVoteRequest(feature_id=str(feature_id), user_email=request.user_email)
    )
    return ApiResponse(data=response)


@router.get("/votes", response_model=ApiResponse[list[VoteListItem]])
async def list_votes(
    list_votes_use_case: FromDishka[ListVotesUseCase],
    feature_id: UUID | None = Query(default=None, alias="featureId"),
    user_email: str | None = Query(default=None, alias="userEmail", pattern=EMAIL_PATTERN),
) -> ApiResponse[list[VoteListItem]]:
    """List votes, optionally filtered by feature and/or voter.

    Args:
        list_votes_use_case: List votes use case from DI
        feature_id: Only votes on this feature
        user_email: Only votes by this user

    Returns:
        Votes with their user and feature
    """
    response = await list_votes_use_case.execute(
        ListVotesRequest(
            feature_id=str(feature_id) if feature_id else None,
            user_email=user_email,
        )
    )
    return ApiResponse(data=response.votes)
