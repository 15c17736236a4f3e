"""
Enquiry board API routes.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from enquiryhub.api.deps import get_board, get_board_context
from enquiryhub.config import settings
from enquiryhub.core.context import BoardContext
from enquiryhub.core.exceptions import ValidationError, raise_not_found, raise_validation_error
from enquiryhub.schemas.enquiry import (
    BoardResponse, BoardStats, EnquiryCard, MoveRequest, MoveResponse, NotificationResponse
)
from enquiryhub.services.board_service import EnquiryBoard

router = APIRouter(prefix=f"{settings.API_PREFIX}/enquiries", tags=["enquiries"])


def _notifications(board: EnquiryBoard):
    return [
        NotificationResponse(title=n.title, description=n.description, severity=n.severity)
        for n in board.notifications.drain()
    ]


@router.get("/board", response_model=BoardResponse)
async def get_enquiry_board(
    search: Optional[str] = Query(None, max_length=200),
    context: BoardContext = Depends(get_board_context),
    board: EnquiryBoard = Depends(get_board)
):
    """Get the three board columns, optionally filtered by a search term."""
    columns = board.search(search)
    return BoardResponse(
        new=[EnquiryCard.from_enquiry(e) for e in columns["new"]],
        pending=[EnquiryCard.from_enquiry(e) for e in columns["pending"]],
        completed=[EnquiryCard.from_enquiry(e) for e in columns["completed"]],
        stats=board.stats(),
        is_empty=board.is_empty,
        demo=context.demo,
        notifications=_notifications(board)
    )


@router.get("/stats", response_model=BoardStats)
async def get_enquiry_stats(board: EnquiryBoard = Depends(get_board)):
    """Get enquiry counts per column."""
    return board.stats()


@router.post("/board/move", response_model=MoveResponse)
async def move_enquiry(
    move: MoveRequest,
    board: EnquiryBoard = Depends(get_board)
):
    """Move an enquiry to another column."""
    try:
        result = await board.move(move.enquiry_id, move.from_status, move.to_status)
    except ValidationError as e:
        raise_validation_error(e.message)

    if (
        move.from_status != move.to_status
        and not result.moved
        and not result.rolled_back
    ):
        raise_not_found("Enquiry", move.enquiry_id)

    return MoveResponse(**result.model_dump(), notifications=_notifications(board))
