"""
API dependencies - shared across all routes.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from enquiryhub.config import settings
from enquiryhub.core.cache import get_query_cache
from enquiryhub.core.context import BoardContext, BoardScope
from enquiryhub.core.exceptions import raise_unauthorized
from enquiryhub.core.security import verify_token
from enquiryhub.database import get_session
from enquiryhub.repositories.enquiry_repo import EnquiryRepository
from enquiryhub.services.board_service import EnquiryBoard, build_board
from enquiryhub.services.fixtures import DEMO_COMPANY_ID
from enquiryhub.services.sources import EnquirySource, FixtureEnquirySource, StoreEnquirySource


bearer_scheme = HTTPBearer(auto_error=False)


async def get_board_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> BoardContext:
    """Resolve the viewer from the bearer token, or the demo viewer in demo mode."""
    if settings.DEMO_MODE:
        return BoardContext(
            scope=BoardScope.for_company(DEMO_COMPANY_ID),
            demo=True,
            rollback_on_failure=settings.ROLLBACK_ON_FAILURE
        )

    if credentials is None:
        raise_unauthorized("Not authenticated")

    payload = verify_token(credentials.credentials)
    if not payload:
        raise_unauthorized("Could not validate credentials")

    try:
        scope = BoardScope(
            role=payload.get("role"),
            company_id=payload.get("company_id"),
            email=payload.get("email")
        )
    except PydanticValidationError:
        raise_unauthorized("Token does not identify a company or customer")

    return BoardContext(scope=scope, rollback_on_failure=settings.ROLLBACK_ON_FAILURE)


async def get_enquiry_source(
    context: BoardContext = Depends(get_board_context),
    session: AsyncSession = Depends(get_session)
) -> EnquirySource:
    """Fixture data in demo mode, the enquiry store otherwise."""
    if context.demo:
        return FixtureEnquirySource()
    return StoreEnquirySource(EnquiryRepository(session), get_query_cache())


async def get_board(
    context: BoardContext = Depends(get_board_context),
    source: EnquirySource = Depends(get_enquiry_source)
) -> EnquiryBoard:
    """Board loaded with the viewer's enquiries."""
    board = build_board(context, source)
    await board.load(context.scope)
    return board
