"""
Enquiry board service - three status columns with optimistic moves.
"""
import logging
from typing import Dict, List, Optional

from pydantic import BaseModel

from enquiryhub.core.context import BoardContext, BoardScope
from enquiryhub.core.exceptions import ValidationError
from enquiryhub.models.enquiry import Enquiry, EnquiryStatus
from enquiryhub.schemas.enquiry import BoardStats, MoveResult
from enquiryhub.services.notifications import NotificationChannel
from enquiryhub.services.sources import EnquirySource

logger = logging.getLogger(__name__)

Partition = Dict[str, List[Enquiry]]


def empty_partition() -> Partition:
    return {status: [] for status in EnquiryStatus.ALL}


def partition_by_status(enquiries: List[Enquiry]) -> Partition:
    """Group enquiries into the three columns. Unknown statuses are dropped."""
    buckets = empty_partition()
    for enquiry in enquiries:
        if enquiry.status in buckets:
            buckets[enquiry.status].append(enquiry)
        else:
            logger.debug(f"Skipping enquiry {enquiry.id} with unknown status '{enquiry.status}'")
    return buckets


def matches_query(enquiry: Enquiry, query: str) -> bool:
    needle = query.lower()
    fields = (enquiry.title, enquiry.customer_name, enquiry.content, enquiry.channel)
    return any(needle in (value or "").lower() for value in fields)


def _check_status(status: str, field: str) -> None:
    if status not in EnquiryStatus.ALL:
        raise ValidationError(
            f"'{status}' is not one of {', '.join(EnquiryStatus.ALL)}", field
        )


class PendingMove(BaseModel):
    """The enquiry picked up for a move and the column it came from."""
    enquiry_id: str
    from_status: str


class EnquiryBoard:
    """
    In-memory board for one viewer.

    Moves are applied locally first, then persisted through the source.
    Only one move can be pending at a time; a new begin_move replaces it.
    """

    def __init__(
        self,
        source: EnquirySource,
        notifications: Optional[NotificationChannel] = None,
        rollback_on_failure: bool = False
    ):
        self.source = source
        self.notifications = notifications or NotificationChannel()
        self.rollback_on_failure = rollback_on_failure
        self.pending_move: Optional[PendingMove] = None
        self._buckets: Partition = empty_partition()

    @property
    def buckets(self) -> Partition:
        """Snapshot of the columns; mutating it does not affect the board."""
        return {status: list(items) for status, items in self._buckets.items()}

    @property
    def is_empty(self) -> bool:
        return all(len(items) == 0 for items in self._buckets.values())

    async def load(self, scope: BoardScope) -> Partition:
        """
        Fetch the scope's enquiries and partition them by status.
        A failed fetch leaves an empty board and an error notification.
        """
        try:
            enquiries = await self.source.fetch(scope)
        except Exception as e:
            logger.error(f"Loading enquiries for {scope.cache_key} failed: {e}")
            self._buckets = empty_partition()
            self.notifications.error("Error loading enquiries", str(e))
            return self.buckets

        self._buckets = partition_by_status(enquiries)
        logger.info(
            f"Loaded board for {scope.cache_key}: "
            + ", ".join(f"{status}={len(items)}" for status, items in self._buckets.items())
        )
        return self.buckets

    def search(self, query: Optional[str]) -> Partition:
        """Filter every column by a case-insensitive substring match."""
        if not query:
            return self.buckets

        return {
            status: [enquiry for enquiry in items if matches_query(enquiry, query)]
            for status, items in self._buckets.items()
        }

    def begin_move(self, enquiry_id: str, from_status: str) -> None:
        """Remember which enquiry is being moved and from where."""
        _check_status(from_status, "from_status")
        self.pending_move = PendingMove(enquiry_id=enquiry_id, from_status=from_status)

    async def complete_move(self, to_status: str) -> Optional[MoveResult]:
        """
        Drop the pending enquiry onto to_status.

        The columns change before the store is called. On a store failure the
        change stays (or is undone when rollback_on_failure is set) and one
        error notification is published.
        """
        # Marker is consumed before the store call; a later begin_move survives it
        pending, self.pending_move = self.pending_move, None
        _check_status(to_status, "to_status")
        if pending is None:
            return None

        return await self._apply_move(pending, to_status)

    async def move(self, enquiry_id: str, from_status: str, to_status: str) -> Optional[MoveResult]:
        """Move an enquiry between columns in one call."""
        self.begin_move(enquiry_id, from_status)
        return await self.complete_move(to_status)

    def stats(self) -> BoardStats:
        counts = {status: len(items) for status, items in self._buckets.items()}
        return BoardStats(total=sum(counts.values()), **counts)

    async def _apply_move(self, pending: PendingMove, to_status: str) -> MoveResult:
        result = MoveResult(
            enquiry_id=pending.enquiry_id,
            from_status=pending.from_status,
            to_status=to_status
        )
        if to_status == pending.from_status:
            return result

        source_bucket = self._buckets[pending.from_status]
        index = next(
            (i for i, enquiry in enumerate(source_bucket) if enquiry.id == pending.enquiry_id),
            None
        )
        if index is None:
            logger.warning(
                f"Enquiry {pending.enquiry_id} is not in column '{pending.from_status}', ignoring move"
            )
            return result

        # Optimistic update
        enquiry = source_bucket.pop(index)
        enquiry.status = to_status
        self._buckets[to_status].append(enquiry)
        result.moved = True
        logger.info(f"Moved enquiry {enquiry.id} from {pending.from_status} to {to_status}")

        if not self.source.is_live:
            return result

        try:
            await self.source.update_status(enquiry.id, to_status)
        except Exception as e:
            logger.warning(f"Persisting move of enquiry {enquiry.id} failed: {e}")
            result.error = str(e)
            if self.rollback_on_failure:
                self._undo_move(enquiry, pending.from_status, index)
                result.moved = False
                result.rolled_back = True
            self.notifications.error("Error updating enquiry", str(e))
            return result

        result.persisted = True
        self.source.invalidate()
        return result

    def _undo_move(self, enquiry: Enquiry, from_status: str, index: int) -> None:
        self._buckets[enquiry.status] = [
            item for item in self._buckets[enquiry.status] if item is not enquiry
        ]
        enquiry.status = from_status
        self._buckets[from_status].insert(index, enquiry)
        logger.info(f"Rolled back move of enquiry {enquiry.id} to {from_status}")


def build_board(context: BoardContext, source: EnquirySource) -> EnquiryBoard:
    """Board configured from the viewer's context."""
    return EnquiryBoard(source, rollback_on_failure=context.rollback_on_failure)
