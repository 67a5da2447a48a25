"""Display-order helpers shared by categories and services"""

import logging
from typing import Any, Literal, Sequence, TypeVar

from ..store import DocumentStore, StoreError, utcnow

logger = logging.getLogger(__name__)

T = TypeVar("T")

Direction = Literal["up", "down"]


def coerce_order(value: Any) -> int:
    """Stored order values are only trusted when they are real integers"""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


def move_item(items: Sequence[T], index: int, direction: Direction) -> list[T]:
    """
    Swap the item at ``index`` with its neighbour.

    Moving the first item up or the last item down returns the sequence
    unchanged. All other items keep their relative order.
    """
    new_index = index - 1 if direction == "up" else index + 1
    result = list(items)
    if not (0 <= index < len(result)) or not (0 <= new_index < len(result)):
        return result
    result[index], result[new_index] = result[new_index], result[index]
    return result


def resequence(store: DocumentStore, collection: str, doc_ids: Sequence[str]) -> int:
    """
    Rewrite ``order`` as the position of each document.

    Each document is its own write. A failure stops the loop and is raised;
    documents already written keep their new order.
    """
    now = utcnow()
    written = 0
    try:
        for position, doc_id in enumerate(doc_ids):
            store.update(collection, doc_id, {"order": position, "updatedAt": now})
            written += 1
    except StoreError:
        logger.error(
            f"❌ Reordering {collection} stopped after {written}/{len(doc_ids)} writes; "
            "order values are now mixed"
        )
        raise
    logger.info(f"✅ Reordered {written} documents in {collection}")
    return written
