"""
Row-to-entity mapping for list reads.

Stored rows are re-validated when they become domain entities. On list reads a
row that no longer validates (an operation token outside the enumeration, a
non-positive id, a non-finite number) is skipped, logged and counted, so one
bad row does not take down the whole listing.
"""

import logging
from typing import Callable, Iterable, TypeVar

from src.domain.exceptions import DomainValidationError
from src.observability.metrics import TreeAnomalyKind, increment_tree_anomaly

logger = logging.getLogger(__name__)

R = TypeVar("R")
E = TypeVar("E")


def map_records(records: Iterable[R], to_entity: Callable[[R], E], kind: str) -> list[E]:
    """
    Map records with ``to_entity``, dropping the ones that fail validation.

    Args:
        records: Storage rows in the order they should be returned
        to_entity: Mapper that raises DomainValidationError or ValueError on bad data
        kind: Record kind for the log line ("comment", "discussion")
    """
    entities: list[E] = []
    for record in records:
        try:
            entities.append(to_entity(record))
        except (DomainValidationError, ValueError) as e:
            logger.warning(
                f"Skipping malformed {kind} record {getattr(record, 'id', '?')}: {e}"
            )
            increment_tree_anomaly(TreeAnomalyKind.MALFORMED_RECORD)
    return entities
