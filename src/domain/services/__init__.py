"""
DOMAIN SERVICES - Pure logic over entities (no I/O)

- calculator.py             → evaluate(): one arithmetic step
- comment_tree.py           → build_comment_forest(): flat comments → nested forest
- discussion_aggregator.py  → aggregate_discussions(): attach a forest to each discussion
"""

from src.domain.services.calculator import evaluate
from src.domain.services.comment_tree import (
    CommentForest,
    CommentNode,
    build_comment_forest,
)
from src.domain.services.discussion_aggregator import (
    AggregationResult,
    DiscussionThread,
    aggregate_discussions,
    build_discussion_thread,
)

__all__ = [
    "evaluate",
    "CommentForest",
    "CommentNode",
    "build_comment_forest",
    "AggregationResult",
    "DiscussionThread",
    "aggregate_discussions",
    "build_discussion_thread",
]
