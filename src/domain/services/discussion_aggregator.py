"""
Discussion aggregator.

Groups comments by their discussion and attaches the comment forest to each
discussion summary, keeping the discussions in the order they were supplied
(storage returns them newest first).
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from src.domain.entities.comment import Comment
from src.domain.entities.discussion import Discussion
from src.domain.services.comment_tree import CommentNode, build_comment_forest

logger = logging.getLogger(__name__)


@dataclass
class DiscussionThread:
    discussion: Discussion
    comments: list[CommentNode] = field(default_factory=list)


@dataclass
class AggregationResult:
    threads: list[DiscussionThread] = field(default_factory=list)
    # Comments pointing at a discussion outside the supplied set
    orphaned: list[Comment] = field(default_factory=list)
    # Comments promoted to roots because their parent was not found
    dangling: list[Comment] = field(default_factory=list)


def build_discussion_thread(
    discussion: Discussion, comments: Sequence[Comment]
) -> tuple[DiscussionThread, list[Comment]]:
    """Build one discussion's forest. Returns the thread and its dangling comments."""
    forest = build_comment_forest(comments)
    return DiscussionThread(discussion=discussion, comments=forest.roots), forest.dangling


def aggregate_discussions(
    discussions: Sequence[Discussion], comments: Iterable[Comment]
) -> AggregationResult:
    """
    Attach a comment forest to every discussion.

    Args:
        discussions: Discussions in display order
        comments: All comments in creation order (may span many discussions)

    Returns:
        AggregationResult with one thread per discussion, in the same order.
        Discussions without comments get an empty forest.
    """
    known_ids = {discussion.id.value for discussion in discussions}
    partitions: dict[int, list[Comment]] = defaultdict(list)
    result = AggregationResult()

    for comment in comments:
        if comment.discussion_id.value not in known_ids:
            result.orphaned.append(comment)
            continue
        partitions[comment.discussion_id.value].append(comment)

    if result.orphaned:
        logger.warning(
            f"{len(result.orphaned)} comment(s) reference unknown discussions and were excluded: "
            f"{[c.id.value for c in result.orphaned]}"
        )

    for discussion in discussions:
        thread, dangling = build_discussion_thread(
            discussion, partitions.get(discussion.id.value, [])
        )
        result.threads.append(thread)
        result.dangling.extend(dangling)

    return result
