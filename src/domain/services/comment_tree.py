"""
Comment tree builder.

Comments are stored flat, each pointing at its parent by id (adjacency list).
build_comment_forest() restores the nested reply structure for one discussion
in two passes: index every comment by id, then link each one to its parent.

The input must already be in creation order (created_at, then id). Roots and
every child list keep that order.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from src.domain.entities.comment import Comment

logger = logging.getLogger(__name__)


@dataclass
class CommentNode:
    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)

    def walk(self) -> Iterator["CommentNode"]:
        """Depth-first, pre-order traversal of this node and its descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass
class CommentForest:
    roots: list[CommentNode] = field(default_factory=list)
    # Comments whose parent could not be resolved and were promoted to roots
    dangling: list[Comment] = field(default_factory=list)

    def __iter__(self) -> Iterator[CommentNode]:
        return iter(self.roots)

    def __len__(self) -> int:
        return len(self.roots)

    def node_count(self) -> int:
        return sum(1 for root in self.roots for _ in root.walk())


def build_comment_forest(comments: Sequence[Comment]) -> CommentForest:
    """
    Assemble a forest of CommentNodes from creation-ordered comments.

    A comment whose parent id is unknown (deleted, foreign discussion, or the
    comment itself) is attached as a root instead of failing the whole read.
    So is the earliest comment of any parent cycle. Such comments are listed in
    ``CommentForest.dangling``.
    """
    nodes: dict[int, CommentNode] = {}
    for comment in comments:
        if comment.id.value in nodes:
            logger.warning(f"Duplicate comment id {comment.id.value} ignored")
            continue
        nodes[comment.id.value] = CommentNode(comment=comment)

    forest = CommentForest()
    for comment_id, node in nodes.items():
        parent_id = node.comment.parent_id
        if parent_id is None:
            forest.roots.append(node)
            continue

        parent = nodes.get(parent_id.value)
        if parent is None or parent_id.value == comment_id:
            logger.warning(
                f"Comment {comment_id} references unknown parent {parent_id.value} "
                f"in discussion {node.comment.discussion_id.value}; attaching as root"
            )
            forest.dangling.append(node.comment)
            forest.roots.append(node)
            continue

        parent.children.append(node)

    _break_cycles(nodes, forest)
    return forest


def _break_cycles(nodes: dict[int, CommentNode], forest: CommentForest) -> None:
    """
    Promote one comment of every parent cycle to a root.

    Comments in a cycle (1 -> 2 -> 1) all have a resolvable parent, so the link
    pass attaches them to each other and none is reachable from a root. The
    earliest created member of each cycle is detached from its parent and
    recorded as dangling; its replies (the rest of the cycle included) follow it.
    """
    reached = {node.comment.id.value for root in forest.roots for node in root.walk()}
    if len(reached) == len(nodes):
        return

    position = {comment_id: index for index, comment_id in enumerate(nodes)}
    for comment_id in nodes:
        if comment_id in reached:
            continue

        # Unreached comments only have unreached ancestors, so the climb ends in a cycle
        path: list[int] = []
        seen: set[int] = set()
        current = comment_id
        while current not in seen:
            path.append(current)
            seen.add(current)
            current = nodes[current].comment.parent_id.value
        cycle = path[path.index(current):]

        head = nodes[min(cycle, key=position.__getitem__)]
        parent = nodes[head.comment.parent_id.value]
        parent.children = [child for child in parent.children if child is not head]
        logger.warning(
            f"Comment {head.comment.id.value} closes a parent cycle {cycle} "
            f"in discussion {head.comment.discussion_id.value}; attaching as root"
        )
        forest.dangling.append(head.comment)
        forest.roots.append(head)
        reached.update(node.comment.id.value for node in head.walk())

    forest.roots.sort(key=lambda node: position[node.comment.id.value])
