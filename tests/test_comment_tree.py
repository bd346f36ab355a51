from src.domain.services.comment_tree import build_comment_forest
from tests.factories import make_comment


def ids(nodes):
    return [node.comment.id.value for node in nodes]


def shape(nodes):
    return [(node.comment.id.value, shape(node.children)) for node in nodes]


def test_empty_input_gives_empty_forest():
    forest = build_comment_forest([])
    assert forest.roots == []
    assert forest.dangling == []
    assert forest.node_count() == 0


def test_siblings_keep_creation_order():
    comments = [make_comment(1), make_comment(2, parent_id=1), make_comment(3, parent_id=1)]

    forest = build_comment_forest(comments)

    assert shape(forest.roots) == [(1, [(2, []), (3, [])])]


def test_roots_keep_creation_order():
    comments = [make_comment(1), make_comment(2, parent_id=1), make_comment(3)]

    forest = build_comment_forest(comments)

    assert ids(forest.roots) == [1, 3]
    assert ids(forest.roots[0].children) == [2]


def test_deep_chain():
    comments = [make_comment(1)] + [make_comment(i, parent_id=i - 1) for i in range(2, 51)]

    forest = build_comment_forest(comments)

    assert len(forest.roots) == 1
    depth = 0
    node = forest.roots[0]
    while node.children:
        assert len(node.children) == 1
        node = node.children[0]
        depth += 1
    assert depth == 49
    assert forest.node_count() == 50


def test_child_listed_before_parent_is_still_linked():
    # Out-of-order input (e.g. clock skew) still resolves parents by id
    comments = [make_comment(2, parent_id=1, seconds=0), make_comment(1, seconds=1)]

    forest = build_comment_forest(comments)

    assert shape(forest.roots) == [(1, [(2, [])])]
    assert forest.dangling == []


def test_dangling_parent_becomes_root():
    comments = [make_comment(1), make_comment(2, parent_id=99), make_comment(3, parent_id=1)]

    forest = build_comment_forest(comments)

    assert ids(forest.roots) == [1, 2]
    assert [c.id.value for c in forest.dangling] == [2]
    assert forest.node_count() == 3


def test_self_parent_becomes_root():
    forest = build_comment_forest([make_comment(5, parent_id=5)])

    assert ids(forest.roots) == [5]
    assert forest.roots[0].children == []
    assert [c.id.value for c in forest.dangling] == [5]


def test_duplicate_ids_keep_first_occurrence():
    first = make_comment(1, operand=1.0)
    duplicate = make_comment(1, operand=2.0)

    forest = build_comment_forest([first, duplicate])

    assert len(forest.roots) == 1
    assert forest.roots[0].comment is first


def test_build_is_deterministic():
    comments = [
        make_comment(1),
        make_comment(2, parent_id=1),
        make_comment(3),
        make_comment(4, parent_id=2),
        make_comment(5, parent_id=1),
        make_comment(6, parent_id=42),
    ]

    assert shape(build_comment_forest(comments).roots) == shape(
        build_comment_forest(comments).roots
    )


def test_no_comment_is_lost():
    comments = [
        make_comment(1),
        make_comment(2, parent_id=1),
        make_comment(3, parent_id=2),
        make_comment(4),
        make_comment(5, parent_id=4),
        make_comment(6, parent_id=1),
    ]

    forest = build_comment_forest(comments)

    assert forest.node_count() == len(comments)
    walked = sorted(node.comment.id.value for root in forest for node in root.walk())
    assert walked == [1, 2, 3, 4, 5, 6]


def test_walk_is_preorder():
    comments = [
        make_comment(1),
        make_comment(2, parent_id=1),
        make_comment(3, parent_id=2),
        make_comment(4, parent_id=1),
    ]

    forest = build_comment_forest(comments)

    assert [n.comment.id.value for n in forest.roots[0].walk()] == [1, 2, 3, 4]


def test_results_are_not_recomputed():
    comments = [
        make_comment(1, operand=5.0, result=15.0),
        make_comment(2, parent_id=1, operand=3.0, result=12345.0),
    ]

    forest = build_comment_forest(comments)

    assert forest.roots[0].children[0].comment.result == 12345.0


def test_parent_cycle_is_broken_at_earliest_comment():
    comments = [make_comment(1, parent_id=2), make_comment(2, parent_id=1), make_comment(3)]

    forest = build_comment_forest(comments)

    assert shape(forest.roots) == [(1, [(2, [])]), (3, [])]
    assert [c.id.value for c in forest.dangling] == [1]
    assert forest.node_count() == 3


def test_reply_hanging_off_a_cycle_is_kept():
    comments = [
        make_comment(1),
        make_comment(2, parent_id=4),
        make_comment(3, parent_id=2),
        make_comment(4, parent_id=3),
        make_comment(5, parent_id=3),
    ]

    forest = build_comment_forest(comments)

    assert shape(forest.roots) == [(1, []), (2, [(3, [(4, []), (5, [])])])]
    assert [c.id.value for c in forest.dangling] == [2]
    assert forest.node_count() == 5
