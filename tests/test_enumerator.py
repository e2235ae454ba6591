from collections import Counter
from itertools import combinations

import pytest

from courtqueue.models import Participant
from courtqueue.scheduling import candidate_count, iter_candidates, iter_groups, team_splits
from courtqueue.scheduling.enumerator import iter_index_combinations


@pytest.mark.parametrize("n", range(0, 9))
def test_index_combinations_follow_lexicographic_order(n):
    assert list(iter_index_combinations(n, 4)) == list(combinations(range(n), 4))


def test_index_combinations_edge_sizes():
    assert list(iter_index_combinations(3, 0)) == [()]
    assert list(iter_index_combinations(3, 5)) == []


def test_groups_keep_input_order():
    assert list(iter_groups("abcde")) == [
        ("a", "b", "c", "d"),
        ("a", "b", "c", "e"),
        ("a", "b", "d", "e"),
        ("a", "c", "d", "e"),
        ("b", "c", "d", "e"),
    ]


def test_three_splits_pair_first_member_with_each_other_member():
    assert team_splits(("a", "b", "c", "d")) == [
        (("a", "b"), ("c", "d")),
        (("a", "c"), ("b", "d")),
        (("a", "d"), ("b", "c")),
    ]


def test_candidates_cover_every_split_once():
    players = [Participant(f"P{i}") for i in range(1, 7)]
    candidates = list(iter_candidates(players))

    assert len(candidates) == candidate_count(6) == 45
    assert len({c.canonical_key for c in candidates}) == 45
    groups = Counter(c.group_key for c in candidates)
    assert len(groups) == 15
    assert set(groups.values()) == {3}


def test_candidate_count_small_pools():
    assert candidate_count(3) == 0
    assert candidate_count(4) == 3
    assert candidate_count(8) == 210
