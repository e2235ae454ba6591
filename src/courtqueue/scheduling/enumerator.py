"""Candidate enumeration: groups of four and their team splits."""

# Court Queue
# Copyright (C) 2025  Court Queue developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from math import comb
from typing import Iterator, List, Sequence, Tuple, TypeVar

from courtqueue.constants import PLAYERS_PER_MATCH
from courtqueue.models.candidate import Candidate
from courtqueue.models.participant import Participant

T = TypeVar("T")

# Ways to split four players into two teams of two
SPLITS_PER_GROUP = 3


def iter_index_combinations(n: int, k: int) -> Iterator[Tuple[int, ...]]:
    """
    Yield every k-combination of ``range(n)`` in lexicographic order.

    The indices are advanced in place: find the rightmost index that can
    still move, bump it, and reset everything to its right.
    """
    if k < 0 or k > n:
        return
    indices = list(range(k))
    yield tuple(indices)
    while True:
        for i in reversed(range(k)):
            if indices[i] != i + n - k:
                break
        else:
            return
        indices[i] += 1
        for j in range(i + 1, k):
            indices[j] = indices[j - 1] + 1
        yield tuple(indices)


def iter_groups(items: Sequence[T], size: int = PLAYERS_PER_MATCH) -> Iterator[Tuple[T, ...]]:
    """Yield every ``size``-subset of ``items``, keeping the input order inside each."""
    for indices in iter_index_combinations(len(items), size):
        yield tuple(items[i] for i in indices)


def team_splits(group: Sequence[T]) -> List[Tuple[Tuple[T, T], Tuple[T, T]]]:
    """
    The three distinct 2v2 splits of a group of four.

    The first member is paired with each of the other three in turn; the
    remaining two form the other team.
    """
    splits = []
    for partner in range(1, PLAYERS_PER_MATCH):
        others = [group[j] for j in range(1, PLAYERS_PER_MATCH) if j != partner]
        splits.append(((group[0], group[partner]), (others[0], others[1])))
    return splits


def iter_candidates(participants: Sequence[Participant]) -> Iterator[Candidate]:
    """Yield all ``3 * C(n, 4)`` candidates for the given pool, lazily."""
    for group in iter_groups(participants):
        for team_a, team_b in team_splits(group):
            yield Candidate(
                team_a=(team_a[0].id, team_a[1].id),
                team_b=(team_b[0].id, team_b[1].id),
            )


def candidate_count(n: int) -> int:
    """Number of candidates per round for a pool of ``n`` participants."""
    return SPLITS_PER_GROUP * comb(n, PLAYERS_PER_MATCH)
