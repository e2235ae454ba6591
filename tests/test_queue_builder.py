from math import comb

import pytest

from courtqueue.exceptions import (
    DuplicateParticipantException,
    TooManyParticipantsException,
)
from courtqueue.models import Candidate, MatchRecord, Participant, QueueConfig
from courtqueue.scheduling import BuilderState, QueueBuilder, UsageCounter, generate_queue
from courtqueue.scheduling.queue_builder import passes_fairness_filter
from courtqueue.testing import HistoryPattern, RandomSessionGenerator, RSGConfig


def _players(n):
    return [Participant(f"P{i}", name=f"Player {i}") for i in range(1, n + 1)]


def _assert_distinct(queue):
    for match in queue:
        assert len(set(match.participant_ids)) == 4
        assert not set(match.team_a) & set(match.team_b)


def test_three_players_get_no_queue():
    result = QueueBuilder().build(_players(3))

    assert result.matches == []
    assert result.rounds == []
    assert result.state is BuilderState.IDLE
    assert generate_queue(_players(3)) == []
    assert generate_queue([]) == []


def test_four_players_exhaust_after_one_match():
    result = QueueBuilder(QueueConfig(max_queue_rounds=3)).build(_players(4))

    assert len(result.matches) == 1
    assert result.state is BuilderState.EXHAUSTED
    assert result.is_partial
    assert result.rounds[-1].winner is None
    assert result.rounds[-1].usage == result.rounds[0].usage
    assert result.usage == {"P1": 1, "P2": 1, "P3": 1, "P4": 1}


def test_five_players_rest_player_returns_next_round():
    result = QueueBuilder().build(_players(5))

    first, second = result.matches[0], result.matches[1]
    assert first.group_key == ("P1", "P2", "P3", "P4")
    assert "P5" in second.participant_ids
    assert len(result.matches) == 3
    assert result.state is BuilderState.COMMITTED
    assert max(result.usage.values()) - min(result.usage.values()) <= 1


def test_fairness_filter_limits_second_round():
    result = QueueBuilder(QueueConfig(max_queue_rounds=2)).build(_players(8))
    first_round, second_round = result.rounds

    assert first_round.fairness_filter_applied
    assert first_round.candidates_scored == 210
    # P5-P8 sit at the minimum: groups with at least three of them survive
    assert second_round.fairness_filter_applied
    assert second_round.candidates_considered == 210
    assert second_round.candidates_scored == 3 * (1 + 4 * 4)
    assert set(result.matches[1].participant_ids) == {"P5", "P6", "P7", "P8"}


def test_fairness_filter_rule():
    at_minimum = {"a", "b", "c", "d"}

    assert passes_fairness_filter(Candidate(("a", "b"), ("c", "x")), at_minimum)
    assert not passes_fairness_filter(Candidate(("a", "b"), ("x", "y")), at_minimum)
    # fewer than four at the minimum: no hard filter
    assert passes_fairness_filter(Candidate(("a", "x"), ("y", "z")), {"a", "b", "c"})


def test_frequent_teammates_are_kept_apart():
    history = [
        MatchRecord(team_a=("P1", "P2"), team_b=("P3", "P4")),
        MatchRecord(team_a=("P1", "P2"), team_b=("P5", "P6")),
        MatchRecord(team_a=("P1", "P2"), team_b=("P7", "P8")),
        MatchRecord(team_a=("P1", "P2"), team_b=("P3", "P5")),
        MatchRecord(team_a=("P1", "P2"), team_b=("P4", "P6")),
    ]

    queue = generate_queue(_players(8), history, max_queue_rounds=3)

    assert len(queue) == 3
    for match in queue:
        assert {"P1", "P2"} != set(match.team_a)
        assert {"P1", "P2"} != set(match.team_b)


def test_output_is_deterministic_and_order_independent():
    session = RandomSessionGenerator(
        RSGConfig(num_players=9, num_history_matches=15, seed=5)
    ).generate_session()
    builder = QueueBuilder()

    first = builder.build(session.participants, session.matches)
    again = builder.build(session.participants, session.matches)
    reversed_pool = builder.build(session.participants[::-1], session.matches)

    assert first.to_dict() == again.to_dict()
    assert [m.canonical_key for m in reversed_pool.matches] == [
        m.canonical_key for m in first.matches
    ]


@pytest.mark.parametrize("seed", range(8))
@pytest.mark.parametrize("num_players", [5, 6, 7, 9, 12])
def test_random_sessions_keep_queue_invariants(seed, num_players):
    session = RandomSessionGenerator(
        RSGConfig(
            num_players=num_players,
            num_history_matches=10,
            history_pattern=HistoryPattern.RANDOM,
            seed=seed,
        )
    ).generate_session()
    config = QueueConfig(max_queue_rounds=3)

    result = QueueBuilder(config).build(session.participants, session.matches)

    assert len(result.matches) <= config.max_queue_rounds
    _assert_distinct(result.matches)
    if len(result.matches) == config.max_queue_rounds:
        assert max(result.usage.values()) - min(result.usage.values()) <= 1


def test_usage_counter_only_grows():
    usage = UsageCounter(["a", "b", "c"])
    seen = [usage.snapshot()]

    usage.increment(["a", "b"])
    seen.append(usage.snapshot())
    usage.increment(["c"])
    seen.append(usage.snapshot())

    for before, after in zip(seen, seen[1:]):
        assert all(after[pid] >= before[pid] for pid in before)
    assert usage.minimum == 1
    assert usage.spread == 0
    assert usage.at_minimum() == {"a", "b", "c"}


def test_contract_violations_are_rejected():
    players = _players(5) + [Participant("P1")]
    with pytest.raises(DuplicateParticipantException):
        QueueBuilder().build(players)
    with pytest.raises(DuplicateParticipantException):
        QueueBuilder().build([Participant(i) for i in (1, 2, 3, 1)])

    with pytest.raises(TooManyParticipantsException):
        QueueBuilder(QueueConfig(max_participants=6)).build(_players(7))


def test_queue_never_exceeds_round_limit():
    queue = generate_queue(_players(10), max_queue_rounds=5)

    assert len(queue) == 5
    _assert_distinct(queue)


@pytest.mark.parametrize("num_players", [5, 6, 7, 8])
def test_long_queues_keep_usage_balanced(num_players):
    rounds = comb(num_players, 4)

    result = QueueBuilder(QueueConfig(max_queue_rounds=rounds)).build(
        _players(num_players)
    )

    assert len(result.matches) == rounds
    assert result.state is BuilderState.COMMITTED
    for outcome in result.rounds:
        assert max(outcome.usage.values()) - min(outcome.usage.values()) <= 1


def test_usage_never_decreases_between_rounds():
    session = RandomSessionGenerator(
        RSGConfig(num_players=9, num_history_matches=12, seed=4)
    ).generate_session()

    result = QueueBuilder(QueueConfig(max_queue_rounds=8)).build(
        session.participants, session.matches
    )

    previous = {p.id: 0 for p in session.participants}
    for outcome in result.rounds:
        assert all(outcome.usage[pid] >= previous[pid] for pid in previous)
        assert sum(outcome.usage.values()) == sum(previous.values()) + 4
        previous = outcome.usage
    assert previous == result.usage


def test_integer_ids_are_matched_against_history():
    players = [Participant(i) for i in range(1, 9)]
    history = [MatchRecord(team_a=(1, 2), team_b=(3, 4)) for _ in range(5)]

    queue = generate_queue(players, history, max_queue_rounds=3)

    assert len(queue) == 3
    for match in queue:
        assert all(isinstance(pid, str) for pid in match.participant_ids)
        assert {"1", "2"} != set(match.team_a)
        assert {"1", "2"} != set(match.team_b)
