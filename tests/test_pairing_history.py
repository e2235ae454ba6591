from itertools import combinations

from courtqueue.models import MatchRecord
from courtqueue.scheduling import PairingIndex, interaction_score, pairing_history
from courtqueue.testing import HistoryPattern, RandomSessionGenerator, RSGConfig


def _match(a, b, c, d):
    return MatchRecord(team_a=(a, b), team_b=(c, d))


FILLER = ("c", "d", "e", "f")


def test_teammates_and_opponents_are_counted_separately():
    matches = [
        _match("a", "b", "c", "d"),
        _match("a", "c", "b", "d"),
        _match("e", "a", "f", "b"),
        _match("c", "d", "e", "f"),
    ]

    assert pairing_history("a", "b", matches) == (1, 2)
    assert pairing_history("b", "a", matches) == (1, 2)
    assert pairing_history("a", "b", matches).teammates == 1


def test_absent_or_self_pairing_counts_nothing():
    matches = [_match("a", "b", "c", "d")]

    assert pairing_history("a", "z", matches) == (0, 0)
    assert pairing_history("a", "a", matches) == (0, 0)
    assert pairing_history("a", "b", []) == (0, 0)


def test_interaction_score_weights_recent_matches_most():
    matches = [_match(*FILLER) for _ in range(12)]
    matches[11] = _match("a", "b", "c", "d")  # latest match
    matches[9] = _match("a", "c", "b", "d")  # 3 matches ago, as opponents
    matches[1] = _match("a", "b", "e", "f")  # outside the window of 10

    assert interaction_score("a", "b", matches) == 20 + 16
    assert interaction_score("a", "b", matches, window=3) == 6 + 2
    assert interaction_score("a", "b", matches[:2]) == 20


def test_interaction_score_ignores_pairs_that_never_met():
    matches = [_match("a", "c", "d", "e"), _match("b", "c", "d", "e")]

    assert interaction_score("a", "b", matches) == 0
    assert interaction_score("a", "a", matches) == 0


def test_index_matches_the_plain_functions():
    session = RandomSessionGenerator(
        RSGConfig(
            num_players=7,
            num_history_matches=25,
            history_pattern=HistoryPattern.RANDOM,
            seed=11,
        )
    ).generate_session()
    index = PairingIndex.from_matches(session.matches, window=10)

    for p1, p2 in combinations([p.id for p in session.participants], 2):
        assert index.pairing(p1, p2) == pairing_history(p1, p2, session.matches)
        assert index.interaction(p1, p2) == interaction_score(
            p1, p2, session.matches, window=10
        )
