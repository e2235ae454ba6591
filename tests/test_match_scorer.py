from courtqueue.models import Candidate, MatchRecord, Participant
from courtqueue.scheduling import MatchScorer, ScoringContext, iter_candidates


def _players(n, lifetime=None):
    lifetime = lifetime or {}
    return [Participant(f"P{i}", lifetime_matches_played=lifetime.get(i, 0)) for i in range(1, n + 1)]


def _context(players, matches=(), usage=None):
    usage = usage or {p.id: 0 for p in players}
    return ScoringContext.build(players, usage, list(matches))


def test_fresh_group_scores_bonus_and_lifetime_only():
    players = _players(4, lifetime={1: 1, 2: 2, 3: 3, 4: 4})
    candidate = Candidate(("P1", "P2"), ("P3", "P4"))

    score = MatchScorer().score(candidate, _context(players))

    assert score == -4 * 1_000_000 + 10 * 100


def test_repeat_and_recency_terms():
    players = _players(4)
    history = [MatchRecord(team_a=("P1", "P2"), team_b=("P3", "P4"))]
    candidate = Candidate(("P1", "P2"), ("P3", "P4"))

    breakdown = MatchScorer().breakdown(candidate, _context(players, history))

    assert breakdown.teammate_repeats == 2
    assert breakdown.opponent_repeats == 4
    # all six pairs met in the latest match: (10 - 1 + 1) * 2 each
    assert breakdown.recent_interaction == 6 * 20
    assert breakdown.total == -4_000_000 + 2 * 5_000 + 4 * 3_000 + 120 * 10


def test_usage_terms():
    players = _players(6)
    usage = {"P1": 2, "P2": 1, "P3": 1, "P4": 1, "P5": 1, "P6": 1}
    context = _context(players, usage=usage)

    breakdown = MatchScorer().breakdown(Candidate(("P1", "P2"), ("P3", "P4")), context)

    assert context.min_usage == 1
    assert breakdown.min_usage_members == 3
    assert breakdown.usage_spread == 1
    assert breakdown.total_usage == 5
    assert breakdown.total == -3_000_000 + 100_000 + 50_000


def test_underused_players_outrank_variety():
    players = _players(8)
    usage = {p.id: 1 for p in players[:4]}
    usage.update({p.id: 0 for p in players[4:]})
    # the rested players have played together a lot
    history = [MatchRecord(team_a=("P5", "P6"), team_b=("P7", "P8")) for _ in range(10)]
    context = _context(players, history, usage)
    scorer = MatchScorer()

    rested = scorer.score(Candidate(("P5", "P7"), ("P6", "P8")), context)
    busy = scorer.score(Candidate(("P1", "P2"), ("P3", "P4")), context)

    assert rested < busy


def test_repeated_teammates_are_split_up():
    players = _players(8)
    # P1 and P2 were teammates in 5 of their last 6 matches together
    history = [
        MatchRecord(team_a=("P1", "P2"), team_b=("P5", "P6")),
        MatchRecord(team_a=("P1", "P2"), team_b=("P7", "P8")),
        MatchRecord(team_a=("P1", "P5"), team_b=("P2", "P6")),
        MatchRecord(team_a=("P1", "P2"), team_b=("P5", "P6")),
        MatchRecord(team_a=("P1", "P2"), team_b=("P7", "P8")),
        MatchRecord(team_a=("P1", "P2"), team_b=("P5", "P6")),
    ]
    context = _context(players, history)
    scorer = MatchScorer()

    together = scorer.breakdown(Candidate(("P1", "P2"), ("P3", "P4")), context)
    apart = scorer.breakdown(Candidate(("P1", "P3"), ("P2", "P4")), context)

    assert together.teammate_repeats == 5
    assert apart.teammate_repeats == 0
    assert together.recent_interaction == apart.recent_interaction
    assert together.total > apart.total


def test_best_breaks_ties_on_ids_not_input_order():
    players = _players(5)
    scorer = MatchScorer()

    forward = scorer.best(iter_candidates(players), _context(players))
    backward = scorer.best(iter_candidates(players[::-1]), _context(players))

    assert forward.candidate.canonical_key == (("P1", "P2"), ("P3", "P4"))
    assert backward.candidate.canonical_key == forward.candidate.canonical_key
    assert backward.score == forward.score


def test_best_of_nothing_is_none():
    players = _players(4)
    assert MatchScorer().best([], _context(players)) is None
