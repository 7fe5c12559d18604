"""Per-candidate signals: relevance, quality, recency, and the weighted blend."""

import asyncio
from datetime import timedelta

import pytest

from deal_ranking import Candidate, IdBucketQualityProvider, RankingConfig
from deal_ranking.stages.ranking import build_scored_candidate, combine_scores, score_candidates, score_candidates_async
from deal_ranking.stages.ranking.recency import recency_score
from deal_ranking.stages.ranking.relevance import cuisine_score, distance_score, relevance_score
from deal_ranking.utils import half_life_decay, hours_since

from .conftest import NOW, PREFERRED


class TestRelevance:
    def test_distance_decay_anchor_points(self):
        assert distance_score(0.0) == 1.0
        assert distance_score(5.0) == pytest.approx(0.5)
        assert distance_score(10.0) == pytest.approx(0.25)

    def test_distance_decay_is_monotonic(self):
        distances = [0.0, 0.1, 1.0, 2.5, 5.0, 7.5, 10.0, 25.0]
        scores = [distance_score(d) for d in distances]
        assert all(a >= b for a, b in zip(scores, scores[1:]))

    def test_missing_distance_scores_zero(self):
        assert distance_score(None) == 0.0

    def test_cuisine_match(self):
        assert cuisine_score("cuisine-id-mexican", PREFERRED) == 1.0
        assert cuisine_score("cuisine-id-thai", PREFERRED) == 0.2
        assert cuisine_score(None, PREFERRED) == 0.2

    def test_relevance_constants(self):
        near_match = Candidate(deal_id="d", title="t", cuisine_id="cuisine-id-italian", distance_miles=0.0)
        far_other = Candidate(deal_id="d", title="t", cuisine_id="cuisine-id-thai", distance_miles=10.0)
        no_data = Candidate(deal_id="d", title="t")
        assert relevance_score(near_match, PREFERRED) == pytest.approx(0.3)
        assert relevance_score(far_other, PREFERRED) == pytest.approx(0.04 + 0.025)
        assert relevance_score(no_data, PREFERRED) == pytest.approx(0.04)


class TestRecency:
    def test_created_now_is_one(self):
        c = Candidate(deal_id="d", title="t", created_at=NOW)
        assert recency_score(c, now=NOW) == pytest.approx(1.0, abs=1e-6)

    def test_one_half_life(self):
        c = Candidate(deal_id="d", title="t", created_at=NOW - timedelta(hours=48))
        assert recency_score(c, now=NOW) == pytest.approx(0.5, abs=1e-6)

    def test_missing_created_at_is_zero(self):
        assert recency_score(Candidate(deal_id="d", title="t"), now=NOW) == 0.0

    def test_future_created_at_clamps_to_one(self):
        c = Candidate(deal_id="d", title="t", created_at=NOW + timedelta(hours=5))
        assert recency_score(c, now=NOW) == 1.0

    def test_configurable_half_life(self):
        config = RankingConfig(recency_half_life_hours=24)
        c = Candidate(deal_id="d", title="t", created_at=NOW - timedelta(hours=48))
        assert recency_score(c, config, now=NOW) == pytest.approx(0.25)

    def test_hours_since(self):
        assert hours_since(None, NOW) is None
        assert hours_since(NOW - timedelta(minutes=90), NOW) == pytest.approx(1.5)
        assert half_life_decay(0, 48) == 1.0


class TestQuality:
    def test_id_bucket_values(self):
        q = IdBucketQualityProvider()
        # ord("a") = 97, ord("c") = 99, ord("d") = 100
        assert q.score(Candidate(deal_id="a-1", title="t")) == pytest.approx(0.7)
        assert q.score(Candidate(deal_id="c-1", title="t")) == pytest.approx(0.9)
        assert q.score(Candidate(deal_id="d-1", title="t")) == 0.0

    def test_astral_ids_use_first_utf16_unit(self):
        q = IdBucketQualityProvider()
        # U+1F600 encodes as surrogate pair D83D DE00; 0xD83D = 55357
        assert q.score(Candidate(deal_id="\U0001F600x", title="t")) == pytest.approx(0.7)

    def test_range_and_determinism(self):
        q = IdBucketQualityProvider()
        for deal_id in ["0", "Z", "reported", "7f3c", "é-deal"]:
            c = Candidate(deal_id=deal_id, title="t")
            assert 0.0 <= q.score(c) < 1.0
            assert q.score(c) == q.score(c)

    def test_async_matches_sync(self):
        q = IdBucketQualityProvider()
        c = Candidate(deal_id="b-1", title="t")
        assert asyncio.run(q.score_async(c)) == q.score(c)

    def test_invalid_bucket_count(self):
        with pytest.raises(ValueError):
            IdBucketQualityProvider(0)


class TestWeightedCombiner:
    def test_all_ones_is_point_nine(self):
        # 0.3 + 0.4 + 0.2 is 0.8999999999999999 in binary floating point; approx is intentional
        assert combine_scores(1.0, 1.0, 1.0) == pytest.approx(0.9)

    def test_weights(self):
        assert combine_scores(1.0, 0.0, 0.0) == pytest.approx(0.3)
        assert combine_scores(0.0, 1.0, 0.0) == pytest.approx(0.4)
        assert combine_scores(0.0, 0.0, 1.0) == pytest.approx(0.2)

    def test_build_scored_candidate(self, user_context):
        c = Candidate(
            deal_id="c-taco", title="t", cuisine_id="cuisine-id-mexican",
            distance_miles=0.0, created_at=NOW,
        )
        s = build_scored_candidate(c, 0.9, user_context, now=NOW)
        assert s.relevance == pytest.approx(0.3)
        assert s.quality == 0.9
        assert s.recency == pytest.approx(1.0)
        assert s.weighted_score == pytest.approx(0.09 + 0.36 + 0.2)


class TestScoringFanOut:
    def test_async_preserves_order_and_values(self, user_context):
        candidates = [
            Candidate(deal_id=d, title=d, distance_miles=float(i), created_at=NOW)
            for i, d in enumerate(["x", "b", "m", "a"])
        ]
        q = IdBucketQualityProvider()
        sync = score_candidates(candidates, user_context, q, now=NOW)
        concurrent = asyncio.run(score_candidates_async(candidates, user_context, q, now=NOW))
        assert [s.deal_id for s in concurrent] == ["x", "b", "m", "a"]
        assert [s.weighted_score for s in concurrent] == [s.weighted_score for s in sync]
