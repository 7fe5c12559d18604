"""Sorting, restaurant diversity, and spice."""

import pytest

from deal_ranking import Candidate, RankingConfig, ScoredCandidate, TailToWindowSpice
from deal_ranking.stages.ranking import apply_restaurant_diversity, inject_spice, rank_scored, sort_by_score


def scored(deal_id: str, score: float, restaurant_id=None) -> ScoredCandidate:
    return ScoredCandidate(
        candidate=Candidate(deal_id=deal_id, title=deal_id, restaurant_id=restaurant_id),
        relevance=0.0,
        quality=0.0,
        recency=0.0,
        weighted_score=score,
    )


class TestSort:
    def test_descending(self):
        out = sort_by_score([scored("a", 0.1), scored("b", 0.9), scored("c", 0.5)])
        assert [s.deal_id for s in out] == ["b", "c", "a"]

    def test_ties_keep_retrieval_order(self):
        out = sort_by_score([scored("z", 0.5), scored("a", 0.5), scored("m", 0.5)])
        assert [s.deal_id for s in out] == ["z", "a", "m"]

    def test_ties_by_deal_id_when_configured(self):
        out = sort_by_score([scored("z", 0.5), scored("a", 0.5), scored("q", 0.9)], tie_break_by_deal_id=True)
        assert [s.deal_id for s in out] == ["q", "a", "z"]


class TestRestaurantDiversity:
    def test_compounding_penalty(self):
        ranked = [scored("a", 1.0, "R1"), scored("b", 1.0, "R1"), scored("c", 1.0, "R1")]
        out = apply_restaurant_diversity(ranked)
        assert [s.weighted_score for s in out] == pytest.approx([1.0, 0.8, 0.64])

    def test_in_place_without_resort(self):
        ranked = [scored("a", 0.9, "R1"), scored("b", 0.85, "R1"), scored("c", 0.8, "R2")]
        out = apply_restaurant_diversity(ranked)
        assert out is ranked
        assert [s.deal_id for s in out] == ["a", "b", "c"]
        assert out[1].weighted_score == pytest.approx(0.68)
        assert out[1].weighted_score < out[2].weighted_score

    def test_missing_restaurant_not_counted(self):
        ranked = [scored("a", 1.0), scored("b", 1.0), scored("c", 1.0, "R1")]
        out = apply_restaurant_diversity(ranked)
        assert [s.weighted_score for s in out] == [1.0, 1.0, 1.0]

    def test_independent_restaurants(self):
        ranked = [scored("a", 1.0, "R1"), scored("b", 1.0, "R2"), scored("c", 1.0, "R1"), scored("d", 1.0, "R2")]
        out = apply_restaurant_diversity(ranked)
        assert [s.weighted_score for s in out] == pytest.approx([1.0, 1.0, 0.8, 0.8])

    def test_rank_scored_resort_flag(self):
        items = [scored("a", 0.9, "R1"), scored("b", 0.85, "R1"), scored("c", 0.8, "R2")]
        out = rank_scored(items, RankingConfig(diversity_resort=True))
        assert [s.deal_id for s in out] == ["a", "c", "b"]

    def test_rank_scored_default_keeps_penalized_order(self):
        items = [scored("c", 0.8, "R2"), scored("b", 0.85, "R1"), scored("a", 0.9, "R1")]
        out = rank_scored(items)
        assert [s.deal_id for s in out] == ["a", "b", "c"]


class TestSpice:
    def test_tail_moves_to_index_three(self):
        assert inject_spice(list("ABCDE")) == ["A", "B", "C", "E", "D"]

    def test_longer_list(self):
        assert inject_spice(list("ABCDEFG")) == ["A", "B", "C", "G", "D", "E", "F"]

    def test_short_lists_unchanged(self):
        for n in range(5):
            items = list("ABCD")[:n]
            assert inject_spice(list(items)) == items

    def test_runs_once_per_call(self):
        policy = TailToWindowSpice()
        assert policy(list("ABCDE")) == ["A", "B", "C", "E", "D"]

    def test_invalid_index(self):
        with pytest.raises(ValueError):
            TailToWindowSpice(min_length=3, insert_index=3)
