"""
Ranking configuration — retrieval, scoring, diversity, and spice parameters.

RankingConfig defaults are defined here. The server may pass a dict
(e.g. from a ranking config JSON file); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, model_validator


class RankingConfig(BaseModel):
    """Configuration for the deal feed ranking pipeline."""

    # -------------------------------------------------------------------------
    # Retrieval
    # -------------------------------------------------------------------------

    # Search radius passed to the geospatial lookup.
    radius_miles: float = 10.0

    # -------------------------------------------------------------------------
    # Relevance
    # relevance = cuisine_score * relevance_cuisine_weight
    #           + distance_score * relevance_distance_weight
    # -------------------------------------------------------------------------

    # Cuisine score when the deal's cuisine is one the user prefers.
    cuisine_match_score: float = 1.0
    # Cuisine score otherwise (including deals with no cuisine).
    cuisine_mismatch_score: float = 0.2
    relevance_cuisine_weight: float = 0.2
    relevance_distance_weight: float = 0.1
    # Distance at which distance_score drops to 0.5.
    distance_half_life_miles: float = 5.0

    # -------------------------------------------------------------------------
    # Quality
    # -------------------------------------------------------------------------

    # Number of buckets the placeholder quality signal maps ids into.
    quality_buckets: int = 10

    # -------------------------------------------------------------------------
    # Recency
    # recency = 0.5 ** (age_hours / recency_half_life_hours)
    # -------------------------------------------------------------------------

    recency_half_life_hours: float = 48.0

    # -------------------------------------------------------------------------
    # Blended Scoring Weights
    # weighted_score = weight_relevance * relevance + weight_quality * quality
    #                + weight_recency * recency
    # Sum is 0.9 and is NOT renormalized.
    # -------------------------------------------------------------------------

    weight_relevance: float = 0.3
    weight_quality: float = 0.4
    weight_recency: float = 0.2

    # -------------------------------------------------------------------------
    # Ranking
    # -------------------------------------------------------------------------

    # Break score ties by ascending deal_id instead of retrieval order.
    tie_break_by_deal_id: bool = False

    # -------------------------------------------------------------------------
    # Restaurant Diversity
    # weighted_score *= diversity_penalty ** (occurrence - 1)
    # -------------------------------------------------------------------------

    diversity_penalty: float = 0.8
    # Re-sort after penalties. Off: penalized list keeps its pre-penalty order.
    diversity_resort: bool = False

    # -------------------------------------------------------------------------
    # Spice (tail-to-window reordering)
    # -------------------------------------------------------------------------

    # Feeds shorter than this are left as is.
    spice_min_length: int = 5
    # Index the lowest-ranked deal is moved to.
    spice_insert_index: int = 3

    @model_validator(mode="after")
    def check_ranges(self):
        weights = {
            "weight_relevance": self.weight_relevance,
            "weight_quality": self.weight_quality,
            "weight_recency": self.weight_recency,
            "relevance_cuisine_weight": self.relevance_cuisine_weight,
            "relevance_distance_weight": self.relevance_distance_weight,
        }
        negative = [name for name, value in weights.items() if value < 0]
        if negative:
            raise ValueError(f"Weights must be non-negative: {', '.join(negative)}")
        if self.distance_half_life_miles <= 0 or self.recency_half_life_hours <= 0:
            raise ValueError("Half-lives must be positive")
        if not 0 < self.diversity_penalty <= 1:
            raise ValueError(f"diversity_penalty must be in (0, 1], got {self.diversity_penalty}")
        if self.quality_buckets < 1:
            raise ValueError("quality_buckets must be at least 1")
        if not 0 <= self.spice_insert_index < self.spice_min_length:
            raise ValueError(
                f"spice_insert_index must be in [0, spice_min_length), got {self.spice_insert_index}"
            )
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RankingConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        for section in ("retrieval", "relevance", "quality", "recency", "ranking"):
            if section in config_dict:
                flat.update(config_dict[section])
        if "blend" in config_dict:
            blend = config_dict["blend"]
            for key in ("relevance", "quality", "recency"):
                if key in blend:
                    flat[f"weight_{key}"] = blend[key]
        if "diversity" in config_dict:
            div = config_dict["diversity"]
            if "penalty" in div:
                flat["diversity_penalty"] = div["penalty"]
            if "resort" in div:
                flat["diversity_resort"] = div["resort"]
        if "spice" in config_dict:
            spice = config_dict["spice"]
            if "min_length" in spice:
                flat["spice_min_length"] = spice["min_length"]
            if "insert_index" in spice:
                flat["spice_insert_index"] = spice["insert_index"]
        # Flat top-level keys win over sections
        flat.update({k: v for k, v in config_dict.items() if not isinstance(v, dict)})
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = RankingConfig()


def resolve_config(config: Optional["RankingConfig"]) -> "RankingConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
