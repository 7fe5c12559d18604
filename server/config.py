"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from deal_ranking import RankingConfig

root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)

CANDIDATE_SOURCES = ("supabase", "json")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Candidate source: "supabase" (nearby_deals RPC) | "json" (local file)
    candidate_source: str = "supabase"

    # Supabase (candidate_source=supabase)
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    retrieval_timeout_seconds: float = 10.0

    # candidate_source=json: deals in nearby_deals row shape
    deals_json_path: Optional[Path] = None

    # Optional ranking overrides (RankingConfig.from_dict format)
    ranking_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent
        candidate_source = os.getenv("CANDIDATE_SOURCE", "").strip().lower() or "supabase"

        def _path_env(key: str) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return None
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            candidate_source=candidate_source,
            supabase_url=os.getenv("SUPABASE_URL") or None,
            supabase_anon_key=os.getenv("SUPABASE_ANON_KEY") or None,
            retrieval_timeout_seconds=float(os.getenv("RETRIEVAL_TIMEOUT_SECONDS", "10")),
            deals_json_path=_path_env("DEALS_JSON_PATH"),
            ranking_config_path=_path_env("RANKING_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.candidate_source not in CANDIDATE_SOURCES:
            errors.append(
                f"CANDIDATE_SOURCE must be one of {', '.join(CANDIDATE_SOURCES)}, got {self.candidate_source!r}"
            )
        elif self.candidate_source == "supabase":
            if not self.supabase_url:
                errors.append("SUPABASE_URL is required when CANDIDATE_SOURCE=supabase")
            if not self.supabase_anon_key:
                errors.append("SUPABASE_ANON_KEY is required when CANDIDATE_SOURCE=supabase")
        elif self.deals_json_path is None or not self.deals_json_path.exists():
            errors.append(f"Deals JSON not found: {self.deals_json_path}")

        if self.retrieval_timeout_seconds <= 0:
            errors.append("RETRIEVAL_TIMEOUT_SECONDS must be positive")

        if self.ranking_config_path is not None and not self.ranking_config_path.exists():
            errors.append(f"Ranking config not found: {self.ranking_config_path}")

        return len(errors) == 0, errors

    def load_ranking_config(self) -> RankingConfig:
        """RankingConfig from ranking_config_path, or defaults when unset."""
        if self.ranking_config_path is None:
            return RankingConfig()
        with open(self.ranking_config_path) as f:
            return RankingConfig.from_dict(json.load(f))


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
