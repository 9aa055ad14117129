"""
Tagging Harness Configuration

Manages loading from environment variables and default values.
"""

import os
from dataclasses import dataclass, field, asdict

from tech_screen_tagging.domain.constants import (
    DEFAULT_BLACKLIST,
    DEFAULT_TAGGER_MODEL,
    PASS_EXTRA_TAG_THRESHOLD,
)


def _env_bool(key: str, default: bool) -> bool:
    """Convert an environment variable to bool"""
    val = os.environ.get(key)
    if val is None:
        return default
    return val.lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Convert an environment variable to int"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to an integer.")


def _env_float(key: str, default: float) -> float:
    """Convert an environment variable to float"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return float(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to a number.")


def _env_str(key: str, default: str | None) -> str | None:
    """Get an environment variable as a string"""
    return os.environ.get(key, default)


def _env_str_list(key: str, default: list[str]) -> list[str]:
    """Convert an environment variable to a comma-separated list of strings"""
    val = os.environ.get(key)
    if val is None:
        return list(default)
    return [x.strip() for x in val.split(",") if x.strip()]


@dataclass
class EvaluationConfig:
    """Batch evaluation configuration"""
    examples_dir: str = "data/training-screens"
    start_index: int = 0
    run_count: int = 0  # 0 = no limit
    extra_tag_threshold: int = PASS_EXTRA_TAG_THRESHOLD
    timeout_seconds: float = 120
    max_concurrency: int = 1  # 1 = sequential


@dataclass
class TaggerConfig:
    """Tagger selection and behaviour"""
    tagger: str = "stub"  # stub / keyword / llm
    model_name: str = DEFAULT_TAGGER_MODEL
    stub_delay_seconds: float = 2.0
    max_retries: int = 1
    retry_delay_seconds: float = 1.0
    apply_blacklist: bool = True
    blacklist: list[str] = field(default_factory=lambda: list(DEFAULT_BLACKLIST))

    @property
    def active_blacklist(self) -> list[str]:
        return self.blacklist if self.apply_blacklist else []


@dataclass
class CatalogConfig:
    """Technology catalog (question repository) configuration"""
    question_repo_path: str = "repos/question-repo.json"


@dataclass
class LMStudioConfig:
    """LMStudio (OpenAI-compatible local LLM) configuration"""
    base_url: str = "http://localhost:1234/v1"
    api_key: str = "lm-studio"


@dataclass
class VertexAIConfig:
    """Google GenAI (Vertex AI) configuration"""
    project_id: str | None = None
    location: str = "global"


@dataclass
class HarnessConfig:
    """Overall tagging harness configuration"""
    evaluation: EvaluationConfig = field(default_factory=EvaluationConfig)
    tagger: TaggerConfig = field(default_factory=TaggerConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    lmstudio: LMStudioConfig = field(default_factory=LMStudioConfig)
    vertex: VertexAIConfig = field(default_factory=VertexAIConfig)
    log_level: str = "WARNING"

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return {"harness_config": asdict(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "HarnessConfig":
        """Create from dictionary (handles presence/absence of harness_config key)"""
        config_data = data.get("harness_config", data)
        return cls(
            evaluation=EvaluationConfig(**config_data.get("evaluation", {})),
            tagger=TaggerConfig(**config_data.get("tagger", {})),
            catalog=CatalogConfig(**config_data.get("catalog", {})),
            lmstudio=LMStudioConfig(**config_data.get("lmstudio", {})),
            vertex=VertexAIConfig(**config_data.get("vertex", {})),
            log_level=config_data.get("log_level", "WARNING"),
        )


def load_config() -> HarnessConfig:
    """
    Load configuration from environment variables

    Uses default values when environment variables are not set.

    Returns:
        HarnessConfig
    """
    evaluation = EvaluationConfig(
        examples_dir=_env_str("TAGGING_EXAMPLES_DIR", "data/training-screens"),
        start_index=_env_int("TAGGING_START_INDEX", 0),
        run_count=_env_int("TAGGING_RUN_COUNT", 0),
        extra_tag_threshold=_env_int("TAGGING_EXTRA_TAG_THRESHOLD", PASS_EXTRA_TAG_THRESHOLD),
        timeout_seconds=_env_float("TAGGING_TIMEOUT_SECONDS", 120),
        max_concurrency=_env_int("TAGGING_MAX_CONCURRENCY", 1),
    )
    tagger = TaggerConfig(
        tagger=_env_str("TAGGER", "stub"),
        model_name=_env_str("TAGGER_MODEL", DEFAULT_TAGGER_MODEL),
        stub_delay_seconds=_env_float("TAGGER_STUB_DELAY_SECONDS", 2.0),
        max_retries=_env_int("TAGGER_MAX_RETRIES", 1),
        retry_delay_seconds=_env_float("TAGGER_RETRY_DELAY_SECONDS", 1.0),
        apply_blacklist=_env_bool("TAGGER_APPLY_BLACKLIST", True),
        blacklist=_env_str_list("TAGGER_BLACKLIST", DEFAULT_BLACKLIST),
    )
    catalog = CatalogConfig(
        question_repo_path=_env_str("QUESTION_REPO_PATH", "repos/question-repo.json"),
    )
    lmstudio = LMStudioConfig(
        base_url=_env_str("LMSTUDIO_BASE_URL", "http://localhost:1234/v1"),
        api_key=_env_str("LMSTUDIO_API_KEY", "lm-studio"),
    )
    vertex = VertexAIConfig(
        project_id=_env_str("GCP_PROJECT_ID", None),
        location=_env_str("GCP_LOCATION", "global"),
    )
    return HarnessConfig(
        evaluation=evaluation,
        tagger=tagger,
        catalog=catalog,
        lmstudio=lmstudio,
        vertex=vertex,
        log_level=_env_str("TAGGING_LOG_LEVEL", "WARNING"),
    )
