import os
from pydantic_settings import BaseSettings


def _parse_list_env(name: str) -> list[str] | None:
    """Parse a list env var given as a comma-separated string or JSON list."""
    raw = os.environ.get(name)
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:9002",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Bearer tokens accepted by the HTTP layer. Empty: any bearer token is a caller.
    api_tokens: list[str] = []
    rate_limit: str = "30/minute"

    # Embedding store: JSON file path, or in-memory when empty
    embedding_store_path: str = ""
    embedding_model: str = "TechWolf/JobBERT-v2"

    match_concurrency: int = 8  # max concurrent candidate fetches per request
    max_job_description_chars: int = 10000

    # Overall score weights (must sum to 1.0)
    weight_skills: float = 0.4
    weight_experience: float = 0.25
    weight_education: float = 0.15
    weight_semantic: float = 0.2

    # Skills score weights
    weight_required_skills: float = 0.7
    weight_preferred_skills: float = 0.3

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "protected_namespaces": ("settings_",)}


_overrides = {
    key: value
    for key, value in (
        ("cors_origins", _parse_list_env("CORS_ORIGINS")),
        ("api_tokens", _parse_list_env("API_TOKENS")),
    )
    if value
}
settings = Settings(**_overrides)
