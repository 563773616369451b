"""Configuration loader for the responder."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

TRUE_VALUES = {"1", "true", "yes", "on"}


def parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUE_VALUES
    return bool(value)


@dataclass(frozen=True)
class ResponderConfig:
    responses_path: Path
    defaults_path: Path
    encoding: str
    strict_parsing: bool
    random_seed: Optional[int]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResponderConfig":
        seed = data.get("random_seed")
        return cls(
            responses_path=Path(data.get("responses_path", "responses.txt")),
            defaults_path=Path(data.get("defaults_path", "default.txt")),
            encoding=data.get("encoding", "ascii"),
            strict_parsing=parse_flag(data.get("strict_parsing", True)),
            random_seed=int(seed) if seed is not None else None,
        )


ENV_MAP = {
    "responses_path": "RESPONDER_RESPONSES_PATH",
    "defaults_path": "RESPONDER_DEFAULTS_PATH",
    "encoding": "RESPONDER_ENCODING",
    "strict_parsing": "RESPONDER_STRICT_PARSING",
    "random_seed": "RESPONDER_RANDOM_SEED",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        value: Any = os.environ[env_name]
        if key == "strict_parsing":
            value = parse_flag(value)
        elif key == "random_seed":
            value = int(value) if value.strip() else None
        merged[key] = value

    return merged


def load_config(config_path: str | Path = "config/responder.defaults.yml") -> ResponderConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    return ResponderConfig.from_dict(data)
