# explicit_tsp/config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml


@dataclass
class ParserConfig:
    encoding: str = "utf-8"
    errors: str = "ignore"
    integer_weights: bool = False

    @classmethod
    def from_dict(cls, cfg: Optional[Dict[str, Any]]) -> "ParserConfig":
        """
        Reads the 'parser' block of a config dict, e.g.
          parser:
            encoding: utf-8
            weights:
              integer: true
        Missing keys keep their defaults.
        """
        cfg = cfg or {}
        if not isinstance(cfg, dict):
            raise ValueError(f"config must be a mapping, got {type(cfg).__name__}")
        p = cfg.get("parser", {}) or {}
        if not isinstance(p, dict):
            raise ValueError("'parser' must be a mapping")
        weights = p.get("weights", {}) or {}
        if not isinstance(weights, dict):
            raise ValueError("'parser.weights' must be a mapping")
        return cls(
            encoding=str(p.get("encoding", cls.encoding)),
            errors=str(p.get("errors", cls.errors)),
            integer_weights=bool(weights.get("integer", cls.integer_weights)),
        )


def load_config(path) -> ParserConfig:
    with open(path, "r", encoding="utf-8") as f:
        return ParserConfig.from_dict(yaml.safe_load(f))
