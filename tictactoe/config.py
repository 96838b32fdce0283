# tictactoe/config.py
from dataclasses import dataclass, field
from typing import Optional
import logging
import os
import tomllib  # python >=3.11

from tictactoe.core.search import VARIANT_ALPHABETA, VARIANTS

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

@dataclass
class SearchConfig:
    variant: str = VARIANT_ALPHABETA  # alphabeta | minimax | randomized | random
    seed: Optional[int] = None  # None means a fresh random source each run

@dataclass
class UIConfig:
    engine_name: str = "TicTacToe"
    computer_first: bool = True
    show_score: bool = True

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        # unknown keys are ignored
        for section in ("search", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        cfg.validate()
        return cfg

    def validate(self):
        """Replace unusable values with the defaults, warning about each one."""
        if self.search.variant not in VARIANTS:
            logger.warning("Unknown search variant %r, using %r", self.search.variant, VARIANT_ALPHABETA)
            self.search.variant = VARIANT_ALPHABETA
        level = str(self.log_level).upper()
        if level not in LOG_LEVELS:
            logger.warning("Unknown log level %r, using 'INFO'", self.log_level)
            level = "INFO"
        self.log_level = level

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("TICTACTOE_CONFIG_TOML", "config.toml"))
# allow env override of the variant for quick debugging
override_variant = os.environ.get("TICTACTOE_SEARCH_VARIANT")
if override_variant:
    CONFIG.search.variant = override_variant
    CONFIG.validate()
