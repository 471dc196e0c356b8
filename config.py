# config.py
import os
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board sizing
    ideal_w: int = 40
    ideal_h: int = 20
    min_w: int = 12
    min_h: int = 8
    h_padding: int = 4          # two leading spaces plus side walls
    v_padding: int = 9          # title(3) + hud(1) + note(1) + borders(2) + controls(1) + slack(1)
    size_floor: int = 5
    note_margin: int = 4

    # gameplay
    start_len: int = 3
    initial_speed_ms: int = 150
    speed_increment_ms: int = 5
    min_speed_ms: int = 50
    seed: Optional[int] = None

    # loop timing
    start_delay_ms: int = 200
    replay_delay_ms: int = 100
    game_over_poll_ms: int = 50

    # render
    render_title: str = "PYTHON SNAKE"

    # logging
    log_file: Optional[str] = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.ideal_w < 1 or self.ideal_h < 1:
            raise ValueError(f"ideal board must be at least 1x1, got {self.ideal_w}x{self.ideal_h}")
        if self.min_w > self.ideal_w or self.min_h > self.ideal_h:
            raise ValueError("minimum board size cannot exceed the ideal size")
        if not 1 <= self.start_len <= 3:
            raise ValueError(f"start_len must be between 1 and 3, got {self.start_len}")
        if self.min_speed_ms > self.initial_speed_ms:
            raise ValueError("min_speed_ms cannot be slower than initial_speed_ms")

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    @classmethod
    def from_env(cls, environ=None) -> "AppConfig":
        """Defaults, overridden by SNAKE_SEED / SNAKE_LOG_FILE / SNAKE_LOG_LEVEL."""
        env = os.environ if environ is None else environ
        overrides = {}
        if env.get("SNAKE_SEED"):
            overrides["seed"] = int(env["SNAKE_SEED"])
        if env.get("SNAKE_LOG_FILE"):
            overrides["log_file"] = env["SNAKE_LOG_FILE"]
        if env.get("SNAKE_LOG_LEVEL"):
            overrides["log_level"] = env["SNAKE_LOG_LEVEL"].upper()
        return cls(**overrides)
