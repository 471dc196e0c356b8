# runners/run_snake.py
import logging
import os
import sys

from config import AppConfig
from core.game_loop import GameLoop
from core.interfaces import TerminalUnavailable
from viz.keyboard import make_keyboard
from viz.renderer_ansi import AnsiRenderer

logger = logging.getLogger(__name__)

def configure_logging(cfg: AppConfig) -> None:
    # stdout and stderr belong to the game screen
    logging.basicConfig(
        filename=cfg.log_file or os.devnull,
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )

def main(cfg: AppConfig | None = None) -> int:
    cfg = cfg if cfg is not None else AppConfig.from_env()
    configure_logging(cfg)

    rend = AnsiRenderer(cfg)
    kbd = make_keyboard()
    loop = GameLoop(cfg, kbd, rend, rend.current_size)

    try:
        loop.run()
    except KeyboardInterrupt:
        rend.close()
        logger.info("interrupted")
        return 130
    except TerminalUnavailable as exc:
        rend.close()
        logger.error("cannot start: %s", exc)
        print(f"snake: cannot start: {exc}", file=sys.stderr)
        return 1
    except Exception:
        rend.close()
        logger.exception("game crashed")
        raise
    return 0
