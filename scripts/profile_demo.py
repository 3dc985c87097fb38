"""Record a few marks around short sleeps and log them."""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from microtimer import Microtimer, load_app_config
from microtimer.utils import log_mark, setup_logging

logger = logging.getLogger("profile_demo")


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, default=PROJECT_ROOT / "configs" / "defaults.yaml")
    parser.add_argument("--steps", type=_non_negative_int, default=3)
    parser.add_argument("--sleep-ms", type=float, default=15.0)
    parser.add_argument("--precision", type=_non_negative_int, default=None)
    return parser.parse_args(argv)


def run_steps(timer: Microtimer, steps: int, sleep_ms: float) -> float:
    """Mark ``steps`` sleeps, stop the timer and return the total."""

    for step in range(steps):
        time.sleep(sleep_ms / 1000.0)
        timer(f"step {step}", {"sleep_ms": sleep_ms})
    total = timer.stop()

    for key, mark in timer.marks().items():
        log_mark(logger, key, mark)
    if steps > 0:
        logger.info("first to last step: %ss", timer.diff("step 0", f"step {steps - 1}"))
    return total


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    cfg = load_app_config(args.config)
    if args.precision is not None:
        cfg.timer.precision = args.precision
    setup_logging(cfg.logging.level, cfg.logging.rich_tracebacks, timer_level=cfg.logging.timer_level)

    timer = Microtimer.from_config(cfg.timer)
    total = run_steps(timer, args.steps, args.sleep_ms)
    logger.info("Timer %s finished in %ss", timer.name, total)


if __name__ == "__main__":
    main()
