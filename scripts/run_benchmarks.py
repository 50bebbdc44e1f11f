#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
import statistics as stats
import time
from dataclasses import dataclass
from typing import List, Tuple

from tictactoe.board import Board
from tictactoe.evaluator import best_move

POSITIONS = ["_________", "X________", "____X____", "X___O____", "X_O_O__X_"]


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    repeats: int = 3
    prune: bool = True


def main() -> int:
    p = argparse.ArgumentParser(description="Time best_move on sample positions")
    p.add_argument("--repeats", type=int, default=Config.repeats)
    p.add_argument("--no-prune", dest="prune", action="store_false")
    ns = p.parse_args()
    cfg = Config(repeats=ns.repeats, prune=ns.prune)

    print(f"repeats={cfg.repeats} prune={cfg.prune}")
    for raw in POSITIONS:
        board = Board.from_string(raw)
        times: List[float] = []
        mv = -1
        for _ in range(cfg.repeats):
            t0 = time.perf_counter()
            mv = best_move(board, prune=cfg.prune)
            t1 = time.perf_counter()
            times.append(t1 - t0)
        m, h = ci95(times)
        print(f"{raw}: best={mv} mean={m:.4f}s ± {h:.4f}s (95% CI)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
