"""CLI for running the elevator fleet simulation in a terminal.

Send SIGUSR1 (breakdown) or SIGUSR2 (fire) to the printed PID, or use
``send_control.py``, to inject failures while it runs.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from simulation import ConfigError, Simulation, SimulationConfig, SinkUnavailable, StatusSnapshot, announce
from simulation.control import install_signal_handlers
from simulation.render import render_frame

CLEAR_SCREEN = "\033[2J\033[H"


def build_config(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        num_floors=args.floors,
        num_requests=args.numreq,
        interval=args.interval,
        tick_interval=0.0 if args.headless else args.tick,
        repair_flag_policy=args.repair_flag,
        random_seed=args.seed,
    ).validate()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--numreq", "-r", type=int, default=1000, help="Total requests to generate")
    parser.add_argument(
        "--interval", "-i", type=int, default=2, help="A request arrives with probability 1/interval per tick"
    )
    parser.add_argument("--floors", "-f", type=int, default=10, help="Number of floors in the building")
    parser.add_argument("--tick", type=float, default=0.5, help="Seconds between ticks")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible runs")
    parser.add_argument(
        "--repair-flag",
        choices=["legacy", "any_broken"],
        default="legacy",
        help="How the fleet-wide repair flag is cleared",
    )
    parser.add_argument("--headless", action="store_true", help="No pacing and no shaft rendering")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = build_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(announce().to_json(), flush=True)

    simulation = Simulation(config)
    if not args.headless:

        def draw(snapshot: StatusSnapshot) -> None:
            try:
                print(CLEAR_SCREEN + render_frame(snapshot, config.num_floors), flush=True)
            except OSError as exc:
                raise SinkUnavailable(f"terminal output failed: {exc}") from exc

        simulation.on_event("status", draw)

    restore = install_signal_handlers(simulation.channel)
    try:
        ticks = simulation.run()
    finally:
        restore()

    final = simulation.snapshot()
    reason = "fire response" if final.fire_mode else "completion of all requests"
    print(f"Simulation ended due to {reason} after {ticks} ticks.")
    print(f"Requests generated: {final.active_requests} (dropped: {final.dropped_requests})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
