"""Deliver a breakdown or fire event to a running elevator simulation."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from simulation import ControlDeliveryFailure, ControlEvent
from simulation.control import deliver


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("event", choices=[event.value for event in ControlEvent], help="Control event to send")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--pid", "-p", type=int, help="PID of the running simulation")
    target.add_argument("--name", "-n", help="Process name to look up, e.g. run_simulation.py")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
    event = ControlEvent(args.event)

    try:
        pid = deliver(event, pid=args.pid, process_name=args.name)
    except ControlDeliveryFailure as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    label = event.value.capitalize()
    if args.name:
        print(f"{label} signal sent to {args.name} (PID {pid}).")
    else:
        print(f"{label} signal sent to PID {pid}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
