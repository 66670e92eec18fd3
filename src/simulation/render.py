from __future__ import annotations

from typing import List

from .telemetry import StatusSnapshot

CELL_WIDTH = 10


def render_frame(snapshot: StatusSnapshot, num_floors: int) -> str:
    """Draw the shaft view: ``[XX]`` broken, ``[n]`` cabin heading to n, ``[  ]`` empty."""

    lines: List[str] = []
    for floor in range(num_floors - 1, -1, -1):
        cells = []
        for elevator in snapshot.elevators:
            if elevator.broken:
                cell = "[XX]"
            elif elevator.current_floor == floor:
                target = "" if elevator.target_floor is None else str(elevator.target_floor)
                cell = f"[{target:>2}]"
            else:
                cell = "[  ]"
            cells.append(cell.ljust(CELL_WIDTH))
        lines.append(f"{floor:>3}  " + "".join(cells).rstrip())

    lines.append("")
    lines.append(f"Idle Elevators: {snapshot.idle_count} | Requests in Queue: {snapshot.queue_length}")
    lines.append(
        f"Elevators Out of Service: {snapshot.broken_count} | "
        f"Repair Requested: {'Yes' if snapshot.repair_requested else 'No'} | "
        f"Time to Repair: {snapshot.repair_time}"
    )
    if snapshot.fire_mode:
        lines.append("Fire alarm active: all elevators returning to the ground floor.")
    return "\n".join(lines)
