"""CLI for running LiftDispatch scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from dispatch import Building, Clock, ElevatorTimings, Event, RealClock, SimulatedClock
from selection import Direction, UnknownStrategyError

DEMO_SCENARIO: Dict = {
    "name": "demo",
    "description": "Two elevators idle at the ground floor of a six-floor building.",
    "num_floors": 6,
    "elevator_ids": [1, 2],
    "strategy": "NearestElevator",
    "actions": [
        {"type": "press", "floor": 1, "direction": "up"},
        {"type": "press", "floor": 5, "direction": "down"},
        {"type": "internal", "elevator_id": 1, "floor": 3},
        {"type": "internal", "elevator_id": 2, "floor": 4},
    ],
}


def build_building(config: Dict, clock: Optional[Clock] = None) -> Building:
    timings = ElevatorTimings(**config.get("timings", {}))
    return Building(
        num_floors=config.get("num_floors", 6),
        elevator_ids=config.get("elevator_ids", [1, 2]),
        strategy_name=config.get("strategy", "NearestElevator"),
        timings=timings,
        clock=clock or SimulatedClock(),
    )


def run_actions(building: Building, actions: List[Dict]) -> List[Dict]:
    log: List[Dict] = []

    def record(event: Event) -> None:
        log.append(event.as_dict())

    building.events.on_event("*", record)
    for action in actions:
        kind = action.get("type")
        if kind == "press":
            building.press_external_button(action["floor"], Direction(action["direction"]))
        elif kind == "internal":
            building.add_internal_request(action["elevator_id"], action["floor"])
        elif kind == "move":
            building.move_elevator(action["elevator_id"], action["floor"])
        else:
            raise ValueError(f"Unknown action type '{kind}'")
    return log


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        help="Path to a JSON scenario configuration file (runs the built-in demo if omitted)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the event log and final state as JSON",
    )
    parser.add_argument(
        "--real-time",
        action="store_true",
        help="Block on the wall clock for travel and door holds instead of simulated time",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every event as it happens")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = json.loads(args.config.read_text()) if args.config else DEMO_SCENARIO
    try:
        building = build_building(config, RealClock() if args.real_time else None)
    except UnknownStrategyError as exc:
        print(f"Selected strategy is not available: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        events = run_actions(building, config.get("actions", []))
    except (KeyError, ValueError) as exc:
        print(f"Scenario action failed: {exc}", file=sys.stderr)
        sys.exit(1)
    results = {
        "scenario": config.get("name", args.config.stem if args.config else "demo"),
        "description": config.get("description"),
        "strategy": building.strategy_name,
        "clock": "real" if args.real_time else "simulated",
        "events": events,
        "final_state": building.snapshot(),
    }
    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print(f"Strategy: {results['strategy']}")
    for event in events:
        details = ", ".join(f"{k}={v}" for k, v in event.items() if k not in ("event", "time"))
        print(f"  t={event['time']:.1f} {event['event']}: {details}")
    print("Final state:")
    for elevator in results["final_state"]["elevators"]:
        print(
            f"  elevator {elevator['id']}: floor {elevator['floor']}, {elevator['direction']}, "
            f"up={elevator['pending_up']} down={elevator['pending_down']}"
        )
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
