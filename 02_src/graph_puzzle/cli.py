"""CLI entrypoint helpers for solving a puzzle file."""

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import SolverSettings, load_settings
from .phases import ConfigurationPhase, PuzzleIngestionPhase, ReportPhase, SolvePhase
from .pipeline import PipelinePhase, PipelineRunner

EXIT_CODES = {"solved": 0, "unreachable": 1, "aborted": 1, "invalid": 2}
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_default_phases() -> List[PipelinePhase]:
    return [
        PuzzleIngestionPhase(),
        ConfigurationPhase(),
        SolvePhase(),
        ReportPhase(),
    ]


def run_pipeline(input_path: str = "", settings: Optional[SolverSettings] = None) -> Dict[str, Any]:
    settings = settings or load_settings()
    initial_context: Dict[str, Any] = {
        "input_path": input_path,
        "settings": settings,
    }
    runner = PipelineRunner(phases=build_default_phases())
    final_context = runner.run(initial_context)

    orchestrator = final_context.get("orchestrator")
    artifact: Dict[str, Any] = {
        "puzzle": orchestrator.to_json() if orchestrator is not None else final_context.get("puzzle_document"),
        "report": final_context.get("report", {}),
    }
    artifact["meta"] = {
        "input_path": input_path,
        "configuration_report": final_context.get("configuration_report", {}),
        "settings": {
            "iteration_cap": settings.iteration_cap,
            "add_self_loops": settings.add_self_loops,
            "default_modulus": settings.default_modulus,
        },
    }
    return artifact


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find the shortest sequence of node increments that solves a graph puzzle."
    )
    parser.add_argument(
        "--input-path",
        default="",
        help="Puzzle JSON with node_count, modulus, edges, initial and goal. Uses a sample if omitted.",
    )
    parser.add_argument(
        "--output-path",
        default="",
        help="Optional path to save the solution artifact JSON.",
    )
    cap_group = parser.add_mutually_exclusive_group()
    cap_group.add_argument(
        "--max-iterations",
        type=_non_negative_int,
        default=None,
        help="Stop the search after this many explored states (0 means no cap).",
    )
    cap_group.add_argument(
        "--unbounded",
        action="store_true",
        help="Search the whole state space without an iteration cap.",
    )
    parser.add_argument(
        "--self-loops",
        dest="self_loops",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add a self-loop to every node that lacks one before solving.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level, e.g. DEBUG or INFO.",
    )
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> SolverSettings:
    settings = load_settings().with_overrides(
        iteration_cap=args.max_iterations,
        add_self_loops=args.self_loops,
        log_level=args.log_level,
    )
    if args.unbounded or settings.iteration_cap == 0:
        settings = replace(settings, iteration_cap=None)
    return settings


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    settings = resolve_settings(args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    artifact = run_pipeline(input_path=args.input_path, settings=settings)
    report = artifact["report"]
    for line in report.get("lines", []):
        print(line)

    if args.output_path:
        output_path = Path(args.output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(artifact, ensure_ascii=False, indent=2), encoding="utf-8")
        print(f"Solution artifact saved to: {output_path.resolve()}")
    return EXIT_CODES.get(report.get("status", "invalid"), 2)


if __name__ == "__main__":
    raise SystemExit(main())
