"""CLI entrypoint for placement searches and headless games.

This module owns argument parsing and mode dispatch. Domain logic lives in:

- ``grid_collector.config``     – constants and configuration dataclasses
- ``grid_collector.placement``  – random and annealing placement
- ``grid_collector.session``    – headless live play
- ``grid_collector.io``         – Parquet/JSON run artifacts
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from random import Random

from grid_collector.config.types import (
    AnnealingConfig,
    GameConfig,
    PlacementKind,
    SelectorKind,
)
from grid_collector.domain.map_state import MapState
from grid_collector.engine.move_engine import MoveEngine
from grid_collector.io.persistence import (
    write_annealing_log,
    write_game_log,
    write_game_summary,
    write_placement,
)
from grid_collector.placement import PlacementOptimizer, create_placement
from grid_collector.selectors import create_selector
from grid_collector.session import GameSession

MODES = ("place", "play")
"""``place`` runs the annealing search; ``play`` places and plays one game."""

# Manual play needs a device-backed input provider, which the CLI lacks.
CLI_SELECTOR_KINDS = tuple(kind for kind in SelectorKind if kind is not SelectorKind.MANUAL)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_selector_kind(raw_selector: str) -> SelectorKind:
    """Parse selector kind from CLI/config."""
    try:
        kind = SelectorKind(raw_selector)
    except ValueError as exc:
        valid = ", ".join(kind.value for kind in CLI_SELECTOR_KINDS)
        raise ValueError(f"selector must be one of {valid}") from exc
    if kind not in CLI_SELECTOR_KINDS:
        raise ValueError("manual selector is not available from the CLI")
    return kind


def _parse_placement_kind(raw_placement: str) -> PlacementKind:
    """Parse placement kind from CLI/config."""
    try:
        return PlacementKind(raw_placement)
    except ValueError as exc:
        valid = ", ".join(kind.value for kind in PlacementKind)
        raise ValueError(f"placement must be one of {valid}") from exc


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        return float(raw)
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object], default: float
) -> float:
    return _coerce_float(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Search start positions and play grid games")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--mode", type=str, choices=MODES, default=None)
    parser.add_argument("--columns", type=int, default=None)
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--end-turn", type=int, default=None)
    parser.add_argument("--characters", type=int, default=None)
    parser.add_argument("--min-point", type=int, default=None)
    parser.add_argument("--max-point", type=int, default=None)
    parser.add_argument("--repeat", type=int, default=None)
    parser.add_argument("--cooling-horizon", type=int, default=None)
    parser.add_argument("--start-temp", type=float, default=None)
    parser.add_argument("--end-temp", type=float, default=None)
    parser.add_argument(
        "--placement",
        type=str,
        choices=[kind.value for kind in PlacementKind],
        default=None,
    )
    parser.add_argument(
        "--selector",
        type=str,
        choices=[kind.value for kind in CLI_SELECTOR_KINDS],
        default=None,
    )
    parser.add_argument("--map-seed", type=int, default=None)
    parser.add_argument("--search-seed", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Supports ``--config path/to/config.json`` for reproducible runs. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    defaults = GameConfig()
    annealing_defaults = AnnealingConfig()
    try:
        mode = _get_str(args.mode, "mode", file_cfg, "place")
        if mode not in MODES:
            raise ValueError(f"mode must be one of {', '.join(MODES)}")
        log_level = _get_str(args.log_level, "log_level", file_cfg, "WARNING")
        config = GameConfig(
            columns=_get_int(args.columns, "columns", file_cfg, defaults.columns),
            rows=_get_int(args.rows, "rows", file_cfg, defaults.rows),
            end_turn=_get_int(args.end_turn, "end_turn", file_cfg, defaults.end_turn),
            num_characters=_get_int(
                args.characters, "characters", file_cfg, defaults.num_characters
            ),
            min_point=_get_int(args.min_point, "min_point", file_cfg, defaults.min_point),
            max_point=_get_int(args.max_point, "max_point", file_cfg, defaults.max_point),
        )
        annealing = AnnealingConfig(
            repeat=_get_int(args.repeat, "repeat", file_cfg, annealing_defaults.repeat),
            cooling_horizon=_get_int(
                args.cooling_horizon,
                "cooling_horizon",
                file_cfg,
                annealing_defaults.cooling_horizon,
            ),
            start_temp=_get_float(
                args.start_temp, "start_temp", file_cfg, annealing_defaults.start_temp
            ),
            end_temp=_get_float(args.end_temp, "end_temp", file_cfg, annealing_defaults.end_temp),
        )
        placement_kind = _parse_placement_kind(
            _get_str(args.placement, "placement", file_cfg, PlacementKind.ANNEALING.value)
        )
        selector_kind = _parse_selector_kind(
            _get_str(args.selector, "selector", file_cfg, SelectorKind.GREEDY.value)
        )
        map_seed = _get_int(args.map_seed, "map_seed", file_cfg, 0)
        search_seed = _get_int(args.search_seed, "search_seed", file_cfg, 0)
        out_dir = Path(_get_str(args.out_dir, "out_dir", file_cfg, "data"))
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    map_state = MapState.create(config, Random(map_seed))
    engine = MoveEngine(config)
    rng = Random(search_seed)

    if mode == "place":
        optimizer = PlacementOptimizer(config, engine, rng, annealing=annealing)
        result = optimizer.search(map_state)
        write_annealing_log(result.history, out_dir)
        write_placement(result, config, annealing, out_dir)
        summary: dict[str, object] = {
            "mode": mode,
            "best_score": result.best_score,
            "coords": [[coord.column, coord.row] for coord in result.coords],
            "iterations": len(result.history),
            "accepted": sum(1 for step in result.history if step.accepted),
        }
    else:
        placement = create_placement(placement_kind, config, engine, rng, annealing=annealing)
        characters = placement.get_characters(map_state)
        selectors = [create_selector(selector_kind, engine, rng=rng) for _ in characters]
        session = GameSession(engine, map_state, characters, selectors)
        game = session.play()
        write_game_log(game.moves, out_dir)
        write_game_summary(game, config, out_dir)
        summary = {
            "mode": mode,
            "placement": placement_kind.value,
            "selector": selector_kind.value,
            "scores": list(game.scores),
            "total_score": game.total_score,
            "turn": game.turn,
            "stalled": game.stalled,
        }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
