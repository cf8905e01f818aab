"""Command-line interface for seeding the catalog and running the game server."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from footguess.config import GameSettings
from footguess.config_loader import CatalogProfile
from footguess.engine import compare_players
from footguess.ingest import load_players_from_csv
from footguess.persistence import open_store


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Daily football-player guessing game")
    subparsers = parser.add_subparsers(dest="command", required=True)

    seed = subparsers.add_parser("seed", help="Load a player catalog CSV into the store")
    seed.add_argument("--catalog", type=Path, default=None, help="Catalog CSV (defaults to the bundled one)")
    seed.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for catalog CSV columns (e.g., name=First Name|Last Name)",
    )
    seed.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    seed.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)

    serve = subparsers.add_parser("serve", help="Run the REST API with uvicorn")
    serve.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve.add_argument("--port", type=int, default=8000, help="Bind port")

    compare = subparsers.add_parser("compare", help="Print feedback for one guess against an answer")
    compare.add_argument("guessed_id", type=int, help="Guessed player id")
    compare.add_argument("answer_id", type=int, help="Answer player id")

    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _seed(args: argparse.Namespace, settings: GameSettings) -> int:
    try:
        profile = CatalogProfile.load(args.load_profile) if args.load_profile else CatalogProfile()
        profile = profile.merged(_parse_mapping(args.column))
    except ValueError as exc:
        print(f"Invalid column mapping: {exc}", file=sys.stderr)
        return 1
    mapping = profile.catalog_mapping

    catalog_path = args.catalog or settings.catalog_path
    try:
        players = load_players_from_csv(catalog_path, mapping=mapping or None)
    except ValueError as exc:
        print(f"Invalid catalog {catalog_path}: {exc}", file=sys.stderr)
        return 1

    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    store = open_store(settings)
    saved = store.save_players(players)
    print(f"Saved {saved} players from {catalog_path} ({store.count_players()} in catalog)")
    return 0


def _compare(args: argparse.Namespace, settings: GameSettings) -> int:
    store = open_store(settings)
    if settings.storage == "memory":
        store.save_players(load_players_from_csv(settings.catalog_path))

    guessed = store.get_player(args.guessed_id)
    answer = store.get_player(args.answer_id)
    missing = [str(pid) for pid, player in ((args.guessed_id, guessed), (args.answer_id, answer)) if player is None]
    if missing:
        print(f"Unknown player id(s): {', '.join(missing)}", file=sys.stderr)
        return 1

    feedback = compare_players(guessed, answer)
    print(json.dumps(feedback.to_payload(), indent=2, ensure_ascii=False))
    return 0


def _serve(args: argparse.Namespace, settings: GameSettings) -> int:
    import uvicorn

    from footguess.api import create_app

    uvicorn.run(create_app(settings=settings), host=args.host, port=args.port)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = GameSettings.from_env()

    if args.command == "seed":
        return _seed(args, settings)
    if args.command == "compare":
        return _compare(args, settings)
    return _serve(args, settings)


if __name__ == "__main__":
    sys.exit(main())
