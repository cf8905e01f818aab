"""Lightweight REST client for the footguess API."""

from __future__ import annotations

import argparse
import json

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the footguess REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--session", default=None, help="Session id sent as X-Session-Id")
    parser.add_argument("--search", metavar="QUERY", help="Search the player catalog")
    parser.add_argument("--guess", metavar="PLAYER_ID", type=int, help="Submit a guess")
    parser.add_argument("--continuous", action="store_true", help="Enable continuous mode")
    args = parser.parse_args()

    headers = {"X-Session-Id": args.session} if args.session else {}
    with httpx.Client(base_url=args.base_url, headers=headers) as client:
        if args.search:
            resp = client.get("/api/players/search", params={"q": args.search})
            if resp.status_code == 400:
                raise SystemExit(resp.json()["detail"])
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2, ensure_ascii=False))

        if args.guess is not None:
            resp = client.post("/api/game/guess", json={"playerId": args.guess})
            if resp.status_code in (400, 404):
                raise SystemExit(resp.json()["detail"])
            resp.raise_for_status()
            feedback = resp.json()
            print(json.dumps(feedback, indent=2, ensure_ascii=False))
            if feedback["correct"]:
                print("Correct!")

        if args.continuous:
            resp = client.post("/api/game/continuous-mode")
            if resp.status_code == 400:
                raise SystemExit(resp.json()["detail"])
            resp.raise_for_status()
            print("Continuous mode enabled")

        resp = client.get("/api/game/state")
        resp.raise_for_status()
        state = resp.json()
        print(f"Attempts: {state['attempts']}/{state['maxAttempts']} completed={state['completed']}")
        if "score" in state:
            print(f"Score: {state['score']}")


if __name__ == "__main__":
    main()
