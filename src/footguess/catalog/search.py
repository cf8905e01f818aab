"""Fuzzy player lookup for the autocomplete endpoint."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from rapidfuzz import fuzz, process, utils

from footguess.models import Player


SEARCH_FIELDS: Tuple[str, ...] = ("name", "nationality", "club")


class PlayerSearchIndex:
    """Matches a query against player name, nationality and club."""

    def __init__(self, players: Iterable[Player], *, limit: int = 10, score_cutoff: float = 70.0):
        self.limit = max(1, limit)
        self.score_cutoff = score_cutoff
        self._players: Dict[int, Player] = {player.id: player for player in players}
        self._choices: Dict[str, Dict[int, str]] = {
            field: {player_id: getattr(player, field) for player_id, player in self._players.items()}
            for field in SEARCH_FIELDS
        }

    def __len__(self) -> int:
        return len(self._players)

    def search(self, query: str) -> List[Player]:
        text = (query or "").strip()
        if not text or not self._players:
            return []

        best: Dict[int, float] = {}
        for choices in self._choices.values():
            matches = process.extract(
                text,
                choices,
                scorer=fuzz.WRatio,
                processor=utils.default_process,
                score_cutoff=self.score_cutoff,
                limit=None,
            )
            for _, score, player_id in matches:
                if score > best.get(player_id, -1.0):
                    best[player_id] = score

        ranked = sorted(best.items(), key=lambda item: (-item[1], self._players[item[0]].name))
        return [self._players[player_id] for player_id, _ in ranked[: self.limit]]
