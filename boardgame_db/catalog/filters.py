"""Game filters and the filter chain pipeline.

A filter takes a name -> Game mapping and returns the matching games in
no guaranteed order. Chains narrow the catalog step by step: every filter
after the first only sees what the previous one kept.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping, Sequence
from typing import Protocol

from boardgame_db.catalog.models import Game
from boardgame_db.utils.constants import (
    FEATURE_MAX_PLAYERS,
    FEATURE_MIN_PLAYERS,
    FEATURE_PLAYERS,
)

logger = logging.getLogger("boardgame_db.filters")

SimilarityPair = tuple[str, str]


class Filter(Protocol):
    def apply(self, games: Mapping[str, Game]) -> list[Game]:
        ...

    def describe(self) -> str:
        ...


class RatingFilter:
    """Keeps games whose average rating is at least `min_rating`."""

    def __init__(self, min_rating: float) -> None:
        self.min_rating = min_rating

    def apply(self, games: Mapping[str, Game]) -> list[Game]:
        return [
            game
            for game in games.values()
            if game is not None and game.average_rating() >= self.min_rating
        ]

    def describe(self) -> str:
        return f"RatingFilter[min rating: {self.min_rating:.2f}]"

    def print_info(self) -> None:
        print(self.describe())


class FeatureFilter:
    """Keeps games matching every required feature.

    Besides literal features, three pseudo keys look at the player count:
    "minPlayers" and "maxPlayers" compare the bound as a string, "players"
    keeps games whose [min, max] range contains the given number.
    """

    def __init__(self, required_features: Mapping[str, str]) -> None:
        self.required_features = dict(required_features)

    def apply(self, games: Mapping[str, Game]) -> list[Game]:
        return [
            game
            for game in games.values()
            if game is not None and self.matches(game)
        ]

    def matches(self, game: Game) -> bool:
        for name, value in self.required_features.items():
            if not self._matches_feature(game, name, value):
                return False
        return True

    def _matches_feature(self, game: Game, name: str, value: str) -> bool:
        if name == FEATURE_MIN_PLAYERS:
            return str(game.min_players) == value
        if name == FEATURE_MAX_PLAYERS:
            return str(game.max_players) == value
        if name == FEATURE_PLAYERS:
            try:
                player_count = int(value)
            except (TypeError, ValueError):
                logger.warning("Ignoring games for non-numeric player count %r", value)
                return False
            return game.min_players <= player_count <= game.max_players
        return game.has_feature(name) and game.get_feature(name) == value

    def describe(self) -> str:
        pairs = ", ".join(f"{k}={v}" for k, v in self.required_features.items())
        return f"FeatureFilter[{pairs}]"

    def print_info(self) -> None:
        print(self.describe())


class SimilarityFilter:
    """Finds games similar to a set of reference games.

    The score of a candidate is the number of reference games it is
    similar to. References themselves and zero-score games are dropped;
    the rest come back by descending score (stable on ties).
    """

    def __init__(
        self,
        reference_games: Sequence[str],
        similarity_data: Collection[SimilarityPair] | None,
    ) -> None:
        self.reference_games = list(reference_games)
        # Kept by reference so pairs added to the store later are seen
        self._pairs: Collection[SimilarityPair] = (
            similarity_data if similarity_data is not None else frozenset()
        )

    def apply(self, games: Mapping[str, Game]) -> list[Game]:
        references = set(self.reference_games)
        scored: list[tuple[Game, int]] = []
        for game in games.values():
            if game is None or game.name in references:
                continue
            score = self.similarity_score(game.name)
            if score > 0:
                scored.append((game, score))

        scored.sort(key=lambda item: item[1], reverse=True)
        return [game for game, _ in scored]

    def are_similar(self, first: str, second: str) -> bool:
        return (first, second) in self._pairs or (second, first) in self._pairs

    def similarity_score(self, game_name: str) -> int:
        return sum(
            1 for reference in self.reference_games
            if self.are_similar(game_name, reference)
        )

    def describe(self) -> str:
        return f"SimilarityFilter[references: {', '.join(self.reference_games)}]"

    def print_info(self) -> None:
        print(self.describe())


def apply_chain(games: Mapping[str, Game], filters: Sequence[Filter]) -> list[Game]:
    """Run filters as a narrowing pipeline. An empty chain selects nothing."""
    if not filters:
        return []

    result = filters[0].apply(games)
    for step in filters[1:]:
        narrowed = {game.name: game for game in result}
        result = step.apply(narrowed)
        logger.debug("%s kept %d of %d games", step.describe(), len(result), len(narrowed))
    return result


def sort_by_rating(games: list[Game]) -> list[Game]:
    """Order games by average rating, highest first."""
    return sorted(games, key=lambda game: game.average_rating(), reverse=True)
