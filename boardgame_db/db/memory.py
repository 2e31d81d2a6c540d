"""In-memory board game store."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence, Set
from dataclasses import dataclass
from types import MappingProxyType

from boardgame_db.catalog.filters import (
    Filter,
    SimilarityPair,
    apply_chain,
    sort_by_rating,
)
from boardgame_db.catalog.models import Game, Match, Player, is_valid_rating
from boardgame_db.utils.constants import (
    ERROR_DUPLICATE_KEY,
    ERROR_INVALID_INPUT,
    ERROR_NOT_FOUND,
    ERROR_OUT_OF_RANGE,
    ERROR_REFERENTIAL_VIOLATION,
    MAX_RATING,
    MIN_RATING,
    NO_RATING,
)

logger = logging.getLogger("boardgame_db.store")


@dataclass
class StoreResult:
    success: bool
    error: str | None = None
    kind: str | None = None

    def __bool__(self) -> bool:
        return self.success


def _ok() -> StoreResult:
    return StoreResult(success=True)


def _fail(kind: str, error: str) -> StoreResult:
    logger.debug("Rejected (%s): %s", kind, error)
    return StoreResult(success=False, error=error, kind=kind)


def canonical_pair(first: str, second: str) -> SimilarityPair:
    return (first, second) if first < second else (second, first)


class SimilarityView(Set):
    """Read-only live view over the store's canonical similarity pairs."""

    def __init__(self, pairs: set[SimilarityPair]) -> None:
        self._pairs = pairs

    def __contains__(self, pair: object) -> bool:
        return pair in self._pairs

    def __iter__(self) -> Iterator[SimilarityPair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


class InMemoryGameDatabase:
    """Owns every game, player and match, plus the similarity relation.

    Accessors hand out the stored objects themselves. A reference obtained
    before a remove_* call must not be used afterwards.
    """

    def __init__(self) -> None:
        self._games: dict[str, Game] = {}
        self._players: dict[str, Player] = {}
        self._matches: list[Match] = []
        self._similar: set[SimilarityPair] = set()

    # --- Games ---

    def add_game(self, game: Game | None) -> StoreResult:
        if game is None:
            return _fail(ERROR_INVALID_INPUT, "Game is missing")
        if game.name in self._games:
            return _fail(ERROR_DUPLICATE_KEY, f"Game {game.name!r} already exists")
        self._games[game.name] = game
        logger.debug("Added game %r", game.name)
        return _ok()

    def remove_game(self, game_name: str) -> StoreResult:
        """Drop a game. Matches and similarity pairs naming it are kept."""
        if self._games.pop(game_name, None) is None:
            return _fail(ERROR_NOT_FOUND, f"Game {game_name!r} not found")
        logger.debug("Removed game %r", game_name)
        return _ok()

    def get_game(self, game_name: str) -> Game | None:
        return self._games.get(game_name)

    def __getitem__(self, game_name: str) -> Game | None:
        return self.get_game(game_name)

    def get_all_games(self) -> Mapping[str, Game]:
        return MappingProxyType(self._games)

    # --- Players ---

    def add_player(self, player: Player | None) -> StoreResult:
        if player is None:
            return _fail(ERROR_INVALID_INPUT, "Player is missing")
        if player.player_id in self._players:
            return _fail(
                ERROR_DUPLICATE_KEY, f"Player {player.player_id!r} already exists"
            )
        self._players[player.player_id] = player
        logger.debug("Added player %r", player.player_id)
        return _ok()

    def remove_player(self, player_id: str) -> StoreResult:
        """Drop a player. Ratings they gave stay on the games."""
        if self._players.pop(player_id, None) is None:
            return _fail(ERROR_NOT_FOUND, f"Player {player_id!r} not found")
        logger.debug("Removed player %r", player_id)
        return _ok()

    def get_player(self, player_id: str) -> Player | None:
        return self._players.get(player_id)

    def get_all_players(self) -> Mapping[str, Player]:
        return MappingProxyType(self._players)

    # --- Matches ---

    def add_match(self, match: Match | None) -> StoreResult:
        """Store a match and append its id to each registered participant's history.

        Participants that are not registered players are skipped.
        """
        if match is None:
            return _fail(ERROR_INVALID_INPUT, "Match is missing")
        if match.game_name not in self._games:
            return _fail(
                ERROR_REFERENTIAL_VIOLATION,
                f"Match {match.match_id!r} references unknown game {match.game_name!r}",
            )
        if self.get_match(match.match_id) is not None:
            return _fail(ERROR_DUPLICATE_KEY, f"Match {match.match_id!r} already exists")

        match.seal()
        self._matches.append(match)
        for player_id in match.player_results:
            player = self._players.get(player_id)
            if player is not None:
                player.add_match_to_history(match.match_id)
        logger.debug("Added match %r for game %r", match.match_id, match.game_name)
        return _ok()

    def get_match(self, match_id: str) -> Match | None:
        for match in self._matches:
            if match.match_id == match_id:
                return match
        return None

    def get_all_matches(self) -> Sequence[Match]:
        return tuple(self._matches)

    def get_matches_by_game(self, game_name: str) -> list[Match]:
        return [m for m in self._matches if m.game_name == game_name]

    def get_matches_by_player(self, player_id: str) -> list[Match]:
        return [m for m in self._matches if m.has_player(player_id)]

    # --- Ratings ---

    def add_rating(self, game_name: str, player_id: str, rating: int) -> StoreResult:
        game = self._games.get(game_name)
        if game is None:
            return _fail(ERROR_NOT_FOUND, f"Game {game_name!r} not found")
        if player_id not in self._players:
            return _fail(ERROR_NOT_FOUND, f"Player {player_id!r} not found")
        if not is_valid_rating(rating):
            return _fail(
                ERROR_OUT_OF_RANGE,
                f"Rating {rating} outside {MIN_RATING}-{MAX_RATING}",
            )
        if not game.add_rating(player_id, rating):
            return _fail(
                ERROR_DUPLICATE_KEY,
                f"Player {player_id!r} already rated {game_name!r}",
            )
        return _ok()

    # --- Similarity ---

    def add_similarity(self, first: str, second: str) -> StoreResult:
        """Mark two games as similar. Re-adding an existing pair succeeds."""
        for name in (first, second):
            if name not in self._games:
                return _fail(
                    ERROR_REFERENTIAL_VIOLATION, f"Game {name!r} not found"
                )
        if first == second:
            return _fail(
                ERROR_REFERENTIAL_VIOLATION, f"Game {first!r} cannot be similar to itself"
            )
        self._similar.add(canonical_pair(first, second))
        return _ok()

    def are_similar(self, first: str, second: str) -> bool:
        return canonical_pair(first, second) in self._similar

    def get_similar_games(self, game_name: str) -> list[str]:
        result = []
        for left, right in sorted(self._similar):
            if left == game_name:
                result.append(right)
            elif right == game_name:
                result.append(left)
        return result

    def get_similarity_data(self) -> SimilarityView:
        return SimilarityView(self._similar)

    # --- Statistics ---

    def get_player_rating_in_game(self, player_id: str, game_name: str) -> float:
        """Mean result of a player over their matches of one game."""
        player = self._players.get(player_id)
        if player is None:
            return NO_RATING

        results = []
        for match in self.get_matches_by_player(player_id):
            if match.game_name != game_name:
                continue
            result = match.get_player_result(player_id)
            if result >= 0:
                results.append(result)
        return player.calculate_rating_in_game(results)

    def get_player_games(self, player_id: str) -> list[str]:
        """Names of games the player has matches in, sorted."""
        return sorted({m.game_name for m in self.get_matches_by_player(player_id)})

    def statistics(self) -> dict[str, int]:
        return {
            "games": len(self._games),
            "players": len(self._players),
            "matches": len(self._matches),
            "similarities": len(self._similar),
        }

    # --- Queries ---

    def find_games(self, filters: Filter | Iterable[Filter] | None) -> list[Game]:
        """Run one filter or a chain and sort the result by rating, highest first.

        The final sort always wins over any order a filter produced.
        """
        if filters is None:
            return []
        chain = [filters] if hasattr(filters, "apply") else list(filters)
        result = apply_chain(self._games, chain)
        logger.debug("find_games: %d filter(s) -> %d game(s)", len(chain), len(result))
        return sort_by_rating(result)
