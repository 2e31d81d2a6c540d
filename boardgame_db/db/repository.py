"""Protocol for the board game store."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from collections.abc import Set as AbstractSet
from typing import TYPE_CHECKING, Protocol

from boardgame_db.catalog.filters import Filter, SimilarityPair
from boardgame_db.catalog.models import Game, Match, Player

if TYPE_CHECKING:
    from boardgame_db.db.memory import StoreResult


class GameDatabase(Protocol):
    # --- Games ---
    def add_game(self, game: Game | None) -> StoreResult:
        ...

    def remove_game(self, game_name: str) -> StoreResult:
        ...

    def get_game(self, game_name: str) -> Game | None:
        ...

    def get_all_games(self) -> Mapping[str, Game]:
        ...

    # --- Players ---
    def add_player(self, player: Player | None) -> StoreResult:
        ...

    def remove_player(self, player_id: str) -> StoreResult:
        ...

    def get_player(self, player_id: str) -> Player | None:
        ...

    def get_all_players(self) -> Mapping[str, Player]:
        ...

    # --- Matches ---
    def add_match(self, match: Match | None) -> StoreResult:
        ...

    def get_match(self, match_id: str) -> Match | None:
        ...

    def get_all_matches(self) -> Sequence[Match]:
        ...

    # --- Ratings and similarity ---
    def add_rating(self, game_name: str, player_id: str, rating: int) -> StoreResult:
        ...

    def add_similarity(self, first: str, second: str) -> StoreResult:
        ...

    def are_similar(self, first: str, second: str) -> bool:
        ...

    def get_similar_games(self, game_name: str) -> list[str]:
        ...

    def get_similarity_data(self) -> AbstractSet[SimilarityPair]:
        ...

    # --- Queries ---
    def find_games(self, filters: Filter | Iterable[Filter] | None) -> list[Game]:
        ...
