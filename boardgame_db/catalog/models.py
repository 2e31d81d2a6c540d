"""Data models for the board game catalog."""

from __future__ import annotations

from dataclasses import dataclass, field

from boardgame_db.utils.constants import (
    DEFAULT_MAX_PLAYERS,
    DEFAULT_MIN_PLAYERS,
    MAX_RATING,
    MIN_RATING,
    MISSING_RESULT,
    NO_RATING,
    RATING_EPSILON,
)


def is_valid_rating(rating: int) -> bool:
    """Ratings are whole numbers from 1 to 5; bools are not ratings."""
    if isinstance(rating, bool) or not isinstance(rating, int):
        return False
    return MIN_RATING <= rating <= MAX_RATING


@dataclass(eq=False)
class Game:
    """A catalog entry with player ratings and free-form features.

    Comparison operators look only at the average rating, so two games
    with different names can be "equal". Games are therefore unhashable.
    """

    name: str = ""
    description: str = ""
    min_players: int = DEFAULT_MIN_PLAYERS
    max_players: int = DEFAULT_MAX_PLAYERS
    edition: str = ""
    ratings: dict[str, int] = field(default_factory=dict)  # player id -> 1..5
    features: dict[str, str] = field(default_factory=dict)

    # --- Ratings ---

    def add_rating(self, player_id: str, rating: int) -> bool:
        """Record a first rating from a player. Fails if out of range or already rated."""
        if not is_valid_rating(rating):
            return False
        if player_id in self.ratings:
            return False
        self.ratings[player_id] = rating
        return True

    def update_rating(self, player_id: str, rating: int) -> bool:
        if not is_valid_rating(rating):
            return False
        if player_id not in self.ratings:
            return False
        self.ratings[player_id] = rating
        return True

    def remove_rating(self, player_id: str) -> bool:
        return self.ratings.pop(player_id, None) is not None

    def average_rating(self) -> float:
        """Arithmetic mean of current ratings, 0.0 when unrated."""
        if not self.ratings:
            return NO_RATING
        return sum(self.ratings.values()) / len(self.ratings)

    def ratings_count(self) -> int:
        return len(self.ratings)

    # --- Features ---

    def add_feature(self, feature_name: str, feature_value: str) -> bool:
        if feature_name in self.features:
            return False
        self.features[feature_name] = feature_value
        return True

    def update_feature(self, feature_name: str, feature_value: str) -> bool:
        if feature_name not in self.features:
            return False
        self.features[feature_name] = feature_value
        return True

    def remove_feature(self, feature_name: str) -> bool:
        return self.features.pop(feature_name, None) is not None

    def get_feature(self, feature_name: str) -> str:
        return self.features.get(feature_name, "")

    def has_feature(self, feature_name: str) -> bool:
        return feature_name in self.features

    # --- Ordering by average rating ---

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self.average_rating() < other.average_rating()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return abs(self.average_rating() - other.average_rating()) < RATING_EPSILON

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self > other or self == other

    def __bool__(self) -> bool:
        return bool(self.name)


@dataclass(eq=False)
class Player:
    """A registered player. Identity is the player id alone."""

    player_id: str
    name: str = ""
    match_history: list[str] = field(default_factory=list)

    def add_match_to_history(self, match_id: str) -> None:
        self.match_history.append(match_id)

    def calculate_rating_in_game(self, results: list[float]) -> float:
        """Mean of the given match results. The caller collects them."""
        if not results:
            return NO_RATING
        return sum(results) / len(results)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.player_id == other.player_id

    def __hash__(self) -> int:
        return hash(self.player_id)

    def __str__(self) -> str:
        parts = [f"ID: {self.player_id}"]
        if self.name:
            parts.append(f"Name: {self.name}")
        parts.append(f"Matches played: {len(self.match_history)}")
        return f"Player[{', '.join(parts)}]"


@dataclass(eq=False)
class Match:
    """A dated play session of one game. Identity is the match id alone.

    `game_name` is a lookup key, not a reference: the game may be removed
    from the store later and the match keeps the name.
    """

    match_id: str
    game_name: str
    date: str  # YYYY-MM-DD
    player_results: dict[str, float] = field(default_factory=dict)
    # Set by the store on insertion; results are frozen afterwards
    sealed: bool = field(default=False, repr=False)

    def add_player_result(self, player_id: str, result: float) -> bool:
        if self.sealed or player_id in self.player_results:
            return False
        self.player_results[player_id] = result
        return True

    def get_player_result(self, player_id: str) -> float:
        """Result for a participant, or MISSING_RESULT (-1.0) if absent."""
        return self.player_results.get(player_id, MISSING_RESULT)

    def has_player(self, player_id: str) -> bool:
        return player_id in self.player_results

    def player_count(self) -> int:
        return len(self.player_results)

    def winner(self) -> str:
        """Participant with the highest result, "" for an empty match.

        Ties resolve to the first maximal participant in insertion order.
        """
        if not self.player_results:
            return ""
        return max(self.player_results, key=self.player_results.__getitem__)

    def seal(self) -> None:
        self.sealed = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return self.match_id == other.match_id

    def __hash__(self) -> int:
        return hash(self.match_id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return self.date < other.date

    def __str__(self) -> str:
        return (
            f"Match[ID: {self.match_id}, Game: {self.game_name}, "
            f"Date: {self.date}, Players: {self.player_count()}]"
        )
