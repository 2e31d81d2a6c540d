"""State integrity checker for the board game store."""

from __future__ import annotations

from collections import Counter

from boardgame_db.catalog.models import is_valid_rating
from boardgame_db.db.repository import GameDatabase


def validate_database_integrity(db: GameDatabase) -> list[str]:
    """Validate store invariants. Returns list of errors (empty = OK).

    Checks:
    1. Games are keyed by their own name
    2. Every rating is within 1-5
    3. Similarity pairs are canonical and never pair a game with itself
    4. Match ids are unique and every stored match is sealed
    5. Player histories only list stored matches the player took part in

    Similarity pairs and matches naming a removed game are allowed.
    """
    errors: list[str] = []

    # 1-2. Games and ratings
    for key, game in db.get_all_games().items():
        if game.name != key:
            errors.append(f"Game stored as {key!r} is named {game.name!r}")
        for player_id, rating in game.ratings.items():
            if not is_valid_rating(rating):
                errors.append(
                    f"Rating {rating} by {player_id!r} for {key!r} out of range"
                )

    # 3. Similarity relation
    for first, second in db.get_similarity_data():
        if first == second:
            errors.append(f"Game {first!r} marked similar to itself")
        elif first > second:
            errors.append(f"Similarity pair ({first!r}, {second!r}) not canonical")

    # 4. Matches
    matches = db.get_all_matches()
    id_counts = Counter(m.match_id for m in matches)
    for match_id, count in id_counts.items():
        if count > 1:
            errors.append(f"Duplicate match id {match_id!r} (x{count})")
    for match in matches:
        if not match.sealed:
            errors.append(f"Match {match.match_id!r} is not sealed")

    # 5. Player histories
    by_id = {m.match_id: m for m in matches}
    for player_id, player in db.get_all_players().items():
        for match_id in player.match_history:
            match = by_id.get(match_id)
            if match is None:
                errors.append(f"Player {player_id!r} history lists unknown match {match_id!r}")
            elif not match.has_player(player_id):
                errors.append(
                    f"Player {player_id!r} history lists match {match_id!r} without them"
                )

    return errors
