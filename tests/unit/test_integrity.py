"""Tests for store integrity checker."""

from boardgame_db.catalog.integrity import validate_database_integrity
from boardgame_db.catalog.models import Match


class TestValidateDatabaseIntegrity:
    def test_valid_database_passes(self, populated_db):
        errors = validate_database_integrity(populated_db)
        assert errors == [], f"Unexpected errors: {errors}"

    def test_empty_database_passes(self, db):
        assert validate_database_integrity(db) == []

    def test_removed_game_tolerated(self, populated_db):
        populated_db.remove_game("Шахматы")
        assert validate_database_integrity(populated_db) == []

    def test_renamed_game_detected(self, populated_db):
        populated_db.get_game("Шахматы").name = "Chess"
        errors = validate_database_integrity(populated_db)
        assert any("is named 'Chess'" in e for e in errors)

    def test_bad_rating_detected(self, populated_db):
        # Bypass add_rating validation
        populated_db.get_game("Шахматы").ratings["petr"] = 9
        errors = validate_database_integrity(populated_db)
        assert any("out of range" in e for e in errors)

    def test_bad_history_detected(self, populated_db):
        populated_db.get_player("petr").add_match_to_history("m1")
        populated_db.get_player("petr").add_match_to_history("m404")
        errors = validate_database_integrity(populated_db)
        assert any("without them" in e for e in errors)
        assert any("unknown match 'm404'" in e for e in errors)

    def test_unsealed_match_detected(self, populated_db):
        populated_db._matches.append(Match("m3", "Шахматы", "2024-10-10"))
        errors = validate_database_integrity(populated_db)
        assert any("not sealed" in e for e in errors)

    def test_duplicate_match_detected(self, populated_db):
        populated_db._matches.append(populated_db.get_match("m1"))
        errors = validate_database_integrity(populated_db)
        assert any("Duplicate match id 'm1'" in e for e in errors)

    def test_bad_similarity_pairs_detected(self, populated_db):
        populated_db._similar.add(("Шахматы", "Каркассон"))
        populated_db._similar.add(("Каркассон", "Каркассон"))
        errors = validate_database_integrity(populated_db)
        assert any("not canonical" in e for e in errors)
        assert any("similar to itself" in e for e in errors)
