"""Shared test fixtures for the board game database."""

from __future__ import annotations

import pytest

from boardgame_db.catalog.models import Game, Match, Player
from boardgame_db.db.memory import InMemoryGameDatabase


def make_game(name: str, *ratings: int, min_players: int = 2, max_players: int = 4) -> Game:
    """Game rated once per value, by players r0, r1, ..."""
    game = Game(name, f"{name} description", min_players, max_players, "1st")
    for i, rating in enumerate(ratings):
        game.add_rating(f"r{i}", rating)
    return game


@pytest.fixture
def db():
    return InMemoryGameDatabase()


@pytest.fixture
def populated_db():
    """Three games, three players, two matches and one similarity pair."""
    db = InMemoryGameDatabase()

    chess = Game("Шахматы", "Классическая стратегия", 2, 2, "Стандарт")
    chess.add_feature("Жанр", "Абстрактная стратегия")
    chess.add_feature("Сложность", "Высокая")

    carcassonne = Game("Каркассон", "Строительство тайлами", 2, 6, "Big Box")
    carcassonne.add_feature("Жанр", "Семейная")
    carcassonne.add_feature("Сложность", "Средняя")

    catan = Game("Колонизаторы", "Торговля ресурсами", 3, 4, "5-е издание")
    catan.add_feature("Жанр", "Стратегия")
    catan.add_feature("Сложность", "Средняя")

    for game in (chess, carcassonne, catan):
        db.add_game(game)

    db.add_player(Player("ivan", "Иван"))
    db.add_player(Player("maria", "Мария"))
    db.add_player(Player("petr", "Петр"))

    db.add_rating("Шахматы", "ivan", 5)
    db.add_rating("Шахматы", "maria", 5)
    db.add_rating("Каркассон", "ivan", 4)
    db.add_rating("Каркассон", "petr", 5)
    db.add_rating("Колонизаторы", "maria", 4)
    db.add_rating("Колонизаторы", "petr", 4)

    m1 = Match("m1", "Шахматы", "2024-10-01")
    m1.add_player_result("ivan", 1.0)
    m1.add_player_result("maria", 0.0)
    db.add_match(m1)

    m2 = Match("m2", "Каркассон", "2024-10-05")
    m2.add_player_result("ivan", 95.0)
    m2.add_player_result("maria", 88.0)
    m2.add_player_result("petr", 102.0)
    db.add_match(m2)

    db.add_similarity("Шахматы", "Колонизаторы")
    return db
