"""Tests for daily menu sampling."""

from __future__ import annotations

import random

from combogen.menu.catalog import MENU_ITEMS, get_items_by_category
from combogen.menu.models import Category, MenuItem, Taste
from combogen.menu.sampler import (
    CALORIE_JITTER,
    POPULARITY_JITTER,
    jitter_item,
    sample_category,
    sample_daily_menu,
    take_random,
)


class TestCatalog:
    """Tests for the static catalog."""

    def test_every_category_present(self):
        for category in Category:
            assert get_items_by_category(category)

    def test_items_valid(self):
        for item in MENU_ITEMS:
            assert item.calories > 0
            assert 0 <= item.popularity <= 100

    def test_names_unique(self):
        names = [item.name for item in MENU_ITEMS]
        assert len(names) == len(set(names))


class TestTakeRandom:
    """Tests for shuffle-then-take selection."""

    def test_takes_requested_count(self):
        items = get_items_by_category(Category.MAIN)
        taken = take_random(items, 3, random.Random(1))
        assert len(taken) == 3
        assert len({i.name for i in taken}) == 3
        assert all(i in items for i in taken)

    def test_does_not_modify_input(self):
        items = get_items_by_category(Category.SIDE)
        before = list(items)
        take_random(items, 4, random.Random(7))
        assert items == before

    def test_every_item_can_come_first(self):
        """Over many draws each item should lead at least once."""
        items = get_items_by_category(Category.DRINK)
        rng = random.Random(0)
        leaders = {take_random(items, 1, rng)[0].name for _ in range(500)}
        assert leaders == {i.name for i in items}


class TestSampleDailyMenu:
    """Tests for sample_daily_menu."""

    def test_default_counts(self):
        menu = sample_daily_menu(seed=42)
        assert len(menu.mains) == 5
        assert len(menu.sides) == 4
        assert len(menu.drinks) == 4

    def test_draws_without_replacement_from_catalog(self):
        menu = sample_daily_menu(seed=3)
        names = [i.name for i in menu.all_items]
        assert len(names) == len(set(names))
        assert all(i in MENU_ITEMS for i in menu.all_items)

    def test_categories_match(self):
        menu = sample_daily_menu(seed=5)
        assert all(i.category == Category.MAIN for i in menu.mains)
        assert all(i.category == Category.SIDE for i in menu.sides)
        assert all(i.category == Category.DRINK for i in menu.drinks)

    def test_seed_reproducible(self):
        assert sample_daily_menu(seed=11) == sample_daily_menu(seed=11)

    def test_custom_target_counts(self):
        menu = sample_daily_menu(target_counts={Category.MAIN: 2}, seed=1)
        assert len(menu.mains) == 2
        assert len(menu.sides) == 4

    def test_empty_category_stays_empty(self, tiny_catalog):
        catalog = [i for i in tiny_catalog if i.category != Category.DRINK]
        menu = sample_daily_menu(catalog=catalog, seed=1)
        assert menu.drinks == []
        assert len(menu.mains) == 5


class TestBackfill:
    """Tests for topping up categories smaller than their target."""

    def test_two_mains_become_five(self, tiny_catalog):
        originals = {i.name: i for i in get_items_by_category(Category.MAIN, tiny_catalog)}
        menu = sample_daily_menu(catalog=tiny_catalog, seed=9)

        assert len(menu.mains) == 5
        names = [i.name for i in menu.mains]
        assert len(set(names)) == 5
        assert set(originals) <= set(names)

        duplicates = [i for i in menu.mains if i.name not in originals]
        assert len(duplicates) == 3
        for dup in duplicates:
            source = originals[dup.name.split(" #")[0]]
            assert abs(dup.calories - source.calories) <= CALORIE_JITTER[Category.MAIN]
            assert abs(dup.popularity - source.popularity) <= POPULARITY_JITTER
            assert 0 <= dup.popularity <= 100
            assert dup.taste == source.taste
            assert dup.category == Category.MAIN

    def test_single_item_category_fills_up(self):
        only = MenuItem("Lassi", Category.DRINK, 200, Taste.SWEET, 98)
        drinks = sample_category([only], 4, random.Random(2))
        assert len(drinks) == 4
        assert len({d.name for d in drinks}) == 4
        assert all(d.popularity <= 100 for d in drinks)

    def test_empty_category_not_backfilled(self):
        assert sample_category([], 4, random.Random(2)) == []

    def test_jitter_keeps_calories_positive(self):
        tiny = MenuItem("Water", Category.DRINK, 5, Taste.SAVORY, 1)
        rng = random.Random(4)
        for _ in range(50):
            copy = jitter_item(tiny, {"Water"}, rng)
            assert copy.calories >= 1
            assert copy.popularity >= 0

    def test_jitter_picks_fresh_name(self):
        item = MenuItem("Naan", Category.SIDE, 200, Taste.SAVORY, 90)
        copy = jitter_item(item, {"Naan", "Naan #2"}, random.Random(0))
        assert copy.name == "Naan #3"
