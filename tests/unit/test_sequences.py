"""
Тесты для модуля Sequences (choice / shuffle)
"""

import itertools
import random

import pytest

from range_random.core.math.sequences import (
    DEFAULT_RNG,
    EmptySequenceError,
    choice,
    resolve_rng,
    shuffle,
)


class TestResolveRng:
    def test_default(self) -> None:
        assert resolve_rng(None) is DEFAULT_RNG

    def test_custom(self) -> None:
        rng = random.Random(1)
        assert resolve_rng(rng) is rng


class TestChoice:
    """Тесты для choice"""

    def test_element_from_items(self) -> None:
        items = [10, 20, 30, 40]
        for _ in range(100):
            assert choice(items) in items

    def test_all_elements_reachable(self) -> None:
        rng = random.Random(11)
        items = ("a", "b", "c", "d")
        assert {choice(items, rng) for _ in range(500)} == set(items)

    def test_single_element(self) -> None:
        assert choice(["only"]) == "only"

    def test_string_sequence(self) -> None:
        assert choice("xyz") in "xyz"

    def test_empty(self) -> None:
        with pytest.raises(EmptySequenceError):
            choice([])

    def test_empty_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            choice(())


class TestShuffle:
    """Тесты для shuffle"""

    def test_permutation(self) -> None:
        items = [1, 2, 3]
        result = shuffle(items)
        assert sorted(result) == [1, 2, 3]

    def test_input_unchanged(self) -> None:
        items = list(range(20))
        snapshot = list(items)
        shuffle(items, random.Random(5))
        assert items == snapshot

    def test_returns_new_list(self) -> None:
        items = [1, 2, 3]
        assert shuffle(items) is not items
        assert isinstance(shuffle((1, 2, 3)), list)

    @pytest.mark.parametrize("items", [[], [42]])
    def test_trivial(self, items: list) -> None:
        assert shuffle(items) == items

    def test_all_permutations_reachable(self) -> None:
        rng = random.Random(99)
        seen = {tuple(shuffle([1, 2, 3], rng)) for _ in range(600)}
        assert seen == set(itertools.permutations([1, 2, 3]))

    def test_seeded_reproducible(self) -> None:
        items = list(range(10))
        assert shuffle(items, random.Random(3)) == shuffle(items, random.Random(3))
