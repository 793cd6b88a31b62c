"""
Sequences — случайный выбор и перемешивание

Вспомогательные функции над последовательностями:
- choice: равновероятный выбор одного элемента
- shuffle: перемешивание копии (Fisher–Yates), исходные данные не меняются

Источник случайности — DEFAULT_RNG (общий для процесса) либо
переданный экземпляр random.Random (для детерминированных тестов).
"""

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptySequenceError(IndexError):
    """Выбор из пустой последовательности."""

    pass


# =============================================================================
# RNG
# =============================================================================

# Глобальный недетерминированный генератор. Для воспроизводимости
# передавайте собственный random.Random(seed).
DEFAULT_RNG = random.Random()


def resolve_rng(rng: random.Random | None) -> random.Random:
    """Переданный генератор или DEFAULT_RNG."""
    return DEFAULT_RNG if rng is None else rng


# =============================================================================
# PUBLIC HELPERS
# =============================================================================


def choice(items: Sequence[T], rng: random.Random | None = None) -> T:
    """
    Равновероятный выбор одного элемента.

    Args:
        items: Непустая упорядоченная последовательность
        rng: Источник случайности (default: DEFAULT_RNG)

    Returns:
        Случайный элемент items

    Raises:
        EmptySequenceError: Если items пуста

    Examples:
        >>> choice([1, 2, 3, 4])  # doctest: +SKIP
        3
    """
    if len(items) == 0:
        raise EmptySequenceError("cannot choose from an empty sequence")

    return items[resolve_rng(rng).randrange(len(items))]


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """
    Новый список с элементами items в случайном порядке.

    Fisher–Yates на копии: для i от конца к началу меняем местами
    i и случайный j из [0, i].

    Args:
        items: Исходная последовательность (не изменяется)
        rng: Источник случайности (default: DEFAULT_RNG)

    Returns:
        Перемешанная копия

    Examples:
        >>> shuffle([1, 2, 3])  # doctest: +SKIP
        [2, 1, 3]
    """
    source = resolve_rng(rng)
    result = list(items)

    for i in range(len(result) - 1, 0, -1):
        j = source.randrange(i + 1)
        result[i], result[j] = result[j], result[i]

    return result
