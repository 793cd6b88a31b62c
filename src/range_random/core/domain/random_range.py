"""
RangeRandom — Генератор случайных чисел в ограниченном диапазоне

Immutable Pydantic модель, описывающая числовой диапазон [min, max] и режим выборки:
- Непрерывная выборка (step <= 0): равномерно в [min, max)
- Дискретная выборка (step > 0): min + k * step, k = 0..floor((max - min) / step)
- Strict floating-point precision (usfpp): округление дискретного значения
  до количества десятичных знаков шага

Структурированное представление соответствует схеме random_range.json.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. min <= max после создания (границы меняются местами при необходимости)
2. Границы и шаг — конечные числа (NaN/Inf отклоняются)
3. Экземпляр неизменяем; методы выборки не меняют состояние
"""

import json
import logging
import random
from typing import Any, Final, Iterator, Mapping, Sequence, TypeVar

import jsonschema
from pydantic import BaseModel, Field, ValidationError, model_validator

from range_random.core.contracts import validate_random_range
from range_random.core.math import sequences
from range_random.core.math.numerical_safeguards import (
    interpolate,
    is_continuous_step,
    is_real_number,
    is_valid_float,
    lattice_value,
    round_to_precision_of,
    step_count,
    validate_count,
)
from range_random.core.math.sequences import resolve_rng

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Шаг по умолчанию: непрерывная выборка
DEFAULT_STEP: Final[float] = 0.0

# Strict floating-point precision по умолчанию выключен
DEFAULT_USFPP: Final[bool] = False

# Отступ JSON сериализации
JSON_INDENT: Final[int] = 2


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RandomParseError(ValueError):
    """
    Невалидное сериализованное или структурированное представление.

    Возникает при синтаксически неверном JSON, при нарушении схемы
    random_range (нет min/max, неверные типы) и при NaN/Inf в границах.
    """

    pass


class RandomInvalidInputError(TypeError):
    """Вход from_any не соответствует ни одной известной форме."""

    pass


# =============================================================================
# SHAPE HELPERS
# =============================================================================


def _is_finite_number(value: Any) -> bool:
    return is_real_number(value) and is_valid_float(value)


def _struct_payload(thing: Any) -> dict[str, Any]:
    """Структурированный dict из Mapping или объекта с атрибутами min/max."""
    if isinstance(thing, RangeRandom):
        return thing.to_dict()
    if isinstance(thing, Mapping):
        return dict(thing)

    payload = {"min": thing.min, "max": thing.max}
    for key in ("step", "usfpp"):
        if hasattr(thing, key):
            payload[key] = getattr(thing, key)
    return payload


# =============================================================================
# RANGE RANDOM MODEL
# =============================================================================


class RangeRandom(BaseModel):
    """
    Генератор случайных чисел в диапазоне [min, max].

    Immutable модель (frozen=True). Создаётся через фабричные методы
    (from_range, from_center, from_dict, from_json, from_tuple, from_any)
    или напрямую: RangeRandom(min=1, max=6, step=1).

    Examples:
        >>> rnd = RangeRandom.from_range(-5, 7)
        >>> rnd.center(), rnd.delta()
        (1.0, 6.0)
        >>> rnd.to_range()
        (-5.0, 7.0)
        >>> dice = RangeRandom.from_range(1, 6, 1)
        >>> for roll in dice.iter_samples():  # doctest: +SKIP
        ...     if roll == 6:
        ...         break
    """

    min: float = Field(..., allow_inf_nan=False, description="Нижняя граница (включительно)")
    max: float = Field(..., allow_inf_nan=False, description="Верхняя граница (включительно)")
    step: float = Field(
        DEFAULT_STEP,
        allow_inf_nan=False,
        description="Шаг дискретной выборки; <= 0 означает непрерывную выборку",
    )
    strict_precision: bool = Field(
        DEFAULT_USFPP,
        alias="usfpp",
        description="Округлять дискретные значения до точности шага",
    )

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}

    @model_validator(mode="before")
    @classmethod
    def order_bounds(cls, data: Any) -> Any:
        """Если min > max, границы меняются местами."""
        if isinstance(data, dict):
            low = data.get("min")
            high = data.get("max")
            if is_real_number(low) and is_real_number(high) and low > high:
                data = {**data, "min": high, "max": low}
        return data

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_range(
        cls,
        a: float,
        b: float,
        step: float = DEFAULT_STEP,
        usfpp: bool = DEFAULT_USFPP,
    ) -> "RangeRandom":
        """
        Диапазон по двум границам в любом порядке.

        Args:
            a: Первая граница
            b: Вторая граница
            step: Шаг дискретной выборки (default: 0, непрерывная)
            usfpp: Strict floating-point precision (default: False)

        Returns:
            RangeRandom с min = min(a, b), max = max(a, b)

        Raises:
            ValidationError: Если границы не числа или NaN/Inf
        """
        return cls(min=a, max=b, step=step, usfpp=usfpp)

    @classmethod
    def from_center(
        cls,
        center: float,
        delta: float,
        step: float = DEFAULT_STEP,
        usfpp: bool = DEFAULT_USFPP,
    ) -> "RangeRandom":
        """
        Диапазон [center - delta, center + delta].

        Отрицательный delta не отклоняется: границы меняются местами.
        """
        return cls.from_range(center - delta, center + delta, step, usfpp)

    @classmethod
    def from_tuple(cls, pair: Sequence[float]) -> "RangeRandom":
        """Диапазон из пары (a, b). step и usfpp не передаются."""
        return cls.from_range(pair[0], pair[1])

    @classmethod
    def unit(cls) -> "RangeRandom":
        """Непрерывный диапазон [0, 1]. Используется from_any для одиночного числа."""
        return cls.from_range(0, 1)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RangeRandom":
        """
        Создание из структурированного представления {min, max, step?, usfpp?}.

        Данные проверяются по схеме random_range; отсутствующие step и usfpp
        принимают значения по умолчанию.

        Args:
            data: Структурированное представление

        Returns:
            RangeRandom

        Raises:
            RandomParseError: Если нарушена схема или границы не конечные числа
        """
        payload = dict(data) if isinstance(data, Mapping) else data

        try:
            validate_random_range(payload)
        except jsonschema.ValidationError as e:
            raise RandomParseError(f"invalid random_range structure: {e.message}") from e

        try:
            return cls.from_range(
                payload["min"],
                payload["max"],
                payload.get("step", DEFAULT_STEP),
                payload.get("usfpp", DEFAULT_USFPP),
            )
        except ValidationError as e:
            raise RandomParseError(f"invalid random_range values: {e}") from e

    @classmethod
    def from_json(cls, text: str) -> "RangeRandom":
        """
        Создание из JSON строки.

        Raises:
            RandomParseError: Если текст не является валидным JSON
                или структура не соответствует схеме
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise RandomParseError(f"invalid JSON: {e.msg}") from e
        except UnicodeDecodeError as e:
            raise RandomParseError(f"invalid JSON encoding: {e.reason}") from e

        return cls.from_dict(data)

    @classmethod
    def try_from_json(cls, text: str) -> "RangeRandom | None":
        """Как from_json, но возвращает None вместо RandomParseError."""
        try:
            return cls.from_json(text)
        except RandomParseError as e:
            logger.debug("try_from_json rejected input: %s", e)
            return None

    @classmethod
    def from_any(cls, thing: Any) -> "RangeRandom":
        """
        Полиморфный конструктор по форме входа.

        Порядок проверок:
        - str → from_json
        - одиночное число → unit() (значение числа игнорируется)
        - пара чисел → from_tuple
        - объект с числовыми min/max → from_dict

        Raises:
            RandomParseError: Если строка не является валидным представлением
            RandomInvalidInputError: Если форма входа не распознана
        """
        if isinstance(thing, str):
            return cls.from_json(thing)
        if is_real_number(thing):
            return cls.unit()
        if cls.is_range(thing):
            return cls.from_tuple(thing)
        if cls.is_struct(thing):
            return cls.from_dict(_struct_payload(thing))

        raise RandomInvalidInputError(
            f"cannot build RangeRandom from {type(thing).__name__}: {thing!r}"
        )

    @classmethod
    def try_from_any(cls, thing: Any) -> "RangeRandom | None":
        """Как from_any, но возвращает None при ошибке разбора или нераспознанной форме."""
        try:
            return cls.from_any(thing)
        except (RandomParseError, RandomInvalidInputError) as e:
            logger.debug("try_from_any rejected input: %s", e)
            return None

    # -------------------------------------------------------------------------
    # Проверки формы
    # -------------------------------------------------------------------------

    @staticmethod
    def is_range(thing: Any) -> bool:
        """Список или кортеж ровно из двух конечных чисел."""
        return (
            isinstance(thing, (list, tuple))
            and len(thing) == 2
            and all(_is_finite_number(x) for x in thing)
        )

    @staticmethod
    def is_struct(thing: Any) -> bool:
        """Mapping или объект с конечными числовыми min и max (включая RangeRandom)."""
        if isinstance(thing, Mapping):
            low, high = thing.get("min"), thing.get("max")
        else:
            low, high = getattr(thing, "min", None), getattr(thing, "max", None)
        return _is_finite_number(low) and _is_finite_number(high)

    # -------------------------------------------------------------------------
    # Производные величины
    # -------------------------------------------------------------------------

    def center(self) -> float:
        """Середина диапазона: 0.5 * (min + max)."""
        return 0.5 * (self.min + self.max)

    def half_width(self) -> float:
        """Половина ширины диапазона: 0.5 * (max - min)."""
        return 0.5 * (self.max - self.min)

    delta = half_width

    def is_discrete(self) -> bool:
        return not is_continuous_step(self.step)

    # -------------------------------------------------------------------------
    # Выборка
    # -------------------------------------------------------------------------

    def take(self, rng: random.Random | None = None) -> float:
        """
        Одно случайное значение.

        - step <= 0: min * (1 - u) + max * u, u равномерно в [0, 1)
        - step > 0: min + idx * step, idx равномерно в [0, step_count)
        - usfpp: дискретное значение округляется до точности шага

        Args:
            rng: Источник случайности (default: DEFAULT_RNG)

        Returns:
            Случайное значение в [min, max]
        """
        source = resolve_rng(rng)

        if is_continuous_step(self.step):
            return interpolate(self.min, self.max, source.random())

        idx = source.randrange(step_count(self.min, self.max, self.step))
        value = lattice_value(self.min, self.step, idx)

        if not self.strict_precision:
            return value

        return round_to_precision_of(value, self.step)

    to_number = take

    def sample(self, count: int, rng: random.Random | None = None) -> list[float]:
        """
        count независимых значений в порядке генерации.

        Raises:
            ValueError: Если count < 0
        """
        validate_count(count, "count")
        return [self.take(rng) for _ in range(count)]

    def iter_samples(self, rng: random.Random | None = None) -> Iterator[float]:
        """
        Бесконечный ленивый поток значений.

        Каждый вызов возвращает новый генератор; остановка — ответственность
        вызывающего кода (break).
        """
        while True:
            yield self.take(rng)

    # -------------------------------------------------------------------------
    # Массивы
    # -------------------------------------------------------------------------

    @staticmethod
    def choice(items: Sequence[T], rng: random.Random | None = None) -> T:
        """Случайный элемент непустой последовательности."""
        return sequences.choice(items, rng)

    @staticmethod
    def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
        """Перемешанная копия последовательности."""
        return sequences.shuffle(items, rng)

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def to_range(self) -> tuple[float, float]:
        """Диапазон как кортеж (min, max)."""
        return (self.min, self.max)

    to_tuple = to_range

    def to_dict(self) -> dict[str, Any]:
        """Структурированное представление {min, max, step, usfpp}."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        """JSON с отступом в 2 пробела, порядок полей: min, max, step, usfpp."""
        return self.model_dump_json(by_alias=True, indent=JSON_INDENT)

    def __float__(self) -> float:
        return self.take()

    def __str__(self) -> str:
        return self.to_json()
