"""
Numerical Safeguards — Float Primitives для RangeRandom

Модуль обеспечивает численную корректность выборки из диапазона:
- Проверка валидности float (NaN/Inf не допускаются)
- Определение количества десятичных знаков шага
- Округление до точности шага (strict floating-point precision)
- Расчёт количества дискретных позиций в диапазоне
- Интерполяция и позиции сетки без переполнения float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в границы диапазона
2. Количество десятичных знаков определяется по кратчайшему
   десятичному представлению float (repr), а не по двоичному значению
3. Количество дискретных позиций всегда >= 1 для непустого шага
"""

import math
from decimal import Decimal
from fractions import Fraction
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Шаг <= CONTINUOUS_STEP_MAX означает непрерывную выборку
CONTINUOUS_STEP_MAX: Final[float] = 0.0


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    try:
        return math.isfinite(value)
    except OverflowError:
        # int больше максимального float
        return False


def is_real_number(value: object) -> bool:
    """
    Проверка, что значение — вещественное число (int/float), но не bool.

    bool в Python является подклассом int, поэтому исключается явно.
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# =============================================================================
# ДЕСЯТИЧНАЯ ТОЧНОСТЬ
# =============================================================================


def decimal_places(value: float) -> int:
    """
    Количество десятичных знаков в кратчайшем представлении числа.

    Используется repr(float) — кратчайшая строка, которая однозначно
    восстанавливает то же значение. Экспоненциальная запись учитывается.

    Args:
        value: Конечное число (обычно шаг диапазона)

    Returns:
        Количество знаков после запятой (>= 0)

    Raises:
        ValueError: Если value равно NaN/Inf

    Examples:
        >>> decimal_places(0.1)
        1
        >>> decimal_places(2.0)
        0
        >>> decimal_places(0.25)
        2
        >>> decimal_places(1e-05)
        5
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    exponent = Decimal(repr(float(value))).normalize().as_tuple().exponent
    return max(0, -int(exponent))


def round_to_precision_of(value: float, reference: float) -> float:
    """
    Округление value до числа десятичных знаков reference.

    Убирает артефакты двоичного представления float,
    например 0.1 * 3 = 0.30000000000000004 → 0.3 при шаге 0.1.

    Args:
        value: Значение для округления
        reference: Число, задающее точность (шаг)

    Returns:
        Округлённое значение

    Examples:
        >>> round_to_precision_of(0.30000000000000004, 0.1)
        0.3
        >>> round_to_precision_of(4.0, 2.0)
        4.0
    """
    return float(round(value, decimal_places(reference)))


# =============================================================================
# ДИСКРЕТНАЯ СЕТКА
# =============================================================================


def is_continuous_step(step: float) -> bool:
    """Шаг <= 0 означает непрерывную выборку (отрицательный шаг — тоже)."""
    return step <= CONTINUOUS_STEP_MAX


def step_count(low: float, high: float, step: float) -> int:
    """
    Количество допустимых дискретных позиций low, low + step, ... <= high.

    Формула: floor((high - low) / step) + 1

    Args:
        low: Нижняя граница (включительно)
        high: Верхняя граница (включительно), high >= low
        step: Шаг сетки (> 0)

    Returns:
        Количество позиций (>= 1)

    Raises:
        ValueError: Если step <= 0

    Examples:
        >>> step_count(1.0, 6.0, 1.0)
        6
        >>> step_count(0.0, 1.0, 0.3)
        4
        >>> step_count(5.0, 5.0, 1.0)
        1
    """
    validate_positive(step, "step")

    quotient = (high - low) / step
    if is_valid_float(quotient):
        return math.floor(quotient) + 1

    # Переполнение float: точный расчёт в рациональных числах
    return math.floor((Fraction(high) - Fraction(low)) / Fraction(step)) + 1


def lattice_value(low: float, step: float, index: int) -> float:
    """
    Позиция дискретной сетки: low + index * step.

    Если index не помещается во float или результат переполняется,
    значение считается точно и округляется до ближайшего float.

    Examples:
        >>> lattice_value(1.0, 0.5, 3)
        2.5
    """
    try:
        value = low + index * step
    except OverflowError:
        value = math.inf

    if is_valid_float(value):
        return value

    return float(Fraction(low) + index * Fraction(step))


def interpolate(low: float, high: float, fraction: float) -> float:
    """
    Точка между low и high для fraction в [0, 1), результат в [low, high).

    Формула low * (1 - fraction) + high * fraction не вычисляет high - low,
    поэтому не переполняется на диапазонах шире максимального float.
    При low == high возвращается low.

    Examples:
        >>> interpolate(-5.0, 7.0, 0.5)
        1.0
        >>> interpolate(-1e308, 1e308, 0.0)
        -1e+308
    """
    value = low * (1.0 - fraction) + high * fraction

    if not is_valid_float(value) or value >= high:
        return low if low >= high else math.nextafter(high, low)

    return max(value, low)


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_count(value: int, name: str) -> None:
    """
    Валидация неотрицательного целого количества.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (bool не допускается)
        ValueError: Если value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
