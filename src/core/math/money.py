"""
Money — Fixed-point арифметика для валютных сумм

Все суммы внутри движка сдачи хранятся как целые центы (int).
Decimal используется только на границе (вход/выход), float никогда
не участвует в вычислениях.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. round2 всегда использует один и тот же режим округления (ROUND_HALF_UP по умолчанию)
2. float конвертируется через str(), чтобы не тянуть двоичный дрейф (0.1 + 0.2)
3. NaN/Inf никогда не превращаются в сумму (ValueError)
4. Операции детерминированы и воспроизводимы
"""

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, getcontext, localcontext
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Шаг квантования: 0.01 (два знака после запятой)
CENT: Final[Decimal] = Decimal("0.01")

# Центов в одной денежной единице
CENTS_PER_UNIT: Final[int] = 100

# Режим округления по умолчанию для round2
DEFAULT_ROUNDING: Final[str] = ROUND_HALF_UP

ZERO: Final[Decimal] = Decimal("0.00")

# Запас разрядов сверх длины операндов (знак переноса, два знака центов)
_PREC_MARGIN: Final[int] = 4


# =============================================================================
# КОНВЕРСИЯ ВХОДА
# =============================================================================


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Приведение числового входа к Decimal.

    Args:
        value: Decimal, int, float или строка ("47.50")

    Returns:
        Точное Decimal-представление

    Raises:
        ValueError: Если значение не число, NaN или Inf

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("19.95")
        Decimal('19.95')
    """
    if isinstance(value, bool):
        raise ValueError(f"Amount must be a number, got bool: {value}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            # float через str: Decimal(0.1) != Decimal("0.1")
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Amount must be a number, got {value!r}") from None
    else:
        raise ValueError(f"Amount must be a number, got {type(value).__name__}")

    if not is_finite_amount(result):
        raise ValueError(f"Amount contains NaN/Inf: {value}")

    return result


def is_finite_amount(value: Decimal) -> bool:
    """True если Decimal конечен (не NaN, не Inf)."""
    return value.is_finite()


# =============================================================================
# ОКРУГЛЕНИЕ И ЦЕНТЫ
# =============================================================================


def _context_for(*values: Decimal) -> Context:
    """
    decimal-контекст с точностью, достаточной для точной работы с values.

    Стандартные 28 знаков не покрывают суммы вроде 10**27 × 100.00:
    quantize бросает InvalidOperation, вычитание теряет разряды.
    """
    top = max(v.adjusted() for v in values)
    bottom = min(min(v.as_tuple().exponent, 0) for v in values)
    ctx = getcontext().copy()
    ctx.prec = max(ctx.prec, top - bottom + _PREC_MARGIN)
    return ctx


def subtract(a: Decimal, b: Decimal) -> Decimal:
    """Точное a - b без потери разрядов на больших суммах."""
    with localcontext(_context_for(a, b)):
        return a - b


def round2(value: Decimal, rounding: str = DEFAULT_ROUNDING) -> Decimal:
    """
    Округление до 0.01.

    По умолчанию round-half-up: 0.005 → 0.01, 0.015 → 0.02
    (banker's rounding дал бы 0.00 и 0.02).

    Args:
        value: Сумма
        rounding: Режим округления модуля decimal

    Returns:
        Сумма с ровно двумя знаками после запятой
    """
    with localcontext(_context_for(value)):
        return value.quantize(CENT, rounding=rounding)


def to_cents(value: Decimal, rounding: str = DEFAULT_ROUNDING) -> int:
    """
    Сумма → целые центы (с round2).

    Examples:
        >>> to_cents(Decimal("16.67"))
        1667
        >>> to_cents(Decimal("0.005"))
        1
    """
    sign, digits, _ = round2(value, rounding).as_tuple()
    cents = int("".join(str(d) for d in digits))
    return -cents if sign else cents


def from_cents(cents: int) -> Decimal:
    """Целые центы → Decimal с двумя знаками (точно, без контекста)."""
    sign = "-" if cents < 0 else ""
    units, rest = divmod(abs(cents), CENTS_PER_UNIT)
    return Decimal(f"{sign}{units}.{rest:02d}")


def is_whole_cents(value: Decimal) -> bool:
    """True если сумма представима целым числом центов без округления."""
    return round2(value) == value


def format_amount(value: Decimal) -> str:
    """
    Форматирование суммы для отображения: "$47.50".

    Отрицательные суммы не ожидаются (движок их не производит).
    """
    return f"${format(round2(value), 'f')}"
