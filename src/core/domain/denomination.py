"""
Denomination — Фиксированная таблица номиналов

Immutable Pydantic модель номинала и таблица, определяемая один раз при старте
процесса и никогда не мутируемая.

Инварианты таблицы (проверяются в validate_denomination_table):
- таблица не пуста
- value > 0 и выражается целым числом центов
- имена уникальны
- порядок строго убывающий по value (рантайм не пересортировывает)
- присутствует наименьший номинал 0.05
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Final, Mapping, Sequence

from pydantic import BaseModel, Field, field_validator

from src.core.math.money import is_whole_cents, to_cents

# Наименьший номинал, гарантирующий разложимость любой суммы, кратной 0.05
SMALLEST_UNIT: Final[Decimal] = Decimal("0.05")


# =============================================================================
# DENOMINATION MODEL
# =============================================================================


class Denomination(BaseModel):
    """
    Номинал валюты.

    Immutable модель (frozen=True).
    """

    name: str = Field(..., min_length=1, description="Внутренний идентификатор ('2dollars')")
    value: Decimal = Field(..., gt=0, description="Номинал в денежных единицах")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_whole_cents(cls, v: Decimal) -> Decimal:
        """Номинал должен выражаться целым числом центов"""
        if not is_whole_cents(v):
            raise ValueError(f"Denomination value {v} is not a whole number of cents")
        return v

    def cents(self) -> int:
        """Номинал в центах"""
        return to_cents(self.value)


# =============================================================================
# TABLE VALIDATION
# =============================================================================


def validate_denomination_table(table: Sequence[Denomination]) -> None:
    """
    Проверка инвариантов таблицы номиналов.

    Args:
        table: Номиналы в объявленном порядке

    Raises:
        ValueError: Если таблица нарушает любой из инвариантов
    """
    if not table:
        raise ValueError("Denomination table cannot be empty")

    seen: set[str] = set()
    for denomination in table:
        if denomination.name in seen:
            raise ValueError(f"Duplicate denomination name: {denomination.name!r}")
        seen.add(denomination.name)

    for previous, current in zip(table, table[1:]):
        if current.value >= previous.value:
            raise ValueError(
                f"Denomination table must be strictly descending by value: "
                f"{previous.name}={previous.value} is followed by {current.name}={current.value}"
            )

    if all(d.value != SMALLEST_UNIT for d in table):
        raise ValueError(
            f"Denomination table must include the smallest unit {SMALLEST_UNIT} "
            f"(smallest_unit_missing)"
        )


def build_denomination_index(table: Sequence[Denomination]) -> Mapping[str, Denomination]:
    """Read-only индекс name → Denomination."""
    return MappingProxyType({d.name: d for d in table})


def _denomination(name: str, value: str) -> Denomination:
    return Denomination(name=name, value=Decimal(value))


# =============================================================================
# FIXED TABLE
# =============================================================================

DENOMINATION_TABLE: Final[tuple[Denomination, ...]] = (
    _denomination("hundred", "100"),
    _denomination("fifty", "50"),
    _denomination("twenty", "20"),
    _denomination("ten", "10"),
    _denomination("five", "5"),
    _denomination("2dollars", "2"),
    _denomination("1dollar", "1"),
    _denomination("50cents", "0.50"),
    _denomination("20cents", "0.20"),
    _denomination("10cents", "0.10"),
    _denomination("5cents", "0.05"),
)

validate_denomination_table(DENOMINATION_TABLE)

DENOMINATION_INDEX: Final[Mapping[str, Denomination]] = build_denomination_index(
    DENOMINATION_TABLE
)
