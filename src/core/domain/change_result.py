"""
ChangeResult — Результат расчёта сдачи

Tagged union из трёх вариантов (дискриминатор kind):
- Insufficient: переданная сумма меньше цены
- Exact: переданная сумма равна цене
- Breakdown: сдача, разложенная по номиналам

Вызывающая сторона диспетчеризует по варианту (match / isinstance),
а не по форме объекта.

Инвариант Breakdown:
    Σ count × value(name) + remainder == difference == round2(total - price)
"""

from decimal import Decimal
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, Field, PlainSerializer, TypeAdapter, model_validator

from src.core.domain.denomination import Denomination
from src.core.math.money import ZERO, from_cents, round2, subtract

INSUFFICIENT_MESSAGE = "The amount given is less than the price"
EXACT_MESSAGE = "Correct amount given"

# В JSON сумма всегда в позиционной записи: "10000000000000000", не "1E+16"
Amount = Annotated[
    Decimal,
    PlainSerializer(lambda value: format(value, "f"), return_type=str, when_used="json"),
]


# =============================================================================
# ENTRY
# =============================================================================


class ChangeEntry(BaseModel):
    """Одна строка сдачи: номинал × количество (count >= 1)."""

    name: str = Field(..., min_length=1)
    count: int = Field(..., ge=1)

    model_config = {"frozen": True}


# =============================================================================
# VARIANTS
# =============================================================================


class Insufficient(BaseModel):
    """Переданная сумма меньше цены. Нормальный исход, не ошибка."""

    kind: Literal["insufficient"] = "insufficient"
    message: str = INSUFFICIENT_MESSAGE
    total: Amount = Field(..., ge=0, description="Переданная сумма")
    price: Amount = Field(..., ge=0, description="Цена покупки")

    model_config = {"frozen": True}

    def shortfall(self) -> Decimal:
        """Сколько не хватает (округлено до 0.01)"""
        return round2(subtract(self.price, self.total))


class Exact(BaseModel):
    """Переданная сумма точно равна цене."""

    kind: Literal["exact"] = "exact"
    message: str = EXACT_MESSAGE
    total: Amount = Field(..., ge=0)
    price: Amount = Field(..., ge=0)

    model_config = {"frozen": True}


class Breakdown(BaseModel):
    """
    Сдача, разложенная по номиналам.

    entries упорядочены по убыванию номинала, по одной записи на
    использованный номинал. remainder != 0 только если difference
    не выражается доступными номиналами (например 16.67 при шаге 0.05);
    такой остаток не теряется молча, а возвращается вызывающей стороне.
    """

    kind: Literal["breakdown"] = "breakdown"
    entries: tuple[ChangeEntry, ...] = ()
    difference: Amount = Field(..., ge=0, description="round2(total - price)")
    remainder: Amount = Field(ZERO, ge=0, description="Остаток, который нельзя выдать")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_remainder_within_difference(self) -> "Breakdown":
        """Остаток не может превышать саму сдачу"""
        if self.remainder > self.difference:
            raise ValueError(
                f"remainder {self.remainder} cannot exceed difference {self.difference}"
            )
        names = [entry.name for entry in self.entries]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate denomination in breakdown entries: {names}")
        return self

    def is_complete(self) -> bool:
        """True если вся сдача выражена номиналами"""
        return self.remainder == 0

    def dispensed_total(self, index: Mapping[str, Denomination]) -> Decimal:
        """
        Сумма выданной сдачи по таблице номиналов.

        Args:
            index: name → Denomination

        Returns:
            Σ count × value с двумя знаками

        Raises:
            KeyError: Если запись ссылается на неизвестный номинал
        """
        return from_cents(sum(index[entry.name].cents() * entry.count for entry in self.entries))

    def as_pairs(self) -> list[tuple[str, int]]:
        """[(name, count), ...] в порядке выдачи"""
        return [(entry.name, entry.count) for entry in self.entries]


ChangeResult = Annotated[
    Union[Insufficient, Exact, Breakdown],
    Field(discriminator="kind"),
]

_CHANGE_RESULT_ADAPTER: TypeAdapter[Any] = TypeAdapter(ChangeResult)


def change_result_to_dict(result: Insufficient | Exact | Breakdown) -> dict[str, Any]:
    """JSON-совместимый dict (Decimal → строка "2.50" без экспоненты)."""
    return result.model_dump(mode="json")


def change_result_from_dict(data: Mapping[str, Any]) -> Insufficient | Exact | Breakdown:
    """
    Восстановление варианта по полю kind.

    Raises:
        pydantic.ValidationError: Если kind неизвестен или поля невалидны
    """
    return _CHANGE_RESULT_ADAPTER.validate_python(data)
