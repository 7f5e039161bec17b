"""
Tender — Количество переданных единиц одного номинала

Immutable Pydantic модель. Производится вызывающей стороной (UI),
по одной записи на номинал, count по умолчанию 0.
"""

from typing import Mapping

from pydantic import BaseModel, Field, StrictInt


class Tender(BaseModel):
    """Сколько единиц номинала передал покупатель."""

    name: str = Field(..., min_length=1, description="Имя номинала из таблицы")
    # StrictInt: True/False и "3" не считаются количеством
    count: StrictInt = Field(0, ge=0, description="Количество единиц (>= 0)")

    model_config = {"frozen": True}


def tenders_from_counts(counts: Mapping[str, int]) -> list[Tender]:
    """
    Построение списка Tender из отображения {name: count}.

    Порядок сохраняется (dict сохраняет порядок вставки).

    Raises:
        pydantic.ValidationError: Если count отрицательный или не int
    """
    return [Tender(name=name, count=count) for name, count in counts.items()]
