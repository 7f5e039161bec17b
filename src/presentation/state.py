"""Immutable UI state для экрана оплаты наличными.

Вместо глобального мутируемого состояния счётчиков: каждое действие
(increment / decrement / clear / set_price) возвращает новый объект,
а расчёт сдачи заново вызывает чистый движок с явным списком Tender.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Final, Mapping, Optional, Sequence

from src.change.engine import ChangeEngine, coerce_price, default_engine
from src.core.domain.change_result import Breakdown, Exact, Insufficient
from src.core.domain.denomination import DENOMINATION_TABLE, Denomination
from src.core.domain.tender import Tender

# Цена покупки при открытии экрана
DEFAULT_PURCHASE_AMOUNT: Final[Decimal] = Decimal("100")


@dataclass(frozen=True)
class TenderCounter:
    """Счётчики по номиналам, по одному на каждый номинал таблицы (>= 0)."""

    counts: Mapping[str, int]

    @classmethod
    def empty(cls, denominations: Sequence[Denomination] = DENOMINATION_TABLE) -> "TenderCounter":
        return cls(counts=MappingProxyType({d.name: 0 for d in denominations}))

    def count(self, name: str) -> int:
        return self.counts[name]

    def increment(self, name: str) -> "TenderCounter":
        self._require_known(name)
        return self._with(name, self.counts[name] + 1)

    def decrement(self, name: str) -> "TenderCounter":
        """Уменьшение на 1, не ниже нуля."""
        self._require_known(name)
        return self._with(name, max(0, self.counts[name] - 1))

    def can_decrement(self, name: str) -> bool:
        return self.counts.get(name, 0) > 0

    def clear(self) -> "TenderCounter":
        return TenderCounter(counts=MappingProxyType({name: 0 for name in self.counts}))

    def tenders(self) -> list[Tender]:
        return [Tender(name=name, count=count) for name, count in self.counts.items()]

    def _with(self, name: str, value: int) -> "TenderCounter":
        updated = dict(self.counts)
        updated[name] = value
        return TenderCounter(counts=MappingProxyType(updated))

    def _require_known(self, name: str) -> None:
        if name not in self.counts:
            raise KeyError(f"Unknown denomination: {name!r}")


@dataclass(frozen=True)
class CheckoutState:
    """Цена покупки + счётчики; сдача пересчитывается на каждый запрос."""

    price: Decimal = DEFAULT_PURCHASE_AMOUNT
    counter: TenderCounter = field(default_factory=TenderCounter.empty)

    def set_price(self, price: Decimal | int | float | str) -> "CheckoutState":
        """
        Raises:
            InvalidChangeInput: если цена нечисловая или отрицательная
        """
        return CheckoutState(price=coerce_price(price), counter=self.counter)

    def increment(self, name: str) -> "CheckoutState":
        return CheckoutState(price=self.price, counter=self.counter.increment(name))

    def decrement(self, name: str) -> "CheckoutState":
        return CheckoutState(price=self.price, counter=self.counter.decrement(name))

    def clear(self) -> "CheckoutState":
        """Сброс счётчиков и цены в 0 (кнопка Clear)."""
        return CheckoutState(price=Decimal(0), counter=self.counter.clear())

    def total_paid(self, engine: Optional[ChangeEngine] = None) -> Decimal:
        engine = engine or default_engine()
        return engine.total_tendered(self.counter.tenders())

    def change(self, engine: Optional[ChangeEngine] = None) -> Insufficient | Exact | Breakdown:
        engine = engine or default_engine()
        return engine.compute_change(self.price, self.counter.tenders())
