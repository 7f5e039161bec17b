"""ChangeEngine — расчёт сдачи по фиксированной таблице номиналов.

Алгоритм:
1. total = Σ count × value по известным номиналам (неизвестные → 0 + WARNING)
2. total < price → Insufficient
3. total == price → Exact
4. difference = round2(total - price)
5. Жадное разложение difference в целых центах по таблице в объявленном порядке
6. Breakdown(entries, difference, remainder)

Движок stateless: таблица неизменяема, вызовы независимы и безопасны
для параллельного использования без блокировок.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional, Sequence

from pydantic import ValidationError

from src.core.domain.change_result import (
    EXACT_MESSAGE,
    INSUFFICIENT_MESSAGE,
    Breakdown,
    ChangeEntry,
    Exact,
    Insufficient,
)
from src.core.domain.denomination import (
    DENOMINATION_TABLE,
    Denomination,
    build_denomination_index,
    validate_denomination_table,
)
from src.core.domain.tender import Tender
from src.core.math.money import (
    DEFAULT_ROUNDING,
    from_cents,
    round2,
    subtract,
    to_cents,
    to_decimal,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidChangeInput(ValueError):
    """
    Нарушение входного контракта: отрицательная цена, отрицательный count,
    нечисловая цена или tender неподдерживаемой формы.

    Отклоняется на границе, до каких-либо вычислений.
    """

    pass


def coerce_price(price: Decimal | int | float | str) -> Decimal:
    """
    Цена покупки → Decimal.

    Raises:
        InvalidChangeInput: если цена нечисловая, NaN/Inf или отрицательная
    """
    try:
        price_dec = to_decimal(price)
    except ValueError as e:
        raise InvalidChangeInput(f"Invalid price {price!r}: {e} (invalid_price)") from e

    if price_dec < 0:
        raise InvalidChangeInput(f"Price cannot be negative: {price} (negative_price)")
    # -0 → 0
    return price_dec.copy_abs() if price_dec.is_zero() else price_dec


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ChangeEngineConfig:
    """Конфигурация движка сдачи.

    denominations должны быть строго убывающими; rounding применяется
    к разнице total - price (round2) и больше нигде.
    """

    denominations: tuple[Denomination, ...] = DENOMINATION_TABLE
    rounding: str = DEFAULT_ROUNDING
    insufficient_message: str = INSUFFICIENT_MESSAGE
    exact_message: str = EXACT_MESSAGE


# =============================================================================
# ENGINE
# =============================================================================


class ChangeEngine:
    """Движок сдачи: валидация, сравнение с ценой, жадное разложение."""

    def __init__(self, config: Optional[ChangeEngineConfig] = None):
        """
        Args:
            config: конфигурация (default: фиксированная таблица, ROUND_HALF_UP)

        Raises:
            ValueError: если таблица номиналов нарушает инварианты
        """
        self.config = config or ChangeEngineConfig()
        validate_denomination_table(self.config.denominations)
        self.denominations = self.config.denominations
        self.index = build_denomination_index(self.denominations)

    def total_tendered(self, tenders: Iterable[Tender | Mapping[str, Any]]) -> Decimal:
        """Сумма переданных денег.

        Tender с неизвестным номиналом даёт 0 и логируется как
        data-integrity warning; расчёт не прерывается.

        Args:
            tenders: список Tender (dict / (name, count) приводятся к Tender)

        Returns:
            Σ count × value, неотрицательный Decimal с двумя знаками

        Raises:
            InvalidChangeInput: если count отрицательный или tender некорректен
        """
        total_cents = 0
        for tender in self._coerce_tenders(tenders):
            denomination = self.index.get(tender.name)
            if denomination is None:
                logger.warning(
                    "Unknown denomination %r in tender (count=%d), contributes 0 to total",
                    tender.name,
                    tender.count,
                )
                continue
            total_cents += denomination.cents() * tender.count
        return from_cents(total_cents)

    def compute_change(
        self,
        price: Decimal | int | float | str,
        tenders: Iterable[Tender | Mapping[str, Any]],
    ) -> Insufficient | Exact | Breakdown:
        """Расчёт сдачи.

        Args:
            price: цена покупки (>= 0)
            tenders: переданные номиналы

        Returns:
            Insufficient | Exact | Breakdown

        Raises:
            InvalidChangeInput: отрицательная/нечисловая цена, отрицательный count
        """
        price_dec = coerce_price(price)
        total = self.total_tendered(tenders)

        # 1. Недостаточно денег (точное сравнение Decimal)
        if total < price_dec:
            logger.debug("Insufficient: total=%s price=%s", total, price_dec)
            return Insufficient(
                message=self.config.insufficient_message, total=total, price=price_dec
            )

        # 2. Ровно без сдачи
        if total == price_dec:
            logger.debug("Exact: total=%s price=%s", total, price_dec)
            return Exact(message=self.config.exact_message, total=total, price=price_dec)

        # 3. Жадное разложение в центах
        difference = round2(subtract(total, price_dec), self.config.rounding)
        entries, remainder_cents = self._decompose(to_cents(difference))

        remainder = from_cents(remainder_cents)
        if remainder_cents:
            logger.warning(
                "Change %s is not representable by the denomination table, "
                "%s left undispensed",
                difference,
                remainder,
            )

        logger.debug(
            "Breakdown: total=%s price=%s difference=%s entries=%s",
            total,
            price_dec,
            difference,
            [(e.name, e.count) for e in entries],
        )
        return Breakdown(entries=tuple(entries), difference=difference, remainder=remainder)

    # -------------------------------------------------------------------------
    # internals
    # -------------------------------------------------------------------------

    def _decompose(self, remaining: int) -> tuple[list[ChangeEntry], int]:
        entries: list[ChangeEntry] = []
        for denomination in self.denominations:
            value_cents = denomination.cents()
            if remaining < value_cents:
                continue
            count = remaining // value_cents
            if count > 0:
                entries.append(ChangeEntry(name=denomination.name, count=count))
                remaining -= value_cents * count
        return entries, remaining

    def _coerce_tenders(self, tenders: Iterable[Tender | Mapping[str, Any]]) -> list[Tender]:
        result: list[Tender] = []
        for tender in tenders:
            if isinstance(tender, Tender):
                result.append(tender)
                continue
            try:
                if isinstance(tender, Mapping):
                    result.append(Tender(**tender))
                elif isinstance(tender, Sequence) and not isinstance(tender, str) and len(tender) == 2:
                    result.append(Tender(name=tender[0], count=tender[1]))
                else:
                    raise InvalidChangeInput(
                        f"Unsupported tender {tender!r}: expected Tender, mapping or (name, count)"
                    )
            except ValidationError as e:
                raise InvalidChangeInput(
                    f"Invalid tender {tender!r}: {e.errors()[0]['msg']} (invalid_tender)"
                ) from e
        return result


# =============================================================================
# MODULE-LEVEL API
# =============================================================================

_DEFAULT_ENGINE = ChangeEngine()


def default_engine() -> ChangeEngine:
    """Общий движок с конфигурацией по умолчанию (stateless, безопасно разделять)."""
    return _DEFAULT_ENGINE


def total_tendered(tenders: Iterable[Tender | Mapping[str, Any]]) -> Decimal:
    """total_tendered на движке с конфигурацией по умолчанию."""
    return _DEFAULT_ENGINE.total_tendered(tenders)


def compute_change(
    price: Decimal | int | float | str,
    tenders: Iterable[Tender | Mapping[str, Any]],
) -> Insufficient | Exact | Breakdown:
    """compute_change на движке с конфигурацией по умолчанию."""
    return _DEFAULT_ENGINE.compute_change(price, tenders)


__all__ = [
    "ChangeEngine",
    "ChangeEngineConfig",
    "InvalidChangeInput",
    "coerce_price",
    "compute_change",
    "default_engine",
    "total_tendered",
]
