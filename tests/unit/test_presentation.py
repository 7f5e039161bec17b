"""
Тесты для presentation helpers

Проверяет:
1. Lookup подписей номиналов
2. Рендер всех вариантов ChangeResult
3. Immutable состояние счётчиков и экрана оплаты
"""

import dataclasses
from decimal import Decimal

import pytest

from src.change import ChangeEngine, InvalidChangeInput
from src.core.domain import DENOMINATION_TABLE, Breakdown, ChangeEntry, Exact, Insufficient
from src.presentation import (
    CHANGE_DUE_HEADER,
    DENOMINATION_LABELS,
    CheckoutState,
    TenderCounter,
    format_denomination_name,
    format_total_paid,
    render_result,
)


# =============================================================================
# DISPLAY
# =============================================================================


class TestDenominationLabels:
    @pytest.mark.parametrize(
        "name,label",
        [
            ("hundred", "$100"),
            ("fifty", "$50"),
            ("twenty", "$20"),
            ("ten", "$10"),
            ("five", "$5"),
            ("2dollars", "$2"),
            ("1dollar", "$1"),
            ("50cents", "50c"),
            ("20cents", "20c"),
            ("10cents", "10c"),
            ("5cents", "5c"),
        ],
    )
    def test_known_labels(self, name: str, label: str) -> None:
        assert format_denomination_name(name) == label

    def test_unknown_name_passthrough(self) -> None:
        assert format_denomination_name("euro") == "euro"

    def test_every_denomination_has_label(self) -> None:
        assert set(DENOMINATION_LABELS) == {d.name for d in DENOMINATION_TABLE}


class TestRenderResult:
    def test_insufficient(self) -> None:
        result = Insufficient(total=Decimal("50.00"), price=Decimal("100"))
        assert render_result(result) == ["The amount given is less than the price"]

    def test_exact(self) -> None:
        result = Exact(total=Decimal("100.00"), price=Decimal("100"))
        assert render_result(result) == ["Correct amount given"]

    def test_breakdown(self) -> None:
        result = Breakdown(
            entries=(ChangeEntry(name="2dollars", count=1), ChangeEntry(name="50cents", count=3)),
            difference=Decimal("3.50"),
        )
        assert render_result(result) == [CHANGE_DUE_HEADER, "1 x $2", "3 x 50c"]

    def test_breakdown_with_remainder(self) -> None:
        result = Breakdown(
            entries=(ChangeEntry(name="5cents", count=1),),
            difference=Decimal("0.07"),
            remainder=Decimal("0.02"),
        )
        assert render_result(result)[-1] == "Undispensed: $0.02"

    def test_unsupported(self) -> None:
        with pytest.raises(TypeError):
            render_result(object())  # type: ignore[arg-type]


def test_format_total_paid() -> None:
    assert format_total_paid(Decimal("47.5")) == "Total Paid: $47.50"


# =============================================================================
# STATE
# =============================================================================


class TestTenderCounter:
    def test_empty_has_zero_for_each_denomination(self) -> None:
        counter = TenderCounter.empty()
        assert list(counter.counts) == [d.name for d in DENOMINATION_TABLE]
        assert all(count == 0 for count in counter.counts.values())

    def test_increment_returns_new_counter(self) -> None:
        counter = TenderCounter.empty()
        updated = counter.increment("fifty").increment("fifty")
        assert updated.count("fifty") == 2
        assert counter.count("fifty") == 0

    def test_decrement_clamped_at_zero(self) -> None:
        counter = TenderCounter.empty().decrement("ten")
        assert counter.count("ten") == 0
        assert not counter.can_decrement("ten")

    def test_unknown_name(self) -> None:
        with pytest.raises(KeyError):
            TenderCounter.empty().increment("euro")

    def test_clear(self) -> None:
        counter = TenderCounter.empty().increment("five").increment("5cents").clear()
        assert counter == TenderCounter.empty()

    def test_tenders_one_per_denomination(self) -> None:
        tenders = TenderCounter.empty().increment("twenty").tenders()
        assert len(tenders) == len(DENOMINATION_TABLE)
        assert [t.count for t in tenders if t.name == "twenty"] == [1]

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            TenderCounter.empty().counts = {}  # type: ignore[misc]


class TestCheckoutState:
    def test_defaults(self) -> None:
        state = CheckoutState()
        assert state.price == Decimal("100")
        assert isinstance(state.change(), Insufficient)

    def test_exact_after_hundred(self) -> None:
        state = CheckoutState().increment("hundred")
        assert isinstance(state.change(), Exact)
        assert state.total_paid() == Decimal("100.00")

    def test_breakdown_after_set_price(self) -> None:
        state = CheckoutState().set_price("47.50").increment("fifty")
        result = state.change(ChangeEngine())
        assert isinstance(result, Breakdown)
        assert render_result(result) == [CHANGE_DUE_HEADER, "1 x $2", "1 x 50c"]

    def test_decrement(self) -> None:
        state = CheckoutState().increment("fifty").decrement("fifty")
        assert state.counter.count("fifty") == 0

    def test_clear_resets_price_and_counts(self) -> None:
        state = CheckoutState().increment("fifty").clear()
        assert state.price == Decimal("0")
        assert state.total_paid() == Decimal("0")
        assert isinstance(state.change(), Exact)

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(InvalidChangeInput, match="negative_price"):
            CheckoutState().set_price(-1)
