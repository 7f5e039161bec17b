"""Presentation helpers — тонкий слой над движком сдачи.

Подписи номиналов, рендер результата в строки, immutable состояние счётчиков.
UI-виджеты (кнопки, поля ввода, layout) остаются внешними.
"""

from .display import (
    CHANGE_DUE_HEADER,
    DENOMINATION_LABELS,
    format_denomination_name,
    format_total_paid,
    render_result,
)
from .state import DEFAULT_PURCHASE_AMOUNT, CheckoutState, TenderCounter

__all__ = [
    "CHANGE_DUE_HEADER",
    "DENOMINATION_LABELS",
    "format_denomination_name",
    "format_total_paid",
    "render_result",
    "DEFAULT_PURCHASE_AMOUNT",
    "CheckoutState",
    "TenderCounter",
]
