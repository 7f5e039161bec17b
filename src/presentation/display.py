"""Display — форматирование для presentation layer.

Отдельный lookup внутреннее имя → подпись ("2dollars" → "$2"), не встроенный
в логику движка, и рендер ChangeResult в строки "count x label".
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Final, Mapping

from src.core.domain.change_result import Breakdown, Exact, Insufficient
from src.core.math.money import format_amount

DENOMINATION_LABELS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "hundred": "$100",
        "fifty": "$50",
        "twenty": "$20",
        "ten": "$10",
        "five": "$5",
        "2dollars": "$2",
        "1dollar": "$1",
        "50cents": "50c",
        "20cents": "20c",
        "10cents": "10c",
        "5cents": "5c",
    }
)

CHANGE_DUE_HEADER: Final[str] = "Change Due:"


def format_denomination_name(name: str) -> str:
    """Подпись номинала; неизвестное имя возвращается как есть."""
    return DENOMINATION_LABELS.get(name, name)


def format_total_paid(total: Decimal) -> str:
    """'Total Paid: $47.50'"""
    return f"Total Paid: {format_amount(total)}"


def render_result(result: Insufficient | Exact | Breakdown) -> list[str]:
    """Рендер результата в строки для отображения.

    Insufficient/Exact → [message]
    Breakdown → ["Change Due:", "1 x $2", "1 x 50c", ...]
    Неразложимый остаток выводится отдельной строкой.
    """
    match result:
        case Insufficient(message=message) | Exact(message=message):
            return [message]
        case Breakdown():
            lines = [CHANGE_DUE_HEADER]
            lines.extend(
                f"{entry.count} x {format_denomination_name(entry.name)}"
                for entry in result.entries
            )
            if not result.is_complete():
                lines.append(f"Undispensed: {format_amount(result.remainder)}")
            return lines
        case _:
            raise TypeError(f"Unsupported change result: {type(result).__name__}")
