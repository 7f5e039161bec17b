"""Change — расчёт сдачи по переданным номиналам.

- ChangeEngine: валидация входа, сравнение с ценой, жадное разложение
- ChangeEngineConfig: таблица номиналов, режим округления, сообщения
"""

from .engine import (
    ChangeEngine,
    ChangeEngineConfig,
    InvalidChangeInput,
    coerce_price,
    compute_change,
    default_engine,
    total_tendered,
)

__all__ = [
    "ChangeEngine",
    "ChangeEngineConfig",
    "InvalidChangeInput",
    "coerce_price",
    "compute_change",
    "default_engine",
    "total_tendered",
]
