"""CSV Export — выгрузка EarningsBreakdown в двухколоночную таблицу.

Формат:
    metric,amount
    second,0.011574074074074073
    ...

- Одна строка на метрику, порядок и имена из EXPORT_METRIC_NAMES
- Значения пишутся кратчайшим round-trip представлением float (repr),
  поэтому повторный разбор воспроизводит значения побитово точно
"""

import csv
import io
import logging
from pathlib import Path
from typing import Final

from src.core.domain.earnings import EXPORT_METRIC_NAMES, EarningsBreakdown

logger = logging.getLogger(__name__)

CSV_HEADER: Final[tuple[str, str]] = ("metric", "amount")
DEFAULT_EXPORT_FILENAME: Final[str] = "earnings-breakdown.csv"


def breakdown_to_csv(breakdown: EarningsBreakdown) -> str:
    """Сериализация метрик в CSV текст (с заголовком metric,amount)."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for metric, value in breakdown.export_metrics():
        writer.writerow((metric, repr(float(value))))
    return buffer.getvalue()


def write_breakdown_csv(
    breakdown: EarningsBreakdown,
    path: str | Path = DEFAULT_EXPORT_FILENAME,
) -> Path:
    """Запись CSV в файл.

    Args:
        breakdown: метрики заработка
        path: путь к файлу (по умолчанию earnings-breakdown.csv)

    Returns:
        Путь к записанному файлу
    """
    target = Path(path)
    with open(target, "w", encoding="utf-8", newline="") as f:
        f.write(breakdown_to_csv(breakdown))
    logger.info("Exported earnings breakdown to %s", target)
    return target


def parse_metric_values(text: str) -> dict[str, float]:
    """Разбор CSV в словарь metric → value.

    Raises:
        ValueError: если заголовок не metric,amount, строка не из двух колонок,
            метрика повторяется или значение не число
    """
    reader = csv.reader(io.StringIO(text))
    header = next(reader, None)
    if header is None or tuple(header) != CSV_HEADER:
        raise ValueError(f"Expected CSV header {','.join(CSV_HEADER)!r}, got {header!r}")

    values: dict[str, float] = {}
    for line_no, row in enumerate(reader, start=2):
        if not row:
            continue
        if len(row) != 2:
            raise ValueError(f"Line {line_no}: expected 2 columns, got {len(row)}")
        metric, raw_amount = row
        if metric in values:
            raise ValueError(f"Line {line_no}: duplicate metric {metric!r}")
        try:
            values[metric] = float(raw_amount)
        except ValueError:
            raise ValueError(f"Line {line_no}: amount {raw_amount!r} is not a number") from None
    return values


def parse_breakdown_csv(text: str) -> EarningsBreakdown:
    """Обратный разбор CSV в EarningsBreakdown.

    Raises:
        ValueError: если CSV некорректен или в нём нет одной из метрик
    """
    values = parse_metric_values(text)
    missing = [metric for metric in EXPORT_METRIC_NAMES.values() if metric not in values]
    if missing:
        raise ValueError(f"Missing metrics: {', '.join(missing)}")
    return EarningsBreakdown.from_export_metrics(values)
