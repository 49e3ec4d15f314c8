from typing import List, Set

from loguru import logger

from stage_result import ErrorKind, StageResult

Row = List[str]
Table = List[Row]


class FilterStats:
    def __init__(self, data_rows: int, kept: int):
        self.data_rows = data_rows
        self.kept = kept
        self.dropped = data_rows - kept

    def __repr__(self) -> str:
        return f"FilterStats(data_rows={self.data_rows}, kept={self.kept}, dropped={self.dropped})"


def filter_stats(before: Table, after: Table) -> FilterStats:
    return FilterStats(max(len(before) - 1, 0), max(len(after) - 1, 0))


def filter_unique(table: Table, key_column: int) -> StageResult:
    """
    Keep the header plus the first data row for each distinct key.

    The key is the exact text in key_column; rows keep their original order.
    """
    if not table:
        return StageResult.failure(ErrorKind.SCHEMA, "Table has no header row")
    if key_column < 0:
        return StageResult.failure(
            ErrorKind.SCHEMA, f"Invalid key column index {key_column}")

    seen: Set[str] = set()
    filtered: Table = [list(table[0])]

    for idx in range(1, len(table)):
        row = table[idx]
        if len(row) <= key_column:
            return StageResult.failure(
                ErrorKind.MALFORMED_ROW,
                f"Row {idx + 1} has {len(row)} cells, key column {key_column + 1} is missing",
                detail=f"Row {idx + 1}: {row}")

        key = row[key_column]
        if key in seen:
            logger.debug(f"Dropping row {idx + 1}, duplicate key '{key}'")
            continue

        seen.add(key)
        filtered.append(list(row))

    return StageResult.success(filtered)
