import os
import tempfile
from pathlib import Path
from typing import List

import pandas as pd
from loguru import logger

from stage_result import ErrorKind, StageResult
from unique_filter import Row, Table


def cell_text(value: str) -> str:
    return value.strip()


def row_cells(values: List[str], width: int = 0) -> Row:
    """
    Trimmed cells of one sheet row, or [] when every cell is empty.

    A row extends to its last non-empty cell, and at least to width
    (the header's width) so blank cells under a header read as "".
    Whitespace-only cells count as filled.
    """
    end = len(values)
    while end > 0 and values[end - 1] == "":
        end -= 1
    if end == 0:
        return []
    return [cell_text(v) for v in values[:max(end, width)]]


def read_sheet(path, sheet_name: str) -> StageResult:
    """
    Load one sheet of an .xlsx workbook as rows of trimmed cell text
    """
    path = Path(path)
    logger.info(f"Loading sheet '{sheet_name}' from {path}")

    if not path.is_file():
        logger.error(f"Input file not found: {path}")
        return StageResult.failure(
            ErrorKind.NOT_FOUND, f"Input file not found: {path}")

    try:
        xls = pd.ExcelFile(path, engine="openpyxl")
    except Exception as e:
        logger.error(f"Error opening workbook: {e}")
        return StageResult.failure(
            ErrorKind.NOT_FOUND, f"Cannot open workbook {path}", detail=repr(e))

    with xls:
        if sheet_name not in xls.sheet_names:
            logger.error(f"Sheet '{sheet_name}' not found in {path}")
            return StageResult.failure(
                ErrorKind.SCHEMA, f"Sheet '{sheet_name}' not found.",
                detail=f"Available sheets: {xls.sheet_names}")

        try:
            df = pd.read_excel(xls, sheet_name=sheet_name,
                               header=None, dtype=str,
                               keep_default_na=False)
        except Exception as e:
            logger.error(f"Error reading sheet '{sheet_name}': {e}")
            return StageResult.failure(
                ErrorKind.NOT_FOUND, f"Cannot read sheet '{sheet_name}'", detail=repr(e))

    table: Table = []
    width = 0
    for values in df.itertuples(index=False, name=None):
        cells = row_cells(list(values), width)
        if not cells:
            continue
        if not table:
            width = len(cells)
        table.append(cells)

    logger.success(f"Loaded {len(table)} rows from sheet '{sheet_name}'")
    return StageResult.success(table)


def _force_text(worksheet) -> None:
    # openpyxl treats strings starting with "=" as formulas
    for row in worksheet.iter_rows():
        for cell in row:
            if cell.data_type == "f":
                cell.data_type = "s"


def write_sheet(table: Table, path, sheet_name: str) -> StageResult:
    """
    Write rows as plain text to a new single-sheet workbook.

    The workbook is built in a temporary file next to the target and moved
    into place only once complete, so a failed write leaves no output.
    """
    target = Path(path)
    logger.info(f"Saving {len(table)} rows to {target}")
    tmp_path = None

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=".~", suffix=".xlsx", dir=str(target.parent))
        os.close(fd)

        frame = pd.DataFrame(table, dtype=object)
        with pd.ExcelWriter(tmp_path, engine="openpyxl") as writer:
            frame.to_excel(writer, sheet_name=sheet_name,
                           header=False, index=False)
            _force_text(writer.sheets[sheet_name])

        os.replace(tmp_path, target)
        tmp_path = None
    except Exception as e:
        logger.error(f"Error saving workbook: {e}")
        return StageResult.failure(
            ErrorKind.IO, f"Cannot write output file {target}", detail=repr(e))
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)

    logger.success(f"Workbook saved to {target}")
    return StageResult.success(str(target))
