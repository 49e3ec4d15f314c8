import sys
from typing import Optional

from loguru import logger

from excel_io import read_sheet, write_sheet
from report_config import FilterOptions, default_output_path, setup_logging
from stage_result import ErrorKind, StageResult
from unique_filter import filter_stats, filter_unique

PROMPT = "Provide file path to the Excel file:"


def run_pipeline(input_path, output_path, options: Optional[FilterOptions] = None) -> StageResult:
    """
    Read the configured sheet, keep the first row per key, write the result.

    Stops at the first failing stage and returns its result; the output
    file is written only when every earlier stage succeeded.
    """
    if options is None:
        options = FilterOptions()
    logger.info(f"Filtering {input_path} with {options}")

    read = read_sheet(input_path, options.sheet_name)
    if not read.ok:
        return read

    filtered = filter_unique(read.value, options.key_column)
    if not filtered.ok:
        logger.error(f"Filtering failed: {filtered.error}")
        return filtered

    stats = filter_stats(read.value, filtered.value)
    logger.info(f"Processed: {stats.data_rows} data rows")
    logger.info(f"Kept: {stats.kept} unique rows, dropped {stats.dropped} duplicates")

    return write_sheet(filtered.value, output_path, options.output_sheet_name)


def clean_input_path(raw: str) -> str:
    path = raw.strip()
    if len(path) >= 2 and path[0] == path[-1] and path[0] in ("'", '"'):
        path = path[1:-1]
    return path


def main() -> int:
    """
    Entry point for the script
    """
    setup_logging()

    print(PROMPT)
    raw = sys.stdin.readline()
    output_path = default_output_path()

    if raw:
        result = run_pipeline(clean_input_path(raw), output_path)
    else:
        result = StageResult.failure(ErrorKind.NOT_FOUND, "No input file path provided")

    if not result.ok:
        print(f"Error processing file: {result.error.message}", file=sys.stderr)
        print(f"{result.error.kind.value}: {result.error.detail or result.error.message}",
              file=sys.stderr)
        return 1

    print(f"Filtered report has been created at: {result.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
