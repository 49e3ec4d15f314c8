import sys
from pathlib import Path
from typing import Optional

from loguru import logger


class Config:
    # Input sheet and dedup key
    SHEET_NAME = "work (2)"
    KEY_COLUMN = 2  # "Defender Atp: Asset Name"

    # Output workbook
    OUTPUT_DIR_NAME = "Documents"
    OUTPUT_FILE_NAME = "FilteredReport.xlsx"
    OUTPUT_SHEET_NAME = "Filtered Data"

    # Logging Configuration
    LOG_FILE = "filtered_report.log"
    LOG_ROTATION = "10 MB"
    LOG_LEVEL = "DEBUG"
    CONSOLE_LOG_LEVEL = "INFO"


class FilterOptions:
    """
    Named options for one pipeline run, defaulting to Config
    """

    def __init__(self, sheet_name: str = Config.SHEET_NAME,
                 key_column: int = Config.KEY_COLUMN,
                 output_sheet_name: str = Config.OUTPUT_SHEET_NAME):
        self.sheet_name = sheet_name
        self.key_column = key_column
        self.output_sheet_name = output_sheet_name

    def __repr__(self) -> str:
        return (f"FilterOptions(sheet_name={self.sheet_name!r}, "
                f"key_column={self.key_column}, "
                f"output_sheet_name={self.output_sheet_name!r})")


def default_output_path(home: Optional[Path] = None) -> Path:
    """Output workbook under the user's Documents folder"""
    if home is None:
        home = Path.home()
    return Path(home) / Config.OUTPUT_DIR_NAME / Config.OUTPUT_FILE_NAME


def setup_logging(log_file: Optional[str] = Config.LOG_FILE) -> None:
    # stdout is reserved for the prompt and the result line
    logger.remove()
    if log_file:
        logger.add(log_file, rotation=Config.LOG_ROTATION,
                   level=Config.LOG_LEVEL)
    logger.add(sys.stderr, level=Config.CONSOLE_LOG_LEVEL,
               colorize=True,
               format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>")
