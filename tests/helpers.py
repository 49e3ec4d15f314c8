"""Workbook builders shared by the test modules."""

from openpyxl import Workbook, load_workbook


HEADER = ["inst", "Host", "Defender Atp: Asset Name", "Owner"]


def make_workbook(path, sheets):
    """Write {sheet_name: rows} to an .xlsx file."""
    wb = Workbook()
    wb.remove(wb.active)
    for name, rows in sheets.items():
        ws = wb.create_sheet(name)
        for row in rows:
            ws.append(row)
    wb.save(path)
    return path


def read_workbook(path):
    """Return {sheet_name: rows} with every cell value as stored."""
    wb = load_workbook(path)
    try:
        return {
            ws.title: [list(row) for row in ws.iter_rows(values_only=True)]
            for ws in wb.worksheets
        }
    finally:
        wb.close()
