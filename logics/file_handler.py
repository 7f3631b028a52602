import io
import zipfile
from pathlib import Path

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from logics.data_model import TabularModel
from logics.errors import (
    EmptySource,
    NoSheetsFound,
    SheetSelectionRequired,
    TooLarge,
    UnreadableFormat,
    UnsupportedExtension,
)

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
ALLOWED_EXTENSIONS = ('csv', 'xlsx')
CSV_ENCODINGS = ['utf-8-sig', 'utf-8', 'cp1252', 'latin-1']
PREVIEW_ROWS = 5
PREVIEW_COLUMNS = 10


def file_extension(file_name):
    """Lower-cased extension without the dot ('' when there is none)."""
    return Path(file_name).suffix.lstrip('.').lower()


def check_upload(file_name, size_bytes):
    """
    Validate size and extension before any bytes are decoded.

    Returns:
        The lower-cased extension ('csv' or 'xlsx').

    Raises:
        TooLarge: size_bytes above MAX_UPLOAD_BYTES.
        UnsupportedExtension: extension not in ALLOWED_EXTENSIONS.
    """
    if size_bytes > MAX_UPLOAD_BYTES:
        raise TooLarge()
    extension = file_extension(file_name)
    if extension not in ALLOWED_EXTENSIONS:
        raise UnsupportedExtension()
    return extension


def decode(file_bytes, file_name, size_bytes=None, sheet_name=None):
    """
    Decode an uploaded CSV/XLSX file into a TabularModel.

    Args:
        file_bytes: raw file content.
        file_name: original file name; its extension picks the reader.
        size_bytes: declared file size, defaults to len(file_bytes).
        sheet_name: sheet to read from a multi-sheet workbook.

    Returns:
        TabularModel with the header row, a preview of up to PREVIEW_ROWS rows
        by PREVIEW_COLUMNS columns, and the full row/column counts.

    Raises:
        SourceError subclasses (TooLarge, UnsupportedExtension, EmptySource,
        UnreadableFormat, NoSheetsFound, SheetSelectionRequired).
    """
    if size_bytes is None:
        size_bytes = len(file_bytes)
    extension = check_upload(file_name, size_bytes)

    if extension == 'csv':
        grid = _read_csv_grid(file_bytes, file_name)
        return _build_model(grid, file_name)

    workbook = _open_workbook(file_bytes)
    sheet_names = list(workbook.sheet_names)
    if not sheet_names:
        raise NoSheetsFound()
    if sheet_name is None:
        if len(sheet_names) > 1:
            raise SheetSelectionRequired(sheet_names)
        sheet_name = sheet_names[0]
    elif sheet_name not in sheet_names:
        raise NoSheetsFound(f"Sheet '{sheet_name}' was not found in {file_name}.")

    grid = _read_sheet_grid(workbook, sheet_name)
    if not grid:
        raise EmptySource("Selected sheet appears to be empty.")
    return _build_model(grid, file_name, sheet_name=sheet_name)


def read_sheet_names(file_bytes):
    """List the sheet names of an XLSX workbook, in workbook order."""
    return list(_open_workbook(file_bytes).sheet_names)


def load_file(path, sheet_name=None):
    """Read a file from disk and decode it (see decode())."""
    path = Path(path)
    size = path.stat().st_size
    check_upload(path.name, size)
    return decode(path.read_bytes(), path.name, size_bytes=size, sheet_name=sheet_name)


# ── Readers ─────────────────────────────────────────────────

def _read_csv_grid(file_bytes, file_name):
    if not file_bytes.strip():
        raise EmptySource()

    # Try multiple encodings to handle international characters
    df = None
    for enc in CSV_ENCODINGS:
        try:
            df = _parse_csv(file_bytes, enc)
            print(f"[DEBUG] {file_name} loaded with encoding: {enc}")
            break
        except (UnicodeDecodeError, LookupError):
            continue
        except pd.errors.EmptyDataError as e:
            raise EmptySource() from e
        except pd.errors.ParserError as e:
            raise UnreadableFormat() from e

    if df is None:
        raise UnreadableFormat(f"Could not load {file_name} with any supported encoding.")
    return _frame_to_grid(df)


def _parse_csv(file_bytes, encoding):
    """Parse CSV bytes with no header row; rows longer than the first row lose their extra cells."""
    options = {'header': None, 'dtype': str, 'keep_default_na': False, 'encoding': encoding}
    width = pd.read_csv(io.BytesIO(file_bytes), engine='python', nrows=1, **options).shape[1]
    return pd.read_csv(
        io.BytesIO(file_bytes),
        engine='python',
        index_col=False,
        on_bad_lines=lambda fields: fields[:width],
        **options,
    )


def _open_workbook(file_bytes):
    if not file_bytes:
        raise EmptySource()
    try:
        return pd.ExcelFile(io.BytesIO(file_bytes), engine='openpyxl')
    except (zipfile.BadZipFile, InvalidFileException, ValueError, KeyError, OSError) as e:
        raise UnreadableFormat("Unable to read Excel file. Please ensure file is valid.") from e


def _read_sheet_grid(workbook, sheet_name):
    try:
        df = workbook.parse(sheet_name, header=None, dtype=object)
    except (ValueError, KeyError) as e:
        raise UnreadableFormat("Error processing Excel sheet. Please try again.") from e
    return _frame_to_grid(df)


def _frame_to_grid(df):
    """DataFrame (no header row) -> list of rows of strings; missing cells become ''."""
    df = df.dropna(how='all')
    grid = []
    for values in df.itertuples(index=False, name=None):
        grid.append([_cell_text(v) for v in values])
    return grid


def _cell_text(value):
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _build_model(grid, file_name, sheet_name=None):
    if not grid:
        raise EmptySource()
    headers = grid[0]
    data_rows = grid[1:]
    width = min(PREVIEW_COLUMNS, len(headers))
    preview = [row[:width] for row in data_rows[:PREVIEW_ROWS]]
    return TabularModel(
        source_name=file_name,
        total_row_count=len(data_rows),
        total_column_count=len(headers),
        headers=headers,
        preview_rows=preview,
        sheet_name=sheet_name,
    )
