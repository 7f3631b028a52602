import io
import json
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import pandas as pd

SPREADSHEET_MIME = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
XLSX_SHEET_NAME = 'Filtered'


class ExportFormat(Enum):
    """Export formats as (key, extension, MIME type)."""

    CSV = ('csv', 'csv', 'text/csv')
    JSON = ('json', 'json', 'application/json')
    # CSV body under a spreadsheet name and MIME type; not a real workbook.
    PSEUDO_EXCEL = ('pseudo_excel', 'xlsx', SPREADSHEET_MIME)
    XLSX = ('xlsx', 'xlsx', SPREADSHEET_MIME)

    @property
    def extension(self):
        return self.value[1]

    @property
    def mime_type(self):
        return self.value[2]

    @classmethod
    def lookup(cls, fmt):
        """Accept an ExportFormat or its name in any case ('csv', 'Pseudo_Excel')."""
        if isinstance(fmt, cls):
            return fmt
        try:
            return cls[str(fmt).upper()]
        except KeyError:
            raise ValueError(f"Unsupported export format: {fmt}") from None


@dataclass(frozen=True)
class ExportResult:
    filename: str
    mime_type: str
    content: bytes


def _escape_cell(cell):
    if ',' in cell or '"' in cell or '\n' in cell:
        return '"' + cell.replace('"', '""') + '"'
    return cell


def to_csv(view):
    """Render a ProjectedView as CSV text: comma separated, '\\n' between lines, no trailing newline."""
    lines = [','.join(_escape_cell(h) for h in view.headers)]
    for row in view.rows:
        lines.append(','.join(_escape_cell(cell) for cell in row))
    return '\n'.join(lines)


def to_json(view):
    """Render a ProjectedView as a pretty-printed array of header -> cell objects."""
    records = []
    for row in view.rows:
        records.append({
            header: (row[i] if i < len(row) else '')
            for i, header in enumerate(view.headers)
        })
    return json.dumps(records, indent=2, ensure_ascii=False)


def to_xlsx(view):
    """Write a real .xlsx workbook (one sheet, all cells as text) and return its bytes."""
    buffer = io.BytesIO()
    # Cells stay literal text: no formulas from "=..." and no auto hyperlinks
    options = {'strings_to_formulas': False, 'strings_to_urls': False}
    with pd.ExcelWriter(buffer, engine='xlsxwriter', engine_kwargs={'options': options}) as writer:
        view.to_dataframe().to_excel(writer, sheet_name=XLSX_SHEET_NAME, index=False)
    return buffer.getvalue()


def serialize(view, fmt):
    """
    Serialize a ProjectedView to bytes.

    Args:
        view: ProjectedView to write.
        fmt: ExportFormat, or its name in any case.

    Returns:
        UTF-8 encoded text for CSV / JSON / PSEUDO_EXCEL, workbook bytes for XLSX.
    """
    fmt = ExportFormat.lookup(fmt)
    if fmt in (ExportFormat.CSV, ExportFormat.PSEUDO_EXCEL):
        return to_csv(view).encode('utf-8')
    if fmt is ExportFormat.JSON:
        return to_json(view).encode('utf-8')
    if fmt is ExportFormat.XLSX:
        return to_xlsx(view)
    raise ValueError(f"Unsupported export format: {fmt}")


def default_filename(source_name, fmt):
    """'sales.2024.csv' -> 'sales.2024_filtered.json' for JSON."""
    stem = re.sub(r'\.[^/.]+$', '', source_name)
    return f"{stem}_filtered.{fmt.extension}"


def export(view, fmt, source_name, filename=None):
    """Serialize a view and name it. `filename` overrides the default naming policy."""
    fmt = ExportFormat.lookup(fmt)
    content = serialize(view, fmt)
    name = filename or default_filename(source_name, fmt)
    print(f"[EXPORT] {name} ({fmt.name}, {len(view.headers)} columns, {len(view.rows)} rows, {len(content)} bytes)")
    return ExportResult(filename=name, mime_type=fmt.mime_type, content=content)


def save_export(result, path):
    """
    Write an ExportResult to disk.

    Args:
        result: ExportResult to write.
        path: target file, or a directory to place result.filename in.

    Returns:
        Path of the written file.
    """
    target = Path(path)
    if target.is_dir():
        target = target / result.filename
    target.write_bytes(result.content)
    print(f"[EXPORT] Written: {target}")
    return target
