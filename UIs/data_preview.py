import tkinter as tk
from tkinter import ttk

from logics.file_handler import PREVIEW_COLUMNS


class DataPreview(ttk.Frame):
    """File metadata and the first rows of the uploaded table."""

    def __init__(self, parent, table):
        super().__init__(parent, padding=10)
        self.table = table
        self._build_ui()

    def _build_ui(self):
        table = self.table

        tk.Label(self, text=table.source_name, font=("Arial", 12, "bold")).pack(anchor='w')

        badges = [f"{table.total_row_count:,} rows", f"{table.total_column_count} columns"]
        if table.sheet_name:
            badges.append(f"Sheet: {table.sheet_name}")
        tk.Label(self, text="   |   ".join(badges), fg="gray").pack(anchor='w', pady=(2, 8))

        header = ttk.Frame(self)
        header.pack(fill='x')
        tk.Label(header, text="Data Preview (Top 5 Rows)", font=("Arial", 10, "bold")).pack(side='left')
        if table.total_column_count > PREVIEW_COLUMNS:
            tk.Label(
                header,
                text=f"Showing first {PREVIEW_COLUMNS} of {table.total_column_count} columns",
                fg="gray",
            ).pack(side='right')

        labels = table.labels[:PREVIEW_COLUMNS]
        columns = [f"c{i}" for i in range(len(labels))]
        tree = ttk.Treeview(self, columns=columns, show="headings", height=5)
        for col_id, label in zip(columns, labels):
            tree.heading(col_id, text=label)
            tree.column(col_id, width=120, stretch=True)
        for row in table.preview_rows:
            cells = [row[i] if i < len(row) and row[i] else "-" for i in range(len(labels))]
            tree.insert("", "end", values=cells)
        tree.pack(fill='x', pady=5)

        if not table.preview_rows:
            tk.Label(self, text="No data rows to display", fg="gray").pack(pady=10)
