import tkinter as tk
from tkinter import ttk, filedialog, messagebox
from pathlib import Path

from logics.exporter import ExportFormat, default_filename, export, save_export
from logics.projection import project_included

FORMAT_CHOICES = [
    (ExportFormat.CSV, "CSV"),
    (ExportFormat.XLSX, "Excel (XLSX)"),
    (ExportFormat.PSEUDO_EXCEL, "Excel-compatible CSV (.xlsx name)"),
    (ExportFormat.JSON, "JSON"),
]


class ExportPanel(ttk.Frame):
    """Export tab – write the included columns to a file."""

    def __init__(self, parent, model):
        super().__init__(parent, padding=10)
        self.model = model
        self._format = tk.StringVar(value=ExportFormat.CSV.name)
        self._build_ui()

    def _build_ui(self):
        tk.Label(self, text="Export your processed data in various formats", fg="gray").pack(anchor='w')

        choices = ttk.LabelFrame(self, text="Format", padding=10)
        choices.pack(fill='x', pady=10)
        for fmt, label in FORMAT_CHOICES:
            ttk.Radiobutton(choices, text=label, value=fmt.name, variable=self._format).pack(anchor='w', pady=2)

        tk.Label(
            self,
            text="Exports contain the preview rows of the included columns, in included order.",
            fg="gray",
        ).pack(anchor='w')

        ttk.Button(self, text="Export...", command=self._export).pack(anchor='w', pady=15)

    def _export(self):
        table = self.model.table
        if table is None:
            messagebox.showerror("Error", "No data loaded.")
            return
        if not self.model.partition.included:
            messagebox.showwarning("Nothing to export", "No columns are included.")
            return

        fmt = ExportFormat[self._format.get()]
        path = filedialog.asksaveasfilename(
            initialfile=default_filename(table.source_name, fmt),
            defaultextension=f".{fmt.extension}",
            filetypes=[(fmt.name, f"*.{fmt.extension}")],
        )
        if not path:
            return

        try:
            view = project_included(table, self.model.partition)
            result = export(view, fmt, table.source_name, filename=Path(path).name)
            written = save_export(result, path)
            messagebox.showinfo("Success", f"Exported: {written}")
        except (OSError, ValueError) as e:
            messagebox.showerror("Export error", str(e))
