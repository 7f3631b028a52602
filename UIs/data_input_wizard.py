import tkinter as tk
from tkinter import ttk, filedialog, messagebox
from pathlib import Path

from logics.errors import SourceError
from logics.file_handler import check_upload, decode, read_sheet_names
from UIs.progress_dialog import ProgressDialog
from UIs.sheet_selector import SheetSelector


class DataInputWizard:
    """First screen – pick a CSV/XLSX file, choose a sheet if needed, decode it."""

    def __init__(self, root, model, on_loaded):
        self.root = root
        self.model = model
        self.on_loaded = on_loaded

        self._build_ui()

    def _build_ui(self):
        frame = ttk.Frame(self.root)
        frame.pack(pady=40, padx=40, fill='both', expand=True)

        tk.Label(frame, text="Upload Your Data File", font=("Arial", 16, "bold")).pack(pady=10)
        tk.Label(
            frame,
            text="Start by uploading a CSV or Excel file to explore your data",
            fg="gray",
        ).pack()

        self._browse_btn = ttk.Button(frame, text="Select File", command=self._browse)
        self._browse_btn.pack(pady=25)

        self._error_label = tk.Label(frame, text="", fg="red", wraplength=600)
        self._error_label.pack(pady=5)

        info = ttk.LabelFrame(frame, text="Supported formats", padding=10)
        info.pack(pady=20)
        for line in (
            "• CSV files (.csv) - UTF-8 encoded",
            "• Excel files (.xlsx) - All sheets available",
            "• Maximum file size: 10 MB",
        ):
            tk.Label(info, text=line).pack(anchor='w')

    # ── Flow ────────────────────────────────────────────────

    def _browse(self):
        path = filedialog.askopenfilename(
            filetypes=[("CSV/Excel files", "*.csv *.xlsx"), ("All files", "*.*")],
        )
        if path:
            self._handle_file(Path(path))

    def _handle_file(self, path):
        self._error_label.config(text="")
        try:
            extension = check_upload(path.name, path.stat().st_size)
            file_bytes = path.read_bytes()
        except SourceError as e:
            self._show_error(e)
            return
        except OSError as e:
            self._show_error(f"Could not open {path.name}: {e}")
            return

        if extension == 'xlsx':
            try:
                sheets = read_sheet_names(file_bytes)
            except SourceError as e:
                self._show_error(e)
                return
            if len(sheets) > 1:
                SheetSelector(
                    self.root,
                    sheets,
                    on_select=lambda sheet: self._decode(file_bytes, path.name, sheet),
                    on_cancel=lambda: None,
                )
                return

        self._decode(file_bytes, path.name, None)

    def _decode(self, file_bytes, file_name, sheet_name):
        ProgressDialog(self.root, "Loading", "Processing file...", file_name).run(
            lambda: decode(file_bytes, file_name, sheet_name=sheet_name),
            on_success=self._on_decoded,
            on_error=self._show_error,
        )

    def _on_decoded(self, table):
        self.model.load(table)
        self.on_loaded()

    def _show_error(self, error):
        message = str(error)
        title = "Invalid file" if isinstance(error, SourceError) else "Error"
        if self._error_label.winfo_exists():
            self._error_label.config(text=message)
        messagebox.showerror(title, message)
