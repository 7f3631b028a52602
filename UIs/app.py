import tkinter as tk
from tkinter import ttk

from logics.data_model import DataModel

from UIs.data_input_wizard import DataInputWizard
from UIs.data_preview import DataPreview
from UIs.column_selection import ColumnSelection
from UIs.export_panel import ExportPanel


class DataPrepApp:
    """Main application controller that manages navigation between views."""

    def __init__(self, root):
        self.root = root
        self.root.title("DataPrep Offline")
        self.root.geometry("1050x850")
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        self.model = DataModel()

        self.show_data_input_wizard()

    # ── Navigation ──────────────────────────────────────────

    def show_data_input_wizard(self):
        self._clear_window()
        DataInputWizard(self.root, self.model, on_loaded=self.show_workspace)

    def show_workspace(self):
        """Preview on top, Columns / Export tabs below."""
        self._clear_window()

        top = ttk.Frame(self.root, padding=(10, 5))
        top.pack(fill='x')
        tk.Label(top, text="File Ready for Processing", font=("Arial", 13, "bold")).pack(side='left')
        ttk.Button(top, text="Clear Data", command=self._clear_data).pack(side='right')

        DataPreview(self.root, self.model.table).pack(fill='x')

        notebook = ttk.Notebook(self.root)
        notebook.pack(fill='both', expand=True, padx=10, pady=10)
        notebook.add(ColumnSelection(notebook, self.model), text="Columns")
        notebook.add(ExportPanel(notebook, self.model), text="Export")

    # ── Logic callbacks ─────────────────────────────────────

    def _clear_data(self):
        self.model.clear()
        self.show_data_input_wizard()

    def _on_close(self):
        self.model.clear()
        self.root.destroy()

    # ── Helpers ──────────────────────────────────────────────

    def _clear_window(self):
        for widget in self.root.winfo_children():
            widget.destroy()
