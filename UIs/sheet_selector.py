import tkinter as tk
from tkinter import ttk


class SheetSelector:
    """Modal dialog: pick one sheet of a multi-sheet workbook."""

    def __init__(self, root, sheets, on_select, on_cancel):
        self._on_select = on_select
        self._on_cancel = on_cancel

        self._dialog = tk.Toplevel(root)
        self._dialog.title("Select Sheet")
        self._dialog.resizable(False, False)
        self._dialog.transient(root)
        self._dialog.grab_set()
        self._dialog.protocol("WM_DELETE_WINDOW", self._cancel)

        tk.Label(
            self._dialog,
            text="This Excel file contains multiple sheets. Please select one to continue.",
            wraplength=360,
        ).pack(padx=15, pady=10)

        self._selected = tk.StringVar(value=sheets[0])
        list_frame = ttk.Frame(self._dialog)
        list_frame.pack(fill='x', padx=20)
        for sheet in sheets:
            ttk.Radiobutton(list_frame, text=sheet, value=sheet, variable=self._selected).pack(anchor='w', pady=2)

        btn_frame = ttk.Frame(self._dialog)
        btn_frame.pack(pady=15)
        ttk.Button(btn_frame, text="Cancel", command=self._cancel).pack(side='left', padx=5)
        ttk.Button(btn_frame, text="Continue", command=self._confirm).pack(side='left', padx=5)

    def _confirm(self):
        sheet = self._selected.get()
        self._dialog.destroy()
        self._on_select(sheet)

    def _cancel(self):
        self._dialog.destroy()
        self._on_cancel()
