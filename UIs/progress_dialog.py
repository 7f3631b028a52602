import tkinter as tk
from tkinter import ttk
import threading
import traceback


class ProgressDialog:
    """
    Modal "working..." dialog that runs a task in a background thread.

    The result is handed back to the Tk main thread in one piece via
    root.after(), so callers never see a half-finished value.

    Usage:
        ProgressDialog(root, "Loading", "Processing file...", "sales.csv").run(
            lambda: decode(data, "sales.csv"),
            on_success=lambda table: ...,
            on_error=lambda exc: ...,
        )

    Args:
        root: Parent Tk window.
        title: Dialog window title.
        body_label: Bold heading shown at the top.
        detail: Secondary line, e.g. the file name.
    """

    def __init__(self, root, title, body_label, detail=""):
        self._root = root

        self._dialog = tk.Toplevel(root)
        self._dialog.title(title)
        self._dialog.geometry("400x140")
        self._dialog.resizable(False, False)
        self._dialog.transient(root)
        self._dialog.grab_set()

        tk.Label(self._dialog, text=body_label, font=("Arial", 12, "bold")).pack(pady=10)
        tk.Label(self._dialog, text=detail, fg="blue").pack(pady=5)

        self._progress_bar = ttk.Progressbar(self._dialog, mode='indeterminate', length=300)
        self._progress_bar.pack(pady=10, padx=20)
        self._progress_bar.start(15)

    def run(self, fn, on_success, on_error):
        """
        Execute fn() in a background thread, then call on_success or on_error on the main thread.

        Args:
            fn: callable() -> result.
            on_success: callable(result).
            on_error: callable(exception).
        """
        def background():
            try:
                result = fn()
            except Exception as e:
                print(f"\n[ERROR] {e}")
                traceback.print_exc()
                self._root.after(0, lambda err=e: self._finish(on_error, err))
                return
            self._root.after(0, lambda: self._finish(on_success, result))

        threading.Thread(target=background, daemon=True).start()

    def _finish(self, callback, value):
        if self._dialog.winfo_exists():
            self._progress_bar.stop()
            self._dialog.destroy()
        callback(value)
