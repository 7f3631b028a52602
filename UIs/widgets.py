import tkinter as tk
from tkinter import ttk


class SearchListbox(ttk.LabelFrame):
    """
    A labeled frame with a debounced search bar and a multi-select Listbox.

    The widget does no matching itself: `filter_fn(query)` returns the items to
    show, so the column lists stay in step with ColumnPartition.filter().

    Args:
        parent: Parent widget.
        title: LabelFrame title text.
        filter_fn: callable(query) -> list of item strings to display.
        height: Listbox height in rows.
        debounce_ms: Milliseconds to wait after keystroke before filtering.

    Example:
        lb = SearchListbox(frame, title="Included",
                           filter_fn=lambda q: partition.filter(Side.INCLUDED, q))
        lb.pack(fill='both', expand=True)
        selected = lb.get_selection()  # ['Name', 'Age']
    """

    def __init__(self, parent, *, title, filter_fn, height=14, debounce_ms=200):
        super().__init__(parent, text=title, padding=5)
        self._title = title
        self._filter_fn = filter_fn
        self._debounce_ms = debounce_ms
        self._timer = None

        # Search bar
        search_frame = ttk.Frame(self)
        search_frame.pack(fill='x', pady=(0, 4))
        tk.Label(search_frame, text="Search:").pack(side='left')
        self._search_var = tk.StringVar()
        search_entry = ttk.Entry(search_frame, textvariable=self._search_var)
        search_entry.pack(side='left', fill='x', expand=True, padx=(4, 0))
        search_entry.bind('<KeyRelease>', self._on_key)

        # Listbox + scrollbar
        lb_frame = ttk.Frame(self)
        lb_frame.pack(fill='both', expand=True)
        self._listbox = tk.Listbox(lb_frame, height=height, selectmode='extended', exportselection=False)
        scrollbar = ttk.Scrollbar(lb_frame, command=self._listbox.yview)
        self._listbox.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side='right', fill='y')
        self._listbox.pack(fill='both', expand=True)

        self.refresh()

    # ── Public API ────────────────────────────────────────────

    @property
    def query(self):
        return self._search_var.get()

    def clear_query(self):
        self._search_var.set('')
        self.refresh()

    def get_selection(self) -> list:
        """Return list of selected item strings."""
        return [self._listbox.get(i) for i in self._listbox.curselection()]

    def bind_double_click(self, callback):
        self._listbox.bind('<Double-Button-1>', callback)

    def refresh(self):
        items = self._filter_fn(self.query)
        selected = set(self.get_selection())
        self._listbox.delete(0, tk.END)
        for item in items:
            self._listbox.insert(tk.END, item)
            if item in selected:
                self._listbox.selection_set(tk.END)
        self.configure(text=f"{self._title} ({len(items)})")

    # ── Internals ─────────────────────────────────────────────

    def _on_key(self, _event=None):
        if self._timer is not None:
            self.after_cancel(self._timer)
        self._timer = self.after(self._debounce_ms, self._fire_refresh)

    def _fire_refresh(self):
        self._timer = None
        self.refresh()
