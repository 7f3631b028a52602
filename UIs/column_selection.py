import tkinter as tk
from tkinter import ttk

from logics.errors import PartitionError
from logics.partition import Side
from logics.projection import project_included
from UIs.widgets import SearchListbox


class ColumnSelection(ttk.Frame):
    """Column tab – move columns between the included and excluded lists."""

    def __init__(self, parent, model):
        super().__init__(parent, padding=10)
        self.model = model
        self._build_ui()
        self._refresh()

    def _build_ui(self):
        partition = self.model.partition

        tk.Label(
            self,
            text="Select the columns to keep. Only included columns are exported.",
            fg="gray",
        ).pack(anchor='w', pady=(0, 8))

        lists = ttk.Frame(self)
        lists.pack(fill='both', expand=True)

        self.list_included = SearchListbox(
            lists, title="Included", filter_fn=lambda q: partition.filter(Side.INCLUDED, q),
        )
        self.list_included.pack(side='left', fill='both', expand=True)
        self.list_included.bind_double_click(lambda _e: self._move_selected(Side.INCLUDED))

        buttons = ttk.Frame(lists, padding=(10, 40))
        buttons.pack(side='left', fill='y')
        ttk.Button(buttons, text="Exclude >", command=lambda: self._move_selected(Side.INCLUDED)).pack(fill='x', pady=3)
        ttk.Button(buttons, text="< Include", command=lambda: self._move_selected(Side.EXCLUDED)).pack(fill='x', pady=3)
        ttk.Separator(buttons).pack(fill='x', pady=10)
        ttk.Button(buttons, text="Exclude matches >>", command=lambda: self._move_filtered(Side.INCLUDED)).pack(fill='x', pady=3)
        ttk.Button(buttons, text="<< Include matches", command=lambda: self._move_filtered(Side.EXCLUDED)).pack(fill='x', pady=3)

        self.list_excluded = SearchListbox(
            lists, title="Excluded", filter_fn=lambda q: partition.filter(Side.EXCLUDED, q),
        )
        self.list_excluded.pack(side='left', fill='both', expand=True)
        self.list_excluded.bind_double_click(lambda _e: self._move_selected(Side.EXCLUDED))

        preview = ttk.LabelFrame(self, text="Included columns preview", padding=5)
        preview.pack(fill='x', pady=(10, 0))
        self._preview_tree = ttk.Treeview(preview, show="headings", height=5)
        scroll_x = ttk.Scrollbar(preview, orient='horizontal', command=self._preview_tree.xview)
        self._preview_tree.configure(xscrollcommand=scroll_x.set)
        self._preview_tree.pack(fill='x')
        scroll_x.pack(fill='x')

    # ── Actions ─────────────────────────────────────────────

    def _list_for(self, side):
        return self.list_included if side is Side.INCLUDED else self.list_excluded

    def _move_selected(self, side):
        partition = self.model.partition
        move = partition.move_to_excluded if side is Side.INCLUDED else partition.move_to_included
        for label in self._list_for(side).get_selection():
            try:
                move(label)
            except PartitionError as e:
                print(f"[WARN] Ignored column move: {e}")
        self._refresh()

    def _move_filtered(self, side):
        source_list = self._list_for(side)
        moved = self.model.partition.bulk_move_filtered(side, source_list.query)
        if moved:
            source_list.clear_query()
        self._refresh()

    def _refresh(self):
        self.list_included.refresh()
        self.list_excluded.refresh()
        self._refresh_preview()

    def _refresh_preview(self):
        view = project_included(self.model.table, self.model.partition)
        tree = self._preview_tree
        tree.delete(*tree.get_children())
        columns = [f"c{i}" for i in range(len(view.headers))]
        tree.configure(columns=columns)
        for col_id, label in zip(columns, view.headers):
            tree.heading(col_id, text=label)
            tree.column(col_id, width=110, stretch=False)
        for row in view.rows:
            tree.insert("", "end", values=[cell or "-" for cell in row])
