from dataclasses import dataclass, field
from functools import cached_property
from typing import List, Optional

from logics.labels import column_labels
from logics.partition import ColumnPartition
from logics.session_store import SessionStore


@dataclass(frozen=True)
class TabularModel:
    """Normalized uploaded table: headers, a bounded preview window and full-size counters."""

    source_name: str
    total_row_count: int
    total_column_count: int
    headers: List[str]
    preview_rows: List[List[str]] = field(default_factory=list)
    sheet_name: Optional[str] = None

    def __post_init__(self):
        if len(self.headers) != self.total_column_count:
            raise ValueError(
                f"Header count {len(self.headers)} does not match column count {self.total_column_count}."
            )
        for idx, row in enumerate(self.preview_rows):
            if len(row) > len(self.headers):
                raise ValueError(f"Preview row {idx} has more cells than there are headers.")

    @cached_property
    def labels(self):
        return column_labels(self.headers)

    @cached_property
    def label_index(self):
        """Map label -> header index."""
        return {label: idx for idx, label in enumerate(self.labels)}

    def to_dict(self):
        return {
            'source_name': self.source_name,
            'total_row_count': self.total_row_count,
            'total_column_count': self.total_column_count,
            'headers': list(self.headers),
            'preview_rows': [list(row) for row in self.preview_rows],
            'sheet_name': self.sheet_name,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            source_name=str(data['source_name']),
            total_row_count=int(data['total_row_count']),
            total_column_count=int(data['total_column_count']),
            headers=[str(h) for h in data['headers']],
            preview_rows=[[str(c) for c in row] for row in data.get('preview_rows', [])],
            sheet_name=data.get('sheet_name'),
        )


class DataModel:
    """Shared state container for the application session."""

    def __init__(self, store=None):
        self.table = None                           # Active TabularModel (None = no data loaded)
        self.partition = ColumnPartition()          # Included/excluded labels for self.table
        self.store = store if store is not None else SessionStore()  # In-memory mirror of self.table

    @property
    def has_data(self):
        return self.table is not None

    def load(self, table):
        """Replace the active table. The previous partition is discarded, never merged."""
        partition = ColumnPartition()
        partition.initialize(table.headers)
        self.table, self.partition = table, partition
        self.store.save(table)
        print(
            f"[LOAD] {table.source_name}: {table.total_row_count} rows, "
            f"{table.total_column_count} columns, "
            f"{len(partition.included)} included / {len(partition.excluded)} excluded"
        )

    def clear(self):
        self.table = None
        self.partition.reset()
        self.store.clear()
        print("[LOAD] Data cleared")
