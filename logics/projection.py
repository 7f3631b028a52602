from dataclasses import dataclass, field
from typing import List

import pandas as pd


@dataclass(frozen=True)
class ProjectedView:
    """Headers and preview rows restricted to, and ordered by, a list of column labels."""

    headers: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)

    def to_dataframe(self):
        return pd.DataFrame(self.rows, columns=self.headers, dtype=str)


def project(model, column_labels):
    """
    Select the columns named by `column_labels` from a TabularModel.

    Labels are resolved through the model's label -> index map. Labels that do
    not belong to the model are dropped silently. A resolved column past the end
    of a short preview row yields an empty cell.

    Args:
        model: TabularModel to read from.
        column_labels: ordered labels to keep.

    Returns:
        ProjectedView with headers in the given order.
    """
    label_index = model.label_index
    resolved = [(label, label_index[label]) for label in column_labels if label in label_index]

    headers = [label for label, _ in resolved]
    rows = [
        [row[idx] if idx < len(row) else '' for _, idx in resolved]
        for row in model.preview_rows
    ]
    return ProjectedView(headers=headers, rows=rows)


def project_included(model, partition):
    """Project the model through the included side of a ColumnPartition."""
    return project(model, partition.included)
