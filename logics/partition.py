import threading
from enum import Enum

from logics.errors import LabelNotFound
from logics.labels import column_labels

INITIAL_INCLUDED = 20


class Side(str, Enum):
    INCLUDED = "included"
    EXCLUDED = "excluded"

    @property
    def other(self):
        return Side.EXCLUDED if self is Side.INCLUDED else Side.INCLUDED


class ColumnPartition:
    """
    Included/excluded split of a table's column labels.

    Every label sits on exactly one side. Moves append to the end of the
    target side. All mutations go through one lock so a partition can be
    shared between threads.
    """

    def __init__(self):
        self.included = []
        self.excluded = []
        self._lock = threading.Lock()

    # ── Queries ─────────────────────────────────────────────

    @property
    def labels(self):
        """All labels, included side first."""
        return self.included + self.excluded

    def side_of(self, label):
        if label in self.included:
            return Side.INCLUDED
        if label in self.excluded:
            return Side.EXCLUDED
        return None

    def get(self, side):
        return self.included if Side(side) is Side.INCLUDED else self.excluded

    def filter(self, side, query):
        """
        Case-insensitive substring match over the labels on one side.

        Args:
            side: Side (or its string value) to search.
            query: text to look for; empty returns the whole side.

        Returns:
            list of matching labels in their current order. State is not modified.
        """
        labels = list(self.get(side))
        if not query:
            return labels
        needle = query.lower()
        return [label for label in labels if needle in label.lower()]

    # ── Mutations ───────────────────────────────────────────

    def initialize(self, headers):
        """
        Populate both sides from the table headers: the first INITIAL_INCLUDED
        labels are included, the rest excluded.

        Does nothing if either side already holds labels, so re-rendering a
        screen never clobbers the user's edits.
        """
        with self._lock:
            if self.included or self.excluded:
                return
            labels = column_labels(headers)
            self.included = labels[:INITIAL_INCLUDED]
            self.excluded = labels[INITIAL_INCLUDED:]

    def reset(self):
        with self._lock:
            self.included = []
            self.excluded = []

    def move_to_excluded(self, label):
        self._move(label, Side.INCLUDED)

    def move_to_included(self, label):
        self._move(label, Side.EXCLUDED)

    def bulk_move_filtered(self, side, query):
        """
        Move every label on `side` matching `query` to the other side.

        Matches keep their relative order and are appended to the target side.
        An empty query moves nothing. The new lists are built first and
        swapped in together, so callers never observe a half-applied batch.

        Returns:
            list of the labels that were moved.
        """
        side = Side(side)
        if not query:
            return []
        with self._lock:
            moved = self.filter(side, query)
            if not moved:
                return []
            moved_set = set(moved)
            source = [label for label in self.get(side) if label not in moved_set]
            target = list(self.get(side.other)) + moved
            if side is Side.INCLUDED:
                self.included, self.excluded = source, target
            else:
                self.excluded, self.included = source, target
        print(f"[PARTITION] Moved {len(moved)} column(s) from {side.value} to {side.other.value} (query '{query}')")
        return moved

    def _move(self, label, source_side):
        with self._lock:
            source = self.get(source_side)
            if label not in source:
                raise LabelNotFound(label, source_side.value)
            new_source = [item for item in source if item != label]
            new_target = list(self.get(source_side.other)) + [label]
            if source_side is Side.INCLUDED:
                self.included, self.excluded = new_source, new_target
            else:
                self.excluded, self.included = new_source, new_target
