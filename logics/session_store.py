import json


class SessionStore:
    """
    Ephemeral per-session mirror of the loaded table.

    The snapshot is kept as JSON text in memory only; it is dropped on
    clear() and never survives a restart.
    """

    def __init__(self):
        self._snapshot = None

    @property
    def has_data(self):
        return self._snapshot is not None

    def save(self, table):
        """Mirror a TabularModel (anything with to_dict())."""
        self._snapshot = json.dumps(table.to_dict(), ensure_ascii=False)

    def load(self):
        """Return the mirrored table as a plain dict, or None when nothing is stored."""
        if self._snapshot is None:
            return None
        return json.loads(self._snapshot)

    def clear(self):
        self._snapshot = None
