import pytest

from logics.data_model import DataModel, TabularModel
from logics.partition import Side
from logics.session_store import SessionStore


def _table(name="people.csv", headers=None):
    headers = headers or ["Name", "", "Age"]
    return TabularModel(
        source_name=name,
        total_row_count=120,
        total_column_count=len(headers),
        headers=headers,
        preview_rows=[["Ana", "X", "30"][: len(headers)]],
        sheet_name=None,
    )


def test_tabular_model_rejects_mismatched_counts():
    with pytest.raises(ValueError):
        TabularModel(source_name="x.csv", total_row_count=0, total_column_count=3, headers=["A"])


def test_tabular_model_rejects_rows_wider_than_headers():
    with pytest.raises(ValueError):
        TabularModel(
            source_name="x.csv",
            total_row_count=1,
            total_column_count=1,
            headers=["A"],
            preview_rows=[["1", "2"]],
        )


def test_counts_are_independent_of_preview_size():
    table = _table()
    assert table.total_row_count == 120
    assert len(table.preview_rows) == 1


def test_to_dict_round_trip():
    table = TabularModel(
        source_name="book.xlsx",
        total_row_count=2,
        total_column_count=2,
        headers=["A", ""],
        preview_rows=[["1", "2"], ["3"]],
        sheet_name="Sheet2",
    )
    assert TabularModel.from_dict(table.to_dict()) == table


def test_load_initializes_partition_and_mirror():
    model = DataModel()
    assert not model.has_data

    model.load(_table())

    assert model.has_data
    assert model.partition.included == ["Name", "Column 2", "Age"]
    assert model.store.has_data
    assert model.store.load()["source_name"] == "people.csv"


def test_loading_new_table_discards_previous_partition():
    model = DataModel()
    model.load(_table())
    model.partition.move_to_excluded("Age")
    old_partition = model.partition

    model.load(_table("other.csv", ["Age", "City"]))

    assert model.partition is not old_partition
    assert model.partition.included == ["Age", "City"]
    assert model.partition.filter(Side.EXCLUDED, "") == []
    assert model.store.load()["source_name"] == "other.csv"


def test_clear_reverts_to_no_data():
    store = SessionStore()
    model = DataModel(store=store)
    model.load(_table())
    model.clear()

    assert model.table is None
    assert model.partition.labels == []
    assert not store.has_data
    assert store.load() is None


def test_clear_empties_partition_so_next_load_starts_fresh():
    model = DataModel()
    model.load(_table())
    partition = model.partition
    partition.move_to_excluded("Age")

    model.clear()
    assert partition.included == []
    assert partition.excluded == []

    partition.initialize(["Age", "City"])
    assert partition.included == ["Age", "City"]


def test_session_store_keeps_non_ascii_text():
    store = SessionStore()
    store.save(_table(headers=["Città", "Größe", "年齢"]))
    assert store.load()["headers"] == ["Città", "Größe", "年齢"]
