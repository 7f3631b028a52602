import threading

import pytest

from logics.errors import LabelNotFound, PartitionError
from logics.labels import column_labels
from logics.partition import INITIAL_INCLUDED, ColumnPartition, Side


def _assert_complete(partition, labels):
    assert set(partition.included).isdisjoint(partition.excluded)
    assert len(partition.labels) == len(set(partition.labels))
    assert sorted(partition.labels) == sorted(labels)


def _partition(headers):
    partition = ColumnPartition()
    partition.initialize(headers)
    return partition


def test_column_labels_fill_empty_headers_with_placeholders():
    assert column_labels(["Name", "", "Age"]) == ["Name", "Column 2", "Age"]


def test_column_labels_disambiguate_duplicates():
    labels = column_labels(["Age", "Name", "Age", "", "Column 4"])
    assert labels == ["Age", "Name", "Age (3)", "Column 4", "Column 4 (5)"]
    assert len(set(labels)) == len(labels)


def test_initialize_puts_small_tables_fully_included():
    partition = _partition(["Name", "", "Age"])
    assert partition.included == ["Name", "Column 2", "Age"]
    assert partition.excluded == []


def test_initialize_splits_after_twenty_columns():
    headers = [f"h{i}" for i in range(25)]
    partition = _partition(headers)
    assert len(partition.included) == INITIAL_INCLUDED == 20
    assert len(partition.excluded) == 5
    assert partition.included == headers[:20]
    assert partition.excluded == headers[20:]


def test_initialize_does_not_clobber_existing_edits():
    partition = _partition(["A", "B", "C"])
    partition.move_to_excluded("B")
    partition.initialize(["A", "B", "C"])
    assert partition.included == ["A", "C"]
    assert partition.excluded == ["B"]


def test_move_to_excluded_appends_to_end():
    partition = _partition([f"h{i}" for i in range(22)])
    partition.move_to_excluded("h3")
    assert "h3" not in partition.included
    assert partition.excluded == ["h20", "h21", "h3"]


def test_scenario_move_placeholder_column():
    partition = _partition(["Name", "", "Age"])
    partition.move_to_excluded("Column 2")
    assert partition.included == ["Name", "Age"]
    assert partition.excluded == ["Column 2"]


def test_move_round_trip_restores_membership():
    headers = ["A", "B", "C", "D"]
    partition = _partition(headers)
    partition.move_to_excluded("B")
    partition.move_to_included("B")
    assert partition.side_of("B") is Side.INCLUDED
    assert partition.included == ["A", "C", "D", "B"]
    _assert_complete(partition, headers)


def test_moving_label_already_on_target_side_is_rejected():
    partition = _partition(["A", "B"])
    with pytest.raises(LabelNotFound) as excinfo:
        partition.move_to_included("A")
    assert excinfo.value.label == "A"
    assert excinfo.value.side == "excluded"
    assert partition.included == ["A", "B"]
    assert partition.excluded == []


def test_moving_unknown_label_is_a_partition_error():
    partition = _partition(["A", "B"])
    with pytest.raises(PartitionError, match="'Z' is not in the included list"):
        partition.move_to_excluded("Z")


def test_filter_is_case_insensitive_and_pure():
    partition = _partition(["Price", "price_usd", "Quantity", "Unit PRICE"])
    before = (list(partition.included), list(partition.excluded))
    assert partition.filter(Side.INCLUDED, "PRICE") == ["Price", "price_usd", "Unit PRICE"]
    assert partition.filter("included", "") == ["Price", "price_usd", "Quantity", "Unit PRICE"]
    assert partition.filter(Side.EXCLUDED, "price") == []
    assert (partition.included, partition.excluded) == before


def test_filter_returns_a_copy():
    partition = _partition(["A", "B"])
    result = partition.filter(Side.INCLUDED, "")
    result.append("C")
    assert partition.included == ["A", "B"]


def test_bulk_move_moves_exactly_matching_labels_in_order():
    headers = ["ax1", "b", "Xy", "c", "max"]
    partition = _partition(headers)
    partition.move_to_excluded("c")

    moved = partition.bulk_move_filtered(Side.INCLUDED, "x")

    assert moved == ["ax1", "Xy", "max"]
    assert partition.included == ["b"]
    assert partition.excluded == ["c", "ax1", "Xy", "max"]
    _assert_complete(partition, headers)


def test_bulk_move_back_to_included():
    headers = [f"col{i}" for i in range(24)]
    partition = _partition(headers)
    moved = partition.bulk_move_filtered(Side.EXCLUDED, "COL2")
    assert moved == ["col20", "col21", "col22", "col23"]
    assert partition.excluded == []
    assert partition.included[-4:] == moved
    _assert_complete(partition, headers)


def test_bulk_move_with_empty_query_is_noop():
    partition = _partition(["A", "B"])
    assert partition.bulk_move_filtered(Side.INCLUDED, "") == []
    assert partition.included == ["A", "B"]
    assert partition.excluded == []


def test_bulk_move_without_matches_is_noop():
    partition = _partition(["A", "B"])
    assert partition.bulk_move_filtered(Side.INCLUDED, "zzz") == []
    assert partition.included == ["A", "B"]


def test_partition_stays_complete_under_mixed_operations():
    headers = ["id", "", "name", "Name", "email", "", "age"] + [f"extra_{i}" for i in range(18)]
    labels = column_labels(headers)
    partition = _partition(headers)
    _assert_complete(partition, labels)

    partition.move_to_excluded("Column 2")
    _assert_complete(partition, labels)
    partition.bulk_move_filtered(Side.INCLUDED, "NAME")
    _assert_complete(partition, labels)
    partition.bulk_move_filtered(Side.EXCLUDED, "extra_1")
    _assert_complete(partition, labels)
    partition.move_to_included("Column 2")
    _assert_complete(partition, labels)
    partition.bulk_move_filtered(Side.INCLUDED, "e")
    _assert_complete(partition, labels)


def test_concurrent_moves_keep_partition_complete():
    headers = [f"c{i}" for i in range(20)]
    partition = _partition(headers)

    def worker(labels):
        for label in labels:
            partition.move_to_excluded(label)

    threads = [threading.Thread(target=worker, args=(headers[i::4],)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert partition.included == []
    _assert_complete(partition, headers)


def test_reset_empties_both_sides():
    partition = _partition(["A", "B"])
    partition.reset()
    assert partition.labels == []
    partition.initialize(["X"])
    assert partition.included == ["X"]
