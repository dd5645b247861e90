"""Tests for size-bounded record partitioning."""

import pytest

from pota_adif.output.chunking import json_size, partition

RECORD = {"call": "w1aw"}


def test_json_size_is_compact():
    assert json_size(RECORD) == len('{"call":"w1aw"}')


class TestPartition:
    def test_empty(self):
        assert partition([], 10) == []

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            partition([RECORD], 0)

    def test_everything_fits(self):
        assert partition([RECORD] * 3, 1000) == [[0, 1, 2]]

    def test_greedy_batches(self):
        assert partition([RECORD] * 3, 40) == [[0, 1], [2]]

    def test_oversized_records_stand_alone(self):
        assert partition([RECORD] * 3, 5) == [[0], [1], [2]]

    def test_batches_cover_every_position_once(self):
        records = [{"call": f"w{i}aw", "comment": "x" * i} for i in range(25)]
        batches = partition(records, 120)
        assert [pos for batch in batches for pos in batch] == list(range(25))
        assert all(batch for batch in batches)
