"""Tests for container adapters (lift.up / lift.down)."""

import io
from array import array
from collections import deque

import pytest

from pushseq import ChannelPolicy, int_range, lift as L, of_list, to_list


class TestUp:
    def test_of_array(self) -> None:
        assert to_list(L.up.of_array(array("i", [1, 2, 3]))) == [1, 2, 3]

    def test_array_slice_inclusive(self) -> None:
        assert to_list(L.up.array_slice([0, 1, 2, 3, 4], 1, 3)) == [1, 2, 3]
        assert to_list(L.up.array_slice([0, 1], 1, 0)) == []

    def test_array_slice_does_not_wrap(self) -> None:
        with pytest.raises(IndexError):
            to_list(L.up.array_slice([0, 1, 2], -1, 0))

    def test_array_slice_past_end(self) -> None:
        with pytest.raises(IndexError):
            to_list(L.up.array_slice([0, 1, 2], 1, 3))
        assert to_list(L.up.array_slice([0, 1, 2], 1, 2)) == [1, 2]
        assert to_list(L.up.array_slice([], 0, -1)) == []

    def test_int_range_inclusive(self) -> None:
        assert to_list(int_range(1, 5)) == [1, 2, 3, 4, 5]
        assert to_list(int_range(3, 3)) == [3]
        assert to_list(int_range(3, 2)) == []

    def test_of_stack_top_first(self) -> None:
        stack = [1, 2, 3]
        assert to_list(L.up.of_stack(stack)) == [3, 2, 1]

    def test_of_queue_fifo(self) -> None:
        assert to_list(L.up.of_queue(deque(["a", "b"]))) == ["a", "b"]

    def test_hashtables(self) -> None:
        table = {"a": 1, "b": 2}
        assert to_list(L.up.of_hashtbl(table)) == [("a", 1), ("b", 2)]
        assert to_list(L.up.hashtbl_keys(table)) == ["a", "b"]
        assert to_list(L.up.hashtbl_values(table)) == [1, 2]

    def test_of_str(self) -> None:
        assert to_list(L.up.of_str("abc")) == ["a", "b", "c"]

    def test_of_in_channel_is_lazy_and_single_pass(self) -> None:
        stream = io.StringIO("hello world")
        seq = L.up.of_in_channel(stream, ChannelPolicy(chunk_size=2))
        assert not seq.restartable
        assert L.down.to_str(seq.take(3)) == "hel"
        # The chunk holding "l" was already read; the rest is still in the stream.
        assert stream.read() == "o world"

    def test_of_in_channel_whole_stream(self) -> None:
        seq = L.up.of_in_channel(io.StringIO("abc"))
        assert L.down.to_str(seq) == "abc"
        assert L.down.to_str(seq) == ""

    def test_channel_policy_validation(self) -> None:
        with pytest.raises(ValueError):
            ChannelPolicy(chunk_size=0)

    def test_of_iterator_single_pass(self) -> None:
        seq = L.up.of_iterator(x * 2 for x in range(3))
        assert not seq.restartable
        assert to_list(seq) == [0, 2, 4]
        assert to_list(seq) == []

    def test_container_changes_visible_between_runs(self) -> None:
        xs = [1]
        seq = of_list(xs)
        xs.append(2)
        assert to_list(seq) == [1, 2]


class TestDown:
    @pytest.mark.parametrize("s", ["", "a", "hello"])
    def test_str_round_trip(self, s: str) -> None:
        assert L.down.to_str(L.up.of_str(s)) == s

    @pytest.mark.parametrize("xs", [[], [1], [4, 5, 6]])
    def test_array_round_trip(self, xs: list[int]) -> None:
        assert L.down.to_array(L.up.of_array(xs)) == xs

    def test_to_stack(self) -> None:
        stack: list[int] = [0]
        L.down.to_stack(stack, of_list([1, 2]))
        assert stack == [0, 1, 2]
        assert to_list(L.up.of_stack(stack)) == [2, 1, 0]

    def test_to_queue(self) -> None:
        queue: deque[int] = deque([0])
        L.down.to_queue(queue, of_list([1, 2]))
        assert list(queue) == [0, 1, 2]

    def test_hashtbl_add_keeps_all_bindings(self) -> None:
        table: dict[int, list[str]] = {}
        L.down.hashtbl_add(table, of_list([(1, "a"), (2, "z"), (1, "b")]))
        assert table[1] == ["b", "a"]
        assert table[2] == ["z"]

    def test_hashtbl_replace(self) -> None:
        table = {1: "old"}
        L.down.hashtbl_replace(table, of_list([(1, "a"), (1, "b")]))
        assert table == {1: "b"}

    def test_to_hashtbl_policies(self) -> None:
        pairs = of_list([(1, "a"), (1, "b"), (2, "c")])
        assert L.down.to_hashtbl(pairs) == {1: "b", 2: "c"}
        assert L.down.to_hashtbl(pairs, keep_first=True) == {1: "a", 2: "c"}

    def test_to_rev_list(self) -> None:
        assert L.down.to_rev_list(int_range(1, 3)) == [3, 2, 1]
