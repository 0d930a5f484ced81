"""Tests for the reduction layer."""

import pytest
from kungfu import Error, Ok

from pushseq import (
    EmptySequenceError,
    NotFoundError,
    cycle,
    empty,
    exists,
    find,
    fold,
    fold_result,
    for_all,
    head,
    is_empty,
    iter,
    iteri,
    length,
    of_list,
    repeat,
    singleton,
    take,
    to_array,
    to_list,
    to_rev_list,
    traverse,
)

from .helpers import Boom, error_value, ok_value, strict


class TestIterFold:
    def test_iter(self) -> None:
        seen: list[int] = []
        iter(of_list([1, 2, 3]), seen.append)
        assert seen == [1, 2, 3]

    def test_iteri(self) -> None:
        seen: list[tuple[int, str]] = []
        iteri(of_list(["a", "b", "c"]), lambda i, x: seen.append((i, x)))
        assert seen == [(0, "a"), (1, "b"), (2, "c")]

    def test_iteri_index_restarts(self) -> None:
        seq = of_list(["a", "b"])
        seen: list[int] = []
        iteri(seq, lambda i, _: seen.append(i))
        iteri(seq, lambda i, _: seen.append(i))
        assert seen == [0, 1, 0, 1]

    def test_fold_order(self) -> None:
        assert fold(of_list(["a", "b", "c"]), lambda acc, x: acc + x, initial="") == "abc"

    def test_fold_empty(self) -> None:
        assert fold(empty(), lambda acc, x: acc + 1, initial=42) == 42

    def test_length(self) -> None:
        assert length(of_list(range(17))) == 17
        assert length(empty()) == 0

    def test_length_of_bounded_infinite(self) -> None:
        assert length(take(cycle(of_list([1, 2])), 9)) == 9


class TestIsEmpty:
    def test_empty_list(self) -> None:
        assert is_empty(of_list([]))

    def test_singleton(self) -> None:
        assert not is_empty(singleton(1))

    def test_stops_at_first_element(self) -> None:
        assert not is_empty(strict([1, 2, 3], limit=1))

    def test_infinite(self) -> None:
        assert not is_empty(repeat(0))


class TestQuantifiers:
    def test_exists_stops_at_first_match(self, calls: list[int]) -> None:
        def even(x: int) -> bool:
            calls.append(x)
            return x % 2 == 0

        assert exists(of_list([1, 2, 3, 4]), even)
        assert calls == [1, 2]

    def test_for_all_stops_at_first_failure(self, calls: list[int]) -> None:
        def even(x: int) -> bool:
            calls.append(x)
            return x % 2 == 0

        assert not for_all(of_list([1, 2, 3, 4]), even)
        assert calls == [1]

    def test_exhaustive_answers(self) -> None:
        assert for_all(of_list([2, 4]), lambda x: x % 2 == 0)
        assert not exists(of_list([1, 3]), lambda x: x % 2 == 0)
        assert for_all(empty(), lambda x: False)
        assert not exists(empty(), lambda x: True)

    def test_exists_on_infinite(self) -> None:
        assert exists(cycle(of_list([1, 2, 3])), lambda x: x == 3)

    def test_nested_quantifiers(self) -> None:
        rows = of_list([of_list([1, 3]), of_list([5, 6]), of_list([7])])
        assert exists(rows, lambda row: exists(row, lambda x: x % 2 == 0))
        assert not for_all(rows, lambda row: for_all(row, lambda x: x % 2 == 1))

    def test_predicate_error_propagates(self) -> None:
        def bad(x: int) -> bool:
            raise Boom("predicate")

        with pytest.raises(Boom):
            exists(of_list([1]), bad)


class TestResultReductions:
    def test_head(self) -> None:
        assert ok_value(head(strict([5, 6], limit=1))) == 5
        assert isinstance(error_value(head(empty())), EmptySequenceError)

    def test_find(self) -> None:
        assert ok_value(find(repeat(3).map(lambda x: x + 1), lambda x: x > 2)) == 4
        assert isinstance(error_value(find(of_list([1]), lambda x: x > 5)), NotFoundError)

    def test_fold_result_ok(self) -> None:
        result = fold_result(of_list([1, 2, 3]), lambda acc, x: Ok(acc + x), initial=0)
        assert ok_value(result) == 6

    def test_fold_result_stops_at_error(self, calls: list[int]) -> None:
        def step(acc: int, x: int):
            calls.append(x)
            return Error(f"bad {x}") if x == 2 else Ok(acc + x)

        result = fold_result(of_list([1, 2, 3]), step, initial=0)
        assert error_value(result) == "bad 2"
        assert calls == [1, 2]

    def test_traverse(self) -> None:
        def parse(s: str):
            return Ok(int(s)) if s.isdigit() else Error(s)

        assert ok_value(traverse(of_list(["1", "22"]), parse)) == [1, 22]
        assert error_value(traverse(of_list(["1", "x", "y"]), parse)) == "x"

    def test_traverse_stops_infinite(self) -> None:
        result = traverse(cycle(of_list([1, 0])), lambda x: Ok(x) if x else Error("zero"))
        assert error_value(result) == "zero"


class TestMaterialize:
    def test_to_list(self) -> None:
        assert to_list(of_list([1, 2, 3])) == [1, 2, 3]

    def test_to_rev_list(self) -> None:
        assert to_rev_list(of_list([1, 2, 3])) == [3, 2, 1]

    def test_to_array(self) -> None:
        assert to_array(of_list([1, 2])) == [1, 2]
        arr = to_array(of_list([1, 2, 3]), "i")
        assert arr.typecode == "i"
        assert arr.tolist() == [1, 2, 3]

    @pytest.mark.parametrize("xs", [[], [1], [1, 2, 3, 4, 5]])
    def test_round_trip(self, xs: list[int]) -> None:
        assert to_list(of_list(xs)) == xs
        assert to_list(of_list(xs).rev()) == list(reversed(xs))
