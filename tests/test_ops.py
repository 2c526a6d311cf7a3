import pytest

from mapreduce import fold, transform, where

from fakes import EVEN_NUMBERS, THREE_MULTIPLICATIONS, Boom, FailOn, Recorder, is_uneven


class TestTransform:
    def test_doubles_each_item(self) -> None:
        assert transform(EVEN_NUMBERS, lambda x: x * 2) == [0, 4, 8, 12, 16]

    def test_preserves_length_and_order(self) -> None:
        items = ["c", "a", "b"]
        assert transform(items, str.upper) == ["C", "A", "B"]

    def test_can_change_type(self) -> None:
        assert transform([1, 22, 333], str) == ["1", "22", "333"]

    def test_empty_input(self) -> None:
        fn = Recorder(lambda x: x)
        assert transform([], fn) == []
        assert fn.calls == []

    def test_returns_fresh_list_and_leaves_input_alone(self) -> None:
        items = [1, 2, 3]
        result = transform(items, lambda x: x)
        assert result == items
        assert result is not items
        result.append(4)
        assert items == [1, 2, 3]

    def test_calls_fn_once_per_item_in_order(self) -> None:
        fn = Recorder(lambda x: x + 1)
        transform([3, 1, 2], fn)
        assert fn.calls == [(3,), (1,), (2,)]

    def test_failure_stops_traversal(self) -> None:
        fn = FailOn(lambda x: x, trigger=lambda x: x == 4)
        with pytest.raises(Boom) as exc_info:
            transform(EVEN_NUMBERS, fn)
        assert exc_info.value is fn.error
        assert fn.calls == [(0,), (2,), (4,)]

    def test_accepts_generator(self) -> None:
        assert transform((x for x in range(3)), lambda x: x * x) == [0, 1, 4]


class TestWhere:
    def test_no_odd_even_numbers(self) -> None:
        assert where(EVEN_NUMBERS, is_uneven) == []

    def test_selects_odd_multiples_of_three(self) -> None:
        assert where(THREE_MULTIPLICATIONS, is_uneven) == [3, 9]

    def test_keeps_relative_order_and_duplicates(self) -> None:
        assert where([5, 1, 4, 5, 3], lambda x: x != 4) == [5, 1, 5, 3]

    def test_truthy_results_count_as_true(self) -> None:
        assert where([0, 1, "", "x", None], lambda x: x) == [1, "x"]

    def test_all_and_none(self) -> None:
        items = [1, 2, 3]
        assert where(items, lambda _: True) == items
        assert where(items, lambda _: False) == []

    def test_does_not_return_input(self) -> None:
        items = [1, 2, 3]
        assert where(items, lambda _: True) is not items

    def test_failure_propagates_unchanged(self) -> None:
        error = KeyError("missing")
        predicate = FailOn(is_uneven, trigger=lambda x: x == 6, error=error)
        with pytest.raises(KeyError) as exc_info:
            where(THREE_MULTIPLICATIONS, predicate)
        assert exc_info.value is error
        assert predicate.calls == [(0,), (3,), (6,)]


class TestFold:
    def test_sums_even_numbers(self) -> None:
        assert fold(EVEN_NUMBERS, 0, lambda acc, x: acc + x) == 20

    def test_empty_returns_seed_object(self) -> None:
        seed = object()
        combiner = Recorder(lambda acc, x: acc)
        assert fold([], seed, combiner) is seed
        assert combiner.calls == []

    def test_is_left_to_right(self) -> None:
        # Subtraction is neither associative nor commutative
        assert fold([1, 2, 3], 10, lambda acc, x: acc - x) == 4
        assert fold(["a", "b", "c"], "", lambda acc, x: acc + x) == "abc"

    def test_threads_accumulator(self) -> None:
        combiner = Recorder(lambda acc, x: acc + [x])
        assert fold([1, 2], [], combiner) == [1, 2]
        assert combiner.calls == [([], 1), ([1], 2)]

    def test_accumulator_type_can_differ(self) -> None:
        assert fold(["ab", "cde"], 0, lambda acc, s: acc + len(s)) == 5

    def test_failure_discards_accumulation(self) -> None:
        combiner = FailOn(lambda acc, x: acc + x, trigger=lambda acc, x: x == 6)
        with pytest.raises(Boom):
            fold(EVEN_NUMBERS, 0, combiner)
        assert len(combiner.calls) == 4
