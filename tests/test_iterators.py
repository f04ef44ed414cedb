import pytest

from drillkit.lessons.iterators import (
    DivideByZeroError,
    DivisionError,
    NotDivisibleError,
    Progress,
    capitalize_first,
    capitalize_words_string,
    capitalize_words_vector,
    count_collection_for,
    count_collection_iterator,
    count_for,
    count_iterator,
    divide,
    factorial,
    list_of_results,
    result_with_list,
)


def test_success():
    assert capitalize_first("hello") == "Hello"


def test_empty():
    assert capitalize_first("") == ""


def test_iterate_string_vec():
    assert capitalize_words_vector(["hello", "world"]) == ["Hello", "World"]


def test_iterate_into_string():
    assert capitalize_words_string(["hello", " ", "world"]) == "Hello World"


def test_divide_success():
    assert divide(81, 9) == 9


def test_not_divisible():
    with pytest.raises(NotDivisibleError) as info:
        divide(81, 6)
    assert (info.value.dividend, info.value.divisor) == (81, 6)


def test_divide_by_0():
    with pytest.raises(DivideByZeroError):
        divide(81, 0)


def test_divide_0_by_something():
    assert divide(0, 81) == 0


def test_result_with_list():
    assert result_with_list() == [1, 11, 1426, 3]


def test_list_of_results():
    results = list_of_results()
    assert results == [1, 11, 1426, 3]
    assert not any(isinstance(r, DivisionError) for r in results)


@pytest.mark.parametrize("num, expected", [(0, 1), (1, 1), (2, 2), (4, 24)])
def test_factorial(num, expected):
    assert factorial(num) == expected


def test_factorial_overflow():
    with pytest.raises(OverflowError):
        factorial(21)


def get_map():
    return {
        "variables1": Progress.COMPLETE,
        "functions1": Progress.COMPLETE,
        "hashmap1": Progress.COMPLETE,
        "arc1": Progress.SOME,
        "as_ref_mut": Progress.NONE,
        "from_str": Progress.NONE,
    }


def get_vec_map():
    other = {
        "variables2": Progress.COMPLETE,
        "functions2": Progress.COMPLETE,
        "if1": Progress.COMPLETE,
        "from_into": Progress.NONE,
        "try_from_into": Progress.NONE,
    }
    return [get_map(), other]


@pytest.mark.parametrize(
    "value, expected",
    [(Progress.COMPLETE, 3), (Progress.SOME, 1), (Progress.NONE, 2)],
)
def test_count(value, expected):
    assert count_iterator(get_map(), value) == expected


def test_count_equals_for():
    progress_map = get_map()
    for state in (Progress.COMPLETE, Progress.SOME, Progress.NONE):
        assert count_for(progress_map, state) == count_iterator(progress_map, state)


@pytest.mark.parametrize(
    "value, expected",
    [(Progress.COMPLETE, 6), (Progress.SOME, 1), (Progress.NONE, 4)],
)
def test_count_collection(value, expected):
    assert count_collection_iterator(get_vec_map(), value) == expected


def test_count_collection_equals_for():
    collection = get_vec_map()
    for state in (Progress.COMPLETE, Progress.SOME, Progress.NONE):
        assert count_collection_for(collection, state) == count_collection_iterator(
            collection, state
        )