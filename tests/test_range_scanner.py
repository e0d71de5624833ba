import pytest

from primesvc.range_scanner import calculate_primes, calculate_primes_chunked, split_range


def test_calculate_primes():
    assert calculate_primes(1, 10) == [1, 2, 3, 5, 7]
    assert calculate_primes(10, 20) == [11, 13, 17, 19]
    assert calculate_primes(20, 30) == [23, 29]
    assert calculate_primes(30, 30) == []


def test_inverted_range_is_empty():
    assert calculate_primes(20, 10) == []


def test_zero_start_includes_zero_and_one():
    assert calculate_primes(0, 5) == [0, 1, 2, 3, 5]


def test_single_prime_range():
    assert calculate_primes(13, 13) == [13]


def test_repeated_calls_give_same_result():
    first = calculate_primes(1, 200)
    second = calculate_primes(1, 200)
    assert first == second
    assert first == sorted(set(first))


def test_split_range_even():
    assert split_range(1, 8, 4) == [(1, 2), (3, 4), (5, 6), (7, 8)]


def test_split_range_remainder_goes_first():
    assert split_range(1, 10, 3) == [(1, 4), (5, 7), (8, 10)]


def test_split_range_more_chunks_than_values():
    assert split_range(5, 7, 10) == [(5, 5), (6, 6), (7, 7)]


def test_split_range_inverted():
    assert split_range(10, 1, 4) == []


def test_split_range_rejects_zero_chunks():
    with pytest.raises(ValueError):
        split_range(1, 10, 0)


def test_split_range_covers_whole_range():
    subranges = split_range(3, 101, 7)
    covered = [n for s, e in subranges for n in range(s, e + 1)]
    assert covered == list(range(3, 102))


@pytest.mark.parametrize("chunks", [1, 2, 3, 8])
def test_chunked_matches_plain_scan(chunks):
    assert calculate_primes_chunked(1, 150, chunks, max_procs=2) == calculate_primes(1, 150)


def test_chunked_inverted_range():
    assert calculate_primes_chunked(30, 20, 4) == []
