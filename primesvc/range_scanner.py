"""
range_scanner.py

Collects the primes of an inclusive range [start..end], either in-process
(calculate_primes) or split into subranges across local worker processes
(calculate_primes_chunked).
"""

from concurrent.futures import ProcessPoolExecutor

from primesvc.prime_classifier import is_prime


def calculate_primes(start: int, end: int) -> list:
    """
    Return every prime in [start..end], ascending.
    An inverted range (start > end) yields an empty list.
    """
    primes = []
    for num in range(start, end + 1):
        if is_prime(num):
            primes.append(num)
    return primes


def split_range(start: int, end: int, chunks: int) -> list:
    """
    Split [start..end] into at most `chunks` contiguous subranges.
    Sizes differ by at most one; the leading subranges take the remainder.
    Returns a list of (sub_start, sub_end) tuples, empty ones omitted.
    """
    if chunks < 1:
        raise ValueError(f"chunks must be >= 1, got {chunks}")
    if start > end:
        return []

    total_range = end - start + 1
    chunk_size = total_range // chunks
    remainder = total_range % chunks

    subranges = []
    current = start
    for i in range(chunks):
        extra = 1 if i < remainder else 0
        last = current + chunk_size + extra - 1
        if last < current:
            break
        subranges.append((current, last))
        current = last + 1
    return subranges


def calculate_primes_chunked(start: int, end: int, chunks: int, max_procs=None) -> list:
    """
    Same result as calculate_primes, with each subrange scanned in its own process.
    Subrange results are joined in range order, so the output stays ascending.
    """
    subranges = split_range(start, end, chunks)
    if not subranges:
        return []

    with ProcessPoolExecutor(max_workers=max_procs or len(subranges)) as executor:
        futures = [executor.submit(calculate_primes, ss, ee) for ss, ee in subranges]
        primes = []
        for fut in futures:
            primes.extend(fut.result())
    return primes
