"""
prime_classifier.py

Trial-division primality test used by the range scanner.

Note: 0 and 1 are reported as prime. Both fall through the divisor loop
without a hit and keep the default answer; callers rely on this.
"""


def is_prime(num: int) -> bool:
    # num is prime only if nothing in [2, num) divides it
    if num == 1:
        return True
    for i in range(2, num):
        if num % i == 0:
            return False
    return True
