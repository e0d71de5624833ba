"""
request_handler.py

Boundary between the HTTP layer and the prime scanner.

A decoded JSON payload {"start": .., "end": ..} is validated into a
PrimeRange, scanned, and the resulting list serialized to JSON. If
serialization fails the fixed FALLBACK_BODY is sent instead, with a 200
status unless strict_errors is enabled (then 500).
"""

import json
import logging

from primesvc.range_scanner import calculate_primes

logger = logging.getLogger(__name__)

U32_MAX = 2 ** 32 - 1
FALLBACK_BODY = "Failed to extract data"

JSON_HEADERS = {"Content-Type": "application/json"}
TEXT_HEADERS = {"Content-Type": "text/plain; charset=utf-8"}


class InvalidRangeError(ValueError):
    """Raised when a request payload does not describe a valid u32 range."""


class PrimeRange:
    """
    Inclusive [start..end] pair of unsigned 32-bit integers.
    start > end is allowed and simply describes an empty range.
    """
    def __init__(self, start, end):
        self.start = start
        self.end = end

    @classmethod
    def from_payload(cls, payload):
        if not isinstance(payload, dict):
            raise InvalidRangeError("Request body must be a JSON object with 'start' and 'end'.")
        values = []
        for field in ("start", "end"):
            if field not in payload:
                raise InvalidRangeError(f"Missing field '{field}'.")
            value = payload[field]
            # bool is an int subclass; JSON true/false is not a number here
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidRangeError(f"Field '{field}' must be an unsigned 32-bit integer.")
            if value < 0 or value > U32_MAX:
                raise InvalidRangeError(f"Field '{field}' is out of range [0..{U32_MAX}]: {value}")
            values.append(value)
        return cls(*values)

    def __eq__(self, other):
        if not isinstance(other, PrimeRange):
            return NotImplemented
        return (self.start, self.end) == (other.start, other.end)

    def __repr__(self):
        return f"PrimeRange(start={self.start}, end={self.end})"


class RequestHandler:
    """
    Turns a decoded request payload into a (body, status, headers) response.

    Attributes:
      - strict_errors (bool): answer a serialization failure with 500 instead of 200
      - dumps (callable): JSON encoder for the prime list
    """
    def __init__(self, strict_errors=False, dumps=json.dumps):
        self.strict_errors = strict_errors
        self.dumps = dumps

    def handle(self, payload):
        try:
            prime_range = PrimeRange.from_payload(payload)
        except InvalidRangeError as e:
            logger.warning(f"Rejected request: {e}")
            return str(e), 400, TEXT_HEADERS

        primes = calculate_primes(prime_range.start, prime_range.end)
        logger.debug(f"Found {len(primes)} prime(s) in range [{prime_range.start}..{prime_range.end}]")
        return self.encode(primes)

    def encode(self, primes):
        try:
            body = self.dumps(primes, separators=(",", ":"))
        except (TypeError, ValueError):
            logger.exception("Could not serialize prime list")
            status = 500 if self.strict_errors else 200
            return FALLBACK_BODY, status, TEXT_HEADERS
        return body, 200, JSON_HEADERS
