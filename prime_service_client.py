#!/usr/bin/env python3
"""
prime_service_client.py

Provides a PrimeServiceClient class that wraps the prime service endpoints:
 - get_primes()
"""

import requests

DEFAULT_URL = "http://127.0.0.1:9000"


class PrimeServiceError(RuntimeError):
    """Raised when the service answers with something other than a prime list."""


class PrimeServiceClient:
    """
    A client for a running prime service over HTTP.
    """

    def __init__(self, base_url=DEFAULT_URL, timeout=30):
        self.session = requests.Session()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _build_url(self, path):
        """
        Example: http://127.0.0.1:9000/primes
        """
        return f"{self.base_url}{path}"

    def get_primes(self, start, end):
        """
        POST /primes
        Sends {"start": start, "end": end} and returns the list of primes.
        """
        url = self._build_url("/primes")
        resp = self.session.post(url, json={"start": start, "end": end}, timeout=self.timeout)
        resp.raise_for_status()
        try:
            primes = resp.json()
        except ValueError:
            raise PrimeServiceError(f"Unexpected response from {url}: {resp.text!r}")
        if not isinstance(primes, list):
            raise PrimeServiceError(f"Expected a JSON array from {url}, got: {primes!r}")
        return primes

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
