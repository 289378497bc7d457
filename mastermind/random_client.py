"""
- HTTP call with clear fallback
Get the secret from random.org as a shuffled 0..7 sequence and keep the first
four values, so the colours never repeat. If anything goes wrong (no internet,
timeout, bad response), we fall back to a local secure random generator so the
game still works.
"""

import logging

import requests

from .engine import ALPHABET, CODE_LENGTH, Sequence
from .types import RandomSource

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/sequences/"


def fetch_code(source: RandomSource = "local", timeout: float = 3.0) -> Sequence:
    if source == "local":
        return Sequence.generate()

    try:
        return _fetch_remote(timeout)
    except (requests.RequestException, ValueError) as exc:
        logger.warning("random.org unavailable (%s); using local randomness", exc)
        return Sequence.generate()


def _fetch_remote(timeout: float) -> Sequence:
    # Parameters to send to random.org
    params = {
        "min": 0,                   # smallest index into the alphabet
        "max": len(ALPHABET) - 1,   # largest index
        "col": 1,                   # one number per line
        "format": "plain",          # plain text response
        "rnd": "new",               # always generate a new shuffle
    }

    response = requests.get(RANDOM_URL, params=params, timeout=timeout)

    # If the response was not 200 OK, this will raise an error
    response.raise_for_status()

    # The body looks like:
    #   5\n0\n7\n2\n...
    indices = [int(line) for line in response.text.split() if line.strip()]

    if len(indices) < CODE_LENGTH:
        raise ValueError(f"random.org returned {len(indices)} values, expected at least {CODE_LENGTH}.")

    picked = indices[:CODE_LENGTH]
    for index in picked:
        if index < 0 or index >= len(ALPHABET):
            raise ValueError(f"random.org number {index} out of range 0..{len(ALPHABET) - 1}.")
    if len(set(picked)) != CODE_LENGTH:
        raise ValueError("random.org sequence repeated a value.")

    logger.debug("secret drawn from random.org")
    return Sequence(tuple(ALPHABET[i] for i in picked))
