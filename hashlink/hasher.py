"""Short code hashing utilities."""

import random
import re
import string
import zlib

# Characters appended to a long URL to move it to a different hash
PERTURB_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_.~"

HASH_PATTERN = re.compile(r"^[0-9a-f]{1,8}$")

LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def hash_url(value: str) -> str:
    """Hash a string to a short code.

    CRC-32 of the UTF-8 bytes as lowercase hex, not zero padded, so the
    code is 1 to 8 characters long. Lone surrogates are encoded as U+FFFD,
    so any str hashes. Collisions are expected; the allocator resolves them.

    Args:
        value: The string to hash (normally a long URL)

    Returns:
        Short code
    """
    data = LONE_SURROGATE.sub("\ufffd", value).encode("utf-8")
    return format(zlib.crc32(data), "x")


def random_perturbation() -> str:
    """Pick one random character from the perturbation alphabet."""
    return random.choice(PERTURB_ALPHABET)


def perturb(long_url: str) -> str:
    """Append one random character to a URL to get a new hash input."""
    return long_url + random_perturbation()


def is_valid_hash(code: str) -> bool:
    """Check if code has the hasher's output format."""
    return bool(HASH_PATTERN.match(code))
