import secrets
import string
import time

FLIGHT_PREFIX = "FL"
BOOKING_PREFIX = "BK"

_ALPHABET = string.digits + string.ascii_lowercase
_SUFFIX_LENGTH = 9


def generate_id(prefix: str) -> str:
    """Build an identifier of the form ``<prefix>_<epoch millis>_<random base36 suffix>``."""
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_SUFFIX_LENGTH))
    return f"{prefix}_{int(time.time() * 1000)}_{suffix}"
