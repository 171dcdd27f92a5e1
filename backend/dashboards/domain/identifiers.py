"""External ID generation for dashboards."""

import random
import string

ID_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
ID_LENGTH = 8


def generate_external_id(rng: random.Random | None = None) -> str:
    """Return a random 8-character alphanumeric identifier.

    Uses the non-cryptographic ``random`` module. Uniqueness is only
    probabilistic (62**8 possibilities); callers do not check for
    collisions.
    """
    source = rng or random
    return "".join(source.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
