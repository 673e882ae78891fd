import math

from strength_check.charset import classify

# Assume 1 billion guesses per second for modern hardware
DEFAULT_GUESSES_PER_SECOND = 1_000_000_000

MINUTE = 60
HOUR = 3600
DAY = 86400
YEAR = 31536000


def entropy(password: str) -> float:
    """Idealised bits of entropy: length * log2(pool size of classes used).

    Assumes every character was drawn uniformly from the union of the
    character classes present, so it is an upper bound rather than the
    Shannon entropy of the actual string.
    """
    if not password:
        return 0.0

    pool_size = classify(password).alphabet_size
    return len(password) * math.log2(max(pool_size, 1))


def estimate_crack_time(bits: float, guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND) -> str:
    """Estimate time to exhaust a 2**bits keyspace at the given guess rate"""
    if guesses_per_second <= 0:
        raise ValueError(f"guesses_per_second must be positive, got {guesses_per_second!r}")
    if bits <= 0:
        return "instant"

    # Stay in log2 space until the number is known to fit in a float
    log2_seconds = bits - math.log2(guesses_per_second)
    if log2_seconds < 0:
        return "instant"
    if log2_seconds > math.log2(1000 * YEAR):
        return "centuries"

    seconds = 2 ** log2_seconds
    if seconds < MINUTE:
        return f"{seconds:.1f} seconds"
    elif seconds < HOUR:
        return f"{seconds/MINUTE:.1f} minutes"
    elif seconds < DAY:
        return f"{seconds/HOUR:.1f} hours"
    elif seconds < YEAR:
        return f"{seconds/DAY:.1f} days"
    else:
        return f"{seconds/YEAR:.1f} years"
