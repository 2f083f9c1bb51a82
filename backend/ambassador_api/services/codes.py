from __future__ import annotations
import secrets, string, time
ALPHABET = string.ascii_uppercase + string.digits
SUFFIX_ALPHABET = string.ascii_lowercase + string.digits

def generate_code(length: int = 8) -> str:
    """Seed rendered into an event's QR code."""
    return "".join(secrets.choice(ALPHABET) for _ in range(length))

def random_suffix(length: int = 6) -> str:
    return "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(length))

def now_ms() -> int:
    return int(time.time() * 1000)
