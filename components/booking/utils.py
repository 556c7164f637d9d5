import string
import secrets

REF_PREFIX = "BK"


def generate_booking_ref(length: int = 8) -> str:
    """Generate a random booking reference like BK-7Q2M9XKD."""
    characters = string.ascii_uppercase + string.digits
    return f"{REF_PREFIX}-" + "".join(secrets.choice(characters) for _ in range(length))
