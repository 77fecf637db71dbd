import os
from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True))


def _optional_int(name: str):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


def _optional_float(name: str):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return float(value)


SCRYFALL_BASE_URL = os.getenv("SCRYFALL_BASE_URL", "https://api.scryfall.com").rstrip("/")
SCRYFALL_USER_AGENT = os.getenv("SCRYFALL_USER_AGENT", "ScryfallLookup/1.0")

# None means no timeout; callers that need bounded latency opt in
REQUEST_TIMEOUT_SECONDS = _optional_float("SCRYFALL_REQUEST_TIMEOUT")

# None keeps get_random_card retrying until it finds a card with artwork
RANDOM_CARD_MAX_ATTEMPTS = _optional_int("SCRYFALL_RANDOM_MAX_ATTEMPTS")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
