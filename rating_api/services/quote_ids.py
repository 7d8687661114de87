import re
import secrets
import string
import time
from typing import Callable, Optional, Protocol

QUOTE_ID_PATTERN = re.compile(r"^Q-\d+-[A-Z0-9]+$")
SUFFIX_ALPHABET = string.ascii_uppercase + string.digits
SUFFIX_LENGTH = 5


class IdGenerator(Protocol):
    def next_id(self) -> str:
        ...


class QuoteIdGenerator:
    """Builds ids of the form Q-<unix millis>-<5 char uppercase alphanumeric suffix>"""

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time

    def next_id(self) -> str:
        millis = int(self._clock() * 1000)
        suffix = "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
        return f"Q-{millis}-{suffix}"
