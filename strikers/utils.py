import urllib.parse
from typing import Any, Optional


def clean_text(value: Optional[str]) -> str:
    return (value or "").strip()


def q(s: str) -> str:
    return urllib.parse.quote(clean_text(s), safe="")


def as_int(value: Any) -> Optional[int]:
    """Return ``value`` as an int when it is an integral number, else ``None``.

    Booleans and fractional floats are refused; the service always sends whole
    numbers for counters and XP.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def format_exception_message(error: Optional[BaseException]) -> str:
    if error is None:
        return "Unknown error"
    message = str(error).strip()
    return message if message else error.__class__.__name__
