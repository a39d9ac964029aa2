# wedding_wonders/utils.py
"""Shared utilities: logging setup and small text helpers."""
import os
import logging
import re
import unicodedata
from dotenv import load_dotenv

load_dotenv()

def get_logger(name=__name__):
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        level=getattr(logging, level, logging.INFO)
    )
    return logging.getLogger(name)

logger = get_logger("wedding-wonders")

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")
_WHITESPACE_RE = re.compile(r"\s+")


def slugify_compact(value: str) -> str:
    # "The Breakers" -> "thebreakers"
    cleaned = _WHITESPACE_RE.sub("", (value or "").lower())
    return _NON_ALNUM_RE.sub("", cleaned)


def collation_key(value: str):
    """Sort key approximating a locale-aware, case-insensitive comparison."""
    text = value or ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (stripped.casefold(), text)
