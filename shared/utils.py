import logging
import random
import string
import time

from shared.config import config


def setup_logging(service_name: str, log_level: str | None = None) -> logging.Logger:
    """Setup logging configuration for a service"""
    logger = logging.getLogger(service_name)
    logger.setLevel(getattr(logging, (log_level or config.get("log_level", "INFO")).upper()))

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(f"%(asctime)s - {service_name} - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def generate_short_id(prefix: str) -> str:
    """Build a client-friendly id such as ``ann_1712345678901_k3j9x2a1b``."""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"{prefix}_{int(time.time() * 1000)}_{suffix}"


def validate_text_length(text: str, max_length: int = 10000) -> str:
    """Validate and truncate text if necessary"""
    if len(text) > max_length:
        return text[:max_length]
    return text


def blank_to_none(value: str | None) -> str | None:
    """Treat empty form values as cleared fields."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def title_from_request(prompt: str, word_count: int = 4) -> str:
    """Derive a short sentence-cased title from the first words of a request."""
    words = prompt.strip().split()
    title = " ".join(words[:word_count])
    if not title:
        return "New Slide"
    return title[0].upper() + title[1:].lower()
