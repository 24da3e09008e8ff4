from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[\s\-()./]")


def format_whatsapp_number(phone: str, default_country_code: str = "90") -> str:
    """Normalize a phone number to E.164 for the WhatsApp gateway.

    Numbers already starting with ``+`` are kept; otherwise a leading zero is
    dropped and the default country code is prefixed.
    """
    cleaned = _SEPARATORS.sub("", phone.strip())
    if cleaned.startswith("+"):
        return cleaned
    if cleaned.startswith("0"):
        cleaned = cleaned[1:]
    return f"+{default_country_code.lstrip('+')}{cleaned}"
