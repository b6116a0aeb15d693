"""
cep_weather.domain.validation

Postal code (CEP) validation.

Responsibilities:
- Decide whether a candidate string is a well-formed CEP (exactly 8 ASCII digits).
"""

from __future__ import annotations

import re
from typing import Any

# re.ASCII keeps \d from matching non-ASCII digits (e.g. Arabic-Indic numerals).
CEP_PATTERN = re.compile(r"\d{8}", re.ASCII)


def is_valid_cep(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return CEP_PATTERN.fullmatch(value) is not None


# --- Module Notes -----------------------------------------------------------
# fullmatch (not match + "$") so a trailing newline is rejected as well.
