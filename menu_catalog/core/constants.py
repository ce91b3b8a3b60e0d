from __future__ import annotations

import re

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

MAX_TAX_RATE = 100

API_PREFIX = "/api/v1"

# precision of the Numeric columns holding money and tax rates
AMOUNT_MAX_DIGITS = 12
TAX_RATE_MAX_DIGITS = 5
DECIMAL_PLACES = 2
