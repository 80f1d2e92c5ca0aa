# storefront/utils/ids.py
import re

from storefront.domain.errors import InvalidArgument

# opcjonalny znak + cyfry ASCII; int() sam przepuszcza "0_1", " 1" i cyfry unicode
_NUMERIC_ID = re.compile(r"[+-]?[0-9]+")


def parse_id(raw_id: str, message: str) -> int:
    if not _NUMERIC_ID.fullmatch(raw_id):
        raise InvalidArgument(message)
    return int(raw_id)
