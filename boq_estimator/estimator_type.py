"""
Product -> estimator domain classifier.

Matches upper-cased subcategory / category / name against ordered keyword
rules; the first rule that fires wins. Products no rule recognizes get a
key derived from their own subcategory, category or name.
"""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)


def _norm(value) -> str:
    return str(value or "").upper()


def _any_in(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


# (domain, keywords checked in subcategory, keywords checked in category,
#  keywords checked in name), in priority order
KEYWORD_RULES = [
    ("doors",
     ("DOOR", "VISION PANEL", "FLUSH", "TEAK", "STILE"),
     ("DOOR",),
     ("DOOR",)),
    ("fire_fighting",
     ("FIRE", "SPRINKLER", "HYDRANT", "EXTINGUISHER"),
     ("FIRE",),
     ("SPRINKLER", "EXTINGUISHER")),
    ("blinds",
     ("BLIND", "CURTAIN"),
     ("BLIND",),
     ("BLIND",)),
    ("civil_wall",
     ("CIVIL", "WALL", "CEMENT", "BRICK", "SAND"),
     ("CIVIL", "WALL"),
     ()),
    ("electrical",
     ("ELECTRICAL", "WIRE", "CABLE", "SWITCH", "SOCKET", "LIGHT", "LED", "FAN", "MCB", "CONDUIT"),
     ("ELECTRICAL",),
     ()),
    ("flooring",
     ("FLOOR", "TILE", "MARBLE", "GRANITE"),
     ("FLOOR",),
     ("FLOORING",)),
    ("plumbing",
     ("PLUMB", "PIPE", "WATER", "TAP", "FAUCET", "SINK"),
     ("PLUMB", "PIPE"),
     ()),
    ("painting",
     ("PAINT", "PUTTY", "PRIMER", "EMULSION"),
     ("PAINT",),
     ()),
    ("false_ceiling",
     ("CEILING", "GYPSUM", "POP", "GRID"),
     ("CEILING",),
     ()),
]


def get_estimator_type(product: Optional[dict]) -> Optional[str]:
    """
    Estimator domain key for a product/category record, or None.

    Reads subcategory (or subcategory_name), category (or category_name)
    and name.
    """
    if not product:
        return None

    subcat = _norm(product.get("subcategory") or product.get("subcategory_name"))
    cat = _norm(product.get("category") or product.get("category_name"))
    name = _norm(product.get("name"))

    # WPC frames are sold as door frames
    if subcat == "WPC" and "FRAME" in name:
        return "doors"

    for domain, subcat_words, cat_words, name_words in KEYWORD_RULES:
        if (_any_in(subcat, subcat_words) or _any_in(cat, cat_words)
                or _any_in(name, name_words)):
            return domain

    candidate = (subcat or cat or name).strip()
    normalized = re.sub(r"[-\s]", "", candidate)
    if re.search(r"\w", normalized):
        logger.debug("No keyword rule for %r, using %r", candidate, normalized.lower())
        return normalized.lower()
    return None
