"""Train category lookups: full names and coarse transport types."""

import re

# Declared order. Several prefixes overlap ("IC"/"ICE", "R"/"RE"/"RJ", "T"/"TGV"),
# so lookups go through _LONGEST_PREFIX_FIRST instead of this tuple directly.
TRAIN_CATEGORY_NAMES: tuple[tuple[str, str], ...] = (
    ("IC", "InterCity"),
    ("IR", "InterRegio"),
    ("ICE", "InterCity Express"),
    ("EC", "EuroCity"),
    ("RE", "Regional Express"),
    ("R", "Regional"),
    ("S", "S-Bahn"),
    ("TGV", "Train à Grande Vitesse"),
    ("RJ", "RailJet"),
    ("EN", "EuroNight"),
    ("BUS", "Bus"),
    ("T", "Tram"),
    ("BAT", "Boat"),
)

# sorted() is stable, so equal-length prefixes keep their declared order
_LONGEST_PREFIX_FIRST = sorted(TRAIN_CATEGORY_NAMES, key=lambda item: len(item[0]), reverse=True)

_LEADING_CODE_PATTERN = re.compile(r"^([A-Z]+)")

TRAIN_TYPE_SEPARATOR = " → "
DEFAULT_TRANSPORT_TYPE = "Train"


def resolve_train_type(code: str) -> str:
    """Return the full name for a category code, e.g. "ICE" -> "InterCity Express".

    Matching is a case-insensitive prefix test; the longest matching prefix wins.
    Unknown codes are returned unchanged.
    """
    upper = code.upper()
    for prefix, name in _LONGEST_PREFIX_FIRST:
        if upper.startswith(prefix):
            return name
    return code


def describe_train_type(train_type: str) -> str:
    """Resolve every leg of a composite train type ("IC 712 → S 3") to full names."""
    names = []
    for part in train_type.split(TRAIN_TYPE_SEPARATOR):
        match = _LEADING_CODE_PATTERN.match(part)
        if match:
            names.append(resolve_train_type(match.group(1)))
    return TRAIN_TYPE_SEPARATOR.join(name for name in names if name)


def classify_transport_type(category: str | None) -> str:
    """Classify a raw departure category into a coarse transport type.

    Express codes are checked first, then regional, S-Bahn, bus, tram and boat.
    Any remaining code containing "T" counts as a tram (NFT, TGV, BAT).
    Anything else is returned as the uppercased raw category.
    """
    if not category:
        return DEFAULT_TRANSPORT_TYPE

    code = category.upper()
    if "IC" in code or "IR" in code or "ICE" in code or "EC" in code:
        return "Express"
    if code == "R" or "RE" in code:
        return "Regional"
    if code.startswith("S"):
        return "S-Bahn"
    if "BUS" in code:
        return "Bus"
    if "T" in code:
        return "Tram"
    if "SHIP" in code:
        return "Boat"
    return code
