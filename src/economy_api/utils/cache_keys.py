"""Cache key derivation.

Keys are plain delimiter-joined strings, e.g. ``economy:items:3:7``.
"""

DELIMITER = ":"
UNDEFINED = "undefined"

# Response cache namespaces
ITEMS_NAMESPACE = "economy:items"
ITEM_DETAIL_NAMESPACE = "economy:item"
LISTINGS_COUNT_NAMESPACE = "economy:listings-count"


def _segment(value: object) -> str:
    if value is None:
        return UNDEFINED
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        escaped = value.replace("%", "%25").replace(DELIMITER, "%3A")
        # keep a literal "undefined" apart from the placeholder
        if escaped == UNDEFINED:
            return "%75" + escaped[1:]
        return escaped
    return str(value)


def derive_key(namespace: str, *params: object) -> str:
    """Build the cache key for a query.

    Args:
        namespace: Key prefix naming the query, e.g. ``economy:items``
        *params: Query parameter values in a fixed order; None becomes
            the ``undefined`` placeholder

    Returns:
        The cache key
    """
    return DELIMITER.join([namespace, *(_segment(p) for p in params)])
