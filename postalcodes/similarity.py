"""
Name similarity for postal lookups.

One rule serves every field (region, district, settlement):
- case-insensitive substring of the candidate is a match
- short queries (3 chars or fewer) only match as substring/prefix
- longer queries match within 30% Levenshtein distance

Invariant:
The check is directional; the query is looked up inside the candidate,
never the other way round.
"""

SHORT_QUERY_LENGTH = 3
DISTANCE_TOLERANCE = 0.3


def levenshtein(a: str, b: str) -> int:
    """Edit distance (insert, delete, substitute) using two DP rows."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        curr = [i]
        for j, cb in enumerate(b, 1):
            ins = curr[j - 1] + 1
            dele = prev[j] + 1
            sub = prev[j - 1] + (ca != cb)
            curr.append(min(ins, dele, sub))
        prev = curr
    return prev[-1]


def is_match(query: str, candidate: str) -> bool:
    """Return True if `query` is close enough to `candidate` to count as the same name."""
    q = query.lower()
    c = candidate.lower()

    if q in c:
        return True

    # Low absolute distances on short strings give false positives
    if len(q) <= SHORT_QUERY_LENGTH:
        return c.startswith(q)

    distance = levenshtein(q, c)
    return distance <= DISTANCE_TOLERANCE * max(len(q), len(c))
