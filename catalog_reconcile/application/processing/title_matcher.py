# catalog_reconcile/application/processing/title_matcher.py

"""Title equivalence under exact, trimmed, and fuzzy comparison"""

# Third party imports
from Levenshtein import distance

# Local imports
from catalog_reconcile.core.domain.enums import TitleMode
from catalog_reconcile.infrastructure.config import DEFAULT_MAX_TITLE_DISTANCE


def title_distance(first: str, second: str, max_distance: int | None = None) -> int:
    """Case-insensitive Levenshtein distance between two titles

    Insertions, deletions, and substitutions each cost 1. With
    ``max_distance`` the computation stops early and any distance beyond
    the bound is reported as ``max_distance + 1``.
    """
    return distance(first.lower(), second.lower(), score_cutoff=max_distance)


def titles_equivalent(
    first: str,
    second: str,
    mode: TitleMode,
    max_distance: int = DEFAULT_MAX_TITLE_DISTANCE,
) -> bool:
    """Decide whether two titles are the same title under a comparison mode

    Args:
        first: Title of the target record
        second: Title of the candidate record
        mode: Comparison mode for the current pass
        max_distance: Largest edit distance accepted in fuzzy mode

    Returns:
        True if the titles are equivalent
    """
    if mode is TitleMode.EXACT:
        return first == second
    if mode is TitleMode.TRIMMED:
        return first.strip() == second.strip()
    if mode is TitleMode.FUZZY:
        first, second = first.lower(), second.lower()
        # Length difference is a lower bound on edit distance
        if abs(len(first) - len(second)) > max_distance:
            return False
        return distance(first, second, score_cutoff=max_distance) <= max_distance
    raise ValueError(f"Unknown title mode: {mode}")
