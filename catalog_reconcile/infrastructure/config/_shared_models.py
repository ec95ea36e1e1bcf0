# catalog_reconcile/infrastructure/config/_shared_models.py

"""Shared configuration models used by both config and the matching engine"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from catalog_reconcile.core.domain.enums import TitleMode

# A pair needs more than 5 of the 9 designated fields to agree
DEFAULT_MIN_AGREEING_FIELDS = 6
DEFAULT_MAX_TITLE_DISTANCE = 1


class MatchPass(BaseModel):
    """One matching pass over the unresolved targets

    Titles are equivalent when any of the pass's title modes says so.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Pass name used in logs and statistics")
    title_modes: tuple[TitleMode, ...] = Field(
        ..., min_length=1, description="Title comparisons tried, in order"
    )


STRICT_PASS = MatchPass(name="strict", title_modes=(TitleMode.EXACT, TitleMode.TRIMMED))
FUZZY_PASS = MatchPass(name="fuzzy", title_modes=(TitleMode.FUZZY,))
DEFAULT_PASSES: tuple[MatchPass, ...] = (STRICT_PASS, FUZZY_PASS)
