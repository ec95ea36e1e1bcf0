# catalog_reconcile/application/models/reconciliation_stats.py

"""Pydantic model for reconciliation run statistics"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ReconciliationStats(BaseModel):
    """Statistics from one reconciliation run"""

    model_config = ConfigDict()

    total_targets: int = Field(0, description="Target records loaded")
    total_candidates: int = Field(0, description="Candidate records loaded")
    skipped_resumed: int = Field(0, description="Targets skipped via the resume index")
    matches_by_pass: dict[str, int] = Field(
        default_factory=dict, description="Targets matched in each pass"
    )
    unmatched_targets: int = Field(0, description="Targets no pass matched")
    output_lines: int = Field(0, description="Records emitted, matched and unmatched")
    matched_keys: list[str] = Field(
        default_factory=list, description="Resume keys of targets matched in this run"
    )
    processing_time: float = Field(0.0, description="Processing time in seconds")

    @property
    def processed_targets(self) -> int:
        """Targets subject to matching, the progress denominator"""
        return self.total_targets - self.skipped_resumed

    @property
    def matched_targets(self) -> int:
        """Targets matched in any pass"""
        return sum(self.matches_by_pass.values())

    def increment(self, field: str, value: int = 1) -> None:
        """Increment a statistic field

        Args:
            field: Field name to increment
            value: Amount to increment by
        """
        if hasattr(self, field):
            current = getattr(self, field)
            setattr(self, field, current + value)

    def record_pass_match(self, pass_name: str) -> None:
        """Count one target matched in the named pass"""
        self.matches_by_pass[pass_name] = self.matches_by_pass.get(pass_name, 0) + 1

    def to_dict(self) -> dict:
        """Convert to dictionary

        Returns:
            Dictionary representation
        """
        return self.model_dump()
