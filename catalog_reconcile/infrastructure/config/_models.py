# catalog_reconcile/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from json import load
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

# Local imports
from catalog_reconcile.core.domain.enums import FillDirection
from catalog_reconcile.core.domain.record import IDENTIFIER_FIELDS
from catalog_reconcile.infrastructure.config._shared_models import DEFAULT_MAX_TITLE_DISTANCE
from catalog_reconcile.infrastructure.config._shared_models import DEFAULT_MIN_AGREEING_FIELDS
from catalog_reconcile.infrastructure.config._shared_models import DEFAULT_PASSES
from catalog_reconcile.infrastructure.config._shared_models import MatchPass

logger = getLogger(__name__)

# Expected column order of the OCLC export (the targets)
OCLC_COLUMNS = [
    "material type",
    "mono or serial",
    "date1",
    "date2",
    "form",
    "isbn",
    "issn",
    "oclc",
    "title",
    "subtitle",
    "author",
    "publisher",
    "year",
    "pagination",
]

# Expected column order of the TIND export (the candidates)
TIND_COLUMNS = [
    "material type",
    "mono or serial",
    "date1",
    "date2",
    "form",
    "tind",
    "oclc",
    "isbn",
    "issn",
    "title",
    "subtitle",
    "author",
    "publisher",
    "year",
    "pagination",
]


class SourceConfig(BaseModel):
    """Layout of one catalog export"""

    columns: list[str] = Field(..., min_length=1, description="Expected column names, in order")
    skip_rows: int = Field(1, ge=0, description="Leading rows (headers) never projected")


class SourcesConfig(BaseModel):
    """Target and candidate export layouts"""

    target: SourceConfig = Field(default_factory=lambda: SourceConfig(columns=list(OCLC_COLUMNS)))
    candidate: SourceConfig = Field(
        default_factory=lambda: SourceConfig(columns=list(TIND_COLUMNS))
    )


class MatchingConfig(BaseModel):
    """Matching engine configuration"""

    min_agreeing_fields: int = Field(
        DEFAULT_MIN_AGREEING_FIELDS,
        ge=0,
        le=9,
        description="Designated fields that must agree for a match",
    )
    max_title_distance: int = Field(
        DEFAULT_MAX_TITLE_DISTANCE, ge=0, description="Largest edit distance for fuzzy titles"
    )
    passes: list[MatchPass] = Field(default_factory=lambda: list(DEFAULT_PASSES), min_length=1)
    fill_direction: FillDirection = Field(
        FillDirection.SOURCE_PREFERRED, description="Which side of a match survives the merge"
    )

    @field_validator("passes")
    @classmethod
    def validate_pass_names(cls, v: list[MatchPass]) -> list[MatchPass]:
        """Pass names identify passes in statistics, so they must be unique"""
        names = [match_pass.name for match_pass in v]
        if len(names) != len(set(names)):
            raise ValueError(f"Pass names must be unique, got {names}")
        return v


class ResumeConfig(BaseModel):
    """Resume index configuration"""

    key_field: str = Field("oclc", description="Target identifier looked up in the resume index")

    @field_validator("key_field")
    @classmethod
    def validate_key_field(cls, v: str) -> str:
        """Only identifier fields can key the resume index"""
        if v not in IDENTIFIER_FIELDS:
            raise ValueError(f"key_field must be one of {IDENTIFIER_FIELDS}, got {v!r}")
        return v


class ProcessingConfig(BaseModel):
    """Processing configuration"""

    progress_interval: int = Field(100, gt=0, description="Targets between progress reports")


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    resume: ResumeConfig = Field(default_factory=ResumeConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        An explicitly named file must exist. Without a path, ``config.json``
        in the current directory is used when present. Invalid content
        raises ``pydantic.ValidationError``.

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None:
            config_path = Path("config.json")
            if not config_path.exists():
                return cls()
        elif not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            data = load(f)
        logger.debug(f"Loaded configuration from {config_path}")
        return cls.model_validate(data)
