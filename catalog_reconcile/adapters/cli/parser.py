# catalog_reconcile/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser
from argparse import Namespace

# Local imports
from catalog_reconcile.core.domain.enums import FillDirection
from catalog_reconcile.infrastructure.config import AppConfig
from catalog_reconcile.infrastructure.config import ConfigLoader
from catalog_reconcile.infrastructure.config import get_config


def create_config_parser() -> ArgumentParser:
    """Parser for the options needed before the full parser can be built"""
    parser = ArgumentParser(add_help=False)
    parser.add_argument("--config", default=None, help="Path to JSON configuration file")
    return parser


def create_argument_parser(config: ConfigLoader | None = None) -> ArgumentParser:
    """Create and configure argument parser with all CLI options

    Defaults come from the loaded configuration.
    """
    if config is None:
        config = get_config()

    matching_config = config.matching
    processing_config = config.processing
    logging_config = config.logging
    pass_names = [match_pass.name for match_pass in matching_config.passes]

    parser = ArgumentParser(
        description="Reconcile OCLC catalog records against a TIND export, "
        "merging cross-reference identifiers",
        parents=[create_config_parser()],
    )

    # Required arguments
    parser.add_argument(
        "--targets", required=True, help="CSV export whose records are matched (OCLC)"
    )
    parser.add_argument(
        "--candidates", required=True, help="CSV export searched for matches (TIND)"
    )

    # Output options
    parser.add_argument(
        "--output", "-o", default=None, help="Output CSV file (default: standard output)"
    )

    # Resume options
    parser.add_argument(
        "--resume-file",
        default=None,
        help="Newline-delimited IDs already reconciled; matching targets are skipped",
    )
    parser.add_argument(
        "--update-resume",
        action="store_true",
        help="Append the IDs of targets matched in this run to --resume-file",
    )

    # Matching options
    parser.add_argument(
        "--passes",
        nargs="+",
        choices=pass_names,
        default=pass_names,
        help=f"Matching passes to run, in order (default: {' '.join(pass_names)})",
    )
    parser.add_argument(
        "--fill-direction",
        choices=[direction.value for direction in FillDirection],
        default=matching_config.fill_direction.value,
        help="Which record of a match survives the merge "
        f"(default: {matching_config.fill_direction.value})",
    )
    parser.add_argument(
        "--min-agreeing-fields",
        type=int,
        default=matching_config.min_agreeing_fields,
        help="Designated fields that must agree for a match "
        f"(default: {matching_config.min_agreeing_fields})",
    )
    parser.add_argument(
        "--target-skip-rows",
        type=int,
        default=config.target_source.skip_rows,
        help="Header rows skipped in the targets file",
    )
    parser.add_argument(
        "--candidate-skip-rows",
        type=int,
        default=config.candidate_source.skip_rows,
        help="Header rows skipped in the candidates file",
    )

    # Progress options
    parser.add_argument(
        "--progress-interval",
        type=int,
        default=processing_config.progress_interval,
        help="Targets between progress log lines",
    )

    # Logging options
    parser.add_argument(
        "--log-file",
        default=logging_config.log_file,
        help="Path to log file (default: logs/reconcile_[timestamp].log)",
    )
    parser.add_argument("--disable-file-logging", action="store_true", help="Disable file logging")

    # Verbosity - count occurrences: -v (INFO), -vv (DEBUG)
    # Default is progress bars with only WARN/ERROR to stderr
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=2 if logging_config.debug else 0,
        help="Increase verbosity (default: progress bars only, -v: INFO, -vv: DEBUG)",
    )
    parser.add_argument("--silent", action="store_true", help="Suppress all console output")

    return parser


def build_run_config(config: ConfigLoader, args: Namespace) -> ConfigLoader:
    """Apply command-line overrides to the loaded configuration

    The result is validated again, so out-of-range overrides raise
    ``pydantic.ValidationError``.
    """
    data = config.app_config.model_dump(mode="json")

    configured_passes = {
        match_pass["name"]: match_pass for match_pass in data["matching"]["passes"]
    }
    data["matching"]["passes"] = [configured_passes[name] for name in args.passes]
    data["matching"]["fill_direction"] = args.fill_direction
    data["matching"]["min_agreeing_fields"] = args.min_agreeing_fields
    data["sources"]["target"]["skip_rows"] = args.target_skip_rows
    data["sources"]["candidate"]["skip_rows"] = args.candidate_skip_rows
    data["processing"]["progress_interval"] = args.progress_interval

    return ConfigLoader(config.config_path, app_config=AppConfig.model_validate(data))


def get_log_level(args: Namespace) -> str:
    """Console log level for the requested verbosity"""
    if args.verbose >= 2:
        return "DEBUG"
    if args.verbose == 1:
        return "INFO"
    return "WARNING"
