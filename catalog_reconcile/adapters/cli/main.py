# catalog_reconcile/adapters/cli/main.py

"""
Catalog Reconciliation Tool - CLI Main Module

Command-line interface for reconciling an OCLC catalog export against a
TIND export and writing the merged record set.
"""

# Standard library imports
import sys
from datetime import datetime
from logging import getLogger
from time import time
from typing import TextIO

# Local imports
from catalog_reconcile.adapters.cli.parser import build_run_config
from catalog_reconcile.adapters.cli.parser import create_argument_parser
from catalog_reconcile.adapters.cli.parser import create_config_parser
from catalog_reconcile.adapters.cli.parser import get_log_level
from catalog_reconcile.adapters.exporters import RecordCSVWriter
from catalog_reconcile.application.services import ReconciliationService
from catalog_reconcile.core.domain import Record
from catalog_reconcile.infrastructure.config import get_config
from catalog_reconcile.infrastructure.logging import ProgressBarManager
from catalog_reconcile.infrastructure.logging import log_run_summary
from catalog_reconcile.infrastructure.logging import setup_logging
from catalog_reconcile.infrastructure.persistence import CatalogLoader
from catalog_reconcile.infrastructure.persistence import ResumeIndex
from catalog_reconcile.infrastructure.persistence import RunIndexManager

logger = getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point"""
    config_args, _ = create_config_parser().parse_known_args(argv)
    config = get_config(config_args.config)

    parser = create_argument_parser(config)
    args = parser.parse_args(argv)

    if args.update_resume and not args.resume_file:
        parser.error("--update-resume requires --resume-file")

    log_file_path = setup_logging(
        log_file=args.log_file,
        log_level=get_log_level(args),
        silent=args.silent,
        disable_file_logging=args.disable_file_logging,
    )

    start_time = time()
    run_index_manager = RunIndexManager()
    run_info = {
        "run_id": datetime.now().isoformat(),
        "log_file": log_file_path or "",
        "targets": args.targets,
        "candidates": args.candidates,
        "output_file": args.output or "",
        "resume_file": args.resume_file or "",
        "passes": " ".join(args.passes),
        "fill_direction": args.fill_direction,
        "min_agreeing_fields": str(args.min_agreeing_fields),
        "status": "running",
    }
    run_index_manager.add_run(run_info)

    progress = ProgressBarManager(enabled=args.verbose == 0 and not args.silent)

    try:
        run_config = build_run_config(config, args)
        logger.info("=== STARTING CATALOG RECONCILIATION ===")
        logger.info(
            f"Passes: {', '.join(args.passes)}; fill direction: {args.fill_direction}; "
            f"min agreeing fields: {args.min_agreeing_fields}"
        )

        resume_index = ResumeIndex.load(args.resume_file) if args.resume_file else None
        targets = CatalogLoader(args.targets, run_config.target_source).load_records()
        candidates = CatalogLoader(args.candidates, run_config.candidate_source).load_records()

        service = ReconciliationService(run_config, resume_index=resume_index, progress=progress)

        progress.start()
        try:
            if args.output:
                with open(args.output, "w", encoding="utf-8", newline="") as output_file:
                    _write_results(service, targets, candidates, output_file)
            else:
                _write_results(service, targets, candidates, sys.stdout)
        finally:
            progress.stop()

        stats = service.stats
        if args.update_resume:
            ResumeIndex.append_to(args.resume_file, stats.matched_keys)

        log_run_summary(
            stats, log_file_path, output_file=args.output, resume_file=args.resume_file
        )

        run_info.update(
            {
                "target_count": str(stats.total_targets),
                "skipped_resumed": str(stats.skipped_resumed),
                "matched_targets": str(stats.matched_targets),
                "unmatched_targets": str(stats.unmatched_targets),
                "output_lines": str(stats.output_lines),
                "duration_seconds": str(int(time() - start_time)),
                "status": "completed",
            }
        )
        run_index_manager.update_run(run_info["run_id"], run_info)

    except Exception as e:
        logger.error(f"Error during reconciliation: {e}")
        run_info["status"] = "failed"
        run_info["duration_seconds"] = str(int(time() - start_time))
        run_index_manager.update_run(run_info["run_id"], run_info)
        raise


def _write_results(
    service: ReconciliationService,
    targets: list[Record],
    candidates: list[Record],
    stream: TextIO,
) -> None:
    """Stream every reconciled record to the output"""
    csv_writer = RecordCSVWriter(stream)
    csv_writer.write_header()
    csv_writer.write_all(service.reconcile(targets, candidates))


if __name__ == "__main__":
    main()
