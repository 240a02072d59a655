"""Nightly scheduler — moves users into their next program phase.

Usage:
    python -m scheduler.nightly --once      # single run (for cron)
    python -m scheduler.nightly --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import logging
from datetime import date

from program_engine.engine import ProgramEngine
from program_engine.exceptions import ProgramEngineError

from scheduler.config import (
    CATALOG_PATH,
    NIGHTLY_HOUR,
    NIGHTLY_MINUTE,
    PROGRESS_STORE_PATH,
)
from scheduler.json_store import JsonProgramCatalog, JsonProgressStore

logger = logging.getLogger(__name__)


def nightly_job(
    store: JsonProgressStore | None = None,
    catalog: JsonProgramCatalog | None = None,
    today: date | None = None,
) -> dict[str, int]:
    """Run the transition check for every stored user.

    One user's failure is logged and does not stop the batch.

    Returns:
        Counts of ``checked``, ``transitioned`` and ``failed`` users.
    """
    store = store or JsonProgressStore(PROGRESS_STORE_PATH)
    catalog = catalog or JsonProgramCatalog(CATALOG_PATH)
    today = today or date.today()
    engine = ProgramEngine(catalog, store)

    logger.info("Starting nightly phase check for %s", today.isoformat())
    counts = {"checked": 0, "transitioned": 0, "failed": 0}

    for user_id in store.user_ids():
        counts["checked"] += 1
        try:
            check = engine.run_transition(user_id, today)
        except ProgramEngineError as exc:
            counts["failed"] += 1
            logger.error("Phase check failed for user %s: %s", user_id, exc)
            continue
        if check.should_transition:
            counts["transitioned"] += 1

    logger.info(
        "Nightly phase check complete: %d checked, %d transitioned, %d failed",
        counts["checked"],
        counts["transitioned"],
        counts["failed"],
    )
    return counts


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = argparse.ArgumentParser(description="Program phase nightly scheduler")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    args = parser.parse_args()

    if args.once:
        nightly_job()
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            nightly_job,
            "cron",
            hour=NIGHTLY_HOUR,
            minute=NIGHTLY_MINUTE,
            id="nightly_phase_check",
        )
        logger.info(
            "Scheduler started — nightly phase check at %02d:%02d",
            NIGHTLY_HOUR,
            NIGHTLY_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
