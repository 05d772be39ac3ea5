"""
APScheduler integration for spotaddon.

The add-on only ever schedules one-off background jobs (the credential
bootstrap), so jobs live in memory and run on a single worker thread.
"""

import logging
from typing import Callable, Optional

from apscheduler.events import (
    EVENT_JOB_ERROR,
    EVENT_JOB_EXECUTED,
    EVENT_JOB_MISSED,
)
from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.schedulers.background import BackgroundScheduler

logger = logging.getLogger(__name__)

# Global scheduler instance
_scheduler: Optional[BackgroundScheduler] = None


def _on_job_executed(event):
    """Listener for successful job execution."""
    logger.info(f"Job {event.job_id} executed successfully")


def _on_job_error(event):
    """Listener for failed job execution."""
    logger.error(
        f"Job {event.job_id} failed with exception: "
        f"{event.exception}",
        exc_info=event.traceback,
    )


def _on_job_missed(event):
    """Listener for missed job execution."""
    logger.warning(
        f"Job {event.job_id} missed its scheduled run time"
    )


def init_scheduler(app) -> Optional[BackgroundScheduler]:
    """
    Start the BackgroundScheduler if it is not running yet.

    Returns:
        The scheduler, or None if disabled or failed to start.
    """
    global _scheduler

    if not app.config.get("SCHEDULER_ENABLED", True):
        logger.info("Scheduler disabled by configuration")
        return None

    if _scheduler is not None and _scheduler.running:
        return _scheduler

    try:
        _scheduler = BackgroundScheduler(
            executors={"default": ThreadPoolExecutor(max_workers=1)},
            job_defaults={
                "coalesce": True,
                "max_instances": 1,
                "misfire_grace_time": None,
            },
        )
        _scheduler.add_listener(_on_job_executed, EVENT_JOB_EXECUTED)
        _scheduler.add_listener(_on_job_error, EVENT_JOB_ERROR)
        _scheduler.add_listener(_on_job_missed, EVENT_JOB_MISSED)
        _scheduler.start()
        logger.info("APScheduler started successfully")
        return _scheduler

    except Exception as e:
        logger.error(
            f"Failed to initialize scheduler: {e}",
            exc_info=True,
        )
        _scheduler = None
        return None


def run_once(app, func: Callable, job_id: str) -> bool:
    """
    Run ``func`` once, as soon as possible, on the background scheduler.

    Returns:
        True if the job was queued, False if no scheduler is available.
    """
    scheduler = init_scheduler(app)
    if scheduler is None:
        return False

    scheduler.add_job(func, trigger="date", id=job_id, replace_existing=True)
    logger.info(f"Queued one-off job {job_id}")
    return True


def shutdown_scheduler() -> None:
    """Stop the scheduler without waiting for a running job."""
    global _scheduler

    if _scheduler is not None and _scheduler.running:
        _scheduler.shutdown(wait=False)
        logger.info("APScheduler shut down")
    _scheduler = None
