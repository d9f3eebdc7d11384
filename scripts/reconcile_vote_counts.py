#!/usr/bin/env python3
"""Recompute every work's vote_count from the votes table.

Vote counter increments are allowed to fail after the vote row is stored, so
counts can drift below the real number of votes. Run this periodically (or by
hand) to repair them.
"""

import asyncio
import sys

import logfire

from showcase.application.usecase.vote import ReconcileVotesUseCase
from showcase.config import Settings
from showcase.util.di.container import create_container
from showcase.util.observability import configure_logfire


async def reconcile() -> int:
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(ReconcileVotesUseCase)
            result = await use_case.execute()
    finally:
        await container.close()

    logfire.info(
        "Vote counts reconciled",
        corrected=len(result.corrected_work_ids),
        work_ids=result.corrected_work_ids,
    )
    return len(result.corrected_work_ids)


def main() -> int:
    """Run reconciliation and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Starting vote count reconciliation")
        asyncio.run(reconcile())
        return 0

    except Exception as e:
        logfire.error(
            "Vote count reconciliation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
