#!/usr/bin/env python3
"""
zpool-summary - one line of ZFS pool health and free space for status bars.

Always prints exactly one line and always exits successfully: a status bar
should show "Unknown" rather than a crash indicator. `zpool list` can be used
to detect whether ZFS is in use at all.
"""

import asyncio
import sys

from .factories.service_factory import ServiceFactory
from .services.summary_builder import UNKNOWN_SUMMARY


async def run(factory: ServiceFactory) -> str:
    try:
        return await factory.create_summary_service().get_summary()
    except Exception:
        factory.logger.exception("Unexpected error while building pool summary")
        return UNKNOWN_SUMMARY


def main() -> int:
    """Main entry point for zpool-summary."""
    output = asyncio.run(run(ServiceFactory()))
    sys.stdout.write(output)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
