"""
List upcoming US launches related to the ISS.

Run with: python examples/launches.py
Requires RLL_API_KEY in the environment or a .env file.
"""

import asyncio
import logging
import os
import sys
from datetime import date

from dotenv import load_dotenv

from rocket_launch_live import (
    Direction,
    Launch,
    LaunchParamsBuilder,
    Response,
    RocketLaunchLive,
    RocketLaunchLiveError,
)

load_dotenv()

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


async def main() -> int:
    client = RocketLaunchLive()

    params = (
        LaunchParamsBuilder()
        .country_code("US")
        .after_date(date(2023, 9, 1))
        .search("ISS")
        .direction(Direction.DESCENDING)
        .limit(10)
        .build()
    )

    try:
        resp: Response[Launch] = await client.launches(params)
    except RocketLaunchLiveError as e:
        logger.error(f"Request failed: {e}")
        return 1

    if not resp.valid_auth:
        logger.error(f"API key rejected: {resp.errors}")
        return 1

    for launch in resp.result:
        print(f"{launch.date_str} | {launch.vehicle.name} | {launch.name}")

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
