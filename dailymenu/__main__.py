"""Entry point for printing or speaking a restaurant's daily menu.

Usage::

    python -m dailymenu CITY RESTAURANT                                  # Print every day
    python -m dailymenu CITY RESTAURANT --strategy structural            # Read the markup only
    python -m dailymenu CITY RESTAURANT --speak festival --language czech
    python -m dailymenu CITY RESTAURANT --speak espeak --language cs --speed 140
"""

import argparse
import asyncio
import logging
import sys

from dailymenu.config import Strategy, settings
from dailymenu.errors import DailyMenuError
from dailymenu.menu import get_daily_menu
from dailymenu.output import format_menus, speech_text
from dailymenu.speech import ENGINES, SpeechError, Speaker, create_speaker

logger = logging.getLogger(__name__)


async def run(
    city: str,
    restaurant: str,
    strategy: Strategy,
    speaker: Speaker | None = None,
) -> int:
    """Fetch the menu and print it, or speak today's menu with *speaker*.

    Returns the process exit status.
    """
    try:
        menus = await get_daily_menu(city, restaurant, strategy=strategy)
    except DailyMenuError as exc:
        logger.error("Could not get the daily menu of %s/%s: %s", city, restaurant, exc)
        return 1

    if speaker is None:
        for line in format_menus(menus):
            print(line)
        return 0

    if not menus:
        logger.info("No menu to speak")
        return 0
    try:
        speaker.speak(speech_text(menus[0]))
    except SpeechError as exc:
        logger.error("Failed to speak: %s", exc)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print a restaurant's daily menu from zomato.com."
    )
    parser.add_argument("city", help="City segment of the restaurant URL.")
    parser.add_argument("restaurant", help="Restaurant segment of the URL.")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        default=settings.strategy.value,
        help="Where to read the menu from (default: %(default)s).",
    )
    parser.add_argument(
        "--speak",
        choices=ENGINES,
        metavar="ENGINE",
        help=f"Read today's menu aloud with a text-to-speech program ({', '.join(ENGINES)}).",
    )
    parser.add_argument("--language", help="Voice language passed to the speech engine.")
    parser.add_argument("--speed", help="Speech speed (espeak only).")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    args = parser.parse_args(argv)

    if args.speed and args.speak != "espeak":
        parser.error("--speed requires --speak espeak")
    if args.language and not args.speak:
        parser.error("--language requires --speak")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or settings.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        datefmt="%H:%M:%S",
    )

    speaker = None
    if args.speak:
        speaker = create_speaker(args.speak, language=args.language, speed=args.speed)

    return asyncio.run(run(args.city, args.restaurant, Strategy(args.strategy), speaker))


if __name__ == "__main__":
    sys.exit(main())
