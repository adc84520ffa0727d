#!/usr/bin/env python3
"""Entry point for running chat interface as a module.

Usage:
    python -m legalmind.chat
    python -m legalmind.chat --no-delay --seed 7
"""

import argparse
import logging


def main():
    parser = argparse.ArgumentParser(
        description="LegalMind legal assistant chat interface",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default: simulated thinking delay, random replies
  python -m legalmind.chat

  # Instant replies, reproducible choices
  python -m legalmind.chat --no-delay --seed 7
        """
    )

    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Reply immediately instead of simulating thinking time"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for response selection (default: nondeterministic)"
    )

    args = parser.parse_args()

    # Import here to avoid circular import warning
    from legalmind.chat.interface import ChatInterface
    from legalmind.config.constants import LOG_FORMAT
    from legalmind.config.settings import settings
    from legalmind.container import LegalMindContainer

    logging.basicConfig(level=settings.effective_log_level, format=LOG_FORMAT)

    interface = ChatInterface(
        container=LegalMindContainer(settings=settings, seed=args.seed),
        thinking_delay=(0.0, 0.0) if args.no_delay else None,
    )
    interface.start()


if __name__ == "__main__":
    main()
