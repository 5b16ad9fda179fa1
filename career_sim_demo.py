#!/usr/bin/env python3
"""
Automated Career Demo

Plays a whole basketball career with a simple automatic decision policy and
prints the career log. Legacy points carry over between consecutive runs.

Usage:
    python career_sim_demo.py
    python career_sim_demo.py --seed 7 --runs 3
    python career_sim_demo.py --db data/database/demo.db --verbose
    python career_sim_demo.py --log-dir logs
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from hoops_career import CareerSession, GameStateStore, create_random_source
from hoops_career.logging_config import (
    get_logger, setup_development_logging, setup_logging, setup_persistence_logging,
    setup_production_logging
)

# Preferred choice ids, first available wins
CHOICE_PREFERENCE = (
    'play_your_game',
    'rest',
    'train_shooting',
    'train_athleticism',
    'study_film',
)

MAX_TURNS_PER_RUN = 20000

logger = get_logger(__name__)


def pick_choice(event, player) -> Optional[str]:
    """Pick a preferred available choice, else the first available one; None if none is affordable."""
    available = event.available_choices(player)
    if not available:
        return None
    available_ids = [choice.choice_id for choice in available]
    if player.stats.energy < 35:
        for choice_id in ('rest', 'conserve_energy'):
            if choice_id in available_ids:
                return choice_id
    for choice_id in CHOICE_PREFERENCE:
        if choice_id in available_ids:
            return choice_id
    return available_ids[0]


def play_career(session: CareerSession, quiet: bool) -> None:
    result = session.start_game()
    if result.error:
        print(f"❌ {result.error}")
        return

    turns = 0
    while not result.game_over and turns < MAX_TURNS_PER_RUN:
        turns += 1
        choice_id = pick_choice(result.next_event, result.player) if result.next_event else None
        if choice_id is not None:
            result = session.handle_choice(choice_id)
        elif result.next_event is not None and result.next_event.is_mandatory:
            logger.warning(f"No affordable choice for mandatory event '{result.next_event.title}', retiring")
            break
        else:
            result = session.sim_to_next_event()

        if result.error:
            print(f"❌ {result.error}")
            return
        if result.notification and not quiet:
            print(f"  ⚠️  {result.notification}")

    if not result.game_over:
        result = session.retire()

    player = result.player
    print("=" * 70)
    print(f"🏀 {player.name} ({player.position})")
    print("=" * 70)
    for entry in player.career_log:
        if quiet and entry.startswith('Practice day.'):
            continue
        print(entry)
    print("-" * 70)
    print(
        f"Final: {player.game_mode.value} {player.current_role}, age {player.age}, "
        f"{player.total_days_played} days played"
    )
    print(f"Legacy points: {session.meta_skill_points}")
    print()


def main():
    parser = argparse.ArgumentParser(description="Automated basketball career demo")
    parser.add_argument('--seed', type=int, default=None, help='Random seed for a reproducible run')
    parser.add_argument('--runs', type=int, default=1, help='Number of consecutive careers')
    parser.add_argument('--db', default=None, help='SQLite database path to save careers to')
    parser.add_argument('--quiet', action='store_true', help='Hide practice days in the printed log')
    parser.add_argument('--verbose', action='store_true', help='Show DEBUG logging')
    parser.add_argument('--log-dir', default=None, help='Also write rotating log files to this directory')
    args = parser.parse_args()

    if args.log_dir and args.verbose:
        setup_development_logging(args.log_dir)
    elif args.log_dir:
        setup_production_logging(args.log_dir)
    else:
        setup_logging(
            level="DEBUG" if args.verbose else "WARNING",
            enable_console=True,
            enable_file=False,
            format_style="simple",
        )
    if args.verbose:
        setup_persistence_logging()

    store = GameStateStore(args.db) if args.db else None
    session = CareerSession(rng=create_random_source(args.seed), store=store)

    try:
        for _ in range(args.runs):
            play_career(session, args.quiet)
    except KeyboardInterrupt:
        print("\n\n👋 Career simulation ended.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
