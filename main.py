import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from src.achievements.factory import build_engine
from src.models.achievement import total_reward_points
from src.models.profile import Profile
from src.services.score_engine import with_life_score
from src.utils.env import Settings, load_env
from src.utils.exceptions import LifeScoreError
from src.utils.helper import score_to_level
from src.utils.logs import setup_logging

logger = logging.getLogger(__name__)


def _load_profile(path: str) -> Profile:
    data = json.loads(Path(path).read_text(encoding='utf-8'))
    return Profile.from_dict(data)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Evaluate LifeScore achievements for a profile JSON file.'
    )
    parser.add_argument('profile', help='Path to the current profile JSON')
    parser.add_argument('--previous', help='Path to the previous profile JSON')
    parser.add_argument(
        '--starter',
        action='store_true',
        help='Treat the profile as new and grant starter achievements',
    )
    parser.add_argument(
        '--progress', metavar='ID', help='Print progress toward one achievement'
    )
    parser.add_argument(
        '--recompute-score',
        action='store_true',
        help='Recompute LifeScore from the profile before evaluating',
    )
    args = parser.parse_args(argv)

    load_env()
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    engine = build_engine(settings)

    try:
        profile = _load_profile(args.profile)
        previous = _load_profile(args.previous) if args.previous else None
    except (OSError, ValueError) as e:
        logger.error(f'Could not load profile: {e}')
        return 1

    if args.recompute_score:
        profile = with_life_score(profile, engine.predicates.score_engine)

    try:
        if args.progress:
            progress = engine.progress(args.progress, profile)
            output = {
                'id': args.progress,
                'current': progress.current,
                'total': progress.total,
                'percentage': progress.percentage,
            }
        else:
            if args.starter:
                unlocked = engine.grant_starter_achievements(profile)
            else:
                unlocked = engine.resolve_new_unlocks(profile, previous)
            output = {
                'profile_id': profile.id,
                'life_score': profile.life_score,
                'level': score_to_level(profile.life_score),
                'unlocked': [a.to_dict() for a in unlocked],
                'reward_points': total_reward_points(unlocked),
            }
    except LifeScoreError as e:
        logger.error(f'Evaluation failed: {e}')
        return 1

    json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write('\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
