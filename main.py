#!/usr/bin/env python3
"""
SkillRank Demo Application

Ranks the bundled sample companies against a skill profile given on the
command line, without starting the HTTP service.

    python main.py 5 5 5
    python main.py 5 5 5 --policy skip
"""

import argparse
import logging
import sys
from pathlib import Path

# Setup basic logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("main")

from skillrank import (
    CandidateRanker,
    CandidateSourceError,
    DegenerateVectorError,
    JsonFileCandidateSource,
)

DEFAULT_DATA = Path(__file__).parent / "web" / "data" / "MOCK_DATA.json"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank companies by skill-profile similarity")
    parser.add_argument("scores", nargs="+", type=float, help="Query vector, e.g. devops fe be")
    parser.add_argument("--data", type=Path, default=DEFAULT_DATA, help="Candidate JSON file")
    parser.add_argument("--policy", choices=["abort", "skip"], default="abort")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    source = JsonFileCandidateSource(args.data)
    ranker = CandidateRanker(args.policy)

    try:
        outcome = ranker.rank(args.scores, source.list_candidates())
    except (CandidateSourceError, DegenerateVectorError) as e:
        logger.error(f"Cannot rank: {e}")
        return 1

    print(f"\n{'#':>3}  {'Company':<16} {'Scores':<20} Similarity")
    for i, result in enumerate(outcome.results, 1):
        scores = ", ".join(f"{s:g}" for s in result.scores)
        print(f"{i:>3}  {result.name:<16} {'[' + scores + ']':<20} {result.score:.4f}")

    if outcome.skipped:
        logger.info(f"Skipped (all-zero scores): {', '.join(outcome.skipped)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
