"""CLI options for selecting players, search depth, blocks, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Battle Ataxx AI")
    parser.add_argument("--depth", type=int, help="Search depth (plies) for AI players")
    parser.add_argument("--timeout", type=float, help="Seconds per move for human players (default from settings)")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default="ai-vs-ai",
        help="Play mode (who plays red/blue)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument(
        "--block",
        action="append",
        default=None,
        metavar="SQUARE",
        help="Place a block (and its reflections) before play, e.g. --block c3; repeatable",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for AI opening randomness")
    parser.add_argument("--random-open", type=int, default=None, help="Number of initial plies AI players choose at random")
    parser.add_argument("--show-board", action="store_true", help="Print the board after every change")
    parser.add_argument("--verbose", action="store_true", help="Log search statistics")
    return parser.parse_args(argv)
