"""Entry point for Battle Ataxx AI matches. Load config, wire players, start Ataxxgame."""

import logging

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.logger import log_event, board_logger
    from Ataxxgame import Ataxxgame, RESULT_TEXT
    from AIPlayer import AIPlayer
    from Board import PieceColor
    from Player import HumanPlayer
except ImportError:
    from Battle_Ataxx_AI.utils.cli import parse_args
    from Battle_Ataxx_AI.utils.logger import log_event, board_logger
    from Battle_Ataxx_AI.Ataxxgame import Ataxxgame, RESULT_TEXT
    from Battle_Ataxx_AI.AIPlayer import AIPlayer
    from Battle_Ataxx_AI.Board import PieceColor
    from Battle_Ataxx_AI.Player import HumanPlayer


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Battle_Ataxx_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def print_board(board):
    print(board.to_string(legend=True))
    print()


def build_players(mode, depth, seed, random_open):
    """Return (red, blue) players for a play mode."""

    def ai(color, offset):
        # Distinct seeds so two AIs do not mirror each other's openings.
        player_seed = None if seed is None else seed + offset
        return AIPlayer(color, depth=depth, seed=player_seed, random_open=random_open)

    if mode == "ai-vs-ai":
        return ai(PieceColor.RED, 0), ai(PieceColor.BLUE, 1)
    if mode == "human-vs-ai":
        return HumanPlayer(PieceColor.RED), ai(PieceColor.BLUE, 1)
    if mode == "ai-vs-human":
        return ai(PieceColor.RED, 0), HumanPlayer(PieceColor.BLUE)
    if mode == "human-vs-human":
        return HumanPlayer(PieceColor.RED), HumanPlayer(PieceColor.BLUE)
    raise ValueError(f"Unsupported mode: {mode}")


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    depth = args.depth if args.depth is not None else settings.get("search_depth", 4)
    move_timeout = args.timeout if args.timeout is not None else settings.get("move_timeout_seconds")
    random_open = args.random_open if args.random_open is not None else settings.get("random_open", 0)
    seed = args.seed if args.seed is not None else settings.get("seed")
    blocks = args.block if args.block is not None else settings.get("blocks") or []
    show_board = args.show_board or settings.get("show_board", False)
    if depth < 1:
        raise SystemExit(f"search depth must be at least 1, got {depth}")

    renderer = None
    if show_board:
        renderer = print_board
    elif args.verbose:
        renderer = board_logger(log_event)

    red, blue = build_players(args.mode, depth, seed, random_open)
    game = Ataxxgame(
        red_player=red,
        blue_player=blue,
        blocks=blocks,
        move_timeout=move_timeout,
        logger=log_event,
        renderer=renderer,
    )
    result = game.play()
    print(RESULT_TEXT.get(result, "Unknown result"))
    return result


if __name__ == "__main__":
    main()
