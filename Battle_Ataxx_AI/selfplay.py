"""Self-play match runner: AI and baseline players, per-game records, summary stats."""

from __future__ import annotations

import argparse
import json
import random
import statistics
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

try:
    from Board import Board, PieceColor
    from engine import referee
    from AIPlayer import AIPlayer
    from Player import Player
    from Move import PASS
    from ai import heuristic, move_selector
except ImportError:
    from .Board import Board, PieceColor
    from .engine import referee
    from .AIPlayer import AIPlayer
    from .Player import Player
    from .Move import PASS
    from .ai import heuristic, move_selector


class RandomBaseline(Player):
    """Uniformly random legal move (passes when stuck)."""

    def __init__(self, color, rng=None):
        super().__init__(color)
        self.rng = rng or random.Random()

    def next_move(self, board, deadline=None):
        return self.rng.choice(move_selector.legal_moves(board))


class GreedyBaseline(Player):
    """Greedy baseline: one-ply lookahead on the static score, first best move wins ties."""

    def next_move(self, board, deadline=None):
        moves = move_selector.legal_moves(board)
        if moves == [PASS]:
            return PASS

        best_score = None
        best_move = moves[0]
        for mv in moves:
            board.make_move(mv)
            try:
                score = heuristic.score_for(board, self.color)
            finally:
                board.undo()
            if best_score is None or score > best_score:
                best_score = score
                best_move = mv
        return best_move


def play_game(red, blue, blocks=(), random_open=0, rng=None):
    """
    Play one game to completion. The first random_open plies are random legal
    moves drawn from rng. Returns (winner, info).
    """
    rng = rng or random.Random()
    board = Board()
    for square in blocks:
        board.set_block(square)
    players = {PieceColor.RED: red, PieceColor.BLUE: blue}
    passes = Counter()
    jumps = Counter()

    while board.winner is None:
        color = board.whose_move
        if board.num_moves < random_open:
            move = rng.choice(move_selector.legal_moves(board))
        else:
            # Players see a fork so a misbehaving one cannot corrupt the game.
            move = players[color].next_move(Board(board))
        referee.check_move(move, board, color, move_index=board.num_moves)
        board.make_move(move)
        if move.is_pass():
            passes[color.name] += 1
        elif move.is_jump():
            jumps[color.name] += 1

    moves = board.all_moves()
    info = {
        "steps": len(moves),
        "moves": [str(mv) for mv in moves],
        "first_move": str(moves[0]) if moves else None,
        "red_pieces": board.red_pieces,
        "blue_pieces": board.blue_pieces,
        "passes": dict(passes),
        "jumps": dict(jumps),
    }
    # Summarize NPS if stats were collected on players
    nps_summary = {}
    for color, player in players.items():
        stat_list = getattr(player, "stats", None)
        if stat_list:
            times = [s["time"] for s in stat_list]
            nodes = [s["nodes"] for s in stat_list]
            nps_summary[color.name] = {
                "moves": len(stat_list),
                "time_mean": statistics.mean(times),
                "nodes_mean": statistics.mean(nodes),
                "nps_mean": statistics.mean(s["nps"] for s in stat_list),
                "nodes_total": sum(nodes),
            }
    if nps_summary:
        info["nps"] = nps_summary
    return board.winner, info


@dataclass(frozen=True)
class AgentSpec:
    tag: str
    baseline: str


def build_player(color, spec: AgentSpec, *, depth: int, seed: int | None, collect_stats: bool) -> Player:
    if spec.baseline == "random":
        return RandomBaseline(color, random.Random(seed))
    if spec.baseline == "greedy":
        return GreedyBaseline(color)
    return AIPlayer(color, depth=depth, seed=seed, stats=[] if collect_stats else None)


def summarize(results, red_tag="red", blue_tag="blue"):
    """Aggregate (winner, info, red_spec_tag, blue_spec_tag) tuples into a JSON-friendly dict."""
    winners = Counter()
    agent_games = Counter()
    agent_wins = Counter()
    agent_draws = Counter()
    lengths = []
    for winner, info, tag_red, tag_blue in results:
        winners[winner.name] += 1
        lengths.append(info["steps"])
        agent_games[tag_red] += 1
        agent_games[tag_blue] += 1
        if winner == PieceColor.RED:
            agent_wins[tag_red] += 1
        elif winner == PieceColor.BLUE:
            agent_wins[tag_blue] += 1
        else:
            agent_draws[tag_red] += 1
            agent_draws[tag_blue] += 1

    agent_points = {
        tag: float(agent_wins.get(tag, 0) + 0.5 * agent_draws.get(tag, 0))
        for tag in agent_games
    }
    return {
        "games": len(results),
        "red_wins": winners["RED"],
        "blue_wins": winners["BLUE"],
        "draws": winners["EMPTY"],
        "avg_steps": statistics.mean(lengths) if lengths else 0,
        "red_tag": red_tag,
        "blue_tag": blue_tag,
        "agent_games": dict(agent_games),
        "agent_wins": dict(agent_wins),
        "agent_draws": dict(agent_draws),
        "agent_points": agent_points,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Ataxx self-play match runner")
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument("--depth", type=int, default=3, help="Search depth for built-in AIs")
    parser.add_argument("--output", default="selfplay_ataxx.jsonl", help="Output JSONL path (one record per game)")
    parser.add_argument("--stats-only", action="store_true", help="Only compute stats; do not write game records")
    parser.add_argument("--swap-colors", action="store_true", help="Swap red/blue agents every other game")
    parser.add_argument("--random-open", type=int, default=2, help="Number of initial plies chosen at random")
    parser.add_argument("--seed", type=int, default=None, help="Seed for self-play randomness (optional)")
    parser.add_argument("--block", action="append", default=[], metavar="SQUARE", help="Block a square (repeatable)")
    parser.add_argument("--red-baseline", choices=["none", "random", "greedy"], default="none",
                        help="Use a simple baseline for red instead of search AI.")
    parser.add_argument("--blue-baseline", choices=["none", "random", "greedy"], default="none",
                        help="Use a simple baseline for blue instead of search AI.")
    parser.add_argument("--collect-stats", action="store_true",
                        help="Collect per-move search stats (nodes/time/nps) and summarize them.")
    parser.add_argument("--red-tag", default="red", help="Label for the first agent")
    parser.add_argument("--blue-tag", default="blue", help="Label for the second agent")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    red_spec = AgentSpec(tag=args.red_tag, baseline=args.red_baseline)
    blue_spec = AgentSpec(tag=args.blue_tag, baseline=args.blue_baseline)

    results = []
    nps_logs = []
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    f = None
    try:
        if not args.stats_only:
            f = open(output_path, "w", encoding="utf-8")

        for g in range(args.games):
            # Swap the agent specs (not player instances) so colors stay consistent.
            spec_red, spec_blue = (
                (red_spec, blue_spec)
                if not args.swap_colors or g % 2 == 0
                else (blue_spec, red_spec)
            )
            r_player = build_player(PieceColor.RED, spec_red, depth=args.depth,
                                    seed=rng.randrange(2 ** 32), collect_stats=args.collect_stats)
            b_player = build_player(PieceColor.BLUE, spec_blue, depth=args.depth,
                                    seed=rng.randrange(2 ** 32), collect_stats=args.collect_stats)

            winner, info = play_game(r_player, b_player, blocks=args.block, random_open=args.random_open, rng=rng)
            results.append((winner, info, spec_red.tag, spec_blue.tag))
            if "nps" in info:
                nps_logs.append(info["nps"])

            if f is not None:
                record = {"winner": winner.name, "red": spec_red.tag, "blue": spec_blue.tag, **info}
                f.write(json.dumps(record, ensure_ascii=False, separators=(",", ":")))
                f.write("\n")

            print(
                f"[{g+1}/{args.games}] winner={winner.name} "
                f"(R={spec_red.tag}, B={spec_blue.tag}), steps={info['steps']}, "
                f"pieces={info['red_pieces']}-{info['blue_pieces']}"
            )
    finally:
        if f is not None:
            f.close()

    summary = summarize(results, red_tag=args.red_tag, blue_tag=args.blue_tag)
    print(f"Winners: red={summary['red_wins']} blue={summary['blue_wins']} draws={summary['draws']}")
    if nps_logs:
        for color in ("RED", "BLUE"):
            items = [entry[color] for entry in nps_logs if color in entry]
            if items:
                moves = sum(d["moves"] for d in items)
                time_mean = statistics.mean(d["time_mean"] for d in items)
                nps_mean = statistics.mean(d["nps_mean"] for d in items)
                print(f"NPS {color}: moves={moves}, time_mean={time_mean:.3f}s, nps_mean={nps_mean:.0f}")

    # Summary stats land next to the game records.
    stats_path = output_path.with_name(output_path.stem + "_stats.json")
    with open(stats_path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)

    if args.stats_only:
        print(f"Completed {len(results)} games (stats-only). Saved stats to {stats_path}")
    else:
        print(f"Saved {len(results)} games to {args.output}")
    return summary


if __name__ == "__main__":
    main()
