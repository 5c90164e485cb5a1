from __future__ import annotations
import argparse
import csv
from datetime import datetime
from pathlib import Path

from termsweeper.engine import Game
from termsweeper.status import End
from termsweeper import terminal

LOG_HEADER = ['timestamp', 'width', 'height', 'mines', 'seed', 'outcome', 'reason', 'digs', 'marks']


def default_mine_count(width: int, height: int) -> int:
    # One tile in five
    return (width * height) // 5


def append_csv_row(csv_path: Path, row: dict, header_order: list[str]):
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    write_header = not csv_path.exists()
    with csv_path.open('a', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=header_order)
        if write_header:
            writer.writeheader()
        writer.writerow(row)


def result_row(game: Game, result: End, mines: int, seed: int | None) -> dict:
    return {
        'timestamp': datetime.now().isoformat(timespec='seconds'),
        'width': game.width, 'height': game.height,
        'mines': mines, 'seed': seed,
        'outcome': result.outcome.value,
        'reason': result.reason,
        'digs': game.digs, 'marks': game.marks,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Minesweeper in the terminal')
    parser.add_argument('--width', type=int, default=10)
    parser.add_argument('--height', type=int, default=5)
    parser.add_argument('--mines', type=int, default=-1, help='Mines to draw; <0 uses one per five tiles')
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 uses OS entropy (random every run)')
    parser.add_argument('--debug', action='store_true', help="Enable the 'p' key, which reveals the whole board")
    parser.add_argument('--log_csv', type=str, default='', help='Append the result of the game to this CSV file')
    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error('--width and --height must be positive')
    seed = None if args.seed < 0 else args.seed
    mines = default_mine_count(args.width, args.height) if args.mines < 0 else args.mines

    game = Game(args.width, args.height, seed=seed, debug=args.debug)
    print(f"[play] generating map with {mines} mines")
    game.new_map(mines)

    result = terminal.play(game)
    print(result.reason)

    if args.log_csv:
        append_csv_row(Path(args.log_csv), result_row(game, result, mines, seed), LOG_HEADER)
        print(f"[play] Logged result to {args.log_csv}")
    return result


if __name__ == '__main__':
    main()
