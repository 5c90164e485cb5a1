from __future__ import annotations
import argparse
import csv
from collections import Counter
from pathlib import Path
from statistics import mean


def parse_csv(path: Path):
    rows = []
    with path.open() as f:
        reader = csv.DictReader(f)
        for r in reader:
            rows.append(r)
    return rows


def to_int(x):
    if x is None or x == '' or x == 'None':
        return None
    try:
        return int(x)
    except ValueError:
        return None


def summarize(rows):
    if not rows:
        return "No games found."
    out = []
    outcomes = Counter(r.get('outcome', '') for r in rows)
    # Quits and aborted sessions count as games that were not won
    win_rate = outcomes['win'] / len(rows)
    digs = [to_int(r.get('digs')) for r in rows]
    digs = [x for x in digs if x is not None]

    out.append(f"Games played: {len(rows)}")
    out.append(f"Win rate: {win_rate:.3f}")
    for outcome, count in sorted(outcomes.items()):
        out.append(f"  {outcome or 'unknown'}: {count}")
    if digs:
        out.append(f"Avg digs per game: {mean(digs):.1f}")

    # Per board size
    sizes = Counter((r.get('width'), r.get('height'), r.get('mines')) for r in rows)
    if len(sizes) > 1:
        out.append("")
        out.append("By board:")
        for (w, h, m), count in sorted(sizes.items()):
            wins = sum(1 for r in rows if (r.get('width'), r.get('height'), r.get('mines')) == (w, h, m) and r.get('outcome') == 'win')
            out.append(f"  {w}x{h}, {m} mines: {count} games, win rate {wins / count:.3f}")
    return "\n".join(out)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--log_csv', type=str, default='logs/games.csv')
    args = parser.parse_args()
    path = Path(args.log_csv)
    if not path.exists():
        print(f"[report] Log not found: {path}")
        return
    print(summarize(parse_csv(path)))


if __name__ == '__main__':
    main()
