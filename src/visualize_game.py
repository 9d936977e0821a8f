"""Plot the trail of a saved Shifting Maze game."""

import json
import argparse
import sys
from pathlib import Path
from typing import Dict, Tuple

from maze_game.visualize import visualize_trail


def load_game_record(run_dir: str) -> Tuple[Dict, Path]:
    path = Path(run_dir)

    if not path.is_dir():
        raise ValueError(f"Path is not a directory: {run_dir}")

    json_files = sorted(path.glob("game_*.json"))
    if not json_files:
        raise ValueError(f"No game_*.json file found in {run_dir}")
    json_path = json_files[0]

    with open(json_path, 'r') as f:
        return json.load(f), path


def main():
    parser = argparse.ArgumentParser(
        description='Plot the trail walked in a saved Shifting Maze game'
    )
    parser.add_argument(
        'run_dir',
        type=str,
        help='Path to the game run directory'
    )

    args = parser.parse_args()

    try:
        record, run_path = load_game_record(args.run_dir)
        trail_path = visualize_trail(record, str((run_path / "trail.png").absolute()))
        print(f"Trail plot saved to {trail_path}")

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
