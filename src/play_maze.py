"""Play the Shifting Maze game on the console."""

import os
import sys
import json
import argparse
from datetime import datetime
from typing import Optional, Dict, Any
from pathlib import Path

import yaml
from dotenv import load_dotenv

from maze_game import MazeGame, GameState, visualize_trail
from maze_game.console import ConsoleLineIO, LineIO


DEFAULT_CONFIG_PATH = 'config.yaml'
SEED_ENV_VAR = 'MAZE_SEED'


def load_env_file(env_path: str = '.env') -> None:
    env_file = Path(env_path)
    if env_file.exists():
        load_dotenv(env_path, override=True)
    elif env_path != '.env':
        print(f"Warning: .env file not found at {env_file.absolute()}")


def load_config(config_path: str, required: bool = True) -> Dict[str, Any]:
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        if required:
            raise ValueError(f"Config file {config_path} not found.")
        return {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML config: {e}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(config).__name__}")
    return config


def _as_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() in ('true', '1', 'yes', 'on')
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}")


def resolve_settings(config: Dict[str, Any], cli_seed: Optional[int] = None, no_save: bool = False) -> Dict[str, Any]:
    """Merge CLI flags, config values, environment and defaults (in that order of priority)."""
    seed = cli_seed
    if seed is None and config.get('seed') is not None:
        seed = _as_int(config['seed'], 'seed')
    if seed is None and os.getenv(SEED_ENV_VAR):
        seed = _as_int(os.getenv(SEED_ENV_VAR), SEED_ENV_VAR)

    bound = _as_int(config.get('bound', 5), 'bound')
    auto_save = _as_bool(config.get('auto_save', True), 'auto_save') and not no_save
    plot_trail = _as_bool(config.get('plot_trail', False), 'plot_trail')
    output_dir = config.get('output_dir')
    if output_dir is None:
        output_dir = 'out'
    output_dir = str(output_dir)

    return {
        'seed': seed,
        'bound': bound,
        'auto_save': auto_save,
        'plot_trail': plot_trail,
        'output_dir': output_dir,
    }


def save_record(record: Dict[str, Any], output_dir: str = 'out') -> Path:
    output_base = Path(output_dir)
    output_base.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    run_dir = output_base / f"maze_{timestamp}"
    run_dir.mkdir(exist_ok=True)

    json_path = run_dir / f"game_{timestamp}.json"
    with open(json_path, 'w') as f:
        json.dump(record, f, indent=2)

    return json_path


def run_game(settings: Dict[str, Any], line_io: Optional[LineIO] = None) -> GameState:
    if line_io is None:
        line_io = ConsoleLineIO()

    game = MazeGame(bound=settings['bound'], seed=settings['seed'])
    game.reset()
    state = game.play(line_io)

    if settings['auto_save']:
        record = game.get_record()
        record['timestamp'] = datetime.now().isoformat()
        json_path = save_record(record, settings['output_dir'])
        print(f"\nGame record saved to {json_path}")

        if settings['plot_trail']:
            trail_path = visualize_trail(record, str((json_path.parent / 'trail.png').absolute()))
            print(f"Trail plot saved to {trail_path}")

    return state


def main():
    parser = argparse.ArgumentParser(description='Play the Shifting Maze game')
    parser.add_argument('--config', type=str, default=None,
                        help=f'Path to YAML config file (default: {DEFAULT_CONFIG_PATH} if present)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random source (overrides config and MAZE_SEED)')
    parser.add_argument('--no-save', action='store_true',
                        help='Do not write the game record when the game ends')

    args = parser.parse_args()

    try:
        load_env_file('.env')
        if args.config is None:
            config = load_config(DEFAULT_CONFIG_PATH, required=False)
        else:
            config = load_config(args.config)

        settings = resolve_settings(config, cli_seed=args.seed, no_save=args.no_save)
        run_game(settings)
        sys.exit(0)

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
