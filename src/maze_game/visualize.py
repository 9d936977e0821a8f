"""Trail visualization for a finished maze game."""

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from typing import Any, Dict, List, Optional, Tuple
import os


def _xy(points: List[Dict[str, int]]) -> Tuple[List[int], List[int]]:
    return [p['x'] for p in points], [p['y'] for p in points]


def visualize_trail(
    record: Dict[str, Any],
    output_path: Optional[str] = None,
    figsize: Tuple[int, int] = (8, 8)
) -> str:
    """
    Draw the path the player walked, together with the key and exit.

    `record` is the dict produced by MazeGame.get_record() (or loaded back from
    the saved JSON). Only the walked trail is drawn; the walls were never
    recorded. Returns the path of the written PNG.
    """
    if output_path is None:
        output_path = "out/trail.png"
    elif not os.path.isabs(output_path):
        if not output_path.startswith("out/"):
            filename = os.path.basename(output_path)
            output_path = f"out/{filename}"

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    trail = record.get('trail')
    if not trail:
        raise ValueError("Game record has no trail to draw.")

    bound = record.get('bound', 5)
    key = record['key_location']
    exit_ = record['exit_location']

    xs, ys = _xy(trail)
    span = max([bound] + [abs(v) for v in xs + ys]) + 1

    fig, ax = plt.subplots(figsize=figsize)
    ax.set_aspect('equal')
    ax.set_xlim(-span, span)
    ax.set_ylim(-span, span)
    ax.set_xticks(range(-span, span + 1))
    ax.set_yticks(range(-span, span + 1))
    ax.grid(True, linewidth=0.5, alpha=0.4)

    # Area the key and exit can be placed in.
    ax.add_patch(mpatches.Rectangle(
        (-bound - 0.5, -bound - 0.5), 2 * bound + 1, 2 * bound + 1,
        fill=False, linestyle='--', edgecolor='gray', linewidth=1
    ))

    ax.plot(xs, ys, '-', color='#1f77b4', linewidth=2, alpha=0.7, zorder=2)
    ax.scatter(xs, ys, s=12, color='#1f77b4', zorder=3)

    ax.scatter([0], [0], s=120, marker='o', color='#2ca02c', zorder=4)
    ax.scatter([key['x']], [key['y']], s=160, marker='*', color='#ff7f0e', zorder=5)
    ax.scatter([exit_['x']], [exit_['y']], s=140, marker='s', color='#d62728', zorder=5)
    ax.scatter([xs[-1]], [ys[-1]], s=80, marker='x', color='black', zorder=6)

    legend_elements = [
        mpatches.Patch(color='#2ca02c', label='Start'),
        mpatches.Patch(color='#ff7f0e', label='Key'),
        mpatches.Patch(color='#d62728', label='Exit'),
        mpatches.Patch(color='#1f77b4', label='Trail'),
    ]
    ax.legend(handles=legend_elements, loc='upper right', fontsize=9)

    outcome = record.get('outcome', 'unknown')
    moves = record.get('moves', len(trail) - 1)
    ax.set_title(f'Shifting Maze - {outcome} after {moves} moves', fontsize=13, fontweight='bold')

    plt.tight_layout()
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    return output_path
