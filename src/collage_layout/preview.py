from __future__ import annotations

from typing import Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .models import CellPosition


def draw_layout(ax, positions: Sequence[CellPosition], canvas_width: int, canvas_height: int) -> None:
    ax.clear()
    ax.add_patch(
        plt.Rectangle(
            (0, 0),
            canvas_width,
            canvas_height,
            fill=False,
            edgecolor="black",
            linewidth=2,
        )
    )
    for pos in positions:
        ax.add_patch(
            plt.Rectangle(
                (pos.x, pos.y),
                pos.width,
                pos.height,
                fill=True,
                facecolor="blue",
                alpha=0.5,
                edgecolor="black",
            )
        )
        ax.text(
            pos.x + pos.width / 2,
            pos.y + pos.height / 2,
            str(pos.media_index),
            ha="center",
            va="center",
            fontsize=8,
            color="white",
        )
    margin = max(canvas_width, canvas_height) * 0.02
    ax.set_xlim(-margin, canvas_width + margin)
    # pixel coordinates grow downwards
    ax.set_ylim(canvas_height + margin, -margin)
    ax.set_aspect("equal")


def save_preview(path: str, positions: Sequence[CellPosition], canvas_width: int, canvas_height: int) -> None:
    fig = plt.Figure(figsize=(9, 9 * canvas_height / max(canvas_width, 1)))
    ax = fig.add_subplot(111)
    draw_layout(ax, positions, canvas_width, canvas_height)
    fig.savefig(path)
