from __future__ import annotations

from typing import Iterable, List

import matplotlib.pyplot as plt

from linalgtools.trace.log import TraceStep
from linalgtools.utils.matrix import is_zero


def draw_trace(
    steps: Iterable[TraceStep],
    *,
    font_size: int = 12,
    cell_width: float = 0.9,
    max_cols_to_draw: int = 20,
    save_prefix: str | None = None,
) -> List[str]:
    """
    Draw each recorded elimination step as a table, one figure per step.

    Nonzero cells are shaded so the staircase shape is visible.

    If save_prefix is set, saves PNG files:
      {save_prefix}_step0.png, {save_prefix}_step1.png, ...
    otherwise shows the figures.

    Returns the labels of the steps drawn, in order.
    """
    labels: List[str] = []
    for k, step in enumerate(steps):
        rows = step.matrix
        n_rows = len(rows)
        n_cols = len(rows[0]) if n_rows else 0

        fig, ax = plt.subplots(
            figsize=(max(3.0, cell_width * min(n_cols, max_cols_to_draw) + 1.0),
                     max(2.0, 0.5 * n_rows + 1.2))
        )
        ax.set_axis_off()
        ax.set_title(f"{k}: {step.label}")

        if n_rows == 0 or n_cols == 0:
            ax.text(0.5, 0.5, f"empty ({n_rows}x{n_cols})",
                    ha="center", va="center", transform=ax.transAxes)
        elif n_cols > max_cols_to_draw:
            ax.text(0.5, 0.5, f"Too wide to draw\n({n_cols} columns)",
                    ha="center", va="center", transform=ax.transAxes)
        else:
            text = [[str(x) for x in row] for row in rows]
            colors = [["white" if is_zero(x) else "#dde8f5" for x in row] for row in rows]
            table = ax.table(cellText=text, cellColours=colors, loc="center", cellLoc="center")
            table.auto_set_font_size(False)
            table.set_fontsize(font_size)
            table.scale(1.0, 1.4)

        plt.tight_layout()

        if save_prefix:
            plt.savefig(f"{save_prefix}_step{k}.png", dpi=150)
            plt.close(fig)
        else:
            plt.show()

        labels.append(step.label)

    return labels
