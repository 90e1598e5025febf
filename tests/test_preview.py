import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from collage_layout.models import CellPosition
from collage_layout.preview import draw_layout


def test_draw_layout_adds_canvas_and_cells():
    fig = plt.Figure()
    ax = fig.add_subplot(111)
    cells = [CellPosition(0, 0, 100, 50, 0), CellPosition(100, 0, 100, 50, 1)]

    draw_layout(ax, cells, 200, 100)

    assert len(ax.patches) == 3
    assert [t.get_text() for t in ax.texts] == ["0", "1"]
    bottom, top = ax.get_ylim()
    assert bottom > top
