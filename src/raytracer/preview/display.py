"""Matplotlib-based preview display for canvases.

Example:
    >>> from src.raytracer.core.canvas import Canvas
    >>> from src.raytracer.preview.display import show_canvas
    >>>
    >>> canvas = Canvas(64, 48)
    >>> show_canvas(canvas, title="Trajectory")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.raytracer.preview.export import canvas_to_uint8

if TYPE_CHECKING:
    from matplotlib.figure import Figure

    from src.raytracer.core.canvas import Canvas


def show_canvas(
    canvas: Canvas,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    block: bool = True,
) -> Figure:
    """Display a canvas as a Matplotlib figure.

    The canvas is quantized exactly as the PPM encoder does, so the preview
    shows what the raster file will contain.

    Args:
        canvas: The canvas to display.
        title: Custom title (default shows the dimensions).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.

    Returns:
        The Matplotlib figure.
    """
    import matplotlib.pyplot as plt

    image = canvas_to_uint8(canvas)

    fig, ax = plt.subplots(1, 1, figsize=figsize)

    # Nearest-neighbour keeps single plotted pixels crisp on small canvases
    ax.imshow(image, interpolation="nearest")
    ax.axis("off")

    if title is None:
        title = f"Canvas {canvas.width}x{canvas.height}"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)

    return fig
