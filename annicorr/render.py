# Copyright (C) 2025 Jure Cerar
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from pathlib import Path
import logging

from matplotlib.figure import Figure
import numpy as np


logger = logging.getLogger(__name__)


@dataclass
class Style():
    """Appearance of a single curve.

    Attributes
    ----------
    color : str
        Any matplotlib color specification.
    marker : str
        Marker drawn at every point (default full circle).
    linestyle : str
        Line style connecting the points (e.g. '-' or '--').
    """
    color: str = "black"
    marker: str = "o"
    linestyle: str = "-"


@dataclass
class Series():
    """A named sequence of (x, y) points drawn as one curve.

    Raises
    ------
    ValueError: If `x` and `y` are of different length.
    """
    label: str = ""
    x: np.ndarray = field(default_factory=lambda: np.empty(0))
    y: np.ndarray = field(default_factory=lambda: np.empty(0))
    style: Style = field(default_factory=Style)

    def __post_init__(self):
        self.x = np.asarray(self.x, dtype=float)
        self.y = np.asarray(self.y, dtype=float)
        if self.x.shape != self.y.shape:
            raise ValueError("x and y length mismatch")


@dataclass
class Frame():
    """Axis ranges and titles of the chart."""
    xlim: tuple[float, float] = (0., 1.)
    ylim: tuple[float, float] = (0., 1.)
    xlabel: str = ""
    ylabel: str = ""


def render(series: list[Series], frame: Frame, fname, *, figsize: tuple = (12, 8), dpi: int = 100) -> Path:
    """Draws the series on a single axes and exports the chart to a file.

    Arguments
    ---------
    series : list[Series]
        Curves to draw, in drawing order.
    frame : Frame
        Axis ranges and titles.
    fname : str or Path
        Output file path. The image format is inferred from the suffix
        (e.g. pdf, png, svg).
    figsize : tuple, optional
        Figure size in inches.
    dpi : int, optional
        Resolution for raster formats.

    Returns
    -------
    Path
        Path of the written file.
    """
    fname = Path(fname)
    logger.info(f"Rendering {len(series)} curve(s) to: {fname}")

    # NOTE: Figure is used directly so no pyplot backend is involved
    fig = Figure(figsize=figsize, dpi=dpi)
    ax = fig.add_subplot()
    for s in series:
        ax.plot(
            s.x,
            s.y,
            label=s.label,
            color=s.style.color,
            marker=s.style.marker,
            linestyle=s.style.linestyle,
        )
    ax.set_xlim(*frame.xlim)
    ax.set_ylim(*frame.ylim)
    ax.set_xlabel(frame.xlabel)
    ax.set_ylabel(frame.ylabel)
    if any(s.label for s in series):
        ax.legend()

    fig.savefig(fname)
    return fname
