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

from types import SimpleNamespace
from itertools import cycle
from pathlib import Path
import logging

import numpy as np

from . import theory
from .render import Frame, Series, Style, render


logger = logging.getLogger(__name__)


PALETTE = [
    ("#cc0000", "#ff6666"),
    ("#0000cc", "#6666ff"),
    ("#006600", "#00cc00"),
]
"""list: Colour pairs per alpha, (electron or theta family, photon family)."""

YLABEL = "P(Δφ = 90)/P(Δφ = 0)"


class FiniteAsymmetry(object):
    """
    Asymmetry of the angular correlation of Compton scattered annihilation
    radiation for detectors of finite size, sampled on a grid of scattering
    angles symmetric around 90°.

    For every grid point the scattered photon and recoil electron energies are
    calculated, together with the asymmetry :func:`theory.rho2` for each
    azimuthal acceptance in `alphas`.

    Arguments
    ---------
    nbins : int
        Number of scattering angle samples, must be at least 1.
    semispan : float
        Half of the detector acceptance in θ [deg], must be positive. Samples
        are spaced by twice the semi-span.
    xvar : str, optional
        Variable on the x-axis of the chart; either "theta" (default) or "energy".
    alphas : tuple[float], optional
        Half of the detector acceptance in φ [deg], must be positive.

    Examples
    --------
    >>> import annicorr
    >>> R = annicorr.FiniteAsymmetry(
    ...     nbins=5,
    ...     semispan=2.0, # [deg]
    ...     xvar="energy",
    ... ).run()
    >>> theta = R.results.theta
    >>> asym = R.results.asymmetry
    >>> R.plot(outdir="Plots")  # Plots/FiniteAsymmetry_5_energy.pdf
    """

    @classmethod
    def get_supported_modes(cls):
        """Return a tuple of supported x-axis variables"""
        return ("theta", "energy")

    def __init__(self, nbins: int, semispan: float, xvar: str = "theta",
                 alphas: tuple = (1., 30., 45.)):
        # Check input; comparisons are written so that NaN fails them
        if not (nbins >= 1 and float(nbins).is_integer()):
            raise ValueError("Invalid number of bins")
        if not semispan > 0.0:
            raise ValueError("Invalid semi-span")
        if not isinstance(xvar, str) or xvar.lower() not in self.get_supported_modes():
            raise ValueError("Invalid x-axis variable")
        if len(alphas) == 0 or not all(a > 0.0 for a in alphas):
            raise ValueError("Invalid azimuthal acceptance")

        # Set locals
        self.nbins = int(nbins)
        self.semispan = float(semispan)
        self.xvar = xvar.lower()
        self.alphas = tuple(float(a) for a in alphas)
        self.results = None

        # Symmetric grid around 90 deg; kept in degrees so that
        # integer inputs give exact samples
        self.theta = 90. - (self.nbins - 1) * self.semispan + \
            np.arange(self.nbins) * 2 * self.semispan
        lo = self.theta[0] - self.semispan
        hi = self.theta[-1] + self.semispan
        if lo <= 0.0 or hi >= 180.0:
            logger.warning(f"Grid spans {lo:g}-{hi:g} deg and leaves the valid range of 0-180 deg")

    def run(self):
        """Evaluate energies and asymmetries on the grid.

        Returns
        -------
        FiniteAsymmetry
            The instance itself, with `results` populated.
        """
        logger.info(f"Calculating asymmetry for {self.nbins} bin(s), semi-span {self.semispan:g} deg")
        theta = np.deg2rad(self.theta)
        semispan = np.deg2rad(self.semispan)

        asymmetry = np.array([
            theory.rho2(theta, semispan, np.deg2rad(a)) for a in self.alphas
        ])
        finite = np.isfinite(asymmetry)
        if not np.all(finite):
            bad = self.theta[~np.all(finite, axis=0)]
            logger.warning(f"Non-finite asymmetry ({np.count_nonzero(~finite)}) at theta: {bad.tolist()} deg")

        self.results = SimpleNamespace(
            theta=self.theta.copy(),
            electron=theory.theta_to_electron_energy(self.theta),
            photon=theory.theta_to_photon_energy(self.theta),
            alphas=np.array(self.alphas),
            asymmetry=asymmetry,
            finite=finite,
        )
        return self

    def frame(self) -> Frame:
        """Axis ranges and titles for the selected x-axis variable."""
        if self.xvar == "theta":
            return Frame((0., 180.), (0.5, 3.0), "θ (deg)", YLABEL)
        return Frame(
            (0., theory.ELECTRON_MASS_KEV),
            (0.5, 3.0),
            "energy (keV): electron (dashed), photon (solid)",
            YLABEL,
        )

    def series(self) -> list[Series]:
        """Construct the curves to draw, one per alpha and family.

        In "theta" mode there is a single family of asymmetry versus scattering
        angle. In "energy" mode the asymmetry is drawn versus the recoil electron
        energy (dashed) and versus the scattered photon energy (solid).
        """
        if self.results is None:
            raise RuntimeError("No results to plot")
        R = self.results

        curves, photon = list(), list()
        for alpha, asym, colors in zip(R.alphas, R.asymmetry, cycle(PALETTE)):
            if self.xvar == "theta":
                curves.append(Series(
                    f"α = {alpha:g}°", R.theta, asym,
                    Style(colors[0], "o", "--"),
                ))
            else:
                curves.append(Series(
                    f"α = {alpha:g}°, electron", R.electron, asym,
                    Style(colors[0], "o", "--"),
                ))
                photon.append(Series(
                    f"α = {alpha:g}°, photon", R.photon, asym,
                    Style(colors[1], "o", "-"),
                ))
        return curves + photon

    def filename(self, fmt: str = "pdf") -> str:
        """Default output file name, encodes the number of bins and x-axis variable."""
        fmt = fmt.lstrip(".")
        if not fmt:
            raise ValueError("Invalid image format")
        return f"FiniteAsymmetry_{self.nbins}_{self.xvar}.{fmt}"

    def plot(self, fname: str = None, outdir: str = ".", fmt: str = "pdf") -> Path:
        """Render the asymmetry curves and export the chart.

        Arguments
        ---------
        fname : str or Path, optional
            Output file name. Defaults to :meth:`filename`.
        outdir : str or Path, optional
            Output directory, created if it does not exist.
        fmt : str, optional
            Image format used for the default file name (e.g. pdf, png, svg).

        Returns
        -------
        Path
            Path of the written file.
        """
        if self.results is None:
            raise RuntimeError("No results to plot")
        outdir = Path(outdir)
        outdir.mkdir(parents=True, exist_ok=True)
        path = outdir / (fname or self.filename(fmt))
        return render(self.series(), self.frame(), path)


def graph_finite_asymmetry(nbins: int, semispan: float, xvar: str = "theta",
                           outdir: str = ".", fmt: str = "pdf") -> Path:
    """Calculate the finite-geometry asymmetry and export it as a chart.

    Arguments
    ---------
    nbins : int
        Number of scattering angle samples.
    semispan : float
        Half of the detector acceptance in θ [deg].
    xvar : str, optional
        Variable on the x-axis, "theta" or "energy".
    outdir : str or Path, optional
        Output directory.
    fmt : str, optional
        Image format (e.g. pdf, png, svg).

    Returns
    -------
    Path
        Path of the written file, named `FiniteAsymmetry_<nbins>_<xvar>.<fmt>`.
    """
    return FiniteAsymmetry(nbins, semispan, xvar).run().plot(outdir=outdir, fmt=fmt)
