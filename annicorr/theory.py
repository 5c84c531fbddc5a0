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

"""
Closed-form asymmetry of the angular correlation of annihilation radiation
after Compton scattering in two detectors of finite size [1].

The quantity of interest is the ratio of coincidences with the two scattering
planes perpendicular and parallel:

.. math::

    \\rho = \\frac {N(\\Delta\\phi = 90)} {N(\\Delta\\phi = 0)}

The polar acceptance of the detectors is accounted for by integrating the
Klein-Nishina weights over the semi-span (``rho1``), the azimuthal acceptance
by the correction factor ``z`` (``rho2``).

All functions accept scalars or NumPy arrays and evaluate element-wise.
Angles are in radians unless stated otherwise. Divisions follow IEEE-754
semantics: singular points yield ``inf`` or ``nan`` without raising.

[1] H. S. Snyder, S. Pasternack, J. Hornbostel: Angular Correlation of
Scattered Annihilation Radiation
Physical Review, 1948, 73, 440
DOI: https://doi.org/10.1103/PhysRev.73.440
"""

import numpy as np


ELECTRON_MASS_KEV = 511.0
"""float: Electron rest mass energy, i.e. energy of an annihilation photon [keV]."""


def x(theta):
    """Compton kinematic factor, 2 - cos(θ). Always within [1, 3]."""
    return 2. - np.cos(theta)


def j_lim(theta):
    """Indefinite integral of the parallel coincidence weight over θ."""
    X = x(theta)
    return np.log(X) - 1. / (2. * X ** 2)


def j(theta, semispan):
    """Parallel coincidence weight integrated over the detector semi-span.

    Arguments
    ---------
    theta : float or np.ndarray
        Central scattering angle [rad].
    semispan : float or np.ndarray
        Half of the detector acceptance in θ [rad].
    """
    return j_lim(theta + semispan) - j_lim(theta - semispan)


def j_dash_lim(theta):
    """Indefinite integral of the total coincidence weight over θ."""
    X = x(theta)
    return -X + 4. * np.log(X) + 3. / X


def j_dash(theta, semispan):
    """Total coincidence weight integrated over the detector semi-span."""
    return j_dash_lim(theta + semispan) - j_dash_lim(theta - semispan)


@np.errstate(divide="ignore", invalid="ignore")
def rho1(theta, semispan):
    """Asymmetry for detectors of finite size in θ and point-like in φ.

    Arguments
    ---------
    theta : float or np.ndarray
        Central scattering angle [rad].
    semispan : float or np.ndarray
        Half of the detector acceptance in θ [rad].

    Returns
    -------
    float or np.ndarray
        The ratio N(90)/N(0).

    Notes
    -----
    With ``r = j / j_dash`` the expression is ``1 + 1 / (r²/2 - r)``, which is
    singular for r = 0 and r = 2, and undefined (0/0) for a zero semi-span
    or for θ = 0 and θ = π. Such points evaluate to ``inf`` or ``nan``.
    """
    r = np.divide(j(theta, semispan), j_dash(theta, semispan))
    return 1. + np.divide(1., 0.5 * r ** 2 - r)


def u(alpha):
    """Azimuthal weight of the perpendicular term, 2α² - sin²(2α)/2."""
    return 2. * alpha ** 2 - 0.5 * np.sin(2. * alpha) ** 2


def w(alpha):
    """Azimuthal weight of the parallel term, 2α² + sin²(2α)/2."""
    return 2. * alpha ** 2 + 0.5 * np.sin(2. * alpha) ** 2


@np.errstate(divide="ignore", invalid="ignore")
def z(alpha):
    """Azimuthal acceptance correction u/w; tends to 0 for small α (0/0 at α = 0)."""
    return np.divide(u(alpha), w(alpha))


@np.errstate(divide="ignore", invalid="ignore")
def rho2(theta, semispan, alpha):
    """Asymmetry for detectors of finite size in both θ and φ.

    Arguments
    ---------
    theta : float or np.ndarray
        Central scattering angle [rad].
    semispan : float or np.ndarray
        Half of the detector acceptance in θ [rad].
    alpha : float or np.ndarray
        Half of the detector acceptance in φ [rad].

    Returns
    -------
    float or np.ndarray
        The ratio N(90)/N(0) folded with the azimuthal acceptance.
    """
    Z = z(alpha)
    R = rho1(theta, semispan)
    return np.divide(Z + R, 1. + Z * R)


def theta_to_photon_energy(theta):
    """Energy of a 511 keV photon after Compton scattering by θ [deg].

    E' = E₀ / [1 + (E₀/511)(1 - cos θ)] which for E₀ = 511 keV reduces
    to 511 / (2 - cos θ).

    Arguments
    ---------
    theta : float or np.ndarray
        Scattering angle [deg].

    Returns
    -------
    float or np.ndarray
        Scattered photon energy [keV].
    """
    return ELECTRON_MASS_KEV / x(np.deg2rad(theta))


def theta_to_electron_energy(theta):
    """Recoil electron energy [keV] for a 511 keV photon scattered by θ [deg]."""
    return ELECTRON_MASS_KEV - theta_to_photon_energy(theta)
