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
This package calculates the asymmetry in the angular correlation of Compton
scattered annihilation radiation for detectors of finite size, and plots it
as a function of the scattering angle or of the deposited energy.

For more information see:

H. S. Snyder, S. Pasternack, J. Hornbostel: Angular Correlation of
Scattered Annihilation Radiation
Physical Review, 1948, 73, 440
DOI: https://doi.org/10.1103/PhysRev.73.440
"""

from .asymmetry import FiniteAsymmetry, graph_finite_asymmetry
from . import theory

__author__ = "Jure Cerar"
__copyright__ = "Copyright (C) 2025-2026 Jure Cerar"
__license__ = "GNU GPL v3.0"
__version__ = "0.1.0"
__all__ = [
    "FiniteAsymmetry",
    "graph_finite_asymmetry",
    "theory",
]
