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

import numpy as np

import pytest

from annicorr import render


@pytest.fixture
def frame():
    """Axis frame matching the angular chart"""
    return render.Frame((0., 180.), (0.5, 3.0), "θ (deg)", "P(Δφ = 90)/P(Δφ = 0)")


class TestRender(object):

    def test_series(self):
        """Test Series input functionality"""
        s = render.Series("a", [1, 2, 3], [4, 5, 6])
        assert s.x.dtype == float
        assert s.style == render.Style()
        render.Series()
        with pytest.raises(ValueError):
            render.Series("a", [1, 2, 3], [4, 5])

    @pytest.mark.parametrize("fmt", ["pdf", "png", "svg"])
    def test_render(self, tmp_path, frame, fmt):
        """Test export in different formats"""
        series = [
            render.Series("a", [80, 90, 100], [2.0, 2.5, 2.1], render.Style("#cc0000", "o", "--")),
            render.Series("b", [80, 90, 100], [1.5, 1.8, 1.6], render.Style("#0000cc", "o", "-")),
        ]
        path = render.render(series, frame, tmp_path / f"chart.{fmt}")
        assert path.exists()
        assert path.stat().st_size > 0

    def test_render_degenerate(self, tmp_path, frame):
        """Single points and non-finite values do not break rendering"""
        series = [
            render.Series("single", [90.], [2.0]),
            render.Series("nan", [0., 90., 180.], [np.nan, 2.0, np.inf]),
            render.Series(),
        ]
        path = render.render(series, frame, str(tmp_path / "chart.png"))
        assert path.exists()
