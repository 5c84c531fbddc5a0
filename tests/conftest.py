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

import pytest


def pytest_addoption(parser):
    parser.addoption("--visual", action="store_true", default=False,
                     help="run tests that display plots")


def pytest_configure(config):
    config.addinivalue_line("markers", "visual: test displays a plot, run with --visual")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--visual"):
        return
    skip = pytest.mark.skip(reason="needs --visual option to run")
    for item in items:
        if "visual" in item.keywords:
            item.add_marker(skip)
