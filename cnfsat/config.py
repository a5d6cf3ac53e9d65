# Copyright (C) 2025, The cnfsat developers
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
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""
Defaults of the command line interface, overridable from the
environment. The solvers themselves read no configuration.
"""

import logging
import os

from .solver import ALGORITHMS

logger = logging.getLogger(__name__)

LOG_LEVEL = os.environ.get("CNFSAT_LOG_LEVEL", "WARNING").upper()
DEFAULT_ALGORITHM = os.environ.get("CNFSAT_DEFAULT_ALGORITHM", "auto")

TRUE_WORDS = ("1", "true", "t", "yes", "y")


def default_algorithm() -> str:
    if DEFAULT_ALGORITHM not in ALGORITHMS:
        logger.warning("Unrecognized CNFSAT_DEFAULT_ALGORITHM %r; falling back to auto",
                       DEFAULT_ALGORITHM)
        return "auto"
    return DEFAULT_ALGORITHM


def log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        logger.warning("Unrecognized log level %r; falling back to WARNING", name)
        return logging.WARNING
    return level
