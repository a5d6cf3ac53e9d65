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
Exceptions raised by the solvers and by the formula reader.
"""

from typing import Optional


class CNFSatError(Exception):
    """Base class of all errors raised by this package."""


class UnsatisfiableError(CNFSatError):
    """
    Raised by a solver when no assignment of the variables satisfies
    every clause of the formula. This is a regular outcome of solving,
    it is an exception only to separate it from the returned assignment.
    """

    def __init__(self, message: str = "No satisfying assignment exists for the formula."):
        super().__init__(message)
        self.message = message


class FormulaFormatError(CNFSatError, ValueError):
    """
    Raised when a formula file cannot be parsed. The line attribute is
    the 1-based line number of the offending line, if known.
    """

    def __init__(self, message: str, line: Optional[int] = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.message = message
        self.line = line
