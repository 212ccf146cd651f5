#
# Copyright (c) 2023 Radiance Technologies, Inc.
#
# This file is part of IONTEXT.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program. If not, see
# <http://www.gnu.org/licenses/>.
#
"""
Utilities for logging.
"""
import logging
from typing import NoReturn

from iontext.util.debug import Debug


def default_log_level() -> int:
    """
    Get the default log level based on debugging status.
    """
    return logging.DEBUG if Debug.is_debug else logging.INFO


def log_and_raise(
        logger: logging.Logger,
        error: Exception,
        level: int = logging.DEBUG) -> NoReturn:
    """
    Log an error message and then raise the error.

    Parameters
    ----------
    logger : logging.Logger
        The logger.
    error : Exception
        The error to report.
    level : int, optional
        The level at which the message is logged, by default
        ``logging.DEBUG``.

    Raises
    ------
    Exception
        The given exception.
    """
    logger.log(level, str(error))
    raise error
