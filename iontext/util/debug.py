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
Provides the process-wide debugging switch.
"""

import logging


class Debug:
    """
    For holding some debugging variables.
    """

    is_debug = False

    @classmethod
    def set_debug(cls, is_debug: bool) -> None:
        """
        Toggle debugging and apply the matching level to the loggers.

        Parameters
        ----------
        is_debug : bool
            Whether debug-level messages should be emitted by the
            ``iontext`` loggers.
        """
        # Deferred to avoid a circular import with `iontext.util.logging`.
        from iontext.util.logging import default_log_level
        cls.is_debug = is_debug
        logging.getLogger("iontext").setLevel(default_log_level())
