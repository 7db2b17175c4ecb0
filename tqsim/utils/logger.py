#    tqsim: a toy state-vector quantum circuit simulator
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 3 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program.  If not, see <https://www.gnu.org/licenses/>.

import os
import sys
from logging import Logger, LoggerAdapter, StreamHandler, getLogger
from typing import Literal, cast, override


class CustomAdapter(LoggerAdapter):
    def __init__(self, logger: Logger):
        super().__init__(logger)
        self._prefix: str | None = None

    @override
    def process(self, msg, kwargs):
        if self._prefix:
            msg = f"[{self._prefix}] {msg}"
        return msg, kwargs

    def install(self, prefix: str | None):
        """
        Prepend a label, such as a circuit name, to log entries.
        """
        self._prefix = prefix

    def set_default_level(self, dflt_level: Literal["CRITICAL", "FATAL", "ERROR", "WARN", "INFO", "DEBUG"]):
        """
        Configure logging level.

        If `TQSIM_LOGLVL` environment variable contains a valid log level, it is used.
        Otherwise, `dflt_level` is used as the logging level.
        """
        try:
            env_level = os.getenv("TQSIM_LOGLVL", dflt_level)
            self.setLevel(env_level)
        except ValueError:  # TQSIM_LOGLVL is not a valid level
            self.setLevel(dflt_level)


log = CustomAdapter(getLogger("tqsim"))
"""
The default ``logger`` used by tqsim.
"""

log.set_default_level("INFO")
cast(Logger, log.logger).addHandler(StreamHandler(sys.stdout))
