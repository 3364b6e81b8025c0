#
# Shared API logging setup with elapsed time.
#
# Design decisions:
#   - Modules log through logging.getLogger(__name__); this module only wires
#     the root handler once, from the app lifespan.
#   - Same line shape as the offline tooling: "[api MM:SS] LEVEL name: msg",
#     elapsed since the logging module was loaded, written to stdout.
#   - Never log CPF in full or email addresses. Use CPF.mascarado.
from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "api-stdout"


class ElapsedFormatter(logging.Formatter):
    """Prefix each record with minutes:seconds since start."""

    def format(self, record: logging.LogRecord) -> str:
        minutes, seconds = divmod(int(record.relativeCreated / 1000), 60)
        return f"[api {minutes:02d}:{seconds:02d}] {super().format(record)}"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(ElapsedFormatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    logging.getLogger("httpx").setLevel(logging.WARNING)
