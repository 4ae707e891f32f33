from __future__ import annotations

import logging
import os


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    # Allow env override, e.g. LYRICCONV_LOG_LEVEL=info
    level_name = os.getenv("LYRICCONV_LOG_LEVEL")
    if level_name:
        level = getattr(logging, level_name.upper(), level)

    # stderr: stdout may carry the converted document
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
