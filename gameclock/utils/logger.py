# gameclock/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер для часов и игрового цикла.
# ---------------------------------------------------------------

import logging

def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("GameClock")

logger = init_logger()
