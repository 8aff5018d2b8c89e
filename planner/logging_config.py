import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
NOISY_LOGGERS = ("urllib3", "requests", "watchdog")


def configure_logging(level_name=None):
    level_name = (level_name or os.getenv("PLANNER_LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op after the first Streamlit run; keep the level current.
    logger = logging.getLogger("planner")
    logger.setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logger
