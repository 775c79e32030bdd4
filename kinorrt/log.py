import logging

logger = logging.getLogger("kinorrt")
