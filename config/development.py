import os

from config.config import optional_int, build_master_data

MASTER_DATA = build_master_data()

RANDOM_SEED = optional_int("RANDOM_SEED")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
# Plain text logs while developing generators locally
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))
