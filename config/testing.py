import os

from config.config import build_master_data

MASTER_DATA = build_master_data()

# Batches must be reproducible in tests
RANDOM_SEED = int(os.getenv("RANDOM_SEED", "42"))

LOG_LEVEL = "DEBUG"
LOG_JSON = False
TESTING = True
