from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_toolkit() -> Container:
    """Entry point for the load-testing harness: settings -> logging -> container."""
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    setup_logging(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        json_output=bool(getattr(settings, "LOG_JSON", False)),
    )

    master_data = getattr(settings, "MASTER_DATA")
    seed = getattr(settings, "RANDOM_SEED", None)
    container = build_container(master_data=master_data, seed=seed)

    logger.info(
        "Checkroll toolkit ready (settings=%s, estate=%s, norm=%s, seed=%s)",
        settings_module,
        container.tables.estate_id,
        container.tables.norm_value,
        seed,
    )
    return container
