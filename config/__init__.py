import os


def get_settings_module() -> str:
    # CHECKROLL_ENV wins over the generic APP_ENV, default is 'development'
    env = (os.getenv("CHECKROLL_ENV") or os.getenv("APP_ENV") or "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
