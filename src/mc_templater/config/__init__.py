import logging
import os


class Settings:
    LOG_LEVEL_STR = os.environ.get("LOG_LEVEL", "INFO")
    LOG_LEVEL = getattr(logging, LOG_LEVEL_STR.upper(), logging.INFO)
    HUMANIZE_LOGS = os.environ.get("HUMANIZE_LOGS", "false") == "true"
    # Template used when a caller asks for a name we do not know
    DEFAULT_TEMPLATE = os.environ.get("DEFAULT_TEMPLATE", "house")
    # Placed wherever a layer references an undefined token, so it stands out
    MISSING_BLOCK = os.environ.get("MISSING_BLOCK", "magenta_glazed_terracotta")


settings = Settings()
