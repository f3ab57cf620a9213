import os
from typing import Optional

from fast_rules.core.localization import set_locale_path
from fast_rules.utils.env_utils import configure_env
from fast_rules.utils.logging import setup_logging


def boot(*,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
    locale_path: Optional[str] = None,
):
    """
    Prepare the process for validation.
    - Loads environment variables (`.env.<ENV>` / `.env` or `env_file_name`)
    - Sets up logging
    - Points the application catalogs at `locale_path` (or `LOCALE_PATH`)

    Settings in `fast_rules.config` are read at import time; the engine
    also accepts them per `Validator` for values loaded later.
    """
    configure_env(env_file_name)
    setup_logging(log_file_name)

    path = locale_path or os.getenv("LOCALE_PATH")
    if path:
        set_locale_path(path)
