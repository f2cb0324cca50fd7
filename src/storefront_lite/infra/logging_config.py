from __future__ import annotations

import logging

_HANDLER_NAME = "storefront"


def configure_logging(level: str = "INFO") -> None:
    """
    Attach the application handler to the root logger and set its level.

    Safe to call repeatedly (every build_app() does): the handler is added
    once, later calls only adjust the level.
    """
    root = logging.getLogger()

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
        root.addHandler(handler)

    level_value = logging.getLevelName(level.upper())
    root.setLevel(level_value if isinstance(level_value, int) else logging.INFO)
