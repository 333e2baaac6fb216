from __future__ import annotations

import logging

from storefront.logging_config import HANDLER_NAME, configure_logging


def test_configure_logging_is_idempotent() -> None:
    configure_logging("debug")
    configure_logging("info")

    root = logging.getLogger()
    assert [h.get_name() for h in root.handlers].count(HANDLER_NAME) == 1
    assert root.level == logging.INFO
