from __future__ import annotations

import logging
from typing import Callable, Optional

from PyQt5.QtWidgets import QAbstractButton, QComboBox

log = logging.getLogger(__name__)


def _safe_call(handler: Callable[..., None], *args) -> None:
    try:
        handler(*args)
    except Exception:
        log.debug("user signal handler failed (best-effort).", exc_info=True)


def connect_button_user_clicked(button: QAbstractButton, handler: Callable[[], None]) -> None:
    try:
        button.clicked.connect(lambda _checked=False: _safe_call(handler))
    except Exception:
        log.debug("connect_button_user_clicked failed (best-effort).", exc_info=True)


def connect_combobox_user_data_changed(combo: QComboBox, handler: Callable[[Optional[str]], None]) -> None:
    """Call handler with the item data of the entry the user picked.

    Uses ``activated`` so programmatic repopulation does not fire the handler.
    """
    try:
        combo.activated.connect(lambda i: _safe_call(handler, combo.itemData(i)))
    except Exception:
        log.debug("connect_combobox_user_data_changed failed (best-effort).", exc_info=True)
