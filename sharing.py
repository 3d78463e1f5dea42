from __future__ import annotations
import logging
import webbrowser
from typing import Callable
from urllib.parse import quote, urlencode

from dessert_ledger import SaleLedger

logger = logging.getLogger("dessert.sharing")

SHARE_SUBJECT = "My Dessert Pusher score"

class ShareUnavailable(RuntimeError):
    pass

def share_via_mail(text: str, subject: str = SHARE_SUBJECT) -> None:
    url = "mailto:?" + urlencode({"subject": subject, "body": text}, quote_via=quote)
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as exc:
        raise ShareUnavailable(str(exc)) from exc
    if not opened:
        raise ShareUnavailable("no application can open mailto links")

def share_score(ledger: SaleLedger, handler: Callable[[str], None] = share_via_mail) -> bool:
    text = ledger.share_summary()
    try:
        handler(text)
    except ShareUnavailable as exc:
        logger.info("Sharing not available: %s", exc)
        return False
    logger.debug("Shared: %s", text)
    return True
