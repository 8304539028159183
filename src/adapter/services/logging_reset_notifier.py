import logging
from datetime import datetime

from src.app.services.reset_notifier import PasswordResetNotifier
from src.domain.entities import Account

logger = logging.getLogger(__name__)


class LoggingPasswordResetNotifier(PasswordResetNotifier):
    """
    Placeholder delivery channel.

    Records that a reset link is due for the account. The token value itself
    is never logged; a mail or queue backed notifier replaces this one in
    deployments that deliver resets.
    """

    async def send_reset_token(self, account: Account, token: str, expires_at: datetime) -> None:
        logger.info(
            "Password reset issued for account %s (expires at %s)",
            account.id,
            expires_at.isoformat(),
        )
