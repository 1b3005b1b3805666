"""Mail delivery for agentctl reports."""

import logging
import subprocess

from ..config import MailConfig
from ..constants import MAIL_TIMEOUT
from ..errors import MailError

logger = logging.getLogger(__name__)


def send_mail(mail: MailConfig, recipient: str, subject: str, body: str) -> None:
    """Send a message with the system mail utility.

    Runs ``<exec> -s SUBJECT RECIPIENT`` with the body on stdin.

    Raises:
        MailError: If the utility is missing, times out, or exits non-zero
    """
    cmd = [mail.exec, "-s", subject, recipient]
    logger.debug(f"Sending report to {recipient} via {mail.exec}")
    try:
        result = subprocess.run(
            cmd,
            input=body,
            capture_output=True,
            text=True,
            timeout=MAIL_TIMEOUT,
        )
    except FileNotFoundError:
        raise MailError(f"Mail command not found: {mail.exec}") from None
    except subprocess.TimeoutExpired as e:
        raise MailError(f"Mail command timed out after {MAIL_TIMEOUT} seconds") from e

    if result.returncode != 0:
        raise MailError(f"Mail command failed: {result.stderr.strip() or result.returncode}")
