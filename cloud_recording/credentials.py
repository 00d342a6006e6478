"""
User credentials for joining a channel: a numeric uid plus the RTC (and
optionally RTM) tokens signed with the app certificate.
"""
import logging
import random
import time
from dataclasses import dataclass
from typing import Optional

from agora_token_builder import RtcTokenBuilder, RtmTokenBuilder

from .constants import (
    DEFAULT_TOKEN_EXPIRE_SECONDS,
    MAX_UID,
    ROLE_PUBLISHER,
    ROLE_RTM_USER,
    ROLE_SUBSCRIBER,
)
from .errors import CredentialError

logger = logging.getLogger("cloud_recording")


@dataclass
class UserCredentials:
    uid: int
    rtc: str
    rtm: Optional[str] = None


def _check_settings(settings):
    if not settings.app_id or not settings.app_certificate:
        raise CredentialError("AGORA_APP_ID and AGORA_APP_CERT are required to build tokens")


def build_rtc_token(settings, channel, role, expire_ts, uid=None, account=None):
    """Build an RTC token for either a numeric uid or a user account."""
    _check_settings(settings)
    try:
        if account:
            return RtcTokenBuilder.buildTokenWithAccount(
                settings.app_id, settings.app_certificate, channel, str(account), role, expire_ts
            )
        return RtcTokenBuilder.buildTokenWithUid(
            settings.app_id, settings.app_certificate, channel, int(uid), role, expire_ts
        )
    except (TypeError, ValueError) as exc:
        raise CredentialError(f"failed to build RTC token: {exc}") from exc


def build_rtm_token(settings, user_account, expire_ts):
    _check_settings(settings)
    try:
        return RtmTokenBuilder.buildToken(
            settings.app_id, settings.app_certificate, str(user_account), ROLE_RTM_USER, expire_ts
        )
    except (TypeError, ValueError) as exc:
        raise CredentialError(f"failed to build RTM token: {exc}") from exc


def generate_user_credentials(
    settings,
    channel: str,
    is_host: bool = False,
    with_rtm: bool = False,
    uid: Optional[int] = None,
    expire: int = DEFAULT_TOKEN_EXPIRE_SECONDS,
) -> UserCredentials:
    if not channel:
        raise CredentialError("channel is required")

    if uid is None:
        uid = random.randint(1, MAX_UID)

    expire_ts = int(time.time()) + expire
    role = ROLE_PUBLISHER if is_host else ROLE_SUBSCRIBER

    rtc = build_rtc_token(settings, channel, role, expire_ts, uid=uid)
    rtm = build_rtm_token(settings, uid, expire_ts) if with_rtm else None

    logger.debug(f"[CREDENTIALS] Generated for channel={channel}, uid={uid}, host={is_host}")
    return UserCredentials(uid=uid, rtc=rtc, rtm=rtm)
