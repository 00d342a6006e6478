from .constants import DEFAULT_TOKEN_EXPIRE_SECONDS, MAX_TOKEN_EXPIRE_SECONDS, ROLE_PUBLISHER, ROLE_SUBSCRIBER

MASKED = "***"
SENSITIVE_KEYS = {"token", "secret", "accessKey", "secretKey"}


def first_n(s: str, n: int) -> str:
    """Return the first n characters (code points) of s; a negative n keeps all of s."""
    if n < 0:
        return s
    return s[:n]


def parse_role(value):
    if value is None:
        return ROLE_SUBSCRIBER
    if isinstance(value, int):
        return ROLE_PUBLISHER if value == ROLE_PUBLISHER else ROLE_SUBSCRIBER
    if isinstance(value, str):
        value = value.lower()
        if value in {"publisher", "host", "broadcaster"}:
            return ROLE_PUBLISHER
        if value in {"subscriber", "audience"}:
            return ROLE_SUBSCRIBER
    return None


def clamp_expire(expire):
    try:
        expire = int(expire)
    except (TypeError, ValueError):
        return DEFAULT_TOKEN_EXPIRE_SECONDS
    if expire <= 0:
        return DEFAULT_TOKEN_EXPIRE_SECONDS
    return min(expire, MAX_TOKEN_EXPIRE_SECONDS)


def redact(payload):
    """Copy of a request payload with credentials masked, for logging."""
    if isinstance(payload, dict):
        return {
            key: MASKED if key in SENSITIVE_KEYS and value else redact(value)
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [redact(item) for item in payload]
    return payload
