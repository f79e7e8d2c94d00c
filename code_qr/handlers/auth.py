"""Whitelist check shared by handlers that touch a chat's form."""

import os

UNAUTHORIZED_MSG = "❌ You do not have access. Contact the administrator."


def is_authorized(user_id: int) -> bool:
    """Check if user is authorized (whitelist).

    BOT_WHITELIST is read on every call so it can change without a restart.
    """
    whitelist_str = os.getenv("BOT_WHITELIST", "")
    if not whitelist_str:
        return True  # No whitelist = allow all

    whitelist = [
        int(uid.strip())
        for uid in whitelist_str.split(",")
        if uid.strip()
    ]
    return user_id in whitelist
