"""Redirect-following settings."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class PostRedirectFlags(enum.Flag):
    """Which redirects keep a POST request a POST."""

    NONE = 0
    POST_301 = 0x1
    POST_302 = 0x2
    POST_303 = 0x4
    POST_ALL = POST_301 | POST_302 | POST_303


def any_flags(flag: PostRedirectFlags) -> bool:
    """Tell whether any flag is set."""
    return flag != PostRedirectFlags.NONE


@dataclass
class Redirect:
    """How redirects are followed.

    A maximum of 0 refuses any redirect and -1 allows any number of them.
    """

    maximum: int = 50
    follow: bool = True
    cont_send_cred: bool = False
    post_flags: PostRedirectFlags = PostRedirectFlags.POST_ALL