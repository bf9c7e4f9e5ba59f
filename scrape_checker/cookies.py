"""
Cookie import

Turns a browser-extension cookie export (a JSON array) into the cookie
shape Playwright's ``BrowserContext.add_cookies`` accepts.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Union

logger = logging.getLogger(__name__)

# Export value -> Playwright value; anything else maps to "Strict"
SAME_SITE_MAP = {
    'no_restriction': 'None',
    'lax': 'Lax',
}
DEFAULT_SAME_SITE = 'Strict'


class MalformedCookieInput(Exception):
    """Raised when a cookie file is unreadable, not JSON, or not an array."""


@dataclass
class CookieRecord:
    """Cookie as found in an export file. Every field is optional."""

    name: Optional[str] = None
    value: Optional[str] = None
    domain: Optional[str] = None
    path: Optional[str] = None
    expiration_date: Any = None
    http_only: Any = None
    secure: Any = None
    same_site: Any = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CookieRecord':
        return cls(
            name=data.get('name'),
            value=data.get('value'),
            domain=data.get('domain'),
            path=data.get('path'),
            expiration_date=data.get('expirationDate'),
            http_only=data.get('httpOnly'),
            secure=data.get('secure'),
            same_site=data.get('sameSite'),
        )


@dataclass
class CanonicalCookie:
    """Cookie in the form the browser context expects."""

    name: str
    value: str
    domain: Optional[str] = None
    path: Optional[str] = None
    expires: Optional[Union[int, float]] = None
    http_only: bool = False
    secure: bool = False
    same_site: str = DEFAULT_SAME_SITE

    def to_playwright(self) -> Dict[str, Any]:
        """Playwright cookie dict; absent optional fields are left out."""
        cookie = {
            'name': self.name,
            'value': self.value,
            'domain': self.domain,
            'path': self.path,
            'expires': self.expires,
            'httpOnly': self.http_only,
            'secure': self.secure,
            'sameSite': self.same_site,
        }
        return {k: v for k, v in cookie.items() if v is not None}


def map_same_site(raw: Any) -> str:
    return SAME_SITE_MAP.get(raw, DEFAULT_SAME_SITE) if isinstance(raw, str) else DEFAULT_SAME_SITE


def _expires(raw: Any) -> Optional[Union[int, float]]:
    # bool is an int subclass but never a timestamp
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return raw
    return None


def normalize_cookie(record: CookieRecord) -> CanonicalCookie:
    return CanonicalCookie(
        name='' if record.name is None else str(record.name),
        value='' if record.value is None else str(record.value),
        domain=record.domain,
        path=record.path,
        expires=_expires(record.expiration_date),
        http_only=bool(record.http_only),
        secure=bool(record.secure),
        same_site=map_same_site(record.same_site),
    )


def normalize_cookies(records: Iterable[CookieRecord]) -> List[CanonicalCookie]:
    """Normalize exported cookies. Never fails on individual fields."""
    return [normalize_cookie(r) for r in records]


def load_cookie_file(path: str) -> List[CanonicalCookie]:
    """Read and normalize a JSON cookie export.

    Raises:
        MalformedCookieInput: if the file cannot be read, is not valid JSON,
            or its top level is not an array.
    """
    try:
        # utf-8-sig also accepts exports written with a byte order mark
        with open(path, 'r', encoding='utf-8-sig') as f:
            data = json.load(f)
    except OSError as e:
        raise MalformedCookieInput(f"Cannot read cookie file {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedCookieInput(f"Cookie file {path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedCookieInput(
            f"Cookie file {path} must contain a JSON array, got {type(data).__name__}"
        )

    records = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            logger.warning("Skipping cookie entry %d: not an object", i)
            continue
        records.append(CookieRecord.from_dict(item))

    cookies = normalize_cookies(records)
    logger.info("Loaded %d cookies from %s", len(cookies), path)
    return cookies
