# idn_normalizer/idn_convert.py

import logging
from functools import wraps
from typing import Callable, Optional

import idna

from idn_normalizer.config import DEFAULT_OPTIONS, IdnaOptions
from idn_normalizer.errors import IdnConversionError, IdnNormalizerError
from idn_normalizer.url_parts import join_url, split_url

logger = logging.getLogger(__name__)


# ============================================================================
# Host conversion
# ============================================================================

def contains_non_ascii(text: str) -> bool:
    """True if any code point is outside 0-127."""
    return not text.isascii()


def host_to_ascii(host: str, options: Optional[IdnaOptions] = None) -> str:
    """
    Encodes an internationalized host name into its Punycode (xn--) form.

    Args:
        host: The host name, e.g. "例え.jp"
        options: IDNA flags (default: UTS #46 mapping, non-transitional)

    Returns:
        str: The ASCII host, e.g. "xn--r8jz45g.jp"

    Raises:
        IdnConversionError: If a label is malformed, too long or holds a
            code point IDNA does not allow
    """
    options = options or DEFAULT_OPTIONS
    try:
        encoded = idna.encode(
            host,
            uts46=options.uts46,
            std3_rules=options.std3_rules,
            transitional=options.transitional,
        )
    except (idna.IDNAError, UnicodeError) as e:
        raise IdnConversionError(f"Failed to convert IDN to ASCII: {e}", host=host) from e
    return encoded.decode("ascii")


# ============================================================================
# URL conversion
# ============================================================================

def fallback_to_input(func: Callable[..., str]) -> Callable[..., str]:
    """
    Decorator that returns the first argument unchanged when func raises
    an IdnNormalizerError.

    Usage:
        @fallback_to_input
        def normalize(url):
            ...
    """
    @wraps(func)
    def wrapper(url: str, *args, **kwargs) -> str:
        try:
            return func(url, *args, **kwargs)
        except IdnNormalizerError as e:
            logger.debug("Leaving %r unchanged: %s", url, e)
            return url

    return wrapper


def convert_idn_to_ascii(url: str, options: Optional[IdnaOptions] = None) -> str:
    """
    Rewrites an internationalized host in a URL into its ASCII form.

    Only the host changes: scheme, userinfo, port, path, query and fragment
    are copied from the input as written. URLs that are already ASCII, or
    have no host, come back unchanged.

    Args:
        url: The URL to normalize
        options: IDNA flags passed to host_to_ascii

    Returns:
        str: The URL with an ASCII host

    Raises:
        InvalidUrlError: If the URL parser rejects the input
        IdnConversionError: If the host cannot be encoded
    """
    if not contains_non_ascii(url):
        return url

    components = split_url(url)
    if components is None or not contains_non_ascii(components.host):
        return url

    ascii_host = host_to_ascii(components.host, options)
    converted = join_url(components.replace_host(ascii_host))
    logger.debug("Converted host %r to %r", components.host, ascii_host)
    return converted


@fallback_to_input
def safe_convert_idn_to_ascii(url: str, options: Optional[IdnaOptions] = None) -> str:
    """Same as convert_idn_to_ascii, but returns the input unchanged on any error."""
    return convert_idn_to_ascii(url, options)
