"""CDN URL construction for package specifiers. Builds strings only; never fetches."""

from enum import Enum
from typing import List, Tuple, Union

from constants import Constants
from .errors import UnknownCDNError
from .models import SpecifierKind
from .parser import parse


class CDN(Enum):
    """Supported CDN providers."""

    UNPKG = "unpkg"
    ESM_SH = "esm.sh"
    ESM_RUN = "esm.run"
    JSPM = "jspm"
    JSDELIVR = "jsdelivr"


# provider -> (npm base, jsr base or None when jsr is unsupported)
_CDN_BASES = {
    CDN.UNPKG: ("https://unpkg.com/", None),
    CDN.ESM_SH: ("https://esm.sh/", "https://esm.sh/jsr/"),
    CDN.ESM_RUN: ("https://esm.run/", None),
    CDN.JSPM: ("https://ga.jspm.io/npm:", None),
    CDN.JSDELIVR: ("https://cdn.jsdelivr.net/npm/", None),
}


def parse_cdn(name: str) -> CDN:
    """Map a provider name to a CDN.

    Raises:
        UnknownCDNError: ``name`` is empty or not a supported provider.
    """
    try:
        return CDN(name)
    except ValueError:
        raise UnknownCDNError(
            f"unknown CDN provider {name!r} (valid: {', '.join(valid_cdns())})"
        ) from None


def valid_cdns() -> List[str]:
    """Return the names of all supported providers."""
    return [cdn.value for cdn in CDN]


def supports_jsr(cdn: CDN) -> bool:
    return _CDN_BASES[cdn][1] is not None


def cdn_url(spec: str, cdn: Union[CDN, str, None] = None) -> Tuple[str, bool]:
    """Build the CDN URL for a package specifier.

    Args:
        spec: Raw specifier.
        cdn: Provider, as a CDN or its name; None or "" means unpkg.

    Returns:
        (url, True) on success, ("", False) for local paths, specifiers with
        no file, unknown providers, or providers that do not serve the
        specifier's registry.
    """
    if cdn is None or cdn == "":
        cdn = Constants.DEFAULT_CDN
    if not isinstance(cdn, CDN):
        try:
            cdn = parse_cdn(cdn)
        except UnknownCDNError:
            return "", False

    parsed = parse(spec)
    if parsed.kind == SpecifierKind.LOCAL or not parsed.package or not parsed.file:
        return "", False

    npm_base, jsr_base = _CDN_BASES[cdn]
    base = jsr_base if parsed.kind == SpecifierKind.JSR else npm_base
    if base is None:
        return "", False
    return f"{base}{parsed.package}/{parsed.file}", True
