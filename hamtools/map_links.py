"""Links to third-party map apps for a coordinate.

Coordinates are passed through as WGS-84; no conversion to the GCJ-02 or
BD-09 datums used by Amap/Tencent/Baidu.
"""

from urllib.parse import quote

from .geo_utils import as_coordinate

DEFAULT_LABEL = "Location"


def _fmt(coord):
    coord = as_coordinate(coord)
    return f"{coord.latitude:.6f}", f"{coord.longitude:.6f}"


def google_maps_link(coord, label: str = DEFAULT_LABEL) -> str:
    lat, lon = _fmt(coord)
    return f"https://www.google.com/maps?q={lat},{lon}({quote(label)})"


def amap_link(coord, label: str = DEFAULT_LABEL) -> str:
    lat, lon = _fmt(coord)
    return (f"https://uri.amap.com/marker?position={lon},{lat}"
            f"&name={quote(label)}&coordinate=gaode&callnative=1")


def tencent_maps_link(coord, label: str = DEFAULT_LABEL) -> str:
    lat, lon = _fmt(coord)
    return (f"https://apis.map.qq.com/uri/v1/marker?marker=coord:{lat},{lon};"
            f"title:{quote(label)}&coord_type=1")


def baidu_maps_link(coord, label: str = DEFAULT_LABEL) -> str:
    lat, lon = _fmt(coord)
    label = quote(label)
    return (f"http://api.map.baidu.com/marker?location={lat},{lon}"
            f"&title={label}&content={label}&output=html")


def geo_uri(coord, label: str = DEFAULT_LABEL) -> str:
    """Universal geo: URI, lets the OS pick a map app."""
    lat, lon = _fmt(coord)
    return f"geo:{lat},{lon}?q={lat},{lon}({quote(label)})"


MAP_PROVIDERS = {
    "google": google_maps_link,
    "amap": amap_link,
    "tencent": tencent_maps_link,
    "baidu": baidu_maps_link,
    "geo": geo_uri,
}


def map_link(provider: str, coord, label: str = DEFAULT_LABEL) -> str:
    """Build a map link for a provider name (see MAP_PROVIDERS).

    Raises:
        ValueError: If the provider is unknown
    """
    try:
        builder = MAP_PROVIDERS[provider.lower()]
    except KeyError:
        raise ValueError(f"Unknown map provider {provider!r}. Valid: {list(MAP_PROVIDERS)}") from None
    return builder(coord, label)
