"""
sources/routes.py
Route tables from scanlator tags and url markers to external hosts.
"""

from errors import ConfigurationError, UnsupportedHostError
from sources.hosts import ExternalHost


class HostRegistry:
    """
    Built once from the installed hosts and validated on construction.

    Image and locator routes are tried in registration order, then in the
    order each host lists its markers; the first match wins.
    """

    def __init__(self, hosts=()):
        self.hosts = list(hosts)
        self._by_tag = {}
        self._image_routes = []
        self._locator_routes = []
        for host in self.hosts:
            self._register(host)

    def _register(self, host):
        for tag in host.tags:
            key = (tag or "").lower()
            if not key:
                raise ConfigurationError(f"{host!r} declares an empty tag")
            if key in self._by_tag:
                raise ConfigurationError(f"Tag {key!r} claimed by {self._by_tag[key]!r} and {host!r}")
            self._by_tag[key] = host

        for marker in host.image_markers:
            if not marker:
                raise ConfigurationError(f"{host!r} declares an empty image marker")
            self._image_routes.append((marker.lower(), host))

        if host.locator_markers and type(host).fetch_image_url is ExternalHost.fetch_image_url:
            raise ConfigurationError(f"{host!r} routes page urls but does not resolve image urls")
        for marker in host.locator_markers:
            if not marker:
                raise ConfigurationError(f"{host!r} declares an empty locator marker")
            self._locator_routes.append((marker, host))

    @property
    def tags(self):
        return sorted(self._by_tag)

    def host_for_tag(self, scanlator):
        host = self._by_tag.get((scanlator or "").lower())
        if host is None:
            raise UnsupportedHostError(scanlator)
        return host

    def host_for_image_url(self, image_url):
        if not image_url:
            return None
        lowered = image_url.lower()
        for marker, host in self._image_routes:
            if marker in lowered:
                return host
        return None

    def host_for_locator(self, locator):
        if not locator:
            return None
        for marker, host in self._locator_routes:
            if marker in locator:
                return host
        return None
