"""Coordinate reference system objects.

A CRS member is either *named* (an identifier such as
``urn:ogc:def:crs:OGC:1.3:CRS84``) or *linked* (a URI plus an optional hint
describing the format of the linked document)::

    {"type": "name", "properties": {"name": "urn:ogc:def:crs:OGC:1.3:CRS84"}}
    {"type": "link", "properties": {"href": "http://example.com/crs/42", "type": "proj4"}}
"""

from __future__ import annotations

from dataclasses import dataclass

from geojson_core.exceptions import CrsUnknownType
from geojson_core.types import JsonObject
from geojson_core.util import as_object, as_string, require, type_of


class Crs:
    """Base of the two CRS variants, :class:`Named` and :class:`Linked`."""

    __slots__ = ()

    def to_dict(self) -> JsonObject:
        raise NotImplementedError

    @classmethod
    def from_dict(cls, obj: JsonObject) -> "Crs":
        """Parse a CRS object, dispatching on its ``type`` member.

        Raises
        ------
        CrsUnknownType
            If ``type`` is neither ``"name"`` nor ``"link"``.
        ExpectedProperty
            If ``properties`` or a required property is missing.
        """
        crs_type = type_of(obj)
        properties = as_object(require(obj, "properties"))

        if crs_type == "name":
            return Named(name=as_string(require(properties, "name")))
        if crs_type == "link":
            href = as_string(require(properties, "href"))
            link_type = as_string(properties["type"]) if "type" in properties else None
            return Linked(href=href, link_type=link_type)
        raise CrsUnknownType(crs_type)

    @property
    def __geo_interface__(self) -> JsonObject:
        return self.to_dict()


@dataclass(frozen=True)
class Named(Crs):
    """A CRS identified by name."""

    name: str

    def to_dict(self) -> JsonObject:
        return {"type": "name", "properties": {"name": self.name}}


@dataclass(frozen=True)
class Linked(Crs):
    """A CRS referenced by URI.

    ``link_type`` is the optional ``properties.type`` hint (``"proj4"``,
    ``"ogcwkt"``, ``"esriwkt"``, …).
    """

    href: str
    link_type: str | None = None

    def to_dict(self) -> JsonObject:
        properties: JsonObject = {"href": self.href}
        if self.link_type is not None:
            properties["type"] = self.link_type
        return {"type": "link", "properties": properties}
