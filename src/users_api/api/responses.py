"""Content negotiation between JSON and XML response bodies."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any
from xml.etree import ElementTree

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

XML_MEDIA_TYPES = frozenset({"application/xml", "text/xml"})
JSON_MEDIA_TYPES = frozenset({"application/json", "text/json", "application/*", "*/*"})


class XMLResponse(Response):
    """Response rendering nested dicts, lists and scalars as XML."""

    media_type = "application/xml"

    def __init__(
        self,
        content: Any,
        *,
        root_tag: str,
        item_tag: str = "item",
        **kwargs: Any,
    ) -> None:
        self._root_tag = root_tag
        self._item_tag = item_tag
        super().__init__(content, **kwargs)

    def render(self, content: Any) -> bytes:
        root = ElementTree.Element(self._root_tag)
        _fill_element(root, content, self._item_tag)
        return ElementTree.tostring(root, encoding="utf-8", xml_declaration=True)


def _fill_element(element: ElementTree.Element, value: Any, item_tag: str) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, child_value in value.items():
            _fill_element(ElementTree.SubElement(element, str(key)), child_value, item_tag)
    elif isinstance(value, Sequence) and not isinstance(value, str):
        for child_value in value:
            _fill_element(ElementTree.SubElement(element, item_tag), child_value, item_tag)
    elif isinstance(value, bool):
        element.text = "true" if value else "false"
    else:
        element.text = str(value)


def _quality(parameters: str) -> float:
    for parameter in parameters.split(";"):
        name, _, value = parameter.partition("=")
        if name.strip().lower() == "q":
            try:
                return float(value.strip())
            except ValueError:
                return 0.0
    return 1.0


def prefers_xml(accept: str | None) -> bool:
    """Return True when the ``Accept`` header ranks XML above JSON.

    Ties go to the media range listed first; unknown ranges are ignored.
    """
    if not accept:
        return False
    best_quality = 0.0
    best_is_xml = False
    for media_range in accept.split(","):
        media_type, _, parameters = media_range.partition(";")
        media_type = media_type.strip().lower()
        if media_type in XML_MEDIA_TYPES:
            is_xml = True
        elif media_type in JSON_MEDIA_TYPES:
            is_xml = False
        else:
            continue
        quality = _quality(parameters)
        if quality > best_quality:
            best_quality = quality
            best_is_xml = is_xml
    return best_is_xml


def _to_primitive(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True)
    if isinstance(payload, Sequence) and not isinstance(payload, str):
        return [_to_primitive(item) for item in payload]
    return payload


def negotiated_response(
    request: Request,
    payload: Any,
    *,
    root_tag: str,
    item_tag: str = "item",
    status_code: int = 200,
    headers: Mapping[str, str] | None = None,
) -> Response:
    """Render *payload* as XML or JSON depending on the request's ``Accept``."""
    content = _to_primitive(payload)
    if prefers_xml(request.headers.get("accept")):
        return XMLResponse(
            content,
            root_tag=root_tag,
            item_tag=item_tag,
            status_code=status_code,
            headers=headers,
        )
    return JSONResponse(content, status_code=status_code, headers=headers)
