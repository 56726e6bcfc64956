from responsewriter.formats.base import BaseResponseType, ResponseType
from responsewriter.formats.json import JSONSerializable, JSONType
from responsewriter.formats.text import PlainTextType, TextSerializable

__all__ = [
    "BaseResponseType",
    "ResponseType",
    "JSONSerializable",
    "JSONType",
    "PlainTextType",
    "TextSerializable",
]
