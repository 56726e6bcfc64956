"""
Inventory API — routes return plain values; responsewriter turns them into responses.
To run: uvicorn main:app --reload
Then try: curl localhost:8000/inventory/items/apple -H "Accept: text/plain"
"""
import json
from dataclasses import asdict, dataclass

from responsewriter import (
    ErrorDescriptor,
    JSONType,
    PlainTextType,
    RequestContext,
    ResponseConfig,
    ResponseModule,
    configure_logging,
    create_app,
)

configure_logging("DEBUG")

config = ResponseConfig.load_from_env()
json_type = JSONType(config)
text_type = PlainTextType(config)


@dataclass
class Item:
    name: str
    quantity: int

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    def to_text(self) -> str:
        return f"{self.name} x{self.quantity}"


class OutOfStock(Exception):
    def get_code(self) -> int:
        return 409


STOCK = {"apple": Item("apple", 3), "pear": Item("pear", 0)}


def list_items(request: RequestContext):
    return {name: item.quantity for name, item in STOCK.items()}


def get_item(request: RequestContext):
    item = STOCK.get(request.param("name"))
    if item is None:
        return ErrorDescriptor(404, "no such item")
    return item


def take_item(request: RequestContext):
    item = STOCK.get(request.param("name"))
    if item is None:
        return 404
    if item.quantity == 0:
        return OutOfStock(item.name)
    item.quantity -= 1
    return None


inventory = (
    ResponseModule("inventory")
    .route("items", list_items, json_type, text_type)
    .route("items/{name}", get_item, json_type, text_type)
    .route("items/{name}/take", take_item, json_type, methods=["POST"])
)

app = create_app(inventory)
