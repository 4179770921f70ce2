import math
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

from catalog.domain.errors import ValidationError


class Product(BaseModel):
    id: str
    name: str
    price: Optional[float] = None
    description: Optional[str] = None
    image_urls: List[str] = Field(default_factory=list, alias="imageUrls")
    category: Optional[str] = None
    brand: Optional[str] = None
    availability: bool = False

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_document(cls, doc: dict) -> "Product":
        """Build from a raw Mongo document (ObjectId `_id` -> string `id`)."""
        data = {k: v for k, v in doc.items() if k != "_id"}
        data["id"] = str(doc["_id"])
        return cls.model_validate(data)


def _parse_price(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValidationError(f"Price must be a number, got '{raw}'.") from None
    if not math.isfinite(value):
        raise ValidationError(f"Price must be a finite number, got '{raw}'.")
    return value


def _as_text(field: str, value) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ValidationError(f"Field '{field}' must be text, a number or a boolean.")


class ProductCreate(BaseModel):
    name: str
    price: Optional[float] = None
    description: Optional[str] = None
    category: Optional[str] = None
    brand: Optional[str] = None
    availability: bool = False

    @classmethod
    def from_form(
        cls,
        *,
        name: Optional[str],
        price: Optional[str] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        brand: Optional[str] = None,
        availability: Optional[str] = None,
    ) -> "ProductCreate":
        """
        Coerce raw multipart text fields.
        - name: required, surrounding whitespace dropped, blank counts as missing
        - price: text -> float, blank -> None, anything else fails
        - availability: True only for the exact text "true"
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Product name is required.")
        return cls(
            name=name,
            price=_parse_price(price),
            description=description,
            category=category,
            brand=brand,
            availability=availability == "true",
        )

    @classmethod
    def from_json(cls, payload: dict) -> "ProductCreate":
        """
        Same coercion for a JSON object body: scalars are turned into the
        text a form would have carried (9.99 -> "9.99", true -> "true").
        """
        fields = ("name", "price", "description", "category", "brand", "availability")
        return cls.from_form(**{f: _as_text(f, payload.get(f)) for f in fields})

    def to_document(self, image_urls: List[str]) -> dict:
        return {
            "name": self.name,
            "price": self.price,
            "description": self.description,
            "imageUrls": list(image_urls),
            "category": self.category,
            "brand": self.brand,
            "availability": self.availability,
        }
