# crm_mock_api/models/dataset.py
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, Tuple


# --- opaque records: whatever fields the bundled document defines ---

class Customer(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)


class Product(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)


# --- sections ---

class CrmSection(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    customers: Tuple[Customer, ...] = ()

    @field_validator("customers", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return () if value is None else value


class InventorySection(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    products: Tuple[Product, ...] = ()

    @field_validator("products", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return () if value is None else value


class DatasetDocument(BaseModel):
    """
    Root of the bundled fixture. Both sections are optional; a missing
    section is a valid document, not a load failure.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    crm: Optional[CrmSection] = None
    inventory: Optional[InventorySection] = None
