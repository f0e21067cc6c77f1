from app.resources.factory import RecordFactory, create_record
from app.resources.models import ItemKind, MetadataRecord
from app.resources.registry import Registry
from app.resources.rules import RecordRules

__all__ = [
    "ItemKind",
    "MetadataRecord",
    "RecordFactory",
    "RecordRules",
    "Registry",
    "create_record",
]
