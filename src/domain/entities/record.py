from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, Dict


def alias(name: str) -> Dict[str, str]:
    """Field metadata naming the camelCase key used on the wire."""
    return {"alias": name}


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Record:
    """Base for records whose fields can be shallow-merged from a JSON body.

    Keys matching a declared field's wire name (its alias if it has one,
    otherwise the attribute name) are assigned to that field. Anything else
    is kept in ``extra`` and echoed back by ``to_dict``. No type checking is done on merged values.
    """
    extra: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def _key_map(cls) -> Dict[str, str]:
        mapping = {}
        for f in fields(cls):
            if f.name == "extra":
                continue
            mapping[f.metadata.get("alias", f.name)] = f.name
        return mapping

    def merge(self, changes: Dict[str, Any]):
        key_map = self._key_map()
        for key, value in changes.items():
            attr = key_map.get(key)
            if attr is not None:
                setattr(self, attr, value)
            else:
                self.extra[key] = value

    def to_dict(self) -> Dict[str, Any]:
        data = {}
        for f in fields(self):
            if f.name == "extra":
                continue
            data[f.metadata.get("alias", f.name)] = getattr(self, f.name)
        data.update(self.extra)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], **defaults):
        record = cls(**defaults)
        record.merge(data)
        return record
