from dataclasses import dataclass
from typing import Any, Optional


OK = 'ok'
NOT_FOUND = 'not_found'
UNAVAILABLE = 'unavailable'


@dataclass(frozen=True)
class CatalogResult:
    """Outcome of a catalog operation.

    ``unavailable`` results may still carry a substitute value (fallback
    categories, the placeholder game, an empty list) so pages can render
    something. ``not_found`` never carries one.
    """
    status: str
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value):
        return cls(OK, value)

    @classmethod
    def missing(cls, error=None):
        return cls(NOT_FOUND, None, error)

    @classmethod
    def degraded(cls, error, fallback=None):
        return cls(UNAVAILABLE, fallback, error)

    @property
    def ok(self) -> bool:
        return self.status == OK

    @property
    def not_found(self) -> bool:
        return self.status == NOT_FOUND

    @property
    def unavailable(self) -> bool:
        return self.status == UNAVAILABLE

    @property
    def has_value(self) -> bool:
        return self.ok or (self.unavailable and self.value is not None)

    def unwrap_or(self, default):
        return self.value if self.has_value else default

    def to_dict(self):
        payload = {'status': self.status, 'data': self.value}
        if self.error:
            payload['error'] = self.error
        return payload
