"""Domain entity: a contact form submission."""

import secrets
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone


def _response_id() -> str:
    """``<epoch millis>-<7 random chars>``; sorts by creation time."""
    return f"{int(time.time() * 1000)}-{secrets.token_hex(4)[:7]}"


@dataclass
class FormResponse:
    """A visitor's message from the public contact form."""

    nombre: str
    email: str
    mensaje: str
    empresa: str | None = None
    telefono: str | None = None
    producto: str | None = None
    ip: str | None = None
    user_agent: str | None = None
    id: str = field(default_factory=_response_id)
    fecha: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @property
    def storage_key(self) -> str:
        return f"form-responses/{self.id}.json"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["userAgent"] = data.pop("user_agent")
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict) -> "FormResponse":
        return cls(
            id=data["id"],
            nombre=data.get("nombre", ""),
            email=data.get("email", ""),
            mensaje=data.get("mensaje", ""),
            empresa=data.get("empresa"),
            telefono=data.get("telefono"),
            producto=data.get("producto"),
            ip=data.get("ip"),
            user_agent=data.get("userAgent"),
            fecha=data.get("fecha", ""),
        )
