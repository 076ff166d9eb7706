from __future__ import annotations

from dataclasses import dataclass

from caradvice.domain.errors import ValidationError


@dataclass(frozen=True, slots=True)
class Lead:
    """Contact request captured by the site's lead forms."""

    name: str
    email: str
    phone: str | None = None
    message: str | None = None
    source: str | None = None  # Form that produced the lead (e.g. "contacto", "auto-detalle")

    def validate(self) -> None:
        """
        Validate required contact fields.

        Raises:
            ValidationError: With one entry per missing field
        """
        errors: list[dict[str, str]] = []

        if not self.name.strip():
            errors.append(
                {"field": "name", "message": "Nombre es obligatorio.", "code": "REQUIRED"}
            )
        if not self.email.strip():
            errors.append(
                {"field": "email", "message": "Email es obligatorio.", "code": "REQUIRED"}
            )

        if errors:
            raise ValidationError("Nombre y email son obligatorios.", errors=errors)
