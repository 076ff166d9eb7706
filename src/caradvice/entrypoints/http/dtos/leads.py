from pydantic import BaseModel, ConfigDict, Field


class LeadRequestDTO(BaseModel):
    """Contact form payload. Blank required fields are rejected by the domain."""

    name: str = Field(default="", max_length=200, examples=["Juan Pérez"])
    email: str = Field(default="", max_length=320, examples=["juan@example.com"])
    phone: str | None = Field(default=None, max_length=50, examples=["351 515 8848"])
    message: str | None = Field(default=None, max_length=5000)
    source: str | None = Field(
        default=None,
        max_length=50,
        description="Form that produced the lead",
        examples=["contacto"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Juan Pérez",
                "email": "juan@example.com",
                "phone": "351 515 8848",
                "message": "Quiero más información sobre el Corolla.",
                "source": "auto-detalle",
            }
        }
    )


class LeadResponseDTO(BaseModel):
    ok: bool
