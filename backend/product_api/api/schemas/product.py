"""Pydantic models describing Product payloads.

Python attribute names are English; the JSON keys keep the API's
Portuguese vocabulary through field aliases.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer

PRODUCT_EXAMPLE = {
    "nome": "Smartphone Modelo X",
    "descricao": "Um smartphone com câmera de 108MP.",
    "cor": "Preto Grafite",
    "peso": 0.180,
    "tipo": "Eletrônico",
    "preco": 2999.90,
}


class ProductPayload(BaseModel):
    """Body accepted by create and update.

    Every field is optional at the schema level: create checks presence
    itself so that a missing field answers with the API's own message,
    and update accepts whatever subset the client sends.
    """

    name: str | None = Field(None, alias="nome", description="Nome do produto.")
    description: str | None = Field(
        None, alias="descricao", description="Descrição detalhada do produto."
    )
    color: str | None = Field(None, alias="cor", description="Cor do produto.")
    weight: float | None = Field(None, alias="peso", description="Peso do produto em kg.")
    category: str | None = Field(
        None, alias="tipo", description="Categoria ou tipo do produto."
    )
    price: float | None = Field(None, alias="preco", description="Preço do produto.")

    model_config = ConfigDict(
        populate_by_name=True,
        allow_inf_nan=False,
        json_schema_extra={"example": PRODUCT_EXAMPLE},
    )


class ProductRead(BaseModel):
    id: str = Field(
        ..., alias="_id", description="O ID gerado automaticamente do produto."
    )
    name: str = Field(..., alias="nome", description="Nome do produto.")
    description: str = Field(
        ..., alias="descricao", description="Descrição detalhada do produto."
    )
    color: str = Field(..., alias="cor", description="Cor do produto.")
    weight: float = Field(..., alias="peso", description="Peso do produto em kg.")
    category: str = Field(..., alias="tipo", description="Categoria ou tipo do produto.")
    price: float = Field(..., alias="preco", description="Preço do produto.")
    registered_at: datetime | None = Field(
        None,
        alias="dataCadastro",
        description="A data em que o produto foi cadastrado.",
    )

    @field_serializer("registered_at")
    def serialize_registered_at(self, value: datetime | None) -> str | None:
        """Convert datetime to ISO format string."""
        if value is None:
            return None
        return value.isoformat()

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
