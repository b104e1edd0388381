"""CRUD endpoints for the product catalogue."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, status

from product_api.api.dependencies.db import get_product_store
from product_api.api.schemas.product import (
    ErrorResponse,
    MessageResponse,
    ProductPayload,
    ProductRead,
)
from product_api.core.errors import ProductNotFoundError, ProductValidationError
from product_api.db.identifiers import is_object_id
from product_api.services.product_store import WRITABLE_FIELDS, ProductStore

logger = logging.getLogger(__name__)

router = APIRouter()

STORE_FAILURE = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "model": ErrorResponse,
        "description": "Falha ao acessar o banco de dados.",
    }
}


@router.get(
    "",
    summary="Lista todos os produtos",
    response_model=list[ProductRead],
    responses={
        status.HTTP_200_OK: {"description": "A lista de todos os produtos."},
        **STORE_FAILURE,
    },
)
async def list_products(
    store: ProductStore = Depends(get_product_store),
) -> list[ProductRead]:
    """Return every stored product; an empty store yields an empty list."""
    products = store.find_all()
    return [ProductRead.model_validate(p) for p in products]


@router.get(
    "/{identifier}",
    summary="Busca um produto por ID ou Nome",
    response_model=ProductRead,
    responses={
        status.HTTP_200_OK: {"description": "Os dados do produto."},
        status.HTTP_404_NOT_FOUND: {
            "model": MessageResponse,
            "description": "Produto não encontrado.",
        },
        **STORE_FAILURE,
    },
)
async def get_product(
    identifier: str,
    store: ProductStore = Depends(get_product_store),
) -> ProductRead:
    """Resolve ``identifier`` as a product ID first, then as a product name.

    The ID interpretation is only attempted for identifier-shaped input
    (24 hex characters). When it finds nothing, or the input is not
    identifier-shaped, the raw value is matched case-insensitively
    against the full product name.
    """
    product = None
    if is_object_id(identifier):
        product = store.find_by_identifier(identifier)

    if product is None:
        product = store.find_by_name_case_insensitive(identifier)

    if product is None:
        raise ProductNotFoundError("Produto não encontrado.")

    return ProductRead.model_validate(product)


@router.post(
    "",
    summary="Cadastra um novo produto",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={
        status.HTTP_201_CREATED: {"description": "Produto cadastrado com sucesso."},
        422: {
            "model": ErrorResponse,
            "description": "Erro de validação (campos obrigatórios).",
        },
        **STORE_FAILURE,
    },
)
async def create_product(
    payload: ProductPayload,
    store: ProductStore = Depends(get_product_store),
) -> MessageResponse:
    """Persist a product from a complete body.

    Every field must be present and truthy: empty strings and a zero
    weight or price are rejected along with missing values.
    """
    fields = payload.model_dump(include=set(WRITABLE_FIELDS))
    missing = [name for name in WRITABLE_FIELDS if not fields[name]]
    if missing:
        logger.info(f"Rejected product without required fields: {missing}")
        raise ProductValidationError("Todos os campos são obrigatórios!")

    store.create(fields)
    return MessageResponse(message="Produto cadastrado com sucesso!")


@router.put(
    "/{product_id}",
    summary="Atualiza um produto pelo ID",
    responses={
        status.HTTP_200_OK: {
            "model": ProductPayload,
            "description": "Produto atualizado com sucesso.",
        },
        status.HTTP_404_NOT_FOUND: {
            "model": MessageResponse,
            "description": "Produto não encontrado.",
        },
        **STORE_FAILURE,
    },
)
async def update_product(
    product_id: str,
    payload: ProductPayload,
    store: ProductStore = Depends(get_product_store),
) -> dict[str, Any]:
    """Overwrite the fields sent in the body and echo them back.

    No required-field check is made here, unlike create. The response
    is the submitted body, not the stored document.
    """
    matched = store.update_by_identifier(
        product_id, payload.model_dump(exclude_unset=True)
    )
    if not matched:
        raise ProductNotFoundError("Produto não encontrado para atualização.")

    return payload.model_dump(by_alias=True, exclude_unset=True)


@router.delete(
    "/{product_id}",
    summary="Deleta um produto pelo ID",
    response_model=MessageResponse,
    responses={
        status.HTTP_200_OK: {"description": "Produto deletado com sucesso."},
        status.HTTP_404_NOT_FOUND: {
            "model": MessageResponse,
            "description": "Produto não encontrado.",
        },
        **STORE_FAILURE,
    },
)
async def delete_product(
    product_id: str,
    store: ProductStore = Depends(get_product_store),
) -> MessageResponse:
    """Remove a product after confirming it exists.

    The lookup and the delete are separate statements. If another
    request removes the product in between, this one still reports
    success.
    """
    if store.find_by_identifier(product_id) is None:
        raise ProductNotFoundError("Produto não encontrado para exclusão.")

    store.delete_by_identifier(product_id)
    return MessageResponse(message="Produto deletado com sucesso!")
