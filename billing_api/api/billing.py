"""Billing API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response, status

from billing_api.api.dependencies import CurrentUserId, get_billing_service
from billing_api.schemas.billing import (
    BillingCreate,
    BillingCreatedResponse,
    BillingDetailResponse,
    BillingListResponse,
    BillingResponse,
    BillingUpdate,
)
from billing_api.services.billing import BillingService

router = APIRouter(tags=["billing"])

BillingId = Annotated[UUID, Path(alias="billingId")]


@router.post(
    "/billing",
    response_model=BillingCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a billing",
)
def create_billing(
    billing_data: BillingCreate,
    user_id: CurrentUserId,
    billings: Annotated[BillingService, Depends(get_billing_service)],
):
    """Create a pending billing for the current user."""
    billing_id = billings.create(user_id, billing_data)
    return BillingCreatedResponse(billing_id=billing_id)


@router.get("/billings", response_model=BillingListResponse, summary="Get all billings by user")
def get_billings(
    user_id: CurrentUserId,
    billings: Annotated[BillingService, Depends(get_billing_service)],
):
    """Get all billings of the current user."""
    return BillingListResponse(
        billings=[BillingResponse.model_validate(b) for b in billings.list(user_id)]
    )


@router.get(
    "/billings/{billingId}",
    response_model=BillingDetailResponse,
    summary="Get billing by id",
)
def get_billing(
    billing_id: BillingId,
    user_id: CurrentUserId,
    billings: Annotated[BillingService, Depends(get_billing_service)],
):
    """Get one billing of the current user."""
    billing = billings.get(user_id, str(billing_id))
    return BillingDetailResponse(billing=BillingResponse.model_validate(billing))


@router.put(
    "/billings/{billingId}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update a billing",
)
def update_billing(
    billing_id: BillingId,
    billing_data: BillingUpdate,
    user_id: CurrentUserId,
    billings: Annotated[BillingService, Depends(get_billing_service)],
):
    """Replace a billing of the current user."""
    billings.update(user_id, str(billing_id), billing_data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/billings/{billingId}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a billing",
)
def delete_billing(
    billing_id: BillingId,
    user_id: CurrentUserId,
    billings: Annotated[BillingService, Depends(get_billing_service)],
):
    """Delete a billing of the current user."""
    billings.delete(user_id, str(billing_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
