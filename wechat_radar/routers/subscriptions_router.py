import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, col

from wechat_radar.dependencies import get_session, require_admin
from wechat_radar.models import Subscription

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/subscriptions", tags=["subscriptions"])


class SubscriptionCreate(BaseModel):
    account_name: Optional[str] = None
    account_id: Optional[str] = None
    is_active: Optional[bool] = None


class SubscriptionUpdate(BaseModel):
    id: Optional[int] = None
    account_name: Optional[str] = None
    account_id: Optional[str] = None
    is_active: Optional[bool] = None


def _get_or_404(session: Session, subscription_id: int) -> Subscription:
    subscription = session.get(Subscription, subscription_id)
    if not subscription:
        raise HTTPException(status_code=404, detail="Subscription not found")
    return subscription


@router.get("")
def list_subscriptions(session: Session = Depends(get_session)):
    subscriptions = session.exec(
        select(Subscription).order_by(col(Subscription.created_at).desc(), col(Subscription.id).desc())
    ).all()
    return {"subscriptions": subscriptions}


@router.post("", dependencies=[Depends(require_admin)])
def create_subscription(body: SubscriptionCreate, session: Session = Depends(get_session)):
    if not body.account_name:
        raise HTTPException(status_code=400, detail="account_name is required")

    subscription = Subscription(
        account_name=body.account_name,
        account_id=body.account_id or None,
        is_active=True if body.is_active is None else body.is_active,
    )
    session.add(subscription)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise HTTPException(status_code=409, detail="Subscription already exists")

    session.refresh(subscription)
    logger.info(f"Subscribed to account '{subscription.account_name}'")
    return {"subscription": subscription}


@router.put("", dependencies=[Depends(require_admin)])
def update_subscription(body: SubscriptionUpdate, session: Session = Depends(get_session)):
    if body.id is None:
        raise HTTPException(status_code=400, detail="id is required")

    subscription = _get_or_404(session, body.id)
    if body.account_name:
        subscription.account_name = body.account_name
    # An explicit null clears the account id
    if "account_id" in body.model_fields_set:
        subscription.account_id = body.account_id
    if body.is_active is not None:
        subscription.is_active = body.is_active

    session.add(subscription)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise HTTPException(status_code=409, detail="Subscription already exists")

    session.refresh(subscription)
    return {"subscription": subscription}


@router.delete("", dependencies=[Depends(require_admin)])
def delete_subscription(id: Optional[int] = Query(None), session: Session = Depends(get_session)):
    if id is None:
        raise HTTPException(status_code=400, detail="id is required")

    subscription = _get_or_404(session, id)
    session.delete(subscription)
    session.commit()
    logger.info(f"Deleted subscription {id}")
    return {"success": True}
