"""
Shipment/order routes.
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..config.database import SHIPPING, get_database
from ..schemas.common import InsertResultResponse
from ..schemas.order import CreateShipmentRequest
from ..utils.dependencies import server_error
from ..utils.serializers import serialize_docs

logger = logging.getLogger(__name__)

router = APIRouter(tags=["orders"])


@router.post("/shipping", response_model=InsertResultResponse)
async def create_shipment(shipment: CreateShipmentRequest, db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        result = await db[SHIPPING].insert_one(shipment.model_dump(exclude_unset=True))
        logger.info(f"📦 Shipment {result.inserted_id} recorded for {shipment.email}")
        return InsertResultResponse.from_result(result)
    except Exception as e:
        raise server_error(e, "create shipment")


@router.get("/order", response_model=List[Dict[str, Any]])
async def list_orders(db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        orders = await db[SHIPPING].find({}).to_list(length=None)
        return serialize_docs(orders)
    except Exception as e:
        raise server_error(e, "list orders")


@router.get("/order/{email}", response_model=List[Dict[str, Any]])
async def list_user_orders(email: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        orders = await db[SHIPPING].find({"email": email}).to_list(length=None)
        return serialize_docs(orders)
    except Exception as e:
        raise server_error(e, "list orders")
