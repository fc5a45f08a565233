"""
Catalog routes: list, fetch, create, review and delete products.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..config.database import PRODUCTS, get_database
from ..schemas.common import DeleteResultResponse, InsertResultResponse, UpdateResultResponse
from ..schemas.product import CreateProductRequest, ReviewRequest
from ..utils.dependencies import server_error, validate_object_id
from ..utils.serializers import serialize_doc, serialize_docs

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.get("/products", response_model=List[Dict[str, Any]])
async def list_products(
    request: Request,
    page: Optional[int] = Query(None, ge=0, description="Zero-based page number, enables paging"),
    size: Optional[int] = Query(None, ge=1, le=100, description="Products per page"),
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    try:
        paging = {}
        if page is not None:
            limit = size or request.app.state.settings.default_page_size
            paging = {"skip": page * limit, "limit": limit}
        products = await db[PRODUCTS].find({}, **paging).to_list(length=None)
        return serialize_docs(products)
    except Exception as e:
        raise server_error(e, "list products")


@router.get("/products/{product_id}", response_model=Dict[str, Any])
async def get_product(product_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    object_id = validate_object_id(product_id, "product")
    try:
        product = await db[PRODUCTS].find_one({"_id": object_id})
    except Exception as e:
        raise server_error(e, "fetch product")

    if not product:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
    return serialize_doc(product)


@router.post("/products", response_model=InsertResultResponse)
async def create_product(product: CreateProductRequest, db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        result = await db[PRODUCTS].insert_one(product.model_dump())
        logger.info(f"🆕 Product {result.inserted_id} created")
        return InsertResultResponse.from_result(result)
    except Exception as e:
        raise server_error(e, "create product")


@router.put("/products/{product_id}", response_model=UpdateResultResponse)
async def add_review(
    product_id: str,
    review: ReviewRequest,
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    object_id = validate_object_id(product_id, "product")
    try:
        result = await db[PRODUCTS].update_one(
            {"_id": object_id},
            {"$push": {"reviews": review.model_dump()}},
        )
        return UpdateResultResponse.from_result(result)
    except Exception as e:
        raise server_error(e, "add review")


@router.delete("/products/{product_id}", response_model=DeleteResultResponse)
async def delete_product(product_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    object_id = validate_object_id(product_id, "product")
    try:
        result = await db[PRODUCTS].delete_one({"_id": object_id})
        return DeleteResultResponse.from_result(result)
    except Exception as e:
        raise server_error(e, "delete product")
