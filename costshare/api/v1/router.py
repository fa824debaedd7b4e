"""Main v1 router aggregator"""
from fastapi import APIRouter

from costshare.api.v1 import ledger, splits

# Create v1 router
api_router = APIRouter()

api_router.include_router(ledger.router)
api_router.include_router(splits.router)
