# api/v1/router.py
from fastapi import APIRouter

from . import analysis

api_router = APIRouter()

api_router.include_router(analysis.router, tags=["Analysis"])
