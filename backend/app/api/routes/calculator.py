from __future__ import annotations

from fastapi import APIRouter

from app.services.calculator import calculate

router = APIRouter(prefix="/calculator", tags=["calculator"])


@router.get("/{operation}", summary="Apply an arithmetic operation to a and b")
async def calculate_route(operation: str, a: float, b: float) -> dict:
    result = calculate(operation, a, b)
    return {
        "success": True,
        "data": {"operation": operation, "a": a, "b": b, "result": result},
    }
