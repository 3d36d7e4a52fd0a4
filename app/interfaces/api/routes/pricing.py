from fastapi import APIRouter, HTTPException, status

from app.application.use_cases.library import calculate_discounted_price
from app.domain.exceptions import InvalidArgumentError
from app.interfaces.api.schemas import DiscountRequest, DiscountResponse

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.post("/discount", response_model=DiscountResponse)
def apply_discount(payload: DiscountRequest):
    """Calcula el precio final aplicando el porcentaje de descuento."""

    try:
        final_price = calculate_discounted_price(payload.base_price, payload.discount_percent)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return DiscountResponse(
        base_price=payload.base_price,
        discount_percent=payload.discount_percent,
        final_price=final_price,
    )
