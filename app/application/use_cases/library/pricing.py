"""Use case for computing discounted prices."""

import logging
import math

from app.domain.exceptions import InvalidArgumentError
from app.domain.services import LibraryManager

logger = logging.getLogger(__name__)


def calculate_discounted_price(base_price: float, discount_percent: float) -> float:
    """Return the final price after applying ``discount_percent``.

    Raises ``InvalidArgumentError`` for negative prices and when the result
    is not a finite number.
    """

    try:
        final_price = LibraryManager.calculate_price_with_discount(
            base_price, discount_percent
        )
    except InvalidArgumentError:
        logger.warning("Precio base inválido recibido: %s", base_price)
        raise

    if not math.isfinite(final_price):
        logger.warning(
            "Precio final fuera de rango para %s con %s%% de descuento",
            base_price,
            discount_percent,
        )
        raise InvalidArgumentError("El precio final no es un número finito")
    return final_price
