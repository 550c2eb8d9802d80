"""JSON file persistence for the cart between sessions."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from shopfront.shared.domain.cart import Cart, CartLoadError
from .records import cart_from_records, cart_to_records

logger = logging.getLogger(__name__)


class CartRepository:
    """Saves and restores a cart as a JSON array of product records."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def save(self, cart: Cart) -> None:
        """Write the cart atomically (temp file + replace)."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(cart_to_records(cart), f, indent=2)
        tmp_path.replace(self.path)
        logger.info(f"Saved cart with {cart.count()} item(s) to {self.path}")

    def load(self) -> Cart:
        """Read the saved cart; a missing file yields an empty cart.

        Raises:
            CartLoadError: If the file is unreadable, not valid JSON or holds invalid records
        """
        if not self.path.exists():
            logger.debug(f"No saved cart at {self.path}")
            return Cart()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CartLoadError(f"{self.path} is not valid JSON: {e}") from e
        except OSError as e:
            raise CartLoadError(f"cannot read {self.path}: {e}") from e

        cart = cart_from_records(data)
        logger.info(f"Restored cart with {cart.count()} item(s) from {self.path}")
        return cart

    def delete(self) -> None:
        self.path.unlink(missing_ok=True)
