"""Index warmer actions."""

from .delete_warmer import SPEC as DELETE_WARMER
from .get_warmer import SPEC as GET_WARMER
from .put_warmer import SPEC as PUT_WARMER

__all__ = ["PUT_WARMER", "GET_WARMER", "DELETE_WARMER"]
