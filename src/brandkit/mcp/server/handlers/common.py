"""Common helpers for MCP handler functions.

- Error-as-JSON wrapping
- Token document loading from the configured data directory
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from brandkit.core.ir.tokens import TokenDocument
from brandkit.core.loader import load_token_document

from ..state import get_data_dir

logger = logging.getLogger("brandkit.mcp")


def load_document() -> TokenDocument:
    """Load the token document for this request."""
    return load_token_document(get_data_dir())


def to_json(payload: Any) -> str:
    """Serialize a tool payload the way every tool returns JSON."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def handler_error_json(
    fn: Callable[..., str],
) -> Callable[..., str]:
    """Decorator that wraps handler exceptions into JSON error responses.

    Catches Exception, logs it, and returns ``{"error": "<message>"}``.
    """

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            logger.debug("Handler %s failed: %s", fn.__name__, e, exc_info=True)
            return json.dumps({"error": str(e)}, indent=2)

    return wrapper
