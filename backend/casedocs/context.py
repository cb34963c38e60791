"""
Name: Request Context (ContextVars)

Responsibilities:
  - Carry the correlation id and route of the current request
  - Carry the document page being viewed once the page route has bound it
  - Expose the bound values as a flat dict for log enrichment

Collaborators:
  - middleware.py: bind_request at request start, clear_context at the end
  - routes.py: bind_page for page highlight requests
  - logger.py: JSONFormatter merges get_context_dict() into every record

Constraints:
  - Values are strings; the empty string means "not bound"
"""

from contextvars import ContextVar
from typing import Dict, Tuple

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# R: "<METHOD> <path>", e.g. "GET /v1/search"
route_var: ContextVar[str] = ContextVar("route", default="")

document_id_var: ContextVar[str] = ContextVar("document_id", default="")
page_number_var: ContextVar[str] = ContextVar("page_number", default="")
align_var: ContextVar[str] = ContextVar("align", default="")

# R: Log field name -> context var, in output order
_LOG_FIELDS: Tuple[Tuple[str, ContextVar[str]], ...] = (
    ("request_id", request_id_var),
    ("route", route_var),
    ("document_id", document_id_var),
    ("page_number", page_number_var),
    ("align", align_var),
)


def bind_request(request_id: str, method: str, path: str) -> None:
    request_id_var.set(request_id)
    route_var.set(f"{method} {path}")


def bind_page(document_id: str, page_number: int, align: str) -> None:
    """R: Attach the viewed page to every log line of the current request."""
    document_id_var.set(str(document_id))
    page_number_var.set(str(page_number))
    align_var.set(str(align))


def get_context_dict() -> Dict[str, str]:
    """R: Bound context values only; unbound fields are left out."""
    return {name: var.get() for name, var in _LOG_FIELDS if var.get()}


def clear_context() -> None:
    for _, var in _LOG_FIELDS:
        var.set("")
