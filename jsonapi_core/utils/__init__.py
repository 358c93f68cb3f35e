"""Query string decoding and header negotiation helpers."""

from .content_negotiation import check_accept, check_content_type, get_header
from .query_params import decode_query_params, group_query_string

__all__ = [
    "check_accept",
    "check_content_type",
    "decode_query_params",
    "get_header",
    "group_query_string",
]
