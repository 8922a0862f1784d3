"""
Core reply handling for EduGraph.

Reference resolution, id coercion and reply normalization shared by the
GraphQL resolvers.
"""

from edugraph.core.refs import (
    EmbeddedRef,
    EntityRef,
    IdRef,
    first_ref_id,
    id_param,
    ref_id,
    to_number,
    to_ref,
)
from edugraph.core.normalize import (
    ai_result_text,
    delete_succeeded,
    to_json_string,
)

__all__ = [
    # References
    "EmbeddedRef",
    "EntityRef",
    "IdRef",
    "first_ref_id",
    "id_param",
    "ref_id",
    "to_number",
    "to_ref",
    # Normalization
    "ai_result_text",
    "delete_succeeded",
    "to_json_string",
]
