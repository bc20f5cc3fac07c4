"""Tag use cases."""

from .get_tag import GetTagRequest, GetTagResponse, GetTagUseCase
from .list_tags import ListTagsResponse, ListTagsUseCase
from .update_tag import UpdateTagRequest, UpdateTagResponse, UpdateTagUseCase

__all__ = [
    "GetTagRequest",
    "GetTagResponse",
    "GetTagUseCase",
    "ListTagsResponse",
    "ListTagsUseCase",
    "UpdateTagRequest",
    "UpdateTagResponse",
    "UpdateTagUseCase",
]
