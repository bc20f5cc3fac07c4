"""Answer use cases."""

from .create_answer import CreateAnswerRequest, CreateAnswerResponse, CreateAnswerUseCase
from .delete_answer import DeleteAnswerRequest, DeleteAnswerResponse, DeleteAnswerUseCase
from .list_answers import ListAnswersRequest, ListAnswersResponse, ListAnswersUseCase
from .update_answer import UpdateAnswerRequest, UpdateAnswerResponse, UpdateAnswerUseCase

__all__ = [
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerResponse",
    "DeleteAnswerUseCase",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
    "UpdateAnswerRequest",
    "UpdateAnswerResponse",
    "UpdateAnswerUseCase",
]
