"""
Base class of the Jira response models.

Models are built from one decoded JSON response, rendered to text and
dropped; nothing is cached or written back.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Pydantic model built from a Jira REST payload.

    Implementations tolerate missing keys, nulls and non-dict input by
    falling back to field defaults, so rendering can show placeholders
    instead of failing.
    """

    @classmethod
    def from_api_response(
        cls: type[ModelT], data: dict[str, Any], **kwargs: Any
    ) -> ModelT:
        """
        Build an instance from a decoded API payload.

        Args:
            data: The decoded JSON object
            **kwargs: Extra context for subclasses that need it

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not override this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")
