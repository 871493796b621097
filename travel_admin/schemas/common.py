from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case accepted on input"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """Minimal confirmation payload"""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned by every exception handler"""

    success: bool = False
    message: str
    error: str | None = None
