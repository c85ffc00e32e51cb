from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def to_camel_custom(snake: str) -> str:
    """Convert a snake_case string to camelCase.

    Args:
        snake: The string to convert.

    Returns:
        The converted camelCase string.
    """
    # Trailing underscores are used for names that shadow builtins.
    if snake.endswith('_'):
        snake = snake.rstrip('_')
    return to_camel(snake)


class WebContextBaseModel(BaseModel):
    """Base class for the value objects exchanged through a web context.

    Fields can be populated by their snake_case name or by their camelCase
    alias, and are serialized by alias so that the JSON shape matches the
    cookie and session attribute names used by browser-facing code.
    """

    model_config = ConfigDict(
        # SEE: https://docs.pydantic.dev/latest/api/config/#pydantic.config.ConfigDict.populate_by_name
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
        validate_assignment=True,
        alias_generator=to_camel_custom,
    )
