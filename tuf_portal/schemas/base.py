from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Wire models speak camelCase (``courseCode``) while Python code uses snake_case.

    Either spelling is accepted on input; output is always camelCase.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CamelInput(CamelModel):
    """Request bodies: surrounding whitespace is stripped before length checks."""

    model_config = ConfigDict(str_strip_whitespace=True)
