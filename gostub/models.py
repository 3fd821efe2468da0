"""Records produced by interface collection."""

from pydantic import BaseModel, ConfigDict, Field


class Param(BaseModel):
    """Three aligned projections of one parameter list."""

    model_config = ConfigDict(frozen=True)

    full_fields: str = Field("", description='Comma-joined "name type" pairs')
    names_only: str = Field("", description="Comma-joined parameter names")
    types_only: str = Field("", description="Comma-joined parameter types")


class Return(BaseModel):
    """Return signature and the matching zero values."""

    model_config = ConfigDict(frozen=True)

    signature_text: str = Field("", description="Return clause as written in Go")
    default_values: str = Field(
        "", description="Comma-joined zero values, one per result slot"
    )


class Method(BaseModel):
    """One interface method, normalized for stub generation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    param: Param
    ret: Return = Field(..., alias="return")


class Interface(BaseModel):
    """An interface declaration and its methods in source order."""

    model_config = ConfigDict(frozen=True)

    name: str
    methods: tuple[Method, ...] = ()
