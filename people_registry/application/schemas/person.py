"""Pydantic DTOs (Data Transfer Objects) for the Person feature."""

from pydantic import BaseModel, Field


class PersonWrite(BaseModel):
    """Request body for both create and update.

    Update is a full replace, so the same shape serves both: any optional
    field left out is stored as null. ``name`` is declared optional here so
    that a missing name reaches the service and fails as invalid input.
    """

    name: str | None = Field(None, examples=["Ana"])
    email: str | None = Field(None, examples=["ana@example.com"])
    age: int | None = Field(None, examples=[31])
    notes: str | None = None


class PersonResponse(BaseModel):
    """Schema returned to the client; never exposes the creation timestamp."""

    id: int
    name: str
    email: str | None = None
    age: int | None = None
    notes: str | None = None

    model_config = {"from_attributes": True}


class DeleteResponse(BaseModel):
    """Outcome of a delete: ``deleted`` is 0 when the id was already gone."""

    ok: bool = True
    deleted: int
