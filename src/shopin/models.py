"""Pydantic models for recipe data validation."""

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Recipe(BaseModel):
    """One user-entered recipe.

    Wire keys follow the stored layout (``haveIngredient``); Python code uses
    the snake_case field names. Image bytes travel as base64 in JSON.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    id: UUID = Field(default_factory=uuid4, description="Assigned at creation, never reassigned")
    title: str = Field(..., description="Recipe title")
    image: Optional[bytes] = Field(None, description="Compressed photo")
    instructions: str = Field("", description="Free-text instructions")
    ingredients: list[str] = Field(default_factory=list, description="Ingredient labels in display order")
    have_ingredient: dict[str, bool] = Field(
        default_factory=dict,
        alias="haveIngredient",
        description="Stored checked flags; carried through unchanged",
    )

    @property
    def has_image(self) -> bool:
        return bool(self.image)


RecipeList = TypeAdapter(list[Recipe])
