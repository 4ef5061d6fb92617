import json
from uuid import UUID

import pytest
from pydantic import ValidationError

from shopin.models import Recipe, RecipeList


def test_defaults():
    recipe = Recipe(title="Toast")
    assert isinstance(recipe.id, UUID)
    assert recipe.image is None
    assert recipe.instructions == ""
    assert recipe.ingredients == []
    assert recipe.have_ingredient == {}
    assert not recipe.has_image


def test_ids_are_unique_per_instance():
    assert Recipe(title="A").id != Recipe(title="A").id


def test_recipes_are_frozen(soup):
    with pytest.raises(ValidationError):
        soup.title = "Stew"


def test_wire_layout_uses_stored_keys(bread):
    data = json.loads(RecipeList.dump_json([bread], by_alias=True))
    assert set(data[0]) == {"id", "title", "image", "instructions", "ingredients", "haveIngredient"}
    assert data[0]["id"] == str(bread.id)
    assert isinstance(data[0]["image"], str)


def test_decodes_blob_in_stored_layout():
    blob = json.dumps([
        {
            "id": "6F9619FF-8B86-D011-B42D-00C04FC964FF",
            "title": "Pancakes",
            "image": "cGhvdG8=",
            "instructions": "Mix and fry",
            "ingredients": ["Flour", "Milk", "Egg"],
            "haveIngredient": {"Milk": True},
        }
    ])
    [recipe] = RecipeList.validate_json(blob)
    assert recipe.id == UUID("6f9619ff-8b86-d011-b42d-00c04fc964ff")
    assert recipe.image == b"photo"
    assert recipe.have_ingredient == {"Milk": True}


def test_field_names_accepted_as_well_as_aliases():
    recipe = Recipe(title="Tea", have_ingredient={"Tea": False})
    assert recipe.have_ingredient == {"Tea": False}


def test_missing_title_is_rejected():
    with pytest.raises(ValidationError):
        RecipeList.validate_json('[{"instructions": "nothing"}]')
