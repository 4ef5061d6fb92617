import pytest

from shopin.errors import IncompleteRecipeError
from shopin.state.form import RecipeForm


def test_empty_form_is_invalid():
    form = RecipeForm()
    assert not form.is_valid
    assert form.missing_fields() == ["title", "instructions", "image"]


def test_title_and_instructions_make_form_valid():
    form = RecipeForm(title="Soup", instructions="Boil")
    assert form.is_valid


def test_add_ingredient_moves_pending_entry():
    form = RecipeForm()
    form.new_ingredient = "Water"
    assert form.add_ingredient()
    assert form.ingredients == ["Water"]
    assert form.new_ingredient == ""


def test_add_empty_ingredient_is_ignored():
    form = RecipeForm()
    assert not form.add_ingredient()
    assert form.ingredients == []


def test_duplicate_ingredients_allowed():
    form = RecipeForm(ingredients=["Salt"])
    form.new_ingredient = "Salt"
    form.add_ingredient()
    assert form.ingredients == ["Salt", "Salt"]


def test_remove_ingredients_by_position():
    form = RecipeForm(ingredients=["Water", "Salt", "Pepper", "Leek"])
    form.remove_ingredients({1, 3})
    assert form.ingredients == ["Water", "Pepper"]


def test_remove_ingredient_out_of_range():
    form = RecipeForm(ingredients=["Water"])
    with pytest.raises(IndexError):
        form.remove_ingredients({2})
    assert form.ingredients == ["Water"]


def test_build_requires_image():
    form = RecipeForm(title="Soup", instructions="Boil")
    with pytest.raises(IncompleteRecipeError) as excinfo:
        form.build()
    assert excinfo.value.missing == ["image"]


def test_clear_image():
    form = RecipeForm(title="Soup", instructions="Boil", image=b"jpeg")
    form.clear_image()
    assert form.missing_fields() == ["image"]


def test_build_copies_form_values():
    form = RecipeForm(title="Soup", instructions="Boil", image=b"jpeg", ingredients=["Water"])
    recipe = form.build()
    form.ingredients.append("Salt")
    assert recipe.title == "Soup"
    assert recipe.image == b"jpeg"
    assert recipe.ingredients == ["Water"]


def test_submit_adds_to_collection(collection, store):
    form = RecipeForm(title="Soup", instructions="Boil", image=b"jpeg", ingredients=["Water", "Salt"])
    recipe = form.submit(collection)
    assert collection.recipes == (recipe,)
    assert store.load() == [recipe]


def test_incomplete_submit_leaves_collection_alone(collection):
    with pytest.raises(IncompleteRecipeError):
        RecipeForm(title="Soup").submit(collection)
    assert len(collection) == 0
