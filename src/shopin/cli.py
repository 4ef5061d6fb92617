"""Terminal front end for the recipe book using typer."""

from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.text import Text

from .errors import DecodingFailure, IncompleteRecipeError, StorageError
from .logger import get_logger
from .runtime import get_runtime_context
from .state import IngredientChecklist, RecipeForm, RecordCollection
from .storage import LoadStatus

load_dotenv()

logger = get_logger("cli")

app = typer.Typer(
    help="Shopin - a small recipe book",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)
console = Console()


def _collection() -> RecordCollection:
    """Load the collection, reporting a corrupt store to the user."""
    runtime = get_runtime_context()
    try:
        collection = runtime.collection
    except DecodingFailure as e:
        console.print(f"[red]Stored recipes could not be read: {e}[/red]")
        console.print(f"  The unreadable data was kept as: {e.quarantine_key}")
        raise typer.Exit(1)

    store = runtime.record_store
    if store.last_status == LoadStatus.CORRUPT:
        console.print("[yellow]Stored recipes could not be read; starting with an empty book.[/yellow]")
        console.print(f"  The unreadable data was kept as: {store.last_quarantine_key}")
    return collection


@app.callback()
def main(
    strict: bool = typer.Option(False, "--strict", help="Fail instead of starting empty when stored data is unreadable"),
):
    """Record recipes with their ingredients and a photo."""
    if strict:
        get_runtime_context().strict = True


@app.command("list")
def list_recipes():
    """List all recipes with their positions."""
    collection = _collection()

    if not len(collection):
        console.print("[yellow]No recipes yet.[/yellow]")
        return

    console.print("[bold]Recipes:[/bold]")
    for position, recipe in enumerate(collection):
        photo = " [dim](photo)[/dim]" if recipe.has_image else ""
        console.print(f"  {position}. {escape(recipe.title)}{photo}")


@app.command()
def show(
    position: int = typer.Argument(..., help="Recipe position as shown by 'list'"),
    check: Optional[List[int]] = typer.Option(None, "--check", "-c", help="Mark an ingredient position as at hand"),
):
    """Show a recipe with its ingredient checklist."""
    collection = _collection()
    if not 0 <= position < len(collection):
        console.print(f"[red]No recipe at position {position}.[/red]")
        raise typer.Exit(1)
    recipe = collection[position]

    checklist = IngredientChecklist(recipe)
    for item in check or []:
        try:
            checklist.toggle(item)
        except IndexError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(Text(recipe.title, style="bold"))
    console.print(Markdown(recipe.instructions))
    console.print("[bold]Ingredients:[/bold]")
    if not recipe.ingredients:
        console.print("  [dim]none[/dim]")
    for label, have in checklist.items():
        mark = "[green]✓[/green]" if have else "[dim]○[/dim]"
        console.print(f"  {mark} {escape(label)}")


@app.command()
def add(
    title: str = typer.Option("", "--title", "-t", help="Recipe title"),
    instructions: str = typer.Option("", "--instructions", "-i", help="Instructions text"),
    image: Optional[Path] = typer.Option(None, "--image", help="Photo file"),
    ingredient: Optional[List[str]] = typer.Option(None, "--ingredient", "-g", help="Ingredient, repeatable"),
):
    """Add a new recipe."""
    form = RecipeForm(title=title, instructions=instructions)
    if image is not None:
        if not image.is_file():
            console.print(f"[red]Image not found: {image}[/red]")
            raise typer.Exit(1)
        form.image = image.read_bytes()
    for item in ingredient or []:
        form.new_ingredient = item
        form.add_ingredient()

    collection = _collection()
    try:
        recipe = form.submit(collection)
    except IncompleteRecipeError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except StorageError as e:
        console.print(f"[red]Recipe not saved: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Added recipe: {escape(recipe.title)}")
    console.print(f"  Position: {len(collection) - 1}")


@app.command()
def delete(
    positions: List[int] = typer.Argument(..., help="Recipe positions to delete"),
):
    """Delete recipes by position."""
    collection = _collection()
    titles = []
    for position in sorted(set(positions)):
        if 0 <= position < len(collection):
            titles.append(collection[position].title)

    try:
        collection.delete(positions)
    except IndexError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except StorageError as e:
        console.print(f"[red]Recipes not deleted: {e}[/red]")
        raise typer.Exit(1)

    for title in titles:
        console.print(f"[green]✓[/green] Deleted recipe: {escape(title)}")


if __name__ == "__main__":
    app()
