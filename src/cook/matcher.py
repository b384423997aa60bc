from __future__ import annotations

from typing import Sequence

from .domain import Cookbook, Recipe
from .errors import RecipeNotFoundError


def accepts(recipe: Recipe, arguments: Sequence[str]) -> bool:
    if recipe.arity == len(arguments):
        return True
    return recipe.variadic and recipe.arity <= len(arguments)


def find_recipe(cookbook: Cookbook, name: str, arguments: Sequence[str]) -> Recipe:
    for recipe in cookbook:
        if recipe.name == name and accepts(recipe, arguments):
            return recipe
    raise RecipeNotFoundError(name, len(arguments))
