from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from campfire.model.items import ItemId

# (item, count)
ItemStack = tuple[ItemId, int]


@dataclass(frozen=True)
class Recipe:
    """
    A crafting recipe.

    ingredients: (item, count) pairs consumed by the craft.
    products: (item, count) pairs produced by the craft.
    craft_time: Time the craft takes at a craft speed of 1.0.
    """
    ingredients: tuple[ItemStack, ...]
    products: tuple[ItemStack, ...]
    craft_time: float

    def __post_init__(self) -> None:
        if self.craft_time <= 0:
            raise ValueError(f"craft_time must be positive, got {self.craft_time}.")
        # Accept lists from callers but store immutable tuples
        object.__setattr__(self, "ingredients", tuple(tuple(i) for i in self.ingredients))
        object.__setattr__(self, "products", tuple(tuple(p) for p in self.products))

    def produces(self, item_id: ItemId) -> bool:
        return any(product == item_id for product, _ in self.products)


class RecipeSet:
    """An ordered set of crafting recipes."""

    def __init__(self, recipes: Optional[Iterable[Recipe]] = None) -> None:
        self._recipes: List[Recipe] = list(recipes) if recipes is not None else []

    def push(self, recipe: Recipe) -> None:
        self._recipes.append(recipe)

    def all(self) -> List[Recipe]:
        return list(self._recipes)

    def filter_product(self, product: ItemId) -> List[Recipe]:
        """Recipes with `product` among their products, in definition order."""
        return [recipe for recipe in self._recipes if recipe.produces(product)]

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)
