"""AVL trees for restaurant records, ratings, sales and costs, with monthly cuisine winners."""

__version__ = "0.1.0"

__all__ = ["avl", "models", "ratings", "sales", "costs", "restaurants", "cuisine"]