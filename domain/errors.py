class RecipeBookError(Exception):
    pass


class NetworkError(RecipeBookError):
    """Transport failure or a non-success status from the recipe API."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ShapeError(RecipeBookError):
    """The API answered, but not with the fields we expect."""


class ValidationError(RecipeBookError):
    pass


class NotFoundError(RecipeBookError):
    pass


class StorageError(RecipeBookError):
    pass


WRONG_INGREDIENT_FORMAT = "Wrong ingredient format! Please use correct format!"
