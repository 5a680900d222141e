"""Describes the recipe book domain. Centres around the `ApplicationState`.

What lives here:

- The current recipe, the active search and the bookmarks.
- The operations that change them, in `domain.services`.
- Mapping between the API's wire format and our models.

Rendering and deciding when to fetch belong to whoever calls in.

Invariants worth caring about:

- Pagination is always computed from the results we actually have.
- `Recipe.bookmarked` agrees with the bookmark collection whenever a recipe
  becomes current or bookmarks change.
- Scaling servings keeps `quantity / servings` fixed.
- Uploaded ingredients are validated before anything leaves the process.
"""
