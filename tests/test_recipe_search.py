"""RecipeFinder strategies against a fake store that records its calls."""

import pytest
from sqlalchemy.dialects import postgresql

from recipe_finder.errors import QueryFailedError
from recipe_finder.matching.scoring import MatchScorer
from recipe_finder.schemas import RecipeFilters
from recipe_finder.services.recipe_search import RecipeFinder
from tests.factories import fake_recipe

SOUP = fake_recipe(1, ["2 tbsp olive oil", "1 onion, diced", "salt"], vegan=True, categories=["soup"])
SALAD = fake_recipe(2, ["4 large tomatoes", "1 red onion (thinly sliced)", "2 tbsp olive oil", "salt", "pepper"], vegan=True, categories=["salad"])
BREAD = fake_recipe(3, ["1 baguette", "3 garlic cloves, minced", "50g butter"], categories=["side"])
MYSTERY = fake_recipe(4, ["2 tbsp", "1 cup"])
OIL_ONLY = fake_recipe(5, ["oil"])


class FakeStore:
    def __init__(self, recipes=(), relevance_rows=(), error=None):
        self.recipes = list(recipes)
        self.relevance_rows = list(relevance_rows)
        self.error = error
        self.calls = []

    def find_many(self, predicate, limit=None):
        self.calls.append(("find_many", predicate, limit))
        if self.error:
            raise self.error
        return list(self.recipes)

    def text_relevance_search(self, query, limit):
        self.calls.append(("text_relevance_search", query, limit))
        if self.error:
            raise self.error
        return list(self.relevance_rows)[:limit]


def _sql(predicate):
    return str(predicate.compile(dialect=postgresql.dialect()))


@pytest.fixture
def store():
    return FakeStore([SOUP, SALAD, BREAD, MYSTERY, OIL_ONLY])


@pytest.fixture
def finder(store):
    return RecipeFinder(store, MatchScorer(), relevance_limit=100, ingredient_name_limit=50, quick_default_limit=10)


# --- Empty inputs ---

@pytest.mark.parametrize(
    "call",
    [
        lambda f: f.find_by_categories([]),
        lambda f: f.exact_ingredients([]),
        lambda f: f.exact_ingredients(["", "  "]),
        lambda f: f.match_by_percentage([], 50),
        lambda f: f.smart_match([], 50),
        lambda f: f.search_by_ingredient_names([]),
        lambda f: f.full_text_search([]),
        lambda f: f.quick_suggestions([], 5),
    ],
)
def test_empty_input_short_circuits_without_store_call(finder, store, call):
    assert call(finder) == []
    assert store.calls == []


# --- Strategies ---

def test_match_by_percentage_scenario_full_match(finder):
    results = finder.match_by_percentage(["olive oil", "onion", "salt", "pepper"], 100)
    ids = [r.recipe.id for r in results]
    assert 1 in ids
    soup = next(r for r in results if r.recipe.id == 1)
    assert soup.match_percentage == 100
    assert soup.missing_ingredients == []


def test_match_by_percentage_scenario_partial(finder):
    results = finder.match_by_percentage(["salt"], 30)
    soup = next(r for r in results if r.recipe.id == 1)
    assert soup.match_percentage == 33
    assert soup.missing_ingredients == ["olive oil", "onion"]
    assert all(r.match_percentage >= 30 for r in results)


def test_match_by_percentage_is_bidirectional(finder):
    # "olive oil" covers the bare "oil" requirement only in two-way matching
    results = finder.match_by_percentage(["olive oil"], 100)
    assert [r.recipe.id for r in results] == [5]


def test_match_by_percentage_zero_threshold_keeps_empty_recipes(finder):
    results = finder.match_by_percentage(["salt"], 0)
    assert {r.recipe.id for r in results} == {1, 2, 3, 4, 5}
    assert results[-1].match_percentage == 0


def test_match_results_sorted_with_stable_ties(finder):
    results = finder.match_by_percentage(["salt", "olive oil"], 0)
    pcts = [r.match_percentage for r in results]
    assert pcts == sorted(pcts, reverse=True)
    zero_ids = [r.recipe.id for r in results if r.match_percentage == 0]
    assert zero_ids == [3, 4]


def test_exact_ingredients_requires_every_ingredient(finder):
    results = finder.exact_ingredients(["olive oil", "onion", "salt"])
    assert [r.recipe.id for r in results] == [1]
    assert results[0].match_percentage == 100


def test_exact_ingredients_is_one_way(finder):
    assert finder.exact_ingredients(["olive oil"]) == []


def test_exact_ingredients_never_returns_unparseable_recipe(finder):
    results = finder.exact_ingredients(["tbsp", "cup", "salt"])
    assert 4 not in [r.recipe.id for r in results]


def test_exact_is_subset_of_percentage_at_100(finder):
    for available in (["olive oil", "onion", "salt"], ["oil"], ["baguette", "garlic", "butter"]):
        exact = {r.recipe.id for r in finder.exact_ingredients(available)}
        at_100 = {r.recipe.id for r in finder.match_by_percentage(available, 100)}
        assert exact <= at_100


def test_smart_match_uses_synonyms(finder):
    results = finder.smart_match(["tomato", "onion", "olive oil", "salt", "pepper"], 100)
    assert [r.recipe.id for r in results] == [1, 2]


def test_smart_match_garlic_alias(finder):
    results = finder.smart_match(["garlic", "baguette", "butter"], 100)
    assert [r.recipe.id for r in results] == [3]


def test_filters_pushed_into_candidate_query(finder, store):
    finder.match_by_percentage(["salt"], 0, RecipeFilters(vegan=True, categories=["soup"]))
    (name, predicate, limit) = store.calls[0]
    assert name == "find_many"
    sql = _sql(predicate)
    assert "recipes.vegan = true" in sql
    assert "recipes.categories &&" in sql
    assert limit is None


def test_find_by_categories_predicate(finder, store):
    finder.find_by_categories(["soup", "salad"], RecipeFilters(vegan=True))
    sql = _sql(store.calls[0][1])
    assert "recipes.vegan = true AND recipes.categories &&" in sql


def test_search_by_ingredient_names_ands_one_condition_per_name(finder, store):
    finder.search_by_ingredient_names(["garlic", " ", "butter"], RecipeFilters(vegan=False))
    (_, predicate, limit) = store.calls[0]
    sql = _sql(predicate)
    assert sql.count("ILIKE") == 2
    assert "recipes.vegan = false" in sql
    assert limit == 50


def test_full_text_search_post_filters_after_cap():
    rows = [(SOUP, 0.9), (BREAD, 0.5), (SALAD, 0.4)]
    store = FakeStore(relevance_rows=rows)
    finder = RecipeFinder(store, relevance_limit=2)
    hits = finder.full_text_search(["onion", "olive oil"], RecipeFilters(vegan=True))
    assert store.calls == [("text_relevance_search", '"onion" or "olive oil"', 2)]
    # SALAD is vegan too, but the cap dropped it before filtering
    assert [(h.recipe.id, h.relevance_score) for h in hits] == [(1, 0.9)]


def test_full_text_search_without_cap_pressure_keeps_all_filtered():
    rows = [(SOUP, 0.9), (BREAD, 0.5), (SALAD, 0.4)]
    hits = RecipeFinder(FakeStore(relevance_rows=rows)).full_text_search(["onion"], RecipeFilters(vegan=True))
    assert [h.recipe.id for h in hits] == [1, 2]


def test_full_text_search_without_filters_keeps_store_order():
    store = FakeStore(relevance_rows=[(BREAD, 0.7), (SOUP, 0.2)])
    hits = RecipeFinder(store).full_text_search(["garlic"])
    assert [h.recipe.id for h in hits] == [3, 1]


def test_quick_suggestions_orders_by_ingredient_count(finder):
    results = finder.quick_suggestions(["salt", "oil"])
    assert [r.recipe.id for r in results] == [5, 1, 2]


def test_quick_suggestions_limit(finder):
    assert [r.recipe.id for r in finder.quick_suggestions(["salt", "oil"], 2)] == [5, 1]


def test_quick_suggestions_default_limit():
    store = FakeStore([fake_recipe(i, ["salt"]) for i in range(20)])
    finder = RecipeFinder(store, quick_default_limit=10)
    assert len(finder.quick_suggestions(["salt"])) == 10


def test_store_failure_propagates():
    failing = FakeStore(error=QueryFailedError("find_many", "connection refused"))
    finder = RecipeFinder(failing)
    with pytest.raises(QueryFailedError):
        finder.match_by_percentage(["salt"], 50)
