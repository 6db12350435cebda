"""Pytest configuration and shared fixtures."""

import asyncio

import httpx
import pytest

BASE_URL = "https://mealdb.test/api/json/v1/1"


def make_meal(meal_id: str, **overrides) -> dict:
    """Build a lookup.php meal record."""
    meal = {
        "idMeal": meal_id,
        "strMeal": f"Meal {meal_id}",
        "strMealThumb": f"https://img.test/{meal_id}.jpg",
        "strInstructions": "Boil water. Add pasta. Stir occasionally. Serve hot.",
        "strCategory": "Pasta",
        "strArea": "Italian",
        "strTags": None,
        "strYoutube": "",
        "strIngredient1": "Spaghetti",
    }
    meal.update(overrides)
    return meal


class FakeMealDB:
    """In-memory stand-in for the filter.php / lookup.php endpoints."""

    def __init__(self):
        self.filter_payload = {"meals": None}
        self.filter_error = None
        self.details = {}
        self.lookup_payloads = {}
        self.failing_ids = set()
        self.delays = {}
        self.requests = []
        self.in_flight = 0
        self.max_in_flight = 0

    def add_meals(self, count: int) -> list[str]:
        ids = [str(52700 + i) for i in range(count)]
        self.filter_payload = {
            "meals": [
                {"idMeal": meal_id, "strMeal": f"Meal {meal_id}", "strMealThumb": f"https://img.test/{meal_id}.jpg"}
                for meal_id in ids
            ]
        }
        for meal_id in ids:
            self.details[meal_id] = make_meal(meal_id)
        return ids

    @property
    def filter_queries(self) -> list[str]:
        return [r.url.params["i"] for r in self.requests if r.url.path.endswith("/filter.php")]

    @property
    def lookup_ids(self) -> list[str]:
        return [r.url.params["i"] for r in self.requests if r.url.path.endswith("/lookup.php")]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path.endswith("/filter.php"):
            if self.filter_error is not None:
                raise self.filter_error
            if isinstance(self.filter_payload, httpx.Response):
                return self.filter_payload
            return httpx.Response(200, json=self.filter_payload)

        meal_id = request.url.params["i"]
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(meal_id, 0.001))
        finally:
            self.in_flight -= 1

        if meal_id in self.failing_ids:
            raise httpx.ConnectError("connection refused", request=request)
        if meal_id in self.lookup_payloads:
            return self.lookup_payloads[meal_id]
        return httpx.Response(200, json={"meals": [self.details[meal_id]]})


@pytest.fixture
def fake_mealdb():
    return FakeMealDB()


@pytest.fixture
def mealdb_client(fake_mealdb):
    """HTTP client routed to the fake recipe directory."""
    return httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(fake_mealdb.handler))


@pytest.fixture
def meal_factory():
    return make_meal
