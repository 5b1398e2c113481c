"""Integration test: HTTP search API over an in-memory roster."""

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.core.config import SearchDefaults, Settings
from src.core.dataset import load_advocates
from src.core.schemas import Advocate


def _advocate(
    first_name: str,
    *,
    city: str = "Austin",
    degree: str = "MD",
    specialties: list[str] | None = None,
    years: int = 5,
) -> Advocate:
    return Advocate(
        first_name=first_name,
        last_name="Doe",
        city=city,
        degree=degree,
        specialties=specialties or ["Bipolar"],
        years_of_experience=years,
        phone_number=5551234567,
    )


@pytest.fixture
def roster() -> list[Advocate]:
    return [
        _advocate("Jane", city="Austin", degree="MD", specialties=["Bipolar"], years=5),
        _advocate("John", city="New York", degree="PhD", specialties=["Bipolar", "LGBTQ"], years=10),
        _advocate("Alice", city="Chicago", degree="MSW", specialties=["Coaching"], years=1),
    ]


@pytest.fixture
def client(roster: list[Advocate]) -> TestClient:
    return TestClient(create_app(roster))


# ---------------------------------------------------------------------------
# POST /api/advocates
# ---------------------------------------------------------------------------


class TestPostSearch:
    def test_empty_body_object_returns_first_page(self, client: TestClient) -> None:
        response = client.post("/api/advocates", json={})
        assert response.status_code == 200
        body = response.json()
        assert [a["firstName"] for a in body["data"]] == ["Jane", "John", "Alice"]
        assert body["pagination"] == {
            "currentPage": 1,
            "totalPages": 1,
            "totalCount": 3,
            "limit": 10,
            "hasNextPage": False,
            "hasPreviousPage": False,
        }

    def test_record_wire_fields(self, client: TestClient) -> None:
        body = client.post("/api/advocates", json={"searchTerm": "jane"}).json()
        assert body["data"] == [{
            "firstName": "Jane",
            "lastName": "Doe",
            "city": "Austin",
            "degree": "MD",
            "specialties": ["Bipolar"],
            "yearsOfExperience": 5,
            "phoneNumber": 5551234567,
        }]

    def test_structured_filters(self, client: TestClient) -> None:
        body = client.post(
            "/api/advocates",
            json={"specialties": ["bipolar", "lgbtq"], "experienceLevel": "expert"},
        ).json()
        assert [a["firstName"] for a in body["data"]] == ["John"]

    def test_paging(self, client: TestClient) -> None:
        body = client.post("/api/advocates", json={"page": 2, "limit": 2}).json()
        assert [a["firstName"] for a in body["data"]] == ["Alice"]
        assert body["pagination"]["totalPages"] == 2
        assert body["pagination"]["hasNextPage"] is False
        assert body["pagination"]["hasPreviousPage"] is True

    def test_out_of_range_page_is_not_an_error(self, client: TestClient) -> None:
        response = client.post("/api/advocates", json={"page": 7})
        assert response.status_code == 200
        body = response.json()
        assert body["data"] == []
        assert body["pagination"]["currentPage"] == 7
        assert body["pagination"]["totalCount"] == 3

    def test_no_matches(self, client: TestClient) -> None:
        body = client.post("/api/advocates", json={"city": "Boston"}).json()
        assert body["data"] == []
        assert body["pagination"]["totalPages"] == 0
        assert body["pagination"]["hasPreviousPage"] is False

    def test_non_positive_limit_uses_default(self, client: TestClient) -> None:
        body = client.post("/api/advocates", json={"limit": 0}).json()
        assert body["pagination"]["limit"] == 10

    def test_configured_default_limit(self, roster: list[Advocate]) -> None:
        settings = Settings(search=SearchDefaults(default_limit=2))
        client = TestClient(create_app(roster, settings))
        body = client.post("/api/advocates", json={}).json()
        assert len(body["data"]) == 2
        assert body["pagination"]["limit"] == 2
        assert body["pagination"]["hasNextPage"] is True

    def test_unknown_experience_level_returns_everyone(self, client: TestClient) -> None:
        response = client.post("/api/advocates", json={"experienceLevel": "veteran"})
        assert response.status_code == 200
        body = response.json()
        assert [a["firstName"] for a in body["data"]] == ["Jane", "John", "Alice"]
        assert body["pagination"]["totalCount"] == 3

    @pytest.mark.parametrize(
        "content",
        [b"", b"{not json", b"[1, 2]", b'"jane"', b'{"page": "first"}'],
    )
    def test_malformed_body_is_client_error(self, client: TestClient, content: bytes) -> None:
        response = client.post(
            "/api/advocates",
            content=content,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}


# ---------------------------------------------------------------------------
# GET /api/advocates
# ---------------------------------------------------------------------------


class TestGetSearch:
    def test_no_params_lists_all(self, client: TestClient) -> None:
        body = client.get("/api/advocates").json()
        assert body["pagination"]["totalCount"] == 3

    def test_query_params(self, client: TestClient) -> None:
        response = client.get(
            "/api/advocates",
            params={"searchTerm": "york", "specialties": ["bipolar"], "limit": "1"},
        )
        assert response.status_code == 200
        body = response.json()
        assert [a["firstName"] for a in body["data"]] == ["John"]
        assert body["pagination"]["limit"] == 1

    def test_repeated_specialties(self, client: TestClient) -> None:
        response = client.get(
            "/api/advocates",
            params=[("specialties", "bipolar"), ("specialties", "lgbtq")],
        )
        assert [a["firstName"] for a in response.json()["data"]] == ["John"]

    def test_invalid_param_is_client_error(self, client: TestClient) -> None:
        response = client.get("/api/advocates", params={"page": "two"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}


class TestSeedRoster:
    def test_serves_shipped_roster(self) -> None:
        client = TestClient(create_app(load_advocates("data/advocates.json")))
        body = client.post("/api/advocates", json={"page": 2}).json()
        assert body["pagination"]["totalCount"] == 15
        assert body["pagination"]["totalPages"] == 2
        assert len(body["data"]) == 5

    def test_roster_shared_read_only(self, roster: list[Advocate]) -> None:
        app = create_app(roster)
        assert isinstance(app.state.advocates, tuple)
        roster.append(_advocate("Late"))
        body = TestClient(app).post("/api/advocates", json={}).json()
        assert body["pagination"]["totalCount"] == 3
