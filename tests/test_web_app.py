import pytest

from mortgage_calc_web.app import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def _form(**overrides):
    data = {"principal": "1000000", "interest_rate": "8", "loan_term": "20", "mortgage_type": "fixed"}
    data.update(overrides)
    return data


class TestIndex:
    def test_placeholder_without_inputs(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert b"Enter your loan details" in response.data

    def test_post_renders_results(self, client):
        response = client.post("/", data=_form())
        body = response.get_data(as_text=True)
        assert "Your Monthly Payment" in body
        assert "₹8,364" in body

    def test_invalid_post_shows_placeholder(self, client):
        response = client.post("/", data=_form(loan_term="0"))
        assert response.status_code == 200
        assert b"Enter your loan details" in response.data

    def test_inputs_restored_on_next_visit(self, client):
        client.post("/", data=_form())
        body = client.get("/").get_data(as_text=True)
        assert 'value="1000000"' in body
        assert "₹8,364" in body

    def test_reset(self, client):
        client.post("/", data=_form())
        client.post("/", data={"action": "reset"})
        assert client.get("/api/state").get_json()["principal"] == ""

    def test_currency_selection(self, client):
        body = client.post("/", data=_form(currency="USD")).get_data(as_text=True)
        assert "$8,364" in body


class TestTheme:
    def test_toggle_redirects_and_persists(self, client):
        response = client.post("/theme")
        assert response.status_code == 302
        assert client.get("/api/state").get_json()["theme"] == "dark"
        assert b'data-theme="dark"' in client.get("/").data

    def test_theme_survives_reset(self, client):
        client.post("/theme")
        client.post("/", data={"action": "reset"})
        assert client.get("/api/state").get_json()["theme"] == "dark"


class TestApiCalculate:
    def test_valid_input(self, client):
        response = client.post("/api/calculate", json=_form())
        assert response.status_code == 200
        payload = response.get_json()
        assert payload["summary"]["principal_amount"] == 1_000_000
        assert payload["display"]["monthly_payment"] == "₹8,364"
        assert payload["chart"]["labels"] == ["Principal", "Interest"]
        assert payload["theme"] == "light"

    def test_numbers_accepted(self, client):
        payload = client.post("/api/calculate", json={"principal": 500000, "interest_rate": 0, "loan_term": 10}).get_json()
        assert payload["display"]["monthly_payment"] == "₹4,167"

    def test_invalid_input_is_null_result(self, client):
        response = client.post("/api/calculate", json=_form(principal="abc"))
        assert response.status_code == 200
        payload = response.get_json()
        assert payload["summary"] is None
        assert payload["chart"] is None

    def test_inputs_are_persisted(self, client):
        client.post("/api/calculate", json=_form(mortgage_type="variable"))
        state = client.get("/api/state").get_json()
        assert state["loan_term"] == "20"
        assert state["mortgage_type"] == "variable"

    def test_non_object_body_rejected(self, client):
        assert client.post("/api/calculate", json=[1, 2, 3]).status_code == 400
        assert client.post("/api/calculate", data="nope").status_code == 400

    def test_non_string_currency_falls_back(self, client):
        response = client.post("/api/calculate", json=_form(currency=5))
        assert response.status_code == 200
        assert response.get_json()["display"]["monthly_payment"] == "₹8,364"

    def test_tiny_rate(self, client):
        response = client.post("/api/calculate", json=_form(principal="100000", interest_rate="1e-15", loan_term="10"))
        assert response.status_code == 200
        assert response.get_json()["display"]["monthly_payment"] == "₹833"

    def test_very_large_principal(self, client):
        response = client.post("/api/calculate", json=_form(principal="1e30"))
        assert response.status_code == 200
        assert response.get_json()["display"]["principal_amount"] == "₹10" + ",00" * 13 + ",000"


def test_sessions_are_isolated():
    first = app.test_client()
    second = app.test_client()
    first.post("/", data=_form())
    assert second.get("/api/state").get_json()["principal"] == ""
