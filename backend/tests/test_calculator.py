import pytest
from fastapi.testclient import TestClient

from app.core.errors import DivisionByZeroError, ValidationError
from app.main import create_app
from app.services.calculator import add, calculate, divide, multiply, subtract


def test_basic_operations():
    assert add(2, 3) == 5
    assert subtract(10, 3) == 7
    assert multiply(4, 5) == 20
    assert divide(10, 2) == 5


def test_divide_by_zero_raises():
    with pytest.raises(DivisionByZeroError, match="Cannot divide by zero"):
        divide(10, 0)
    assert issubclass(DivisionByZeroError, ValidationError)


def test_calculator_endpoint():
    client = TestClient(create_app())

    response = client.get("/api/calculator/multiply", params={"a": 4, "b": 5})
    assert response.status_code == 200
    assert response.json()["data"]["result"] == 20


def test_calculator_endpoint_errors():
    client = TestClient(create_app())

    zero = client.get("/api/calculator/divide", params={"a": 10, "b": 0})
    assert zero.status_code == 400
    assert zero.json() == {"success": False, "message": "Cannot divide by zero"}

    unknown = client.get("/api/calculator/power", params={"a": 2, "b": 3})
    assert unknown.status_code == 400
    assert unknown.json()["message"].startswith("Unknown operation")

    bad = client.get("/api/calculator/add", params={"a": "x", "b": 1})
    assert bad.status_code == 400
    assert bad.json()["message"] == "Invalid request parameters"


@pytest.mark.parametrize(
    "operation, a, b, message",
    [
        ("add", float("nan"), 1, "Operands must be finite numbers"),
        ("subtract", 1, float("inf"), "Operands must be finite numbers"),
        ("multiply", 1e308, 10, "Result is out of range"),
    ],
)
def test_calculate_rejects_non_finite_values(operation, a, b, message):
    with pytest.raises(ValidationError, match=message):
        calculate(operation, a, b)


def test_calculator_endpoint_rejects_nan_and_overflow():
    client = TestClient(create_app())

    for params in ({"a": "nan", "b": 1}, {"a": "inf", "b": 1}):
        response = client.get("/api/calculator/add", params=params)
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Operands must be finite numbers",
        }

    overflow = client.get("/api/calculator/multiply", params={"a": 1e308, "b": 10})
    assert overflow.status_code == 400
    assert overflow.json() == {"success": False, "message": "Result is out of range"}
