from unittest.mock import patch

from fastapi.testclient import TestClient

from api.main import app
from schemas.responses import BuildResult

client = TestClient(app)


def test_build_endpoint_with_corpus(corpus):
    response = client.post("/build", json={"input": {"root": str(corpus)}})

    assert response.status_code == 200
    data = response.json()
    assert data["counts"]["documents"] == 6
    assert data["counts"]["broken_links"] == 1
    assert len(data["fingerprint"]) == 64
    assert [node["label"] for node in data["tree"]] == ["Javascript", "Python"]


def test_build_endpoint_passes_options():
    mock_result = BuildResult(root="docs", fingerprint="0" * 64)

    with patch("api.main.run_build") as mock_run:
        mock_run.return_value = mock_result

        response = client.post(
            "/build",
            json={"input": {"root": "docs"}, "options": {"workers": 2, "strict": True}},
        )

        assert response.status_code == 200
        mock_run.assert_called_once()
        args, _ = mock_run.call_args
        input_data, options_obj = args
        assert input_data.root == "docs"
        assert options_obj.workers == 2
        assert options_obj.strict is True


def test_build_endpoint_invalid_options():
    response = client.post(
        "/build",
        json={"input": {"root": "docs"}, "options": {"workers": 0}},
    )

    assert response.status_code == 422
    assert "Invalid options" in response.json()["detail"]


def test_build_endpoint_unknown_option():
    response = client.post(
        "/build",
        json={"input": {"root": "docs"}, "options": {"colour": "blue"}},
    )

    assert response.status_code == 422


def test_build_endpoint_missing_root(tmp_path):
    response = client.post("/build", json={"input": {"root": str(tmp_path / "missing")}})

    assert response.status_code == 404
    assert "Content root not found" in response.json()["detail"]
