from __future__ import annotations

from shortlink.main import DB_FILENAME, build_app, main


def test_build_app_creates_directory_and_database(tmp_path):
    data_dir = tmp_path / "nested" / "data"
    app = build_app(data_dir)
    try:
        assert data_dir.is_dir()
        assert (data_dir / DB_FILENAME).is_file()
    finally:
        app.extensions["shortlink_repository"].close()


def test_built_app_serves_round_trip(tmp_path):
    app = build_app(tmp_path)
    try:
        client = app.test_client()
        created = client.post("/shorten", json={"url": "https://example.com/home"})
        assert created.status_code == 201
        short_url = created.get_json()["short_url"]
        assert short_url.startswith("http://localhost:8080/")
        code = short_url.rsplit("/", 1)[1]
        assert client.get(f"/{code}").headers["Location"] == "https://example.com/home"
    finally:
        app.extensions["shortlink_repository"].close()


def test_data_persists_between_builds(tmp_path):
    first = build_app(tmp_path)
    created = first.test_client().post("/shorten", json={"url": "https://example.com/kept"})
    code = created.get_json()["short_url"].rsplit("/", 1)[1]
    first.extensions["shortlink_repository"].close()

    second = build_app(tmp_path)
    try:
        response = second.test_client().get(f"/{code}")
        assert response.status_code == 302
        assert response.headers["Location"] == "https://example.com/kept"
    finally:
        second.extensions["shortlink_repository"].close()


def test_main_fails_when_data_dir_is_a_file(tmp_path):
    blocker = tmp_path / "occupied"
    blocker.write_text("x")
    assert main(["--data-dir", str(blocker)]) == 1