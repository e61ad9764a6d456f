# shortlink

A small URL shortener service. It turns long URLs into random
eight-character codes, stores them in SQLite, and redirects visitors from a
short link to the original address.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Running the server

```
shortlink
```

The command creates its data directory if needed, keeps the database in
`shortener.db` inside it, and serves the API with Flask's built-in server.
It logs to standard error and exits with status 1 if the data directory or
the database cannot be set up, or if the server cannot start.

Options:

- `--data-dir DIR`: directory for the database (default `./data`)
- `--host HOST`: address to listen on (default `0.0.0.0`)
- `--port PORT`: port to listen on (default `8080`)

The short links it hands out always begin with `http://localhost:8080`,
whatever host and port the server listens on.

## HTTP API

### `POST /shorten`

Request body:

```json
{"url": "https://example.com/some/long/path"}
```

On success the server answers `201 Created` with a JSON body:

```json
{"short_url": "http://localhost:8080/aB3dE9xQ"}
```

The `url` key is also found when written in another letter case (`"URL"`).
These get `400 Bad Request` with a plain-text message:

- a body that is not valid UTF-8 JSON, is not a JSON object, or whose `url`
  is not a string: `Invalid request body`
- a missing, `null` or empty `url`: `URL cannot be empty`

A failure to store the record gets `500 Internal Server Error`.

### `GET /<short_code>`

Redirects with `302 Found` to the original URL. An unknown code gets
`404 Not Found`; any other lookup failure gets `500 Internal Server Error`.

## Using it as a library

The parts can be put together by hand, for example to use a different
database file or base URL:

```python
from shortlink.service import URLService
from shortlink.sqlite_repository import SQLiteRepository
from shortlink.web import create_app

repo = SQLiteRepository("links.db")
service = URLService(repo)
app = create_app(service, base_url="http://localhost:8080")
app.run(port=8080)
```

- `shortlink.main.build_app(data_dir)` builds the same application the
  `shortlink` command serves, with its database under `data_dir`.
- `shortlink.domain.ShortURL` is a frozen record with `id`, `original_url`,
  `short_code` and `created_at`; `to_dict()` gives a JSON-ready dictionary
  with `created_at` in ISO 8601 form.
- `shortlink.domain.URLRepository` is the abstract storage contract
  (`save`, `find_by_code`). `SQLiteRepository` implements it; it can be used
  as a context manager, and `close()` closes the connection. Database
  failures raise `RepositoryError`.
- `URLService(repo, code_generator)` takes an optional callable that returns
  new codes; by default it uses `shortlink.codegen.generate_short_code`,
  which also accepts a `random.Random` instance for reproducible codes.
- `URLService.create_short_url(url)` returns the stored `ShortURL`, or raises
  `ServiceError` if the repository fails.
- `URLService.get_original_url(code)` returns the stored `ShortURL` and raises
  `shortlink.domain.URLNotFoundError` if no record has that code.
- `shortlink.web.URLHandler` holds the request handlers;
  `register_routes(app)` attaches them to an existing Flask application.

## Limitations

- URLs are stored as given; their format is not checked.
- A newly generated code is not checked against existing ones. If it
  collides, the database rejects the insert and the request fails with
  `500 Internal Server Error`.
- The built-in server is Flask's development server; for production, serve
  the application from `build_app` with a WSGI server of your choice.