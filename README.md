# blogservice

A small HTTP service that stores blog posts in a SQL database and serves
them as JSON. It is built on Flask and SQLAlchemy.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the service

```
blogservice
```

The command takes no options other than `--help`. It connects to the
database, builds the application and serves it on port 3000 on all
interfaces until interrupted. If the port cannot be opened it prints the
error and exits with status 1.

The database URL is built by `blogservice.db.connection_url()` from the
environment variables `POSTGRES_USER`, `POSTGRES_PASSWORD` and
`POSTGRES_DB`, with the host `go-db`:

```
postgresql://<POSTGRES_USER>:<POSTGRES_PASSWORD>@go-db/<POSTGRES_DB>?sslmode=disable
```

A PostgreSQL driver for SQLAlchemy is not among the dependencies and must
be installed separately to use that URL. On start-up the connection is
checked and the table `blogs` is created if it does not exist yet.

## Endpoints

All routes are mounted under `/api/v1`:

| Method | Path                | Action         |
|--------|---------------------|----------------|
| GET    | `/blog/<id>`        | fetch one post |
| POST   | `/blog`             | create a post  |
| PUT    | `/blog/<id>`        | update a post  |
| DELETE | `/blog/remove/<id>` | delete a post  |

A post looks like this (`blog_details` and `blog_description` are left out
of responses when empty):

```json
{
  "id": 1,
  "blog_name": "First post",
  "blog_details": "Details of the post",
  "blog_description": "A short description"
}
```

Request bodies are matched to these fields case-insensitively; unknown keys
are ignored.

Successful responses are sent with HTTP 200 and wrapped as:

```json
{"status": {"code": 200, "statusType": "SUCCESS"}, "data": {...}}
```

Errors carry a `status` object with `code`, `statusType` set to `ERROR`,
and `errorMessage`, `errorDetail` or `devErrorMessage` where they apply:

- a post that does not exist gives HTTP 404 with code 404;
- other failures give HTTP 200 with code 400 and `errorMessage`
  `"Invalid Request"`;
- a malformed body on `POST /blog` gives a plain-text HTTP 400.

## Using it from Python

```python
from blogservice.db import Config, init_pgsql, new_client
from blogservice.handler import BlogHandler
from blogservice.server import create_app
from blogservice.service import new_service

init_pgsql("sqlite:///blogs.db")
store = new_service(new_client(Config()))
app = create_app(BlogHandler(store))
app.run(port=3000)
```

`init_pgsql(url)` opens one shared connection and returns the same one on
later calls; `reset_connection()` closes it. `blogservice.server.new(url)`
does the whole wiring and returns a `Server` whose `listen_and_serve()`
serves on port 3000 and whose `get_handler()` returns the Flask app.

`BlogHandler` accepts any object with the `BlogStorage` methods (`list`,
`get`, `create`, `update`, `delete`), so posts can be served from an
in-memory store in tests. `make_blueprint(handler)` gives the routes as a
Flask blueprint to mount elsewhere.

## Limitations

- There is no endpoint that lists all posts. `BlogHandler.list_posts` exists
  but is not routed, and `BlogStore.list()` always returns an empty list.
- Creating and updating a post log database failures instead of reporting
  them; the response still says `"data saved"` or
  `"record updated successfully"`.
- Updating writes only the non-empty fields of the request body.
- The `blogservice` command cannot be pointed at another database; use
  `new(url)` or `init_pgsql(url)` from Python for that.