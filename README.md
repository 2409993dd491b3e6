# usermgmt

A small REST API for managing users (create, read, update, delete), with
in-memory storage and a Swagger 2.0 description of its endpoints.

## Installing

```
pip install .
```

## Running the server

```
usermgmt
usermgmt --port 8080
```

The port is taken from `--port`, then from the `PORT` environment variable, and
is 5000 when neither is given. An invalid port makes the command log an error
and exit with status 1. The server listens on all interfaces using Flask's
built-in development server.

The store starts with three users: Alice, Bob and Charlie.

## Endpoints

| Method | Path          | Body                                            | Success                            | Errors   |
|--------|---------------|-------------------------------------------------|------------------------------------|----------|
| POST   | `/users`      | `{"name": ..., "email": ...}` (both required)   | 201, the new user                  | 400      |
| GET    | `/users`      |                                                 | 200, list of users                 |          |
| GET    | `/users/<id>` |                                                 | 200, the user                      | 400, 404 |
| PUT    | `/users/<id>` | `{"name": ..., "email": ...}` (either optional) | 200, the updated user              | 400, 404 |
| DELETE | `/users/<id>` |                                                 | 200, `{"message": "User deleted"}` | 400, 404 |

Errors come back as `{"error": "<reason>"}`:

- `"Name and email are required"` when a POST body is not a JSON object with
  non-empty string `name` and `email`;
- `"No data provided"` when a PUT body is missing, is not a JSON object, or has
  a non-string field;
- `"Invalid user ID"` when `<id>` is not a decimal integer;
- `"User not found"` when no user has that id.

When updating, an empty or missing field leaves the stored value unchanged.

Other routes:

- `GET /` redirects to `/swagger/index.html`;
- `GET /swagger/index.html` is a plain HTML page listing the endpoints;
- `GET /swagger/doc.json` returns the Swagger 2.0 document.

Example:

```
curl -X POST localhost:5000/users \
     -H 'Content-Type: application/json' \
     -d '{"name": "Dana", "email": "dana@example.com"}'
```

## Using it from Python

```python
from usermgmt.app import create_app
from usermgmt.models import seeded_store

app = create_app(seeded_store())
client = app.test_client()
print(client.get("/users/1").get_json())
```

`create_app()` with no argument uses a freshly seeded store.

`usermgmt.models.UserStore` can be used on its own. It is thread-safe and
offers `create_user`, `get_all_users`, `get_user`, `update_user`, `delete_user`
and `reset`. The methods return copies of `User` records; `get_user`,
`update_user` and `delete_user` raise `UserNotFoundError` for an unknown id.
`CreateUserRequest.from_json` and `UpdateUserRequest.from_json` parse request
bodies and raise `ValidationError` on bad input. `usermgmt.handlers.create_blueprint(store)`
returns a Flask blueprint with the `/users` routes, for use in another app.

`usermgmt.docs.swagger_spec(host, base_path)` returns the API description as a
dictionary; the defaults are `localhost:5000` and `/`.

## What it does not do

- Nothing is persisted: users live only in memory, and restarting the server
  restores the three seeded users.
- There is no interactive Swagger UI; `/swagger/index.html` is a static list of
  endpoints with a link to `doc.json`.
- There is no authentication.

## Tests

```
pip install '.[test]'
pytest
```