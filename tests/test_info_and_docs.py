def test_welcome_message(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Welcome to the Student CRUD API! Visit /api-docs for Swagger documentation."


def test_swagger_ui_is_served(client):
    response = client.get("/api-docs")

    assert response.status_code == 200
    assert "swagger-ui" in response.text
    assert "/openapi.json" in response.text


def test_openapi_document_lists_student_operations(client):
    document = client.get("/openapi.json").json()

    assert document["info"]["title"] == "Student CRUD API"
    assert document["info"]["version"] == "1.0.0"

    paths = document["paths"]
    assert set(paths["/students"]) == {"get", "post"}
    assert set(paths["/students/{student_id}"]) == {"get", "put", "delete"}

    assert paths["/students"]["post"]["summary"] == "Create a new student"
    assert paths["/students"]["get"]["summary"] == "Get all students"
    assert paths["/students/{student_id}"]["get"]["summary"] == "Get a student by ID"
    assert paths["/students/{student_id}"]["put"]["summary"] == "Update a student by ID"
    assert paths["/students/{student_id}"]["delete"]["summary"] == "Delete a student by ID"

    assert "201" in paths["/students"]["post"]["responses"]
    assert "404" in paths["/students/{student_id}"]["get"]["responses"]
    assert "404" in paths["/students/{student_id}"]["put"]["responses"]
    assert "204" in paths["/students/{student_id}"]["delete"]["responses"]


def test_openapi_documents_student_fields(client):
    document = client.get("/openapi.json").json()
    schemas = document["components"]["schemas"]

    create_schema = schemas["StudentCreate"]
    assert create_schema["required"] == ["name", "age"]
    assert create_schema["properties"]["name"]["type"] == "string"
    assert create_schema["properties"]["age"]["type"] == "integer"
