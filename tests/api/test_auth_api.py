def test_admin_login_returns_public_profile(client):
    response = client.post("/api/auth/login", json={"email": "admin@mail.com", "password": "admin123"})

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["role"] == "admin"
    assert user["email"] == "admin@mail.com"
    assert user["name"] == "Admin User"
    assert set(user) == {"id", "email", "role", "name"}


def test_wrong_password_is_unauthorized(client):
    response = client.post("/api/auth/login", json={"email": "admin@mail.com", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}


def test_unknown_email_is_unauthorized(client):
    response = client.post("/api/auth/login", json={"email": "ghost@mail.com", "password": "admin123"})

    assert response.status_code == 401


def test_malformed_login_body_is_bad_request(client):
    response = client.post("/api/auth/login", json={"email": "not-an-email", "password": ""})

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid request data"}


def test_logout_acknowledges(client):
    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_unknown_local_domain_is_unauthorized(client):
    response = client.post("/api/auth/login", json={"email": "a@school.local", "password": "admin123"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}
