def test_signup_returns_public_fields_only(client):
	response = client.post("/auth/signup", json={"email": "a@x.com", "password": "pw1"})

	assert response.status_code == 201
	data = response.json()["data"]
	assert data["email"] == "a@x.com"
	assert isinstance(data["id"], int)
	assert "password" not in data
	assert "password_hash" not in data


def test_duplicate_signup_is_a_bad_request(client):
	client.post("/auth/signup", json={"email": "a@x.com", "password": "pw1"})
	response = client.post("/auth/signup", json={"email": "A@x.com", "password": "pw2"})

	assert response.status_code == 400
	assert response.json()["error"]["message"] == "Email already registered"


def test_signup_rejects_bad_input(client):
	assert client.post("/auth/signup", json={"email": "not-an-email", "password": "pw1"}).status_code == 400
	assert client.post("/auth/signup", json={"email": "a@x.com"}).status_code == 400
	assert client.post("/auth/signup", json={"email": "a@x.com", "password": ""}).status_code == 400


def test_login_returns_token(client):
	client.post("/auth/signup", json={"email": "a@x.com", "password": "pw1"})
	response = client.post("/auth/login", json={"email": "a@x.com", "password": "pw1"})

	assert response.status_code == 200
	body = response.json()
	assert body["token_type"] == "bearer"
	assert isinstance(body["token"], str) and body["token"]


def test_login_failures_are_indistinguishable(client):
	client.post("/auth/signup", json={"email": "a@x.com", "password": "pw1"})

	wrong_password = client.post("/auth/login", json={"email": "a@x.com", "password": "nope"})
	unknown_email = client.post("/auth/login", json={"email": "b@x.com", "password": "pw1"})

	assert wrong_password.status_code == unknown_email.status_code == 401
	assert wrong_password.json()["error"]["message"] == unknown_email.json()["error"]["message"]
	assert wrong_password.headers["WWW-Authenticate"] == "Bearer"


def test_health_and_request_id(client):
	response = client.get("/health")

	assert response.status_code == 200
	assert response.json() == {"status": "OK"}
	assert response.headers["X-Request-Id"]


def test_multibyte_password_at_the_length_cap(client):
	# 72 characters but 144 bytes; hashing truncates to bcrypt's 72-byte window
	password = "é" * 72
	assert client.post("/auth/signup", json={"email": "a@x.com", "password": password}).status_code == 201
	assert client.post("/auth/login", json={"email": "a@x.com", "password": password}).status_code == 200
	assert client.post("/auth/signup", json={"email": "b@x.com", "password": "é" * 73}).status_code == 400
