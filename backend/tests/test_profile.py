"""Tests for /api/profile"""
from backend.app.models.post import Post
from backend.app.models.profile import Profile
from backend.app.models.user import User


def _upsert(client, headers, **fields):
    body = {"status": "Developer", "skills": "python, fastapi"}
    body.update(fields)
    return client.post("/api/profile", headers=headers, json=body)


def test_my_profile_requires_auth(client):
    r = client.get("/api/profile/me")
    assert r.status_code == 401


def test_my_profile_missing(client, auth_headers):
    r = client.get("/api/profile/me", headers=auth_headers)
    assert r.status_code == 400
    assert r.json() == {"msg": "There is no profile for this user"}


def test_upsert_creates_profile(client, auth_headers, test_user):
    r = _upsert(client, auth_headers, company="Acme", bio="Hi", githubUsername="ada")
    assert r.status_code == 200
    data = r.json()
    assert data["userId"] == test_user.id
    assert data["user"] == {"id": test_user.id, "name": "Test User", "avatarUrl": test_user.avatar_url}
    assert data["status"] == "Developer"
    assert data["skills"] == ["python", "fastapi"]
    assert data["company"] == "Acme"
    assert data["githubUsername"] == "ada"
    assert data["experience"] == []
    assert data["education"] == []

    r = client.get("/api/profile/me", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["id"] == data["id"]


def test_upsert_requires_status_and_skills(client, auth_headers, db_session):
    r = client.post("/api/profile", headers=auth_headers, json={"status": "", "skills": "  "})
    assert r.status_code == 400
    errors = {e["param"]: e["msg"] for e in r.json()["errors"]}
    assert errors == {"status": "Status is required", "skills": "Skills is required"}
    assert db_session.query(Profile).count() == 0


def test_upsert_normalizes_skills_string(client, auth_headers):
    r = _upsert(client, auth_headers, skills="js, node , react")
    assert r.json()["skills"] == ["js", "node", "react"]


def test_upsert_accepts_skills_list(client, auth_headers):
    r = _upsert(client, auth_headers, skills=[" go", "rust "])
    assert r.json()["skills"] == ["go", "rust"]


def test_upsert_normalizes_urls(client, auth_headers):
    r = _upsert(
        client,
        auth_headers,
        website="http://www.Example.com/",
        twitter="twitter.com/ada",
        linkedin="https://linkedin.com/in/ada/",
        youtube="",
    )
    data = r.json()
    assert data["website"] == "https://example.com"
    assert data["social"]["twitter"] == "https://twitter.com/ada"
    assert data["social"]["linkedin"] == "https://linkedin.com/in/ada"
    assert data["social"]["youtube"] is None


def test_upsert_is_idempotent(client, auth_headers, db_session, test_user):
    first = _upsert(client, auth_headers, company="Acme").json()
    second = _upsert(client, auth_headers, company="Acme").json()

    assert first["id"] == second["id"]
    assert {k: v for k, v in first.items() if k != "date"} == {
        k: v for k, v in second.items() if k != "date"
    }
    assert db_session.query(Profile).filter(Profile.user_id == test_user.id).count() == 1


def test_upsert_merges_into_existing(client, auth_headers):
    _upsert(client, auth_headers, company="Acme", location="Berlin")
    r = _upsert(client, auth_headers, status="Senior Developer", company="Initech")
    data = r.json()
    assert data["status"] == "Senior Developer"
    assert data["company"] == "Initech"
    # not sent the second time: kept
    assert data["location"] == "Berlin"


def test_list_profiles_is_public(client, auth_headers, other_headers):
    _upsert(client, auth_headers)
    _upsert(client, other_headers, status="Student")
    r = client.get("/api/profile")
    assert r.status_code == 200
    assert sorted(p["status"] for p in r.json()) == ["Developer", "Student"]


def test_profile_by_user(client, auth_headers, test_user):
    _upsert(client, auth_headers)
    r = client.get(f"/api/profile/user/{test_user.id}")
    assert r.status_code == 200
    assert r.json()["userId"] == test_user.id


def test_profile_by_user_malformed_id(client):
    r = client.get("/api/profile/user/not-an-id")
    assert r.status_code == 400
    assert r.json() == {"msg": "Profile not found"}


def test_profile_by_user_unknown_id(client):
    r = client.get(f"/api/profile/user/{'a' * 32}")
    assert r.status_code == 400
    assert r.json() == {"msg": "Profile not found"}


def test_delete_account_cascades(client, auth_headers, other_headers, db_session, test_user, other_user):
    _upsert(client, auth_headers)
    client.post("/api/posts", headers=auth_headers, json={"text": "mine"})
    client.post("/api/posts", headers=auth_headers, json={"text": "also mine"})
    client.post("/api/posts", headers=other_headers, json={"text": "theirs"})
    user_id = test_user.id

    r = client.delete("/api/profile", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == {"msg": "User deleted"}

    db_session.expire_all()
    assert db_session.query(Post).filter(Post.user_id == user_id).count() == 0
    assert db_session.query(Post).filter(Post.user_id == other_user.id).count() == 1
    assert db_session.query(Profile).filter(Profile.user_id == user_id).count() == 0
    assert db_session.query(User).filter(User.id == user_id).count() == 0

    r = client.get(f"/api/profile/user/{user_id}")
    assert r.status_code == 400


def test_add_experience(client, auth_headers, test_user_with_profile):
    body = {"title": "Engineer", "company": "Acme", "from": "2020-01-01", "current": True}
    r = client.put("/api/profile/experience", headers=auth_headers, json=body)
    assert r.status_code == 200
    exp = r.json()["experience"]
    assert len(exp) == 1
    assert exp[0]["title"] == "Engineer"
    assert exp[0]["from"] == "2020-01-01"
    assert exp[0]["to"] is None
    assert exp[0]["current"] is True
    assert len(exp[0]["id"]) == 32

    body2 = {"title": "Lead", "company": "Initech", "from": "2022-03-01", "to": ""}
    r = client.put("/api/profile/experience", headers=auth_headers, json=body2)
    assert [e["title"] for e in r.json()["experience"]] == ["Lead", "Engineer"]


def test_add_experience_missing_from(client, auth_headers, test_user_with_profile):
    r = client.put(
        "/api/profile/experience",
        headers=auth_headers,
        json={"title": "Engineer", "company": "Acme"},
    )
    assert r.status_code == 400
    assert r.json()["errors"] == [
        {"msg": "From date is required", "param": "from", "location": "body"}
    ]

    r = client.get("/api/profile/me", headers=auth_headers)
    assert r.json()["experience"] == []


def test_add_experience_without_profile(client, auth_headers):
    body = {"title": "Engineer", "company": "Acme", "from": "2020-01-01"}
    r = client.put("/api/profile/experience", headers=auth_headers, json=body)
    assert r.status_code == 400
    assert r.json() == {"msg": "There is no profile for this user"}


def test_remove_experience(client, auth_headers, test_user_with_profile):
    body = {"title": "Engineer", "company": "Acme", "from": "2020-01-01"}
    exp_id = client.put("/api/profile/experience", headers=auth_headers, json=body).json()["experience"][0]["id"]

    r = client.delete(f"/api/profile/experience/{exp_id}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["experience"] == []


def test_remove_unknown_experience_is_noop(client, auth_headers, test_user_with_profile):
    body = {"title": "Engineer", "company": "Acme", "from": "2020-01-01"}
    before = client.put("/api/profile/experience", headers=auth_headers, json=body).json()

    r = client.delete("/api/profile/experience/does-not-exist", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["experience"] == before["experience"]


def test_add_and_remove_education(client, auth_headers, test_user_with_profile):
    body = {
        "school": "MIT",
        "degree": "BSc",
        "fieldOfStudy": "Computer Science",
        "from": "2014-09-01",
        "to": "2018-06-01",
    }
    r = client.put("/api/profile/education", headers=auth_headers, json=body)
    assert r.status_code == 200
    edu = r.json()["education"]
    assert edu[0]["school"] == "MIT"
    assert edu[0]["to"] == "2018-06-01"

    r = client.delete(f"/api/profile/education/{edu[0]['id']}", headers=auth_headers)
    assert r.json()["education"] == []


def test_add_education_validation(client, auth_headers, test_user_with_profile):
    r = client.put("/api/profile/education", headers=auth_headers, json={"school": "MIT"})
    assert r.status_code == 400
    errors = {e["param"]: e["msg"] for e in r.json()["errors"]}
    assert errors == {
        "degree": "Degree is required",
        "fieldOfStudy": "Field of study is required",
        "from": "From date is required",
    }


def test_add_education_blank_from(client, auth_headers, test_user_with_profile):
    body = {"school": "MIT", "degree": "BSc", "fieldOfStudy": "CS", "from": ""}
    r = client.put("/api/profile/education", headers=auth_headers, json=body)
    assert r.status_code == 400
    assert r.json()["errors"] == [
        {"msg": "From date is required", "param": "from", "location": "body"}
    ]

    r = client.get("/api/profile/me", headers=auth_headers)
    assert r.json()["education"] == []
