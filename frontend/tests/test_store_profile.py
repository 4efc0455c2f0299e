"""Profile action creators against a fake API"""
from frontend.actions.auth import login
from frontend.actions.profile import (
    add_experience,
    create_profile,
    delete_account,
    delete_experience,
    get_current_profile,
    get_github_repos,
    get_profiles,
)

PROFILE = {"id": "pr1", "userId": "u1", "status": "Dev", "skills": ["go"], "experience": []}


def test_get_current_profile(store, api):
    api.respond("GET", "/profile/me", PROFILE)
    store.dispatch(get_current_profile())
    state = store.get_state()["profile"]
    assert state["profile"] == PROFILE
    assert state["loading"] is False


def test_get_current_profile_error(store, api):
    api.fail("GET", "/profile/me", 400, {"msg": "There is no profile for this user"})
    store.dispatch(get_current_profile())
    state = store.get_state()["profile"]
    assert state["profile"] is None
    assert state["error"] == {"msg": "There is no profile for this user", "status": 400}
    # not found is not an alert
    assert store.get_state()["alert"] == []


def test_get_profiles(store, api):
    api.respond("GET", "/profile", [PROFILE])
    store.dispatch(get_profiles())
    assert store.get_state()["profile"]["profiles"] == [PROFILE]


def test_create_profile_success_alerts(store, api):
    api.respond("POST", "/profile", PROFILE)
    assert store.dispatch(create_profile({"status": "Dev", "skills": "go"})) is True
    state = store.get_state()
    assert state["profile"]["profile"] == PROFILE
    assert [(a["msg"], a["alertType"]) for a in state["alert"]] == [("Profile Created", "success")]


def test_create_profile_validation_errors(store, api):
    errors = [{"msg": "Status is required"}, {"msg": "Skills is required"}]
    api.fail("POST", "/profile", 400, {"errors": errors})
    assert store.dispatch(create_profile({}, edit=True)) is False
    assert [a["msg"] for a in store.get_state()["alert"]] == ["Status is required", "Skills is required"]


def test_add_and_delete_experience(store, api):
    with_exp = {**PROFILE, "experience": [{"id": "e1", "title": "Engineer"}]}
    api.respond("PUT", "/profile/experience", with_exp)
    api.respond("DELETE", "/profile/experience/e1", PROFILE)

    store.dispatch(add_experience({"title": "Engineer", "company": "Acme", "from": "2020-01-01"}))
    assert store.get_state()["profile"]["profile"]["experience"] == with_exp["experience"]

    store.dispatch(delete_experience("e1"))
    assert store.get_state()["profile"]["profile"]["experience"] == []


def test_github_repos_and_failure(store, api):
    api.respond("GET", "/profile/github/octocat", [{"id": 1}])
    store.dispatch(get_github_repos("octocat"))
    assert store.get_state()["profile"]["repos"] == [{"id": 1}]

    api.fail("GET", "/profile/github/octocat", 404, {"msg": "No Github profile found"})
    store.dispatch(get_github_repos("octocat"))
    assert store.get_state()["profile"]["repos"] == []


def test_delete_account(store, api):
    api.respond("POST", "/auth", {"token": "tok"})
    api.respond("DELETE", "/profile", {"msg": "User deleted"})

    store.dispatch(login("a@example.com", "secret123"))
    store.dispatch(delete_account())

    state = store.get_state()
    assert state["auth"]["isAuthenticated"] is False
    assert state["profile"]["profile"] is None
    assert api.token is None
