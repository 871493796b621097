from tests.conftest import TENANT_A, bearer, create_test_token


def test_me_returns_profile_and_scope(client, tenant_a_headers):
    response = client.get("/user/me", headers=tenant_a_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["user"]["authUserId"] == "user-a"
    assert body["user"]["userType"] == "business_user"
    assert body["businessId"] == TENANT_A
    assert body["unrestricted"] is False


def test_me_reports_nested_business_profile(client):
    token = create_test_token(
        user_id="u2", business_id="top", business_info_id="nested", user_type="business_admin"
    )
    body = client.get("/user/me", headers=bearer(token)).json()

    assert body["businessId"] == "nested"
    assert body["user"]["businessId"] == "nested"


def test_me_for_super_admin_is_unrestricted(client, super_admin_headers):
    body = client.get("/user/me", headers=super_admin_headers).json()

    assert body["unrestricted"] is True
    assert body["businessId"] is None
    assert body["user"]["userType"] == "super_admin"


def test_me_keeps_profile_claims(client):
    token = create_test_token(user_id="u3", business_id="b3", email="u3@example.com", name="Uma")
    body = client.get("/user/me", headers=bearer(token)).json()

    assert body["user"]["email"] == "u3@example.com"
    assert body["user"]["name"] == "Uma"


def test_me_requires_auth(client):
    assert client.get("/user/me").status_code == 401
