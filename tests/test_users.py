# tests/test_users.py

def test_get_own_user(client, make_user, auth_header):
    user = make_user(wallet_money=250)
    resp = client.get(f"/api/users/{user.id}", headers=auth_header(user))
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["_id"] == user.id
    assert body["email"] == user.email
    assert body["walletMoney"] == 250
    assert "password_hash" not in body


def test_get_address_only(client, make_user, auth_header):
    user = make_user()
    resp = client.get(f"/api/users/{user.id}", params={"q": "address"}, headers=auth_header(user))
    assert resp.status_code == 200
    assert resp.json() == {"address": user.address}


def test_get_other_user_forbidden(client, make_user, auth_header):
    me = make_user()
    other = make_user()
    resp = client.get(f"/api/users/{other.id}", headers=auth_header(me))
    assert resp.status_code == 403


def test_get_missing_user(client, make_user, auth_header):
    me = make_user()
    resp = client.get("/api/users/missing", headers=auth_header(me))
    assert resp.status_code == 404


def test_set_address(client, make_user, auth_header, users):
    user = make_user(address=None)
    assert not user.has_set_non_default_address()

    new_address = "42 Wallaby Way, Sydney NSW 2000"
    resp = client.put(f"/api/users/{user.id}", json={"address": new_address}, headers=auth_header(user))
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"address": new_address}
    assert users.get(user.id).has_set_non_default_address()


def test_set_address_too_short(client, make_user, auth_header):
    user = make_user()
    resp = client.put(f"/api/users/{user.id}", json={"address": "short"}, headers=auth_header(user))
    assert resp.status_code == 400
