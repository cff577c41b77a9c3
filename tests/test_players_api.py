"""HTTP contract tests for the roster endpoints used by the lineup picker."""

import uuid

from app.models import Player


def test_quick_add_returns_usable_id(client, db, team):
    response = client.post(f"/api/teams/{team.id}/players/quick-add", json={"name": "  Ciara Nic Aoidh ", "jerseyNo": 9})
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Ciara Nic Aoidh"
    assert body["jerseyNo"] == 9
    assert body["teamId"] == str(team.id)

    player = db.get(Player, uuid.UUID(body["id"]))
    assert player is not None and player.team_id == team.id


def test_quick_add_without_jersey(client, team):
    response = client.post(f"/api/teams/{team.id}/players/quick-add", json={"name": "Aoife"})
    assert response.status_code == 200
    assert response.json()["jerseyNo"] is None


def test_quick_add_duplicate_jersey_is_409(client, team):
    url = f"/api/teams/{team.id}/players/quick-add"
    assert client.post(url, json={"name": "A", "jerseyNo": 4}).status_code == 200
    assert client.post(url, json={"name": "B", "jerseyNo": 4}).status_code == 409


def test_quick_add_blank_name_is_400(client, team):
    response = client.post(f"/api/teams/{team.id}/players/quick-add", json={"name": "   "})
    assert response.status_code == 400


def test_quick_add_unknown_team_is_404(client, db):
    response = client.post(f"/api/teams/{uuid.uuid4()}/players/quick-add", json={"name": "X"})
    assert response.status_code == 404


def test_quick_add_malformed_team_id_is_400(client, db):
    response = client.post("/api/teams/undefined/players/quick-add", json={"name": "X"})
    assert response.status_code == 400
    assert "teamId" in response.json()["detail"]


def test_team_players_ordered_by_jersey(client, team):
    url = f"/api/teams/{team.id}/players/quick-add"
    client.post(url, json={"name": "No Number"})
    client.post(url, json={"name": "Fifteen", "jerseyNo": 15})
    client.post(url, json={"name": "Two", "jerseyNo": 2})

    names = [p["name"] for p in client.get(f"/api/teams/{team.id}/players").json()]
    assert names == ["Two", "Fifteen", "No Number"]
