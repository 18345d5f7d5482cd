"""Tests for the REST API: state, keys, upgrades, control and config routes."""

import time

import pytest
from fastapi.testclient import TestClient

from keycrafter.api.app import create_app
from keycrafter.api.dependencies import get_game_manager
from keycrafter.config import GameConfig
from keycrafter.core.enums import ResourceKind
from keycrafter.core.models import Coordinate
from keycrafter.core.resource_nodes import ResourceNode


@pytest.fixture
def client():
    cfg = GameConfig(world_seed=7)
    with TestClient(create_app(cfg)) as c:
        yield c


def _first_node(client: TestClient) -> dict:
    state = client.get("/api/v1/state").json()
    assert state["nodes"], "a new game should have nodes"
    return state["nodes"][0]


class TestStateRoutes:
    def test_initial_state(self, client):
        resp = client.get("/api/v1/state")
        assert resp.status_code == 200
        data = resp.json()
        assert data["tick"] == 0
        assert data["width"] == 80
        assert data["height"] == 24
        assert data["island"] == "Starter Grove"
        assert data["player"] == {"x": 40, "y": 12, "wood": 0, "copper": 0}
        assert len(data["nodes"]) == 3
        for n in data["nodes"]:
            assert n["kind"] in ("wood", "copper")
            assert n["typed_prefix"] == ""
            assert (n["access_x"], n["access_y"]) == (n["x"] + 2, n["y"] + 3)

    def test_save_payload(self, client):
        data = client.get("/api/v1/save").json()
        assert data["version"] == 1
        assert data["wood"] == 0
        assert data["upgrade_levels"] == {"Better Axe": 0, "Better Pickaxe": 0}
        assert data["stats"]["keystrokes"] == 0

    def test_config(self, client):
        data = client.get("/api/v1/config").json()
        assert data["world_seed"] == 7
        assert data["harvest_range"] == 2
        assert data["max_nodes"] == 6
        assert data["spawn_chance"] == 0.15


class TestKeys:
    def test_typing_a_word_completes_it(self, client):
        node = _first_node(client)
        word = node["target_word"]
        resp = client.post("/api/v1/keys", json={"keys": word})
        assert resp.status_code == 200
        data = resp.json()
        assert data["tick"] == len(word)
        assert len(data["results"]) == len(word)
        assert node["node_id"] in data["results"][0]["advanced"]
        assert node["node_id"] in data["results"][-1]["completed"]

        save = client.get("/api/v1/save").json()
        assert save["stats"]["words_completed"] >= 1
        assert save["stats"]["keystrokes"] == len(word)

    def test_first_letter_moves_player(self, client):
        node = _first_node(client)
        resp = client.post("/api/v1/keys", json={"keys": node["target_word"][0]})
        data = resp.json()
        player = data["player"]
        # One step per node that started on this letter
        assert abs(player["x"] - 40) + abs(player["y"] - 12) <= data["results"][0]["steps"]
        assert data["results"][0]["steps"] <= len(data["results"][0]["advanced"])

    def test_events_after_typing(self, client):
        node = _first_node(client)
        client.post("/api/v1/keys", json={"keys": node["target_word"][0]})
        events = client.get("/api/v1/events", params={"count": 5}).json()
        assert any(e["category"] == "word_started" for e in events)
        state = client.get("/api/v1/state", params={"since_tick": 1}).json()
        assert all(e["tick"] >= 1 for e in state["events"])

    def test_empty_keys_rejected(self, client):
        resp = client.post("/api/v1/keys", json={"keys": ""})
        assert resp.status_code == 422


class TestUpgradesAndControl:
    def test_list_upgrades(self, client):
        data = client.get("/api/v1/upgrades").json()
        assert [u["name"] for u in data] == ["Better Axe", "Better Pickaxe"]
        assert data[0]["next_cost"] == 10
        assert data[0]["cost_kind"] == "Wood"

    def test_purchase_without_resources(self, client):
        resp = client.post("/api/v1/upgrades/0")
        assert resp.status_code == 400

    def test_purchase_unknown_upgrade(self, client):
        resp = client.post("/api/v1/upgrades/9")
        assert resp.status_code == 404

    def test_purchase_with_resources(self, client):
        manager = get_game_manager()
        manager._game.state.player.wood = 12
        resp = client.post("/api/v1/upgrades/0")
        assert resp.status_code == 200
        data = resp.json()
        assert data["cost"] == 10
        assert data["player"]["wood"] == 2
        assert client.get("/api/v1/upgrades").json()[0]["level"] == 1

    def test_reset(self, client):
        node = _first_node(client)
        client.post("/api/v1/keys", json={"keys": node["target_word"]})
        resp = client.post("/api/v1/control/reset")
        assert resp.status_code == 200
        assert resp.json()["tick"] == 0
        assert client.get("/api/v1/state").json()["player"]["wood"] == 0

    def test_unknown_action(self, client):
        resp = client.post("/api/v1/control/explode")
        assert resp.status_code == 422


def test_dependency_requires_running_app():
    with TestClient(create_app(GameConfig())):
        pass
    with pytest.raises(RuntimeError):
        get_game_manager()


class TestSessionAccounting:
    def test_play_time_counted_without_game_loop(self, client):
        node = _first_node(client)
        time.sleep(0.2)
        client.post("/api/v1/keys", json={"keys": node["target_word"]})
        time.sleep(0.2)
        client.post("/api/v1/keys", json={"keys": "zz"})
        stats = client.get("/api/v1/save").json()["stats"]
        assert stats["play_time_seconds"] >= 0.3

    def test_accuracy_reported(self, client):
        stats = client.get("/api/v1/save").json()["stats"]
        assert stats["accuracy"] == 100.0

    def test_unreachable_target_reported_per_key(self, client):
        game = get_game_manager()._game
        state = game.state
        state.nodes.clear()
        # Footprints around the player at (40, 12) leave it no way out
        for word, anchor in (("bbb", (41, 9)), ("ccc", (36, 9)), ("ddd", (38, 13)), ("eee", (40, 8))):
            state.add_node(ResourceNode(
                node_id=state.allocate_node_id(), kind=ResourceKind.WOOD, pos=Coordinate(*anchor),
                target_word=word, next_word="elm", remaining_yield=3, max_yield=3,
            ))
        target = ResourceNode(
            node_id=state.allocate_node_id(), kind=ResourceKind.WOOD, pos=Coordinate(60, 5),
            target_word="oak", next_word="elm", remaining_yield=3, max_yield=3,
        )
        state.add_node(target)

        result = client.post("/api/v1/keys", json={"keys": "o"}).json()["results"][0]
        assert result["unreachable"] == [target.node_id]
        assert result["advanced"] == [target.node_id]
        assert result["steps"] == 0
