import json
import unittest

from app import app as flask_app


def cell(x, y, species, rank):
    return {"x": x, "y": y, "card": [species, rank]}


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _post(self, path, payload):
        return self.client.post(path, data=json.dumps(payload), content_type="application/json")

    def test_given_empty_area_when_frontier_requested_then_origin_only(self):
        r = self._post("/api/frontier", {"playArea": []})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json(), {"ok": True, "legalPlacements": [[0, 0]]})

    def test_given_disconnected_area_when_frontier_requested_then_bad_request(self):
        r = self._post("/api/frontier", {"playArea": [cell(0, 0, "J", 1), cell(3, 3, "R", 2)]})
        self.assertEqual(r.status_code, 400)
        self.assertFalse(r.get_json()["ok"])

    def test_given_hand_when_analyzed_then_all_species_reported(self):
        r = self._post("/api/analyze", {"hand": [["J", 1], ["J", 5], ["R", 8]]})
        data = r.get_json()
        self.assertTrue(data["ok"])
        self.assertEqual(set(data["analysis"]), {"J", "R", "C", "M", "O", "W"})
        self.assertEqual(data["analysis"]["J"]["score"], 7)
        self.assertEqual(data["analysis"]["R"]["ranks"], [8])

    def test_given_hand_and_opponent_when_categorized_then_nullified_eight_played(self):
        r = self._post("/api/categorize", {
            "hand": [["J", 1], ["J", 5], ["R", 8]],
            "opponentHand": [["R", 1], None, None],
        })
        data = r.get_json()
        self.assertEqual(data["saveSpecies"], ["R", "J"])
        self.assertEqual(data["saveCards"], [["J", 1], ["J", 5]])
        self.assertEqual(data["playCards"], [["R", 8]])

    def test_given_position_when_scored_and_compared_then_numbers_returned(self):
        area = [cell(0, 0, "J", 8)]
        r = self._post("/api/score", {"playArea": area, "hand": [["C", 2]], "opponentHand": []})
        self.assertEqual(r.get_json()["score"], 9)
        r2 = self._post("/api/accelerate", {
            "playArea": area,
            "hand": [["C", 2]],
            "opponentHand": [None, ["W", 1]],
            "opponentPlayArea": [cell(0, 0, "R", 3)],
        })
        d2 = r2.get_json()
        self.assertTrue(d2["accelerate"])
        self.assertEqual(d2["ourScore"], 9)
        self.assertEqual(d2["opponentScore"], 4)

    def test_given_area_when_placing_then_new_area_or_rejection(self):
        area = [cell(0, 0, "J", 1)]
        r = self._post("/api/place", {"playArea": area, "card": ["R", 2], "coord": [1, 0]})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(len(data["playArea"]), 2)
        self.assertIn([2, 0], data["legalPlacements"])
        self.assertNotIn([1, 0], data["legalPlacements"])

        occupied = self._post("/api/place", {"playArea": area, "card": ["R", 2], "coord": [0, 0]})
        self.assertEqual(occupied.status_code, 400)
        self.assertIn("occupied", occupied.get_json()["error"])

        far = self._post("/api/place", {"playArea": area, "card": ["R", 2], "coord": [5, 5]})
        self.assertEqual(far.status_code, 400)

        for coord in ([None, 0], [0.9, 0]):
            bad = self._post("/api/place", {"playArea": area, "card": ["R", 2], "coord": coord})
            self.assertEqual(bad.status_code, 400)
            self.assertFalse(bad.get_json()["ok"])
        fractional = self._post("/api/frontier", {"playArea": [cell(0, 0, "J", 1), {"x": 1.5, "y": 0, "card": ["R", 2]}]})
        self.assertEqual(fractional.status_code, 400)

    def test_given_turn_states_when_move_requested_then_move_for_sub_turn(self):
        base = {"hand": [["J", 1], ["J", 5], ["R", 8]], "opponentHand": [["R", 1]], "deck": 5}
        r = self._post("/api/move", {"state": dict(base, subTurn=0)})
        self.assertEqual(r.get_json()["move"], {"draw": 0})
        r2 = self._post("/api/move", {"state": dict(base, subTurn=2)})
        self.assertEqual(r2.get_json()["move"], {"play": {"card": ["R", 8], "coord": [0, 0]}})
        r3 = self._post("/api/move", {"state": dict(base, subTurn=3)})
        self.assertEqual(r3.get_json()["move"], {"discard": ["R", 8]})
        r4 = self._post("/api/move", {"state": dict(base, subTurn=3), "strategy": "random"})
        self.assertEqual(r4.get_json()["move"], {"discard": ["J", 1]})

    def test_given_bad_payloads_when_posted_then_bad_request(self):
        self.assertEqual(self._post("/api/move", {"state": {"subTurn": 7, "hand": [["J", 1]]}}).status_code, 400)
        self.assertEqual(self._post("/api/move", {"state": {"subTurn": 2}, "strategy": "x"}).status_code, 400)
        self.assertEqual(self._post("/api/analyze", {"hand": [["Z", 1]]}).status_code, 400)
        r = self.client.post("/api/score", data="not json", content_type="application/json")
        self.assertEqual(r.status_code, 400)


if __name__ == "__main__":
    unittest.main(verbosity=2)
