import unittest

from strikers.errors import NoRankedHistory, Unknown
from strikers.models import Standing
from strikers.normalize import (
    apply_standing,
    normalize_leaderboard,
    normalize_level,
    normalize_mastery,
    normalize_ranked,
    standing_of,
)
from tests.fakes import sample_level, sample_mastery, sample_ranked_entry


class RankedNormalizeTests(unittest.TestCase):
    def _window(self, *entries: dict) -> dict:
        return {"players": list(entries)}

    def test_tracked_entry_passes_through(self) -> None:
        entry = sample_ranked_entry("Alice", "p2", rank=42)
        payload = self._window(sample_ranked_entry("Bob", "p1", rank=41), entry)

        record = normalize_ranked(payload, "p2")

        self.assertEqual(record, entry)
        self.assertEqual(record["currentDivisionId"], "Challenger")

    def test_untracked_entry_gets_world_division(self) -> None:
        entry = sample_ranked_entry("Alice", "p2", rank=None)

        record = normalize_ranked(self._window(entry), "p2")

        self.assertEqual(record["rank"], 0)
        self.assertEqual(record["currentDivisionId"], "WORLD")
        self.assertEqual(record["progressToNext"], 0)
        self.assertEqual(record["username"], "Alice")
        self.assertEqual(record["organization"]["name"], "Org")

    def test_missing_identifier_is_no_ranked_history(self) -> None:
        payload = self._window(sample_ranked_entry("Bob", "p1"))
        with self.assertRaises(NoRankedHistory):
            normalize_ranked(payload, "p2")

    def test_username_fallback_locates_entry(self) -> None:
        payload = self._window(sample_ranked_entry("Alice", "legacy-id"))
        self.assertEqual(normalize_ranked(payload, "p2", "Alice")["playerId"], "legacy-id")

    def test_does_not_mutate_payload(self) -> None:
        entry = sample_ranked_entry("Alice", "p2", rank=None)
        normalize_ranked(self._window(entry), "p2")
        self.assertNotIn("rank", entry)

    def test_standing_variant(self) -> None:
        self.assertIsNone(standing_of({"rank": None}))
        self.assertEqual(
            standing_of({"rank": 3, "currentDivisionId": "Omega", "progressToNext": 0.5}),
            Standing(rank=3, division_id="Omega", progress_to_next=0.5),
        )
        self.assertEqual(apply_standing({}, None)["currentDivisionId"], "WORLD")


class LeaderboardNormalizeTests(unittest.TestCase):
    def test_caps_to_page_size_in_service_order(self) -> None:
        players = [sample_ranked_entry(f"P{i}", f"id{i}", rank=10 - i) for i in range(5)]
        page = normalize_leaderboard(players, 3)
        self.assertEqual([p["playerId"] for p in page], ["id0", "id1", "id2"])

    def test_accepts_players_envelope(self) -> None:
        payload = {"players": [sample_ranked_entry("A", "a", rank=1)]}
        self.assertEqual(len(normalize_leaderboard(payload, 10)), 1)

    def test_rejects_non_list(self) -> None:
        with self.assertRaises(Unknown):
            normalize_leaderboard("nope", 10)


class PassThroughTests(unittest.TestCase):
    def test_level_is_identical(self) -> None:
        payload = sample_level("p2")
        self.assertEqual(normalize_level(payload), payload)

    def test_mastery_is_identical(self) -> None:
        payload = sample_mastery("p2")
        self.assertEqual(normalize_mastery(payload), payload)

    def test_level_rejects_negative_xp(self) -> None:
        payload = sample_level("p2")
        payload["totalXp"] = -1
        with self.assertRaises(Unknown) as ctx:
            normalize_level(payload)
        self.assertIsInstance(ctx.exception.cause, ValueError)

    def test_level_rejects_missing_field(self) -> None:
        payload = sample_level("p2")
        del payload["currentLevel"]
        with self.assertRaises(Unknown):
            normalize_level(payload)

    def test_mastery_rejects_bad_character_entry(self) -> None:
        payload = sample_mastery("p2")
        payload["characterMasteries"][0]["currentTierXp"] = "lots"
        with self.assertRaises(Unknown):
            normalize_mastery(payload)


if __name__ == "__main__":
    unittest.main()
