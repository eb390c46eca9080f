import asyncio
import json

from quicknotes.client.models import Preferences
from quicknotes.client.preferences import PREFERENCES_KEY


class TestPreferencesParsing:
    def test_defaults(self):
        prefs = Preferences()
        assert (prefs.search_term, prefs.sort_by, prefs.sort_order, prefs.view_mode) == (
            "",
            "date",
            "desc",
            "grid",
        )

    def test_serialized_with_camel_case_keys(self):
        stored = json.loads(Preferences(search_term="x", view_mode="list").to_json())
        assert stored == {"searchTerm": "x", "sortBy": "date", "sortOrder": "desc", "viewMode": "list"}

    def test_round_trip(self):
        prefs = Preferences(search_term="milk", sort_by="title", sort_order="asc", view_mode="list")
        assert Preferences.from_json(prefs.to_json()) == prefs

    def test_malformed_json_gives_defaults(self):
        assert Preferences.from_json("{oops") == Preferences()
        assert Preferences.from_json("[1, 2]") == Preferences()
        assert Preferences.from_json(None) == Preferences()

    def test_each_field_falls_back_on_its_own(self):
        raw = json.dumps({"searchTerm": "", "sortBy": "colour", "sortOrder": "asc", "viewMode": 3})

        prefs = Preferences.from_json(raw)

        assert prefs == Preferences(sort_order="asc")


class TestPreferenceStore:
    def test_load_without_stored_value(self, preference_store):
        assert preference_store.load() == Preferences()

    def test_save_outside_event_loop_is_immediate(self, preference_store, storage):
        preference_store.schedule_save(Preferences(view_mode="list"))

        assert not preference_store.has_pending
        assert json.loads(storage.get_item(PREFERENCES_KEY))["viewMode"] == "list"

    async def test_save_is_debounced(self, preference_store, storage):
        preference_store.schedule_save(Preferences(search_term="a"))
        preference_store.schedule_save(Preferences(search_term="ab"))

        assert preference_store.has_pending
        assert storage.get_item(PREFERENCES_KEY) is None

        await asyncio.sleep(0.05)

        assert not preference_store.has_pending
        assert preference_store.load().search_term == "ab"

    async def test_flush_writes_pending_value(self, preference_store):
        preference_store.schedule_save(Preferences(sort_by="title"))

        preference_store.flush()

        assert preference_store.load().sort_by == "title"
        assert not preference_store.has_pending
