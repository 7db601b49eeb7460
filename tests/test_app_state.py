import random

import pytest

from daily_movie.domain.models.app_state import MAX_SELECTED_DIRECTORS, AppState

from .factories import director_factory


class TestToggle:
    def test_toggle_adds_and_removes(self, app_state):
        assert app_state.toggle("d0") is True
        assert app_state.chosen_director_ids == {"d0"}

        assert app_state.toggle("d0") is True
        assert app_state.chosen_director_ids == frozenset()

    def test_sixth_selection_is_refused(self, app_state):
        for i in range(5):
            app_state.toggle(f"d{i}")

        assert app_state.toggle("d5") is False
        assert len(app_state.chosen_director_ids) == MAX_SELECTED_DIRECTORS
        assert "d5" not in app_state.chosen_director_ids

    def test_removal_allowed_at_cap(self, app_state):
        for i in range(5):
            app_state.toggle(f"d{i}")

        assert app_state.toggle("d2") is True
        assert app_state.toggle("d5") is True
        assert app_state.chosen_director_ids == {"d0", "d1", "d3", "d4", "d5"}

    def test_unknown_director_is_ignored(self, app_state):
        assert app_state.toggle("missing") is False
        assert app_state.chosen_director_ids == frozenset()

    def test_toggle_against_empty_catalog_has_no_effect(self):
        state = AppState(user_id="user-1")

        assert state.toggle("d0") is False
        assert state.chosen_director_ids == frozenset()

    @pytest.mark.parametrize("seed", range(20))
    def test_random_toggle_sequences_never_exceed_cap(self, seed, app_state, catalog):
        rng = random.Random(seed)
        ids = [director.id for director in catalog] + ["ghost"]

        for _ in range(200):
            app_state.toggle(rng.choice(ids))
            assert len(app_state.chosen_director_ids) <= MAX_SELECTED_DIRECTORS
            assert app_state.chosen_director_ids <= {director.id for director in catalog}


class TestOnboardingCompletion:
    @pytest.mark.parametrize("count", [0, 1, 4])
    def test_completion_requires_exactly_five(self, app_state, count):
        for i in range(count):
            app_state.toggle(f"d{i}")

        assert app_state.can_complete_onboarding is False
        assert app_state.mark_onboarding_completed() is False
        assert app_state.onboarding_completed is False

    def test_completion_with_five(self, app_state):
        for i in range(5):
            app_state.toggle(f"d{i}")

        assert app_state.mark_onboarding_completed() is True
        assert app_state.onboarding_completed is True

    def test_selection_is_frozen_after_completion(self, onboarded_state):
        before = onboarded_state.chosen_director_ids

        assert onboarded_state.toggle("d0") is False
        assert onboarded_state.toggle("d6") is False
        assert onboarded_state.chosen_director_ids == before
        assert onboarded_state.mark_onboarding_completed() is False
        assert onboarded_state.onboarding_completed is True


class TestSubscriptions:
    def test_listeners_see_changes_until_unsubscribed(self, app_state):
        seen = []
        unsubscribe = app_state.subscribe(lambda state: seen.append(state.chosen_director_ids))

        app_state.toggle("d0")
        unsubscribe()
        app_state.toggle("d1")

        assert seen == [frozenset({"d0"})]

    def test_no_notification_for_refused_toggle(self, app_state):
        seen = []
        app_state.subscribe(lambda state: seen.append(state))

        app_state.toggle("missing")

        assert seen == []

    def test_replace_catalog_is_wholesale(self, app_state):
        replacement = [director_factory.create_director("x1")]

        app_state.replace_catalog(replacement)

        assert [director.id for director in app_state.catalog] == ["x1"]
