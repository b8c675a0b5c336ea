"""Tests for the interactive rating session."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rankcurve.config import AdjustmentConfig, RatingConfig
from rankcurve.exceptions import GestureError, InsufficientItemsError
from rankcurve.rating import GestureKind, RatingSession, print_rating_summary


def ratings_of(session: RatingSession) -> list:
    return [item.rating for item in session.items]


def x_of(session: RatingSession, rating: float) -> float:
    return session.viewport.rating_to_x(rating, session.adjustment.curve_width_px)


class TestSessionSetup:
    """Tests for seeding a session."""

    def test_needs_two_items(self, make_ranked) -> None:
        with pytest.raises(InsufficientItemsError):
            RatingSession(make_ranked([None]))

    def test_unrated_items_follow_curve(self, sorted_four) -> None:
        session = RatingSession(sorted_four)
        assert ratings_of(session) == [5.0, 3.43, 2.57, 0.5]

    def test_rated_items_kept(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        assert ratings_of(session) == [4.0, 3.0, 2.0]

    def test_items_sorted_best_first(self, make_ranked) -> None:
        session = RatingSession(list(reversed(make_ranked([4.0, 3.0, 2.0]))))
        assert [item.rank for item in session.items] == [2, 1, 0]

    def test_starts_idle_at_full_range(self, sorted_four) -> None:
        session = RatingSession(sorted_four)
        assert session.gesture.kind == GestureKind.IDLE
        assert session.highlighted_key is None
        assert not session.viewport.zoomed


class TestGestures:
    """Tests for pointer gestures."""

    def test_point_drag(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        start = x_of(session, 3.0)
        session.begin_point_drag(1, start)
        assert session.highlighted_key == session.items[1].key

        assert session.move(start + 100)
        assert ratings_of(session) == [4.0, 3.28, 2.0]

        session.end()
        assert session.highlighted_key is None

    def test_point_drag_jitter_ignored(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        start = x_of(session, 3.0)
        session.begin_point_drag(1, start)
        assert not session.move(start + 1)
        assert ratings_of(session) == [4.0, 3.0, 2.0]

    def test_adjuster_drag(self, make_ranked) -> None:
        session = RatingSession(make_ranked([5.0, 4.0, 2.0, 1.0]))
        start = x_of(session, 4.0)
        session.begin_adjuster_drag(1, start)
        assert session.gesture.original_rating == 4.0

        # Half sensitivity: move the pointer twice as far as the target
        assert session.move(start + 2 * (x_of(session, 3.0) - start))
        assert ratings_of(session) == [5.0, 3.0, 1.67, 1.0]

    def test_second_gesture_rejected(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        session.begin_point_drag(0, 100.0)
        with pytest.raises(GestureError):
            session.begin_card_drag(1, 100.0)
        with pytest.raises(GestureError):
            session.begin_adjuster_drag(0, 100.0)

    def test_move_while_idle_is_noop(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        calls = []
        session.subscribe(calls.append)
        assert not session.move(500.0)
        assert calls == []

    def test_end_while_idle_is_noop(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        session.end()
        assert session.gesture.kind == GestureKind.IDLE

    def test_bad_index(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0]))
        with pytest.raises(GestureError):
            session.begin_point_drag(5, 0.0)


class TestCardDrag:
    """Tests for card drags."""

    def test_swaps_after_half_card_width(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        session.begin_card_drag(0, 100.0)

        assert not session.move(150.0)
        assert session.move(190.0)
        assert [item.id for item in session.items] == [2, 1, 3]
        assert ratings_of(session) == [4.0, 3.0, 2.0]

        # Distance is measured from the last swap
        assert not session.move(200.0)
        assert session.highlighted_key == session.items[1].key

    def test_first_card_cannot_move_up(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        before = list(session.items)
        session.begin_card_drag(0, 500.0)
        assert not session.move(300.0)
        assert session.items == before


class TestKeyboardActions:
    """Tests for direct rating changes outside gestures."""

    def test_set_rating(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        assert session.set_rating(1, 3.6)
        assert ratings_of(session) == [4.0, 3.6, 2.0]

    def test_set_rating_during_gesture(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        session.begin_card_drag(0, 0.0)
        with pytest.raises(GestureError):
            session.set_rating(1, 3.6)

    def test_swap(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        assert session.swap(2, -1) == 1
        assert [item.id for item in session.items] == [1, 3, 2]

    def test_set_curve_reseeds(self, sorted_four) -> None:
        session = RatingSession(sorted_four)
        session.set_rating(1, 4.0)
        session.set_curve(3.5, 1.0)
        assert session.mean == 3.5
        assert ratings_of(session) == [5.0, 3.93, 3.07, 0.5]

    def test_set_curve_validates(self, sorted_four) -> None:
        session = RatingSession(sorted_four)
        with pytest.raises(ValidationError):
            session.set_curve(7.0, 1.0)

    def test_reset_ratings(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.9, 3.8, 1.0]))
        session.reset_ratings()
        assert ratings_of(session) == [5.0, 3.43, 2.57, 0.5]

    def test_zoom(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.5, 3.0]))
        viewport = session.zoom_to_fit()
        assert viewport.zoomed
        assert viewport.visible_min == pytest.approx(2.9)

        session.reset_zoom()
        assert not session.viewport.zoomed

    def test_custom_bounds(self, sorted_four) -> None:
        session = RatingSession(
            sorted_four,
            RatingConfig(min_rating=1.0, max_rating=4.0),
            AdjustmentConfig(curve_width_px=400.0),
        )
        assert ratings_of(session) == [4.0, 3.43, 2.57, 1.0]
        assert session.viewport.visible_min == 1.0


class TestSubscriptions:
    """Tests for change notification."""

    def test_listener_called_on_change(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        calls = []
        session.subscribe(calls.append)

        session.set_rating(1, 3.5)
        assert calls == [session]

    def test_no_call_without_change(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        calls = []
        session.subscribe(calls.append)
        session.set_rating(1, 3.0)
        assert calls == []

    def test_unsubscribe(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        calls = []
        unsubscribe = session.subscribe(calls.append)
        unsubscribe()
        session.set_rating(1, 3.5)
        assert calls == []


class TestCommit:
    """Tests for committing a session."""

    def test_commit_recomputes_ranks(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        session.swap(0, 1)
        result = session.commit()
        assert [item.id for item in result] == [2, 1, 3]
        assert [item.rank for item in result] == [2, 1, 0]

    def test_commit_requires_idle(self, make_ranked) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        session.begin_point_drag(0, 0.0)
        with pytest.raises(GestureError):
            session.commit()

    def test_print_summary(self, make_ranked, capsys: pytest.CaptureFixture) -> None:
        session = RatingSession(make_ranked([4.0, 3.0, 2.0]))
        print_rating_summary(session)
        assert "4.00" in capsys.readouterr().out
